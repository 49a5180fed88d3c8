from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: an account owning businesses and plans.

    Plain data object (no DB access code).
    """

    user_id: str
    email: str
    password_hash: str
    name: Optional[str] = None
    created_at: Optional[datetime] = None
