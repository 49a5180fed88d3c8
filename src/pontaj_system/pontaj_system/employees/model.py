from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee of one business.

    ``start_date`` and ``termination_date`` are stored as YYYY-MM-DD strings
    (date only, no timezone).
    """

    employee_id: str
    business_id: str
    full_name: str
    active: bool = True
    start_date: Optional[str] = None
    termination_date: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "businessId": self.business_id,
            "fullName": self.full_name,
            "active": self.active,
            "startDate": self.start_date,
            "terminationDate": self.termination_date,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
