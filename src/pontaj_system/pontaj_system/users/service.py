from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_email, require_min_length
from ..core.constants import DEFAULT_MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, ConflictError, ValidationError
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: str
    email: str
    name: Optional[str]


class AuthService:
    """Use cases: register and authenticate (login)."""

    def __init__(self, users: UserRepository, *, min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH):
        self._users = users
        self._min_password_length = int(min_password_length)

    def register(self, *, email: str, password: str, name: Optional[str] = None) -> SessionUser:
        if not email or not password:
            raise ValidationError("Câmpuri lipsă")
        email = require_email(email)
        require_min_length(password, "Parola", self._min_password_length)

        if self._users.get_by_email(email):
            raise ConflictError("Email deja înregistrat")

        name = (name or "").strip() or None
        user_id = self._users.create_user(email=email, password_hash=generate_password_hash(password), name=name)
        logger.info("Registered user %s", user_id)
        return SessionUser(user_id=user_id, email=email, name=name)

    def authenticate(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email((email or "").strip())
        if not user:
            raise AuthenticationError("Email sau parolă greșită")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Email sau parolă greșită")

        return SessionUser(user_id=user.user_id, email=user.email, name=user.name)
