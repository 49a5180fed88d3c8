from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, new_id
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, email, name, password_hash, created_at"


def _row_to_user(row: dict) -> User:
    return User(
        user_id=str(row["user_id"]),
        email=row["email"],
        password_hash=row["password_hash"],
        name=row.get("name"),
        created_at=row.get("created_at"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE email=%s", (email,))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def create_user(self, *, email: str, password_hash: str, name: Optional[str]) -> str:
        user_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO users(user_id, email, name, password_hash) VALUES(%s,%s,%s,%s)",
                (user_id, email, name, password_hash),
            )
        return user_id
