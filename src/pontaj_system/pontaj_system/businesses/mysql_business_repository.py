from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id
from .model import Business
from .repository import BusinessRepository

_COLUMNS = "business_id, owner_user_id, name, location_name, created_at, updated_at"


def _row_to_business(row: dict) -> Business:
    return Business(
        business_id=str(row["business_id"]),
        owner_user_id=str(row["owner_user_id"]),
        name=row["name"],
        location_name=row["location_name"],
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLBusinessRepository(BusinessRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get(self, cur, business_id: str) -> Optional[Business]:
        cur.execute(f"SELECT {_COLUMNS} FROM businesses WHERE business_id=%s", (business_id,))
        row = fetchone(cur)
        return _row_to_business(row) if row else None

    def get_owned(self, *, business_id: str, owner_user_id: str) -> Optional[Business]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM businesses WHERE business_id=%s AND owner_user_id=%s",
                (business_id, owner_user_id),
            )
            row = fetchone(cur)
            return _row_to_business(row) if row else None

    def list_for_owner(self, owner_user_id: str) -> Sequence[Business]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM businesses WHERE owner_user_id=%s ORDER BY created_at ASC",
                (owner_user_id,),
            )
            return [_row_to_business(r) for r in fetchall(cur)]

    def create(self, *, owner_user_id: str, name: str, location_name: str) -> Business:
        business_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO businesses(business_id, owner_user_id, name, location_name) VALUES(%s,%s,%s,%s)",
                (business_id, owner_user_id, name, location_name),
            )
            return self._get(cur, business_id)

    def update(self, *, business_id: str, name: str, location_name: str) -> Business:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE businesses SET name=%s, location_name=%s WHERE business_id=%s",
                (name, location_name, business_id),
            )
            return self._get(cur, business_id)

    def delete(self, *, business_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM businesses WHERE business_id=%s", (business_id,))
            return cur.rowcount > 0
