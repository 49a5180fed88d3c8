from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, decode_ids, dump_ids, fetchall, fetchone, load_ids, new_id
from .model import MonthPlan
from .repository import PlanRepository

logger = logging.getLogger(__name__)

_COLUMNS = "plan_id, user_id, business_id, month, year, location_name, employee_ids, created_at, updated_at"


def _row_to_plan(row: dict) -> MonthPlan:
    return MonthPlan(
        plan_id=str(row["plan_id"]),
        user_id=str(row["user_id"]),
        business_id=str(row["business_id"]),
        month=int(row["month"]),
        year=int(row["year"]),
        employee_ids=tuple(load_ids(row.get("employee_ids"))),
        location_name=row.get("location_name") or "",
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLPlanRepository(PlanRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get(self, cur, plan_id: str) -> Optional[MonthPlan]:
        cur.execute(f"SELECT {_COLUMNS} FROM month_plans WHERE plan_id=%s", (plan_id,))
        row = fetchone(cur)
        return _row_to_plan(row) if row else None

    def get_by_key(self, *, business_id: str, month: int, year: int) -> Optional[MonthPlan]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM month_plans WHERE business_id=%s AND month=%s AND year=%s",
                (business_id, int(month), int(year)),
            )
            row = fetchone(cur)
            return _row_to_plan(row) if row else None

    def get_owned(self, *, plan_id: str, user_id: str) -> Optional[MonthPlan]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM month_plans WHERE plan_id=%s AND user_id=%s", (plan_id, user_id))
            row = fetchone(cur)
            return _row_to_plan(row) if row else None

    def list_for_user(self, *, user_id: str, business_id: Optional[str] = None) -> Sequence[MonthPlan]:
        clauses = ["user_id=%s"]
        params: list[object] = [user_id]
        if business_id:
            clauses.append("business_id=%s")
            params.append(business_id)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM month_plans WHERE {where} ORDER BY year DESC, month DESC",
                tuple(params),
            )
            return [_row_to_plan(r) for r in fetchall(cur)]

    def create_if_absent(
        self,
        *,
        user_id: str,
        business_id: str,
        month: int,
        year: int,
        location_name: str,
        employee_ids: Sequence[str],
    ) -> MonthPlan:
        with db_cursor(self._conn_factory) as (_, cur):
            # The unique (business_id, month, year) key turns a concurrent create into a no-op.
            cur.execute(
                """
                INSERT IGNORE INTO month_plans(plan_id, user_id, business_id, month, year, location_name, employee_ids)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (new_id(), user_id, business_id, int(month), int(year), location_name, dump_ids(employee_ids)),
            )
            cur.execute(
                f"SELECT {_COLUMNS} FROM month_plans WHERE business_id=%s AND month=%s AND year=%s",
                (business_id, int(month), int(year)),
            )
            return _row_to_plan(fetchone(cur))

    def compare_and_set_membership(self, *, plan_id: str, expected: Sequence[str], new: Sequence[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_ids FROM month_plans WHERE plan_id=%s FOR UPDATE",
                (plan_id,),
            )
            row = fetchone(cur)
            if not row:
                return False
            stored = decode_ids(row["employee_ids"])
            if stored is None:
                # unreadable membership stays as stored
                logger.error("Plan %s has malformed membership, refusing to update it", plan_id)
                return False
            if stored != list(expected):
                return False
            cur.execute("UPDATE month_plans SET employee_ids=%s WHERE plan_id=%s", (dump_ids(new), plan_id))
            return True

    def update(self, *, plan_id: str, employee_ids: Sequence[str], location_name: str) -> MonthPlan:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE month_plans SET employee_ids=%s, location_name=%s WHERE plan_id=%s",
                (dump_ids(employee_ids), location_name, plan_id),
            )
            return self._get(cur, plan_id)

    def delete(self, *, plan_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM month_plans WHERE plan_id=%s", (plan_id,))
            return cur.rowcount > 0
