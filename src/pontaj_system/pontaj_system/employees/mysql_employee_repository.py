from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_ids, fetchall, fetchone, load_ids, new_id, placeholders
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, business_id, full_name, active, start_date, termination_date, created_at, updated_at"


def _row_to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=str(row["employee_id"]),
        business_id=str(row["business_id"]),
        full_name=row["full_name"],
        active=bool(row.get("active", True)),
        start_date=row.get("start_date") or None,
        termination_date=row.get("termination_date") or None,
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get(self, cur, employee_id: str) -> Optional[Employee]:
        cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
        row = fetchone(cur)
        return _row_to_employee(row) if row else None

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._get(cur, employee_id)

    def list_active(self, business_id: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE business_id=%s AND active=1
                ORDER BY created_at ASC
                """,
                (business_id,),
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def list_by_ids(self, *, business_id: str, employee_ids: Sequence[str]) -> Sequence[Employee]:
        ids = list(employee_ids)
        if not ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE business_id=%s AND employee_id IN ({placeholders(ids)})",
                (business_id, *ids),
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def create(self, *, business_id: str, full_name: str, start_date: Optional[str] = None) -> Employee:
        employee_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_id, business_id, full_name, active, start_date)
                VALUES(%s,%s,%s,1,%s)
                """,
                (employee_id, business_id, full_name, start_date),
            )
            return self._get(cur, employee_id)

    def update(
        self,
        *,
        employee_id: str,
        full_name: str,
        active: bool,
        start_date: Optional[str],
        termination_date: Optional[str],
    ) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET full_name=%s, active=%s, start_date=%s, termination_date=%s
                WHERE employee_id=%s
                """,
                (full_name, 1 if active else 0, start_date, termination_date, employee_id),
            )
            return self._get(cur, employee_id)

    def delete_permanently(self, *, business_id: str, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id FROM employees WHERE employee_id=%s AND business_id=%s FOR UPDATE",
                (employee_id, business_id),
            )
            if not fetchone(cur):
                return False

            cur.execute("DELETE FROM cells WHERE employee_id=%s", (employee_id,))

            cur.execute(
                "SELECT plan_id, employee_ids FROM month_plans WHERE business_id=%s FOR UPDATE",
                (business_id,),
            )
            for plan in fetchall(cur):
                ids = load_ids(plan["employee_ids"])
                if employee_id in ids:
                    kept = [i for i in ids if i != employee_id]
                    cur.execute(
                        "UPDATE month_plans SET employee_ids=%s WHERE plan_id=%s",
                        (dump_ids(kept), plan["plan_id"]),
                    )

            cur.execute("DELETE FROM employees WHERE employee_id=%s AND business_id=%s", (employee_id, business_id))
            return cur.rowcount > 0
