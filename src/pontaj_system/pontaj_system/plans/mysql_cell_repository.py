from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id, placeholders
from .model import Cell, CellInput
from .repository import CellRepository

_COLUMNS = "cell_id, plan_id, employee_id, day, code"


def _row_to_cell(row: dict) -> Cell:
    return Cell(
        cell_id=str(row["cell_id"]),
        plan_id=str(row["plan_id"]),
        employee_id=str(row["employee_id"]),
        day=int(row["day"]),
        code=row.get("code") or "",
    )


class MySQLCellRepository(CellRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_plan(self, plan_id: str) -> Sequence[Cell]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM cells WHERE plan_id=%s ORDER BY employee_id, day",
                (plan_id,),
            )
            return [_row_to_cell(r) for r in fetchall(cur)]

    def upsert_many(self, cells: Sequence[CellInput]) -> Sequence[Cell]:
        out: list[Cell] = []
        with db_cursor(self._conn_factory) as (_, cur):
            for c in cells:
                cur.execute(
                    """
                    INSERT INTO cells(cell_id, plan_id, employee_id, day, code)
                    VALUES(%s,%s,%s,%s,%s)
                    ON DUPLICATE KEY UPDATE code=VALUES(code)
                    """,
                    (new_id(), c.plan_id, c.employee_id, int(c.day), c.code),
                )
                cur.execute(
                    f"SELECT {_COLUMNS} FROM cells WHERE plan_id=%s AND employee_id=%s AND day=%s",
                    (c.plan_id, c.employee_id, int(c.day)),
                )
                out.append(_row_to_cell(fetchone(cur)))
        return out

    def clear_days(self, *, plan_id: str, employee_id: str, days: Sequence[int]) -> int:
        days = [int(d) for d in days]
        if not days:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE cells SET code=''
                WHERE plan_id=%s AND employee_id=%s AND code<>'' AND day IN ({placeholders(days)})
                """,
                (plan_id, employee_id, *days),
            )
            return cur.rowcount
