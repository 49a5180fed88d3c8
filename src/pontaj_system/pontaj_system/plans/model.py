from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence


@dataclass(frozen=True)
class Cell:
    """One employee's code for one day of a plan.

    Unique per (plan_id, employee_id, day); an empty code means "unset".
    """

    cell_id: str
    plan_id: str
    employee_id: str
    day: int
    code: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.cell_id,
            "monthPlanId": self.plan_id,
            "employeeId": self.employee_id,
            "day": self.day,
            "value": self.code,
        }


@dataclass(frozen=True)
class CellInput:
    plan_id: str
    employee_id: str
    day: int
    code: str


@dataclass(frozen=True)
class MonthPlan:
    """The attendance grid of one business for one calendar month.

    ``employee_ids`` is the ordered membership (row order of the grid).
    """

    plan_id: str
    user_id: str
    business_id: str
    month: int
    year: int
    employee_ids: tuple[str, ...] = ()
    location_name: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self, *, cells: Optional[Sequence[Cell]] = None) -> dict:
        out = {
            "id": self.plan_id,
            "userId": self.user_id,
            "businessId": self.business_id,
            "month": self.month,
            "year": self.year,
            "locationName": self.location_name,
            "employeeIds": list(self.employee_ids),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
        if cells is not None:
            out["cells"] = [c.to_dict() for c in cells]
        return out
