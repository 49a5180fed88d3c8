"""Read-model for rendering/exporting a month plan.

Persisted cells (user input) and derived cells (resignation fill) are kept as
distinct types; when both exist for a day the derived cell is shown.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping, Optional, Protocol, Sequence, Union

from ..common.datetime_utils import (
    days_in_month,
    format_date_ro,
    is_weekend,
    month_name,
    try_parse_local_date,
    weekday_label,
)
from ..core.enums import CellCode, CellKind, EmploymentStatus
from .aggregation import StandardTotalsCalculator, TotalsCalculator, leave_days
from .cells import CellMap, classify_code
from .resignation import resignation_fill_for
from .roster import EmployeeRecord, employment_status


@dataclass(frozen=True)
class PersistedCell:
    code: str

    @property
    def kind(self) -> CellKind:
        return classify_code(self.code)

    @property
    def derived(self) -> bool:
        return False


@dataclass(frozen=True)
class DerivedCell:
    code: str

    @property
    def kind(self) -> CellKind:
        return CellKind.RESIGNATION

    @property
    def derived(self) -> bool:
        return True


GridCell = Union[PersistedCell, DerivedCell]


class GridEmployee(EmployeeRecord, Protocol):
    full_name: str


def merge_row(persisted: CellMap, derived: CellMap, days: int) -> dict[int, GridCell]:
    """Cells to display for days 1..days; derived always wins."""
    row: dict[int, GridCell] = {}
    for day in range(1, days + 1):
        if derived.get(day):
            row[day] = DerivedCell(derived[day])
        elif persisted.get(day):
            row[day] = PersistedCell(persisted[day])
    return row


def visible_codes(row: Mapping[int, GridCell]) -> dict[int, str]:
    """User-entered codes still visible after the resignation overlay."""
    return {day: cell.code for day, cell in row.items() if isinstance(cell, PersistedCell)}


@dataclass(frozen=True)
class GridDay:
    day: int
    weekday: str
    is_weekend: bool


@dataclass(frozen=True)
class GridRow:
    employee_id: str
    full_name: str
    status: EmploymentStatus
    cells: dict[int, GridCell]
    total_hours: int
    paid_leave_days: list[int] = field(default_factory=list)
    medical_leave_days: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class LeaveFootnote:
    employee_id: str
    full_name: str
    days: list[int]

    @property
    def label(self) -> str:
        return f"{self.full_name} = {len(self.days)} zile ({', '.join(str(d) for d in self.days)})"


@dataclass(frozen=True)
class ResignationFootnote:
    employee_id: str
    full_name: str
    termination_date: date

    @property
    def label(self) -> str:
        return f"{self.full_name} — începând cu {format_date_ro(self.termination_date)}"


@dataclass(frozen=True)
class PlanGrid:
    plan_id: Optional[str]
    year: int
    month: int
    location_name: str
    days: list[GridDay]
    rows: list[GridRow]
    leave_footnotes: list[LeaveFootnote]
    resignation_footnotes: list[ResignationFootnote]

    @property
    def title(self) -> str:
        return f"{month_name(self.month)} {self.year}"

    def to_dict(self) -> dict:
        return {
            "planId": self.plan_id,
            "year": self.year,
            "month": self.month,
            "title": self.title,
            "locationName": self.location_name,
            "days": [{"day": d.day, "weekday": d.weekday, "isWeekend": d.is_weekend} for d in self.days],
            "rows": [
                {
                    "employeeId": r.employee_id,
                    "fullName": r.full_name,
                    "status": r.status.value,
                    "cells": {
                        str(day): {"code": cell.code, "derived": cell.derived, "kind": cell.kind.value}
                        for day, cell in r.cells.items()
                    },
                    "totalHours": r.total_hours,
                    "paidLeaveDays": r.paid_leave_days,
                    "medicalLeaveDays": r.medical_leave_days,
                }
                for r in self.rows
            ],
            "leaveFootnotes": [
                {"employeeId": f.employee_id, "fullName": f.full_name, "days": f.days, "label": f.label}
                for f in self.leave_footnotes
            ],
            "resignationFootnotes": [
                {
                    "employeeId": f.employee_id,
                    "fullName": f.full_name,
                    "terminationDate": f.termination_date.isoformat(),
                    "label": f.label,
                }
                for f in self.resignation_footnotes
            ],
        }


def build_plan_grid(
    *,
    year: int,
    month: int,
    membership: Sequence[str],
    employees: Mapping[str, GridEmployee],
    cells_by_employee: Mapping[str, CellMap],
    location_name: str = "",
    plan_id: Optional[str] = None,
    calculator: Optional[TotalsCalculator] = None,
) -> PlanGrid:
    """Assemble the grid rows in membership order.

    Membership ids that no longer resolve to an employee are skipped.
    """
    calculator = calculator or StandardTotalsCalculator()
    n_days = days_in_month(year, month)

    days = [GridDay(day=d, weekday=weekday_label(year, month, d), is_weekend=is_weekend(year, month, d)) for d in range(1, n_days + 1)]

    rows: list[GridRow] = []
    leave_notes: list[LeaveFootnote] = []
    resignation_notes: list[ResignationFootnote] = []

    for employee_id in membership:
        employee = employees.get(employee_id)
        if employee is None:
            continue

        derived = resignation_fill_for(employee.termination_date, year, month)
        row_cells = merge_row(cells_by_employee.get(employee_id, {}), derived, n_days)
        visible = visible_codes(row_cells)

        paid = leave_days(visible, CellCode.PAID_LEAVE.value)
        medical = leave_days(visible, CellCode.MEDICAL_LEAVE.value)
        rows.append(
            GridRow(
                employee_id=employee_id,
                full_name=employee.full_name,
                status=employment_status(employee, year, month),
                cells=row_cells,
                total_hours=calculator.total_hours(visible),
                paid_leave_days=paid,
                medical_leave_days=medical,
            )
        )

        if paid:
            leave_notes.append(LeaveFootnote(employee_id=employee_id, full_name=employee.full_name, days=paid))

        termination = try_parse_local_date(employee.termination_date, field_name="termination_date")
        if termination.ok:
            resignation_notes.append(
                ResignationFootnote(employee_id=employee_id, full_name=employee.full_name, termination_date=termination.value)
            )

    return PlanGrid(
        plan_id=plan_id,
        year=int(year),
        month=int(month),
        location_name=location_name,
        days=days,
        rows=rows,
        leave_footnotes=leave_notes,
        resignation_footnotes=resignation_notes,
    )
