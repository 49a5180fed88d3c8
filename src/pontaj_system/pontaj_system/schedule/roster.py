"""Roster reconciliation.

Decides which employees belong to a month's plan and merges newcomers into an
existing plan. Membership only grows: an employee already listed in a plan
stays there even after becoming ineligible, so attendance entered before the
status change remains visible.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional, Protocol, Sequence, Union

from ..common.datetime_utils import ParseIssue, compare_year_month, try_parse_local_date
from ..core.enums import EmploymentStatus

logger = logging.getLogger(__name__)


class EmployeeRecord(Protocol):
    employee_id: str
    start_date: Optional[str]
    termination_date: Optional[str]
    created_at: Optional[Union[datetime, date]]


@dataclass(frozen=True)
class EligibilityCheck:
    """Outcome of an eligibility check.

    ``issue`` is set when a stored date could not be parsed; the employee is
    then reported eligible.
    """

    eligible: bool
    issue: Optional[ParseIssue] = None


def _effective_start(employee: EmployeeRecord):
    if employee.start_date:
        return try_parse_local_date(employee.start_date, field_name="start_date")
    return try_parse_local_date(employee.created_at, field_name="created_at")


def check_eligibility(employee: EmployeeRecord, year: int, month: int) -> EligibilityCheck:
    start = _effective_start(employee)
    if start.issue:
        return EligibilityCheck(eligible=True, issue=start.issue)
    if start.ok and compare_year_month(start.value, year, month) > 0:
        return EligibilityCheck(eligible=False)

    termination = try_parse_local_date(employee.termination_date, field_name="termination_date")
    if termination.issue:
        return EligibilityCheck(eligible=True, issue=termination.issue)
    if not termination.ok:
        return EligibilityCheck(eligible=True)
    return EligibilityCheck(eligible=compare_year_month(termination.value, year, month) >= 0)


def eligible_employee_ids(employees: Iterable[EmployeeRecord], year: int, month: int) -> list[str]:
    """Ids of employees in scope for (year, month), in input order."""
    out: list[str] = []
    seen: set[str] = set()
    for employee in employees:
        check = check_eligibility(employee, year, month)
        if check.issue:
            logger.warning(
                "Employee %s has an unparseable %s %r; treating as eligible for %02d/%d",
                employee.employee_id,
                check.issue.field_name,
                check.issue.raw_value,
                month,
                year,
            )
        if check.eligible and employee.employee_id not in seen:
            seen.add(employee.employee_id)
            out.append(employee.employee_id)
    return out


def reconcile_membership(existing: Sequence[str], eligible: Iterable[str]) -> list[str]:
    """Existing membership followed by eligible ids not yet present.

    Never removes or reorders existing ids; applying it twice with the same
    inputs gives the same result as applying it once.
    """
    out = list(existing)
    present = set(out)
    for employee_id in eligible:
        if employee_id not in present:
            present.add(employee_id)
            out.append(employee_id)
    return out


def employment_status(employee: EmployeeRecord, year: int, month: int) -> EmploymentStatus:
    """Where the viewed month falls in the employee's lifecycle.

    A termination date wins over a start date when both apply.
    """
    termination = try_parse_local_date(employee.termination_date, field_name="termination_date")
    if termination.ok:
        cmp = compare_year_month(termination.value, year, month)
        if cmp < 0:
            return EmploymentStatus.RESIGNED_BEFORE
        if cmp == 0:
            return EmploymentStatus.RESIGNED_THIS_MONTH

    start = _effective_start(employee)
    if start.ok and compare_year_month(start.value, year, month) > 0:
        return EmploymentStatus.NOT_YET_STARTED
    return EmploymentStatus.ACTIVE
