from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from ..businesses.repository import BusinessRepository
from ..common.datetime_utils import days_in_month, parse_local_date
from ..common.validators import require_month_year
from ..core.constants import DEFAULT_MAX_SHIFT_HOURS, MEMBERSHIP_RETRY_ATTEMPTS
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..employees.service import UNSET, EmployeeService
from ..schedule.aggregation import StandardTotalsCalculator, TotalsCalculator
from ..schedule.cells import validate_manual_code
from ..schedule.grid import PlanGrid, build_plan_grid
from ..schedule.resignation import resignation_clear_days
from ..schedule.roster import eligible_employee_ids, reconcile_membership
from .model import Cell, CellInput, MonthPlan
from .repository import CellRepository, PlanRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResignationResult:
    employee: Employee
    cleared_days: list[int]


class PlanService:
    """Use cases around month plans: fetch-or-create with roster
    reconciliation, cell entry, resignation and the grid read-model."""

    def __init__(
        self,
        plans: PlanRepository,
        cells: CellRepository,
        employees: EmployeeRepository,
        businesses: BusinessRepository,
        employee_service: EmployeeService,
        *,
        calculator: Optional[TotalsCalculator] = None,
        max_shift_hours: int = DEFAULT_MAX_SHIFT_HOURS,
        retry_attempts: int = MEMBERSHIP_RETRY_ATTEMPTS,
    ):
        self._plans = plans
        self._cells = cells
        self._employees = employees
        self._businesses = businesses
        self._employee_service = employee_service
        self._calculator = calculator or StandardTotalsCalculator()
        self._max_shift_hours = int(max_shift_hours)
        self._retry_attempts = max(int(retry_attempts), 1)

    def require_owned(self, *, user_id: str, plan_id: str) -> MonthPlan:
        plan = self._plans.get_owned(plan_id=plan_id, user_id=user_id) if plan_id else None
        if not plan:
            raise NotFoundError("Planul nu există")
        return plan

    def _require_member(self, plan: MonthPlan, employee_id: str) -> None:
        # Stored membership may predate the business check in update_plan.
        employee = self._employees.get_by_id(employee_id) if employee_id in plan.employee_ids else None
        if not employee or employee.business_id != plan.business_id:
            raise ValidationError("Angajatul nu face parte din plan")

    def list_plans(self, *, user_id: str, business_id: Optional[str] = None) -> Sequence[MonthPlan]:
        return self._plans.list_for_user(user_id=user_id, business_id=business_id)

    def get_or_create(self, *, user_id: str, business_id: str, month: object, year: object) -> MonthPlan:
        """Plan for (business, month, year), created on first request.

        An existing plan gets newly eligible employees appended; members are
        never removed here. The membership write is a compare-and-set retried
        a bounded number of times.
        """
        month, year = require_month_year(month, year)
        business = self._businesses.get_owned(business_id=business_id, owner_user_id=user_id) if business_id else None
        if not business:
            raise NotFoundError("Firma nu există")

        eligible = eligible_employee_ids(self._employees.list_active(business.business_id), year, month)

        for _ in range(self._retry_attempts):
            plan = self._plans.get_by_key(business_id=business.business_id, month=month, year=year)
            if plan is None:
                plan = self._plans.create_if_absent(
                    user_id=user_id,
                    business_id=business.business_id,
                    month=month,
                    year=year,
                    location_name=business.location_name,
                    employee_ids=eligible,
                )
                logger.info("Plan %s ready for %02d/%d (%d members)", plan.plan_id, month, year, len(plan.employee_ids))

            merged = reconcile_membership(plan.employee_ids, eligible)
            if merged == list(plan.employee_ids):
                return plan

            if self._plans.compare_and_set_membership(plan_id=plan.plan_id, expected=plan.employee_ids, new=merged):
                logger.info(
                    "Plan %s reconciled: added %s",
                    plan.plan_id,
                    ", ".join(merged[len(plan.employee_ids):]),
                )
                return replace(plan, employee_ids=tuple(merged))

            logger.warning("Membership of plan %s changed concurrently, retrying", plan.plan_id)

        raise ConflictError("Planul a fost modificat între timp, reîncercați")

    def get_plan(self, *, user_id: str, plan_id: str) -> tuple[MonthPlan, Sequence[Cell]]:
        plan = self.require_owned(user_id=user_id, plan_id=plan_id)
        return plan, self._cells.list_for_plan(plan.plan_id)

    def update_plan(self, *, user_id: str, plan_id: str, employee_ids=UNSET, location_name=UNSET) -> MonthPlan:
        """Explicit user edit: reorder or replace membership, rename location."""
        plan = self.require_owned(user_id=user_id, plan_id=plan_id)

        new_ids = list(plan.employee_ids)
        if employee_ids is not UNSET:
            if not isinstance(employee_ids, (list, tuple)) or not all(isinstance(i, str) for i in employee_ids):
                raise ValidationError("Lista de angajați este invalidă")
            if len(set(employee_ids)) != len(employee_ids):
                raise ValidationError("Lista de angajați conține duplicate")
            known = {
                e.employee_id
                for e in self._employees.list_by_ids(business_id=plan.business_id, employee_ids=employee_ids)
            }
            if any(i not in known for i in employee_ids):
                raise ValidationError("Lista conține angajați care nu aparțin firmei")
            new_ids = list(employee_ids)

        new_location = plan.location_name if location_name is UNSET else str(location_name or "").strip()
        return self._plans.update(plan_id=plan.plan_id, employee_ids=new_ids, location_name=new_location)

    def delete_plan(self, *, user_id: str, plan_id: str) -> None:
        plan = self.require_owned(user_id=user_id, plan_id=plan_id)
        if not self._plans.delete(plan_id=plan.plan_id):
            raise NotFoundError("Planul nu există")

    def upsert_cells(self, *, user_id: str, cells: Sequence[CellInput]) -> Sequence[Cell]:
        """Validate and store a batch of cell codes (all or nothing)."""
        if not cells:
            raise ValidationError("Nicio celulă de salvat")

        plans: dict[str, MonthPlan] = {}
        accepted: list[CellInput] = []
        for c in cells:
            plan = plans.get(c.plan_id)
            if plan is None:
                plan = self.require_owned(user_id=user_id, plan_id=c.plan_id)
                plans[c.plan_id] = plan

            self._require_member(plan, c.employee_id)
            try:
                day = int(c.day)
            except (TypeError, ValueError):
                raise ValidationError("Zi invalidă")
            if not 1 <= day <= days_in_month(plan.year, plan.month):
                raise ValidationError(f"Zi invalidă: {c.day}")

            code = validate_manual_code(c.code, max_hours=self._max_shift_hours)
            accepted.append(CellInput(plan_id=plan.plan_id, employee_id=c.employee_id, day=day, code=code))

        return self._cells.upsert_many(accepted)

    def apply_resignation(
        self,
        *,
        user_id: str,
        plan_id: str,
        employee_id: str,
        termination_date: Optional[str],
    ) -> ResignationResult:
        """Set (or clear) a termination date and clear manual codes the fill now covers."""
        plan = self.require_owned(user_id=user_id, plan_id=plan_id)
        self._require_member(plan, employee_id)

        employee = self._employee_service.update(
            user_id=user_id,
            employee_id=employee_id,
            termination_date=termination_date,
        )

        cleared: list[int] = []
        if employee.termination_date:
            days = resignation_clear_days(parse_local_date(employee.termination_date), plan.year, plan.month)
            if days:
                self._cells.clear_days(plan_id=plan.plan_id, employee_id=employee_id, days=days)
                cleared = days
        return ResignationResult(employee=employee, cleared_days=cleared)

    def build_grid(self, *, user_id: str, plan_id: str) -> PlanGrid:
        plan, cells = self.get_plan(user_id=user_id, plan_id=plan_id)
        employees = {
            e.employee_id: e
            for e in self._employees.list_by_ids(business_id=plan.business_id, employee_ids=plan.employee_ids)
        }

        cells_by_employee: dict[str, dict[int, str]] = {}
        for c in cells:
            cells_by_employee.setdefault(c.employee_id, {})[c.day] = c.code

        return build_plan_grid(
            year=plan.year,
            month=plan.month,
            membership=plan.employee_ids,
            employees=employees,
            cells_by_employee=cells_by_employee,
            location_name=plan.location_name,
            plan_id=plan.plan_id,
            calculator=self._calculator,
        )
