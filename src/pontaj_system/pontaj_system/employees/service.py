from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..businesses.repository import BusinessRepository
from ..common.datetime_utils import parse_local_date, try_parse_local_date
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

UNSET = object()


def normalize_date_field(value: Optional[str], field_label: str) -> Optional[str]:
    """Validate an optional YYYY-MM-DD input; empty means "no date"."""
    if value is None or not str(value).strip():
        return None
    try:
        return parse_local_date(str(value).strip()).isoformat()
    except ValidationError:
        raise ValidationError(f"{field_label} invalidă (AAAA-LL-ZZ)")


def require_termination_after_start(start_date: Optional[str], termination_date: Optional[str]) -> None:
    start = try_parse_local_date(start_date)
    termination = try_parse_local_date(termination_date)
    if start.ok and termination.ok and termination.value < start.value:
        raise ValidationError("Data demisiei nu poate fi înainte de data angajării")


class EmployeeService:
    """Use cases: manage employees of the caller's businesses."""

    def __init__(self, employees: EmployeeRepository, businesses: BusinessRepository):
        self._employees = employees
        self._businesses = businesses

    def _require_business(self, *, user_id: str, business_id: str) -> None:
        if not business_id or not self._businesses.get_owned(business_id=business_id, owner_user_id=user_id):
            raise NotFoundError("Firma nu există")

    def require_owned(self, *, user_id: str, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee or not self._businesses.get_owned(business_id=employee.business_id, owner_user_id=user_id):
            raise NotFoundError("Angajatul nu există")
        return employee

    def list_active(self, *, user_id: str, business_id: str) -> Sequence[Employee]:
        self._require_business(user_id=user_id, business_id=business_id)
        return self._employees.list_active(business_id)

    def create(self, *, user_id: str, business_id: str, full_name: str, start_date: Optional[str] = None) -> Employee:
        full_name = require_non_empty(full_name, "Numele")
        self._require_business(user_id=user_id, business_id=business_id)
        start = normalize_date_field(start_date, "Data angajării")
        employee = self._employees.create(business_id=business_id, full_name=full_name, start_date=start)
        logger.info("Created employee %s in business %s", employee.employee_id, business_id)
        return employee

    def update(
        self,
        *,
        user_id: str,
        employee_id: str,
        full_name=UNSET,
        active=UNSET,
        start_date=UNSET,
        termination_date=UNSET,
    ) -> Employee:
        """Partial update; fields left as UNSET keep their value, ``None`` clears a date."""
        employee = self.require_owned(user_id=user_id, employee_id=employee_id)

        new_name = employee.full_name if full_name is UNSET else require_non_empty(full_name, "Numele")
        new_active = employee.active if active is UNSET else bool(active)
        new_start = employee.start_date if start_date is UNSET else normalize_date_field(start_date, "Data angajării")
        new_termination = (
            employee.termination_date
            if termination_date is UNSET
            else normalize_date_field(termination_date, "Data demisiei")
        )
        require_termination_after_start(new_start, new_termination)

        return self._employees.update(
            employee_id=employee.employee_id,
            full_name=new_name,
            active=new_active,
            start_date=new_start,
            termination_date=new_termination,
        )

    def deactivate(self, *, user_id: str, employee_id: str) -> Employee:
        """Soft delete: the employee stays in existing plans."""
        return self.update(user_id=user_id, employee_id=employee_id, active=False)

    def delete_permanently(self, *, user_id: str, business_id: str, employee_id: str) -> None:
        self._require_business(user_id=user_id, business_id=business_id)
        employee = self._employees.get_by_id(employee_id)
        if not employee or employee.business_id != business_id:
            raise NotFoundError("Angajatul nu există")
        if not self._employees.delete_permanently(business_id=business_id, employee_id=employee_id):
            raise NotFoundError("Angajatul nu există")
        logger.info("Permanently deleted employee %s from business %s", employee_id, business_id)
