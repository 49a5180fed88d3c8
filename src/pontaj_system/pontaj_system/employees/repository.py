from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_active(self, business_id: str) -> Sequence[Employee]:
        """Active employees of a business in creation order."""

        raise NotImplementedError

    def list_by_ids(self, *, business_id: str, employee_ids: Sequence[str]) -> Sequence[Employee]:
        """Employees of ``business_id`` by id regardless of ``active``; foreign ids are left out."""

        raise NotImplementedError

    def create(self, *, business_id: str, full_name: str, start_date: Optional[str] = None) -> Employee:
        raise NotImplementedError

    def update(
        self,
        *,
        employee_id: str,
        full_name: str,
        active: bool,
        start_date: Optional[str],
        termination_date: Optional[str],
    ) -> Employee:
        raise NotImplementedError

    def delete_permanently(self, *, business_id: str, employee_id: str) -> bool:
        """Delete the employee, its cells and its plan memberships in one transaction."""

        raise NotImplementedError
