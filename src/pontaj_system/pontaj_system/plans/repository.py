from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Cell, CellInput, MonthPlan


class PlanRepository(Protocol):
    def get_by_key(self, *, business_id: str, month: int, year: int) -> Optional[MonthPlan]:
        raise NotImplementedError

    def get_owned(self, *, plan_id: str, user_id: str) -> Optional[MonthPlan]:
        raise NotImplementedError

    def list_for_user(self, *, user_id: str, business_id: Optional[str] = None) -> Sequence[MonthPlan]:
        """Plans newest month first."""

        raise NotImplementedError

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
        """Insert the plan unless (business, month, year) exists; return the stored plan."""

        raise NotImplementedError

    def compare_and_set_membership(self, *, plan_id: str, expected: Sequence[str], new: Sequence[str]) -> bool:
        """Write ``new`` only if the stored membership still equals ``expected``."""

        raise NotImplementedError

    def update(self, *, plan_id: str, employee_ids: Sequence[str], location_name: str) -> MonthPlan:
        raise NotImplementedError

    def delete(self, *, plan_id: str) -> bool:
        raise NotImplementedError


class CellRepository(Protocol):
    def list_for_plan(self, plan_id: str) -> Sequence[Cell]:
        raise NotImplementedError

    def upsert_many(self, cells: Sequence[CellInput]) -> Sequence[Cell]:
        """Create-or-update by (plan_id, employee_id, day); last write wins."""

        raise NotImplementedError

    def clear_days(self, *, plan_id: str, employee_id: str, days: Sequence[int]) -> int:
        """Set the code of existing cells on ``days`` to empty; returns the rows changed."""

        raise NotImplementedError
