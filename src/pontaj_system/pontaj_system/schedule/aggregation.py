from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.constants import LEGACY_SHIFT_HOURS
from ..core.enums import HoursModel
from .cells import CellMap, parse_hours


def total_hours(cells: CellMap) -> int:
    """Sum of numeric codes; leave, absence and empty cells add nothing."""
    return sum(parse_hours(code) or 0 for code in cells.values())


def count_leave_days(cells: CellMap, code: str) -> int:
    return sum(1 for value in cells.values() if value == code)


def leave_days(cells: CellMap, code: str) -> list[int]:
    """Days carrying ``code``, ascending."""
    return sorted(int(day) for day, value in cells.items() if value == code)


class TotalsCalculator(ABC):
    """Calculator interface (Strategy Pattern for row totals)."""

    @abstractmethod
    def total_hours(self, cells: CellMap) -> int:
        raise NotImplementedError


class StandardTotalsCalculator(TotalsCalculator):
    """Generalized rule: every positive numeric code counts its own hours."""

    def total_hours(self, cells: CellMap) -> int:
        return total_hours(cells)


class LegacyTotalsCalculator(TotalsCalculator):
    """Legacy rule: only full "24" shifts count."""

    def total_hours(self, cells: CellMap) -> int:
        full_shift = str(LEGACY_SHIFT_HOURS)
        return sum(1 for value in cells.values() if value == full_shift) * LEGACY_SHIFT_HOURS


def calculator_for(model: HoursModel | str) -> TotalsCalculator:
    if HoursModel(model) == HoursModel.LEGACY:
        return LegacyTotalsCalculator()
    return StandardTotalsCalculator()
