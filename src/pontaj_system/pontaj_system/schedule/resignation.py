"""Resignation ("Demisie") fill.

Days on and after an employee's termination date display the fixed pattern
D, E, M, I, S, I, E (cycling). The fill is a computed view: it is never written
to the cell storage and must be recomputed for every viewed month.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import DateLike, compare_year_month, days_in_month, try_parse_local_date
from ..core.constants import RESIGNATION_PATTERN

logger = logging.getLogger(__name__)


def _fill_start_day(termination_date: date, year: int, month: int) -> Optional[int]:
    """First day of (year, month) covered by the fill, ``None`` if none is."""
    cmp = compare_year_month(termination_date, year, month)
    if cmp > 0:
        return None
    if cmp < 0:
        return 1
    return termination_date.day


def resignation_fill_cells(termination_date: date, year: int, month: int) -> dict[int, str]:
    """Map of day -> resignation letter for the viewed month.

    - termination in an earlier month: every day, pattern starting on day 1
    - termination in this month: from the termination day to the month end,
      pattern starting on the termination day
    - termination in a later month: empty
    """
    start = _fill_start_day(termination_date, year, month)
    if start is None:
        return {}

    size = len(RESIGNATION_PATTERN)
    return {day: RESIGNATION_PATTERN[(day - start) % size] for day in range(start, days_in_month(year, month) + 1)}


def resignation_fill_for(termination: DateLike, year: int, month: int) -> dict[int, str]:
    """Fill for a persisted (possibly missing or malformed) termination value.

    A malformed value has no effect on the grid.
    """
    parsed = try_parse_local_date(termination, field_name="termination_date")
    if parsed.issue:
        logger.warning("Ignoring unparseable termination date %r: %s", parsed.issue.raw_value, parsed.issue.reason)
    if not parsed.ok:
        return {}
    return resignation_fill_cells(parsed.value, year, month)


def resignation_clear_days(termination_date: date, year: int, month: int) -> list[int]:
    """Days of (year, month) whose manual codes are cleared when a resignation is set."""
    start = _fill_start_day(termination_date, year, month)
    if start is None:
        return []
    return list(range(start, days_in_month(year, month) + 1))
