from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from ..core.constants import MONTHS_RO, WEEKDAYS_RO
from ..core.exceptions import InvalidDateFormat

_ISO_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

DateLike = Union[date, str, None]


def days_in_month(year: int, month: int) -> int:
    """Number of days in a 1-based month.

    Out-of-range months roll over into the neighbouring years (month 13 is
    January of the next year, month 0 is December of the previous one).
    """
    year, month = normalize_year_month(year, month)
    return calendar.monthrange(year, month)[1]


def normalize_year_month(year: int, month: int) -> tuple[int, int]:
    year = int(year) + (int(month) - 1) // 12
    month = (int(month) - 1) % 12 + 1
    return year, month


def parse_local_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD string (ASCII digits, no padding) into a calendar date.

    A ``date`` carries no time or timezone, so the parsed components are
    returned as-is regardless of the host timezone.
    """
    m = _ISO_DATE_RE.fullmatch(value) if isinstance(value, str) else None
    if not m:
        raise InvalidDateFormat(f"Data invalidă (AAAA-LL-ZZ): {value!r}")
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        raise InvalidDateFormat(f"Data invalidă: {value!r}")


@dataclass(frozen=True)
class ParseIssue:
    """Why a stored date could not be used."""

    field_name: str
    raw_value: object
    reason: str


@dataclass(frozen=True)
class ParsedDate:
    value: Optional[date] = None
    issue: Optional[ParseIssue] = None

    @property
    def ok(self) -> bool:
        return self.value is not None


def try_parse_local_date(value: DateLike, *, field_name: str = "date") -> ParsedDate:
    """Non-raising variant for persisted fields.

    ``None``/empty gives an empty result without an issue; anything that is not
    a valid date gives an empty result carrying a ``ParseIssue``.
    """
    if value is None or value == "":
        return ParsedDate()
    if isinstance(value, datetime):
        return ParsedDate(value=value.date())
    if isinstance(value, date):
        return ParsedDate(value=value)
    try:
        return ParsedDate(value=parse_local_date(value))
    except InvalidDateFormat as e:
        return ParsedDate(issue=ParseIssue(field_name=field_name, raw_value=value, reason=str(e)))


def day_of_week(year: int, month: int, day: int) -> int:
    """Weekday of a day in the month, 0 = Monday ... 6 = Sunday."""
    return date(year, month, day).weekday()


def is_weekend(year: int, month: int, day: int) -> bool:
    return day_of_week(year, month, day) >= 5


def weekday_label(year: int, month: int, day: int) -> str:
    return WEEKDAYS_RO[day_of_week(year, month, day)]


def month_name(month: int) -> str:
    return MONTHS_RO[int(month) - 1]


def compare_year_month(a: date, year: int, month: int) -> int:
    """-1 / 0 / 1 as (a.year, a.month) is before / equal / after (year, month)."""
    left = (a.year, a.month)
    right = (int(year), int(month))
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def format_date_ro(value: date) -> str:
    return value.strftime("%d.%m.%Y")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now()
