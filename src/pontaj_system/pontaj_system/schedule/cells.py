"""Cell value model.

A cell code is one of: empty, a number of worked hours, ``CO`` (paid leave),
``CM`` (medical leave) or ``X`` (unpaid absence). The resignation letters
``D E M I S`` are only ever derived by the resignation fill and are never
accepted as user input.
"""

from __future__ import annotations

from typing import Mapping, Optional

from ..core.constants import DEFAULT_MAX_SHIFT_HOURS, RESIGNATION_PATTERN
from ..core.enums import CellCode, CellKind
from ..core.exceptions import ValidationError

RESIGNATION_LETTERS = frozenset(RESIGNATION_PATTERN)

_KIND_BY_CODE = {
    CellCode.EMPTY.value: CellKind.EMPTY,
    CellCode.PAID_LEAVE.value: CellKind.PAID_LEAVE,
    CellCode.MEDICAL_LEAVE.value: CellKind.MEDICAL_LEAVE,
    CellCode.ABSENCE.value: CellKind.ABSENCE,
}

CellMap = Mapping[int, str]


def parse_hours(code: Optional[str]) -> Optional[int]:
    """Hours for a numeric code, ``None`` for anything else.

    Only plain digit strings with a positive value count ("08" is 8, "0" and
    "-4" are not hours).
    """
    if not code or not code.isdigit() or not code.isascii():
        return None
    hours = int(code)
    return hours if hours > 0 else None


def classify_code(code: Optional[str]) -> CellKind:
    code = code or ""
    kind = _KIND_BY_CODE.get(code)
    if kind is not None:
        return kind
    if parse_hours(code) is not None:
        return CellKind.HOURS
    if code in RESIGNATION_LETTERS:
        return CellKind.RESIGNATION
    return CellKind.UNKNOWN


def is_leave_code(code: Optional[str]) -> bool:
    return classify_code(code) in (CellKind.PAID_LEAVE, CellKind.MEDICAL_LEAVE)


def validate_manual_code(code: Optional[str], *, max_hours: int = DEFAULT_MAX_SHIFT_HOURS) -> str:
    """Normalize a user-entered code and return the value to persist.

    Raises ValidationError for resignation letters, unknown codes and hours
    outside 1..max_hours.
    """
    normalized = (code or "").strip().upper()
    kind = classify_code(normalized)

    if kind == CellKind.HOURS:
        hours = parse_hours(normalized)
        if hours is None or hours > int(max_hours):
            raise ValidationError(f"Numărul de ore trebuie să fie între 1 și {max_hours}")
        return str(hours)
    if kind == CellKind.RESIGNATION:
        raise ValidationError(f"Codul {normalized!r} este rezervat pentru demisie")
    if kind == CellKind.UNKNOWN:
        if normalized.lstrip("-").isdigit():
            raise ValidationError(f"Numărul de ore trebuie să fie între 1 și {max_hours}")
        raise ValidationError(f"Cod invalid: {normalized!r}")
    return normalized
