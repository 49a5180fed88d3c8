from __future__ import annotations

from enum import Enum


class CellCode(str, Enum):
    """Non-numeric codes a user may enter in a grid cell."""

    EMPTY = ""
    PAID_LEAVE = "CO"
    MEDICAL_LEAVE = "CM"
    ABSENCE = "X"


class CellKind(str, Enum):
    """Classification of a cell code used by aggregation and rendering."""

    EMPTY = "EMPTY"
    HOURS = "HOURS"
    PAID_LEAVE = "PAID_LEAVE"
    MEDICAL_LEAVE = "MEDICAL_LEAVE"
    ABSENCE = "ABSENCE"
    RESIGNATION = "RESIGNATION"
    UNKNOWN = "UNKNOWN"


class EmploymentStatus(str, Enum):
    """Employee status relative to one viewed month (derived, never stored)."""

    NOT_YET_STARTED = "NOT_YET_STARTED"
    ACTIVE = "ACTIVE"
    RESIGNED_THIS_MONTH = "RESIGNED_THIS_MONTH"
    RESIGNED_BEFORE = "RESIGNED_BEFORE"


class HoursModel(str, Enum):
    GENERALIZED = "generalized"
    LEGACY = "legacy"
