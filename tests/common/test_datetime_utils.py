from datetime import date, datetime

import pytest

from src.pontaj_system.pontaj_system.common.datetime_utils import (
    compare_year_month,
    day_of_week,
    days_in_month,
    format_date_ro,
    is_weekend,
    month_name,
    parse_local_date,
    try_parse_local_date,
    weekday_label,
)
from src.pontaj_system.pontaj_system.core.exceptions import InvalidDateFormat, ValidationError


def test_days_in_month_handles_leap_years():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(2024, 1) == 31
    assert days_in_month(2024, 4) == 30


def test_days_in_month_rolls_over_out_of_range_months():
    assert days_in_month(2024, 13) == days_in_month(2025, 1) == 31
    assert days_in_month(2024, 0) == days_in_month(2023, 12)


def test_parse_local_date_keeps_calendar_components():
    assert parse_local_date("2024-03-15") == date(2024, 3, 15)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "15.03.2024",
        "2024-3-15",
        "2024-02-30",
        "2024-03-15T10:00:00",
        "abc",
        " 2024-03-15",
        "\t2024-03-15\n",
        "2024-03-15\n",
        "\u0662\u0660\u0662\u0664-\u0660\u0663-\u0661\u0665",
    ],
)
def test_parse_local_date_rejects_malformed_values(raw):
    with pytest.raises(InvalidDateFormat):
        parse_local_date(raw)


def test_invalid_date_format_is_a_validation_error():
    with pytest.raises(ValidationError):
        parse_local_date("not-a-date")


def test_try_parse_local_date_reports_issue_instead_of_raising():
    empty = try_parse_local_date(None)
    assert not empty.ok and empty.issue is None

    bad = try_parse_local_date("31/12/2024", field_name="termination_date")
    assert not bad.ok
    assert bad.issue.field_name == "termination_date"
    assert bad.issue.raw_value == "31/12/2024"

    assert try_parse_local_date(datetime(2024, 5, 2, 23, 59)).value == date(2024, 5, 2)
    assert try_parse_local_date(date(2024, 5, 2)).value == date(2024, 5, 2)


def test_weekday_helpers():
    # 2024-01-01 was a Monday
    assert day_of_week(2024, 1, 1) == 0
    assert weekday_label(2024, 1, 1) == "L"
    assert not is_weekend(2024, 1, 5)
    assert is_weekend(2024, 1, 6)
    assert is_weekend(2024, 1, 7)


def test_compare_year_month_ignores_day():
    assert compare_year_month(date(2024, 3, 31), 2024, 3) == 0
    assert compare_year_month(date(2024, 2, 29), 2024, 3) == -1
    assert compare_year_month(date(2025, 1, 1), 2024, 12) == 1


def test_romanian_formatting():
    assert month_name(1) == "Ianuarie"
    assert format_date_ro(date(2024, 3, 5)) == "05.03.2024"
