from datetime import date

from src.pontaj_system.pontaj_system.schedule.resignation import (
    resignation_clear_days,
    resignation_fill_cells,
    resignation_fill_for,
)


def test_fill_starts_on_termination_day_in_same_month():
    assert resignation_fill_cells(date(2024, 1, 25), 2024, 1) == {
        25: "D",
        26: "E",
        27: "M",
        28: "I",
        29: "S",
        30: "I",
        31: "E",
    }


def test_fill_is_empty_for_months_before_termination():
    assert resignation_fill_cells(date(2024, 3, 1), 2024, 1) == {}


def test_fill_covers_whole_month_after_termination():
    cells = resignation_fill_cells(date(2024, 1, 1), 2024, 2)

    assert sorted(cells) == list(range(1, 30))
    assert [cells[d] for d in range(1, 8)] == ["D", "E", "M", "I", "S", "I", "E"]
    assert cells[8] == "D"
    assert cells[29] == "D"


def test_fill_cycles_from_termination_day():
    cells = resignation_fill_cells(date(2024, 4, 10), 2024, 4)

    assert min(cells) == 10
    assert cells[17] == "D"
    assert cells[28] == "S"
    assert cells[30] == "E"


def test_fill_for_persisted_value_fails_open():
    assert resignation_fill_for(None, 2024, 1) == {}
    assert resignation_fill_for("", 2024, 1) == {}
    assert resignation_fill_for("25/01/2024", 2024, 1) == {}
    assert resignation_fill_for("2024-01-30", 2024, 1) == {30: "D", 31: "E"}


def test_clear_days_match_fill_coverage():
    assert resignation_clear_days(date(2024, 1, 25), 2024, 1) == [25, 26, 27, 28, 29, 30, 31]
    assert resignation_clear_days(date(2024, 1, 25), 2024, 2) == list(range(1, 30))
    assert resignation_clear_days(date(2024, 3, 1), 2024, 2) == []
