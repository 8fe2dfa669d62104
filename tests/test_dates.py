from __future__ import annotations

from plannergen.dates import build_month, build_year


def test_month_rows_always_have_seven_slots() -> None:
    month = build_month(2026, 2, "monday")
    assert all(len(week.days) == 7 for week in month.weeks)
    first = month.weeks[0]
    assert [day.day if day else None for day in first.days] == [None] * 6 + [1]
    assert first.number == 5


def test_weekday_start_moves_the_first_column() -> None:
    month = build_month(2026, 2, "sunday")
    assert month.weeks[0].days[0].day == 1
    assert month.weekday_start == "sunday"


def test_year_has_every_day() -> None:
    year = build_year(2024)
    assert len(year.months) == 12
    assert len(year.days()) == 366
    assert [month.month for month in year.quarter(2)] == [4, 5, 6]
