from __future__ import annotations

import pytest

from plannergen.dates import build_month
from plannergen.i18n import Translator
from plannergen.tex.little_calendar import LittleCalendar


class KeyEcho:
    """Translator stand-in that returns the last part of the key."""

    def t(self, key: str) -> str:
        return key.rsplit(".", 1)[-1]


def test_heading_rotates_to_weekday_start() -> None:
    month = build_month(2026, 4, "wednesday")
    calendar = LittleCalendar(month, KeyEcho(), with_week_numbers=False)
    assert calendar.column_headings().values() == [
        "wednesday",
        "thursday",
        "friday",
        "saturday",
        "sunday",
        "monday",
        "tuesday",
    ]


@pytest.mark.parametrize("weekday_start", ["monday", "sunday", "saturday"])
@pytest.mark.parametrize("placement, index", [("left", 0), ("right", -1)])
def test_week_number_column_is_the_same_in_every_row(weekday_start: str, placement: str, index: int) -> None:
    month = build_month(2026, 2, weekday_start)
    table = LittleCalendar(month, KeyEcho(), week_number_placement=placement).table()
    assert table.column_count == 8
    assert table.rows[0][index].value == "week"
    assert [row[index].value for row in table.rows[1:]] == [week.number for week in month.weeks]


def test_without_week_numbers_rows_have_seven_cells() -> None:
    month = build_month(2026, 3, "monday")
    table = LittleCalendar(month, KeyEcho(), with_week_numbers=False).table()
    assert {len(row) for row in table.rows} == {7}
    assert "week" not in table.rows[0].values()


def test_empty_slots_stay_in_the_row() -> None:
    month = build_month(2026, 2, "monday")
    first_week = LittleCalendar(month, KeyEcho()).table().rows[1]
    assert first_week.values() == [5, "", "", "", "", "", "", 1]


def test_defaults_and_none_parameters() -> None:
    month = build_month(2026, 2, "monday")
    calendar = LittleCalendar(month, KeyEcho(), with_week_numbers=None, week_number_placement=None)
    assert calendar.with_week_numbers is True
    assert calendar.week_number_placement == "left"


def test_unknown_placement() -> None:
    with pytest.raises(ValueError):
        LittleCalendar(build_month(2026, 2), KeyEcho(), week_number_placement="middle")


def test_output_is_wrapped_in_adjustbox() -> None:
    rendered = str(LittleCalendar(build_month(2026, 2), Translator("en")))
    assert rendered.startswith(r"\adjustbox{max width=\linewidth}{\begin{tabularx}")
    assert rendered.endswith(r"\end{tabularx}}")
    assert "W & M & T & W & T & F & S & S" in rendered
