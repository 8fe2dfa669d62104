from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..dates import WEEKDAYS, Month, Week
from ..i18n import Translator
from .snippets import adjust_box
from .tables import Cell, Row, Table


DEFAULT_PARAMETERS: Dict[str, Any] = {
    "with_week_numbers": True,
    "week_number_placement": "left",
}

PLACEMENTS = ("left", "right")


def rotate_weekdays(weekday_start: str) -> List[str]:
    index = WEEKDAYS.index(weekday_start)
    return list(WEEKDAYS[index:] + WEEKDAYS[:index])


class LittleCalendar:
    """
    Month grid: one heading row of one-letter weekdays, then one row per week.
    Week numbers, when on, sit in the same column of every row.
    """

    def __init__(self, month: Month, i18n: Optional[Translator] = None, **parameters: Any) -> None:
        self.month = month
        self.i18n = i18n or Translator()
        merged = dict(DEFAULT_PARAMETERS)
        merged.update({key: value for key, value in parameters.items() if value is not None})
        if merged["week_number_placement"] not in PLACEMENTS:
            raise ValueError(f"week_number_placement must be one of {PLACEMENTS}, got {merged['week_number_placement']!r}")
        self.with_week_numbers = bool(merged["with_week_numbers"])
        self.week_number_placement = merged["week_number_placement"]

    def __str__(self) -> str:
        return adjust_box(str(self.table()))

    def table(self) -> Table:
        table = Table()
        table.add_row(self.column_headings())
        table.add_rows(self.week_row(week) for week in self.month.weeks)
        return table

    def column_headings(self) -> Row:
        row = Row(
            Cell(self.i18n.t(f"calendar.one_letter.{weekday}"))
            for weekday in rotate_weekdays(self.month.weekday_start)
        )
        return self._with_week_number(row, self.i18n.t("calendar.one_letter.week"))

    def week_row(self, week: Week) -> Row:
        # days outside the month keep their slot as an empty cell
        row = Row(Cell(day.day if day is not None else "") for day in week.days)
        return self._with_week_number(row, week.number)

    def _with_week_number(self, row: Row, value: Any) -> Row:
        if not self.with_week_numbers:
            return row
        if self.week_number_placement == "left":
            return row.unshift(Cell(value))
        return row.push(Cell(value))
