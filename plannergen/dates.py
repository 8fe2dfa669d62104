from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple


WEEKDAYS: Tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

MONTHS: Tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

THURSDAY = 3


@dataclass(frozen=True)
class Day:
    date: date

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def weekday(self) -> str:
        return WEEKDAYS[self.date.weekday()]

    @property
    def month_name(self) -> str:
        return MONTHS[self.date.month - 1]

    def ref(self) -> str:
        return self.date.isoformat()


@dataclass(frozen=True)
class Week:
    number: int
    days: Tuple[Optional[Day], ...]


@dataclass(frozen=True)
class Month:
    year: int
    month: int
    weekday_start: str
    weeks: Tuple[Week, ...]

    @property
    def name(self) -> str:
        return MONTHS[self.month - 1]

    @property
    def quarter(self) -> int:
        return (self.month - 1) // 3 + 1

    def days(self) -> List[Day]:
        return [day for week in self.weeks for day in week.days if day is not None]

    def ref(self) -> str:
        return f"{self.year}-{self.month:02d}"


@dataclass(frozen=True)
class Year:
    year: int
    weekday_start: str
    months: Tuple[Month, ...]

    def days(self) -> List[Day]:
        return [day for month in self.months for day in month.days()]

    def quarter(self, number: int) -> Tuple[Month, ...]:
        return tuple(month for month in self.months if month.quarter == number)


def _week_number(dates: List[date]) -> int:
    # ISO week of the row's Thursday, so every row gets exactly one number
    for value in dates:
        if value.weekday() == THURSDAY:
            return value.isocalendar()[1]
    return dates[0].isocalendar()[1]


def build_month(year: int, month: int, weekday_start: str = "monday") -> Month:
    if weekday_start not in WEEKDAYS:
        raise ValueError(f"Unknown weekday: {weekday_start}")
    cal = calendar.Calendar(firstweekday=WEEKDAYS.index(weekday_start))
    weeks: List[Week] = []
    for row in cal.monthdatescalendar(year, month):
        days = tuple(Day(value) if value.month == month else None for value in row)
        weeks.append(Week(number=_week_number(row), days=days))
    return Month(year=year, month=month, weekday_start=weekday_start, weeks=tuple(weeks))


def build_year(year: int, weekday_start: str = "monday") -> Year:
    months = tuple(build_month(year, month, weekday_start) for month in range(1, 13))
    return Year(year=year, weekday_start=weekday_start, months=months)
