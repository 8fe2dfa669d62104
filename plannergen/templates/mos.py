"""
"Months on sides" template family.

Every page gets a header with the page title on the left and tabs to the
calendar and notes sections on the right; left-handed planners swap the two.
"""
from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from ..dates import Day, Month, Year
from ..registry import ComponentRegistry
from ..section import Component, Section
from ..tex import snippets
from ..tex.little_calendar import LittleCalendar
from ..tex.notes_dotted import NotesDotted


FAMILY = "mos"

Quarter = Tuple[Month, ...]


class Header(Component):
    def title(self, page: Any) -> str:
        raise NotImplementedError(f"{type(self).__qualname__}.title")

    def target(self, page: Any) -> str:
        return ""

    def tabs(self) -> str:
        year = self.config.parameters.year
        return " | ".join(
            [
                snippets.hyperlink(f"{year}-01", self.i18n.t("sections.calendar")),
                snippets.hyperlink("notes-1", self.i18n.t("sections.notes")),
            ]
        )

    def generate(self, page: Any) -> str:
        left, right = r"{\Large " + snippets.escape(self.title(page)) + "}", self.tabs()
        if self.config.parameters.hand == "left":
            left, right = right, left
        target = self.target(page)
        return (
            (snippets.hypertarget(target) if target else "")
            + r"\noindent" + left + r"\hfill{}" + right + r"\par" + snippets.NL
            + r"\vskip1mm\hrule\vskip5mm" + snippets.NL
        )


class TitleHeader(Component):
    def generate(self, page: Any) -> str:
        return ""


class TitleBody(Component):
    def generate(self, year: int) -> str:
        return (
            r"\hspace{0pt}\vfil" + snippets.NL
            + r"\hfill\resizebox{.7\linewidth}{!}{" + str(year) + r"}\hfill{}" + snippets.NL
            + r"\vfil\hspace{0pt}"
        )


class TitleSection(Section):
    def pages(self) -> List[int]:
        return [self.config.parameters.year]


class CalendarGrid(Component):
    """Small month calendars side by side, `columns` to a row."""

    columns = 3
    cell_width = r".32\linewidth"

    def calendar(self, month: Month) -> LittleCalendar:
        return LittleCalendar(
            month,
            self.i18n,
            with_week_numbers=getattr(self.options, "with_week_numbers", None),
            week_number_placement=getattr(self.options, "week_number_placement", None),
        )

    def cell(self, month: Month) -> str:
        name = self.i18n.t(f"calendar.month.{month.name}")
        return (
            rf"\begin{{minipage}}[t]{{{self.cell_width}}}" + snippets.NL
            + r"\centering" + snippets.hyperlink(month.ref(), snippets.bold(name)) + r"\par" + snippets.NL
            + str(self.calendar(month)) + snippets.NL
            + r"\end{minipage}"
        )

    def grid(self, months: Sequence[Month]) -> str:
        rows = [months[start:start + self.columns] for start in range(0, len(months), self.columns)]
        return (r"\par\vskip5mm" + snippets.NL).join(
            r"\noindent" + r"\hfill".join(self.cell(month) for month in row) for row in rows
        )


class AnnualHeader(Header):
    def title(self, year: Year) -> str:
        return str(year.year)

    def target(self, year: Year) -> str:
        return f"{year.year}-annual"


class AnnualBody(CalendarGrid):
    def generate(self, year: Year) -> str:
        return self.grid(year.months)


class AnnualSection(Section):
    def pages(self) -> List[Year]:
        return [self.year]


class QuarterlyHeader(Header):
    def title(self, quarter: Quarter) -> str:
        first = quarter[0]
        return f"{self.i18n.t('calendar.quarter')}{first.quarter} {first.year}"

    def target(self, quarter: Quarter) -> str:
        first = quarter[0]
        return f"{first.year}-Q{first.quarter}"


class QuarterlyBody(CalendarGrid):
    columns = 1
    cell_width = r".6\linewidth"

    def generate(self, quarter: Quarter) -> str:
        return self.grid(quarter)


class QuarterlySection(Section):
    def pages(self) -> List[Quarter]:
        return [self.year.quarter(number) for number in range(1, 5)]


class MonthlyHeader(Header):
    def title(self, month: Month) -> str:
        return f"{self.i18n.t(f'calendar.month.{month.name}')} {month.year}"

    def target(self, month: Month) -> str:
        return month.ref()


class MonthlyBody(CalendarGrid):
    def generate(self, month: Month) -> str:
        return str(self.calendar(month))


class MonthlySection(Section):
    def pages(self) -> List[Month]:
        return list(self.year.months)


class DailyHeader(Header):
    def title(self, day: Day) -> str:
        weekday = self.i18n.t(f"calendar.weekday.{day.weekday}")
        month = self.i18n.t(f"calendar.month.{day.month_name}")
        return f"{weekday}, {day.day} {month}"

    def target(self, day: Day) -> str:
        return day.ref()


class DailyBody(Component):
    def schedule(self) -> str:
        first = getattr(self.options, "schedule_from", 5)
        last = getattr(self.options, "schedule_to", 23)
        hours = snippets.NL.join(
            rf"\parbox{{0pt}}{{\vskip5mm}}{hour:02d}\hrulefill" for hour in range(first, last + 1)
        )
        return (
            r"\begin{minipage}[t]{.35\linewidth}" + snippets.NL
            + snippets.bold(self.i18n.t("sections.schedule")) + r"\par" + snippets.NL
            + hours + snippets.NL
            + r"\end{minipage}"
        )

    def notes(self) -> str:
        dots = NotesDotted(
            width=getattr(self.options, "width", "6cm"),
            height=getattr(self.options, "height", "5cm"),
        )
        return (
            r"\begin{minipage}[t]{.6\linewidth}" + snippets.NL
            + snippets.bold(self.i18n.t("sections.notes")) + r"\par\vspace{5mm}" + snippets.NL
            + str(dots) + snippets.NL
            + r"\end{minipage}"
        )

    def generate(self, day: Day) -> str:
        columns = [self.schedule(), self.notes()]
        if self.config.parameters.hand == "left":
            columns.reverse()
        return r"\noindent" + r"\hfill".join(columns)


class DailySection(Section):
    def pages(self) -> List[Day]:
        return self.year.days()


class NotesHeader(Header):
    def title(self, number: int) -> str:
        return f"{self.i18n.t('sections.notes')} {number}"

    def target(self, number: int) -> str:
        return f"notes-{number}"


class NotesBody(Component):
    def generate(self, number: int) -> str:
        dots = NotesDotted(
            width=getattr(self.options, "width", "10cm"),
            height=getattr(self.options, "height", "15cm"),
        )
        return r"\vbox to 0mm{" + str(dots) + "}"


class NotesSection(Section):
    def pages(self) -> List[int]:
        return list(range(1, getattr(self.options, "pages", 1) + 1))


def register(registry: ComponentRegistry) -> None:
    registry.register_section(FAMILY, "title", TitleSection, TitleHeader, TitleBody)
    registry.register_section(FAMILY, "annual", AnnualSection, AnnualHeader, AnnualBody)
    registry.register_section(FAMILY, "quarterly", QuarterlySection, QuarterlyHeader, QuarterlyBody)
    registry.register_section(FAMILY, "monthly", MonthlySection, MonthlyHeader, MonthlyBody)
    registry.register_section(FAMILY, "daily", DailySection, DailyHeader, DailyBody)
    registry.register_section(FAMILY, "notes", NotesSection, NotesHeader, NotesBody)
