"""Breadcrumb template family: the header is a year > quarter > month trail."""
from __future__ import annotations

from typing import Any, List, Tuple

from ..dates import Month
from ..registry import ComponentRegistry
from ..section import Component
from ..tex import snippets
from . import mos


FAMILY = "breadcrumb"
SEPARATOR = r" $\rangle$ "


class BreadcrumbHeader(Component):
    def crumbs(self, page: Any) -> List[Tuple[str, str]]:
        """(target, text) pairs from the outermost level inwards."""
        year = self.config.parameters.year
        return [(f"{year}-01", str(year))]

    def generate(self, page: Any) -> str:
        crumbs = self.crumbs(page)
        *parents, (target, current) = crumbs
        trail = [snippets.hyperlink(parent_target, snippets.escape(text)) for parent_target, text in parents]
        trail.append(snippets.bold(snippets.escape(current)))
        return (
            snippets.hypertarget(target)
            + r"\noindent{\large " + SEPARATOR.join(trail) + r"}\par" + snippets.NL
            + r"\vskip1mm\hrule\vskip5mm" + snippets.NL
        )


class MonthlyHeader(BreadcrumbHeader):
    def crumbs(self, month: Month) -> List[Tuple[str, str]]:
        first_month = (month.quarter - 1) * 3 + 1
        return super().crumbs(month) + [
            (f"{month.year}-{first_month:02d}", f"{self.i18n.t('calendar.quarter')}{month.quarter}"),
            (month.ref(), self.i18n.t(f"calendar.month.{month.name}")),
        ]


class NotesHeader(BreadcrumbHeader):
    def crumbs(self, number: int) -> List[Tuple[str, str]]:
        return super().crumbs(number) + [
            ("notes-1", self.i18n.t("sections.notes")),
            (f"notes-{number}", str(number)),
        ]


def register(registry: ComponentRegistry) -> None:
    registry.register_section(FAMILY, "monthly", mos.MonthlySection, MonthlyHeader, mos.MonthlyBody)
    registry.register_section(FAMILY, "notes", mos.NotesSection, NotesHeader, mos.NotesBody)
