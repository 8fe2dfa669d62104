from __future__ import annotations

from collections.abc import Mapping
from functools import cached_property
from typing import Any, Sequence

from . import config
from .dates import Year, build_year
from .errors import UnimplementedPageSequenceError
from .i18n import Translator
from .models import PlannerConfig, SectionOptions, TextDocument
from .tex.snippets import PAGES_GLUE


class Component:
    """Header or body renderer; turns one page of a section into markup."""

    def __init__(self, config: PlannerConfig, options: SectionOptions) -> None:
        self.config = config
        self.options = options

    @cached_property
    def i18n(self) -> Translator:
        return Translator(self.config.parameters.locale)

    def generate(self, page: Any) -> str:
        raise NotImplementedError(f"{type(self).__qualname__}.generate")


class Section:
    extension = config.DOCUMENT_EXTENSION

    def __init__(self, config: PlannerConfig, options: SectionOptions, header: Component, body: Component) -> None:
        self.config = config
        self.options = options
        self.header = header
        self.body = body

    @property
    def name(self) -> str:
        # NotesSection -> notes
        return _option(self.options, "name", "") or (type(self).__name__.removesuffix("Section") or "section").lower()

    @cached_property
    def year(self) -> Year:
        parameters = self.config.parameters
        return build_year(parameters.year, parameters.weekday_start)

    def enabled(self) -> bool:
        return bool(_option(self.options, "enabled", False))

    def generate(self) -> TextDocument:
        return TextDocument(name=f"{self.name}.{self.extension}", content=self.content())

    def content(self) -> str:
        return PAGES_GLUE.join(self.generate_page(page) for page in self.pages())

    def generate_page(self, page: Any) -> str:
        return f"{self.header.generate(page)}{self.body.generate(page)}"

    def pages(self) -> Sequence[Any]:
        """One entry per output page; every section type supplies its own."""
        raise UnimplementedPageSequenceError(type(self))

    @classmethod
    def supplies_pages(cls) -> bool:
        return cls.pages is not Section.pages


def _option(options: Any, key: str, default: Any) -> Any:
    if isinstance(options, Mapping):
        return options.get(key, default)
    return getattr(options, key, default)
