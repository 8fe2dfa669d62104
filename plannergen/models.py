from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional, Type

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from . import config
from .errors import ConfigError, InvalidMeasurementError
from .i18n import available_locales
from .tex.measurement import Measurement


Weekday = Literal["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
Placement = Literal["left", "right"]

IDENTIFIER_RE = re.compile(r"^[A-Za-z][A-Za-z0-9]*(?:_[A-Za-z0-9]+)*$")


def normalize_identifier(name: str) -> str:
    """Strip whitespace and require a plain identifier, so two names can never collide.

    Underscores only join words (no leading, trailing or doubled ones): the name
    doubles as a file stem and has to survive slugify unchanged.
    """
    normalized = str(name).strip()
    if not IDENTIFIER_RE.match(normalized):
        raise ValueError(f"Invalid name {name!r}: use letters and digits, words joined by single underscores")
    return normalized


def _positive_length(value: str) -> str:
    try:
        measurement = Measurement.parse(value)
    except InvalidMeasurementError as exc:
        raise ValueError(str(exc)) from exc
    if not measurement.is_positive():
        raise ValueError(f"Length must be positive: {value}")
    return str(value)


@dataclass(frozen=True)
class TextDocument:
    name: str
    content: str


class Parameters(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    year: int = Field(default_factory=lambda: date.today().year, ge=1, le=9998)
    weekday_start: Weekday = "monday"
    template_name: str = config.DEFAULT_TEMPLATE
    locale: str = config.DEFAULT_LOCALE
    paper: Literal["a4", "a5", "letter"] = "a5"
    margin: str = "1cm"
    hand: Placement = "right"

    @field_validator("template_name")
    @classmethod
    def check_template_name(cls, value: str) -> str:
        return normalize_identifier(value)

    @field_validator("locale")
    @classmethod
    def check_locale(cls, value: str) -> str:
        locales = available_locales()
        if value not in locales:
            raise ValueError(f"Unsupported locale {value!r}, expected one of {locales}")
        return value

    @field_validator("margin")
    @classmethod
    def check_margin(cls, value: str) -> str:
        return _positive_length(value)


class SectionOptions(BaseModel):
    """Per-section options; keys no schema knows about stay in model_extra for the template."""

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = ""
    enabled: bool = False
    template_name: Optional[str] = None

    @field_validator("template_name")
    @classmethod
    def check_template_name(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else normalize_identifier(value)

    @property
    def extras(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class CalendarSectionOptions(SectionOptions):
    with_week_numbers: bool = True
    week_number_placement: Placement = "left"


class DailySectionOptions(SectionOptions):
    schedule_from: int = Field(default=5, ge=0, le=23)
    schedule_to: int = Field(default=23, ge=0, le=23)
    width: str = "6cm"
    height: str = "5cm"

    @field_validator("width", "height")
    @classmethod
    def check_dimensions(cls, value: str) -> str:
        return _positive_length(value)

    @model_validator(mode="after")
    def check_schedule_order(self) -> "DailySectionOptions":
        if self.schedule_from > self.schedule_to:
            raise ValueError("schedule_from must not be after schedule_to")
        return self


class NotesSectionOptions(SectionOptions):
    pages: int = Field(default=20, ge=1)
    width: str = "10cm"
    height: str = "15cm"

    @field_validator("width", "height")
    @classmethod
    def check_dimensions(cls, value: str) -> str:
        return _positive_length(value)


SECTION_OPTIONS: Dict[str, Type[SectionOptions]] = {
    "annual": CalendarSectionOptions,
    "quarterly": CalendarSectionOptions,
    "monthly": CalendarSectionOptions,
    "daily": DailySectionOptions,
    "notes": NotesSectionOptions,
}


class PlannerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    parameters: Parameters = Field(default_factory=Parameters)
    sections: Dict[str, SectionOptions] = Field(default_factory=dict)

    @field_validator("sections", mode="before")
    @classmethod
    def build_typed_sections(cls, value: Any) -> Dict[str, SectionOptions]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError("sections must be a mapping of name to options")
        typed: Dict[str, SectionOptions] = {}
        for raw_name, raw_options in value.items():
            name = normalize_identifier(raw_name)
            if name in typed:
                raise ValueError(f"Section {raw_name!r} duplicates section {name!r}")
            if isinstance(raw_options, SectionOptions):
                typed[name] = raw_options.model_copy(update={"name": name})
                continue
            if raw_options is None:
                raw_options = {}
            if not isinstance(raw_options, Mapping):
                raise ValueError(f"Options of section {name!r} must be a mapping")
            schema = SECTION_OPTIONS.get(name, SectionOptions)
            typed[name] = schema.model_validate({**raw_options, "name": name})
        return typed

    def enabled_sections(self) -> Dict[str, SectionOptions]:
        return {name: options for name, options in self.sections.items() if options.enabled}

    def template_for(self, options: SectionOptions) -> str:
        return options.template_name or self.parameters.template_name


def parse_planner_config(raw: Any) -> PlannerConfig:
    if not isinstance(raw, Mapping):
        raise ConfigError("Config root must be a mapping")
    try:
        return PlannerConfig.model_validate(dict(raw))
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_planner_config(path: Path) -> PlannerConfig:
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            raw = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Config {path} is not valid YAML: {exc}") from exc
    return parse_planner_config(raw or {})
