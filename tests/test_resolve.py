from __future__ import annotations

import pytest

from plannergen.errors import ComponentNotFoundError
from plannergen.models import parse_planner_config
from plannergen.pipeline.resolve import Sectioner, resolve
from plannergen.registry import ComponentRegistry, Role, build_registry
from plannergen.section import Component
from plannergen.templates import breadcrumb, mos


def _config(sections: dict, template_name: str = "mos"):
    return parse_planner_config({"parameters": {"year": 2026, "template_name": template_name}, "sections": sections})


def test_only_enabled_sections_in_config_order() -> None:
    planner_config = _config(
        {
            "notes": {"enabled": True, "pages": 2},
            "daily": {},
            "title": {"enabled": True},
            "monthly": {"enabled": False},
        }
    )
    sections = resolve(planner_config, build_registry())
    assert [section.name for section in sections] == ["notes", "title"]
    assert all(section.enabled() for section in sections)


def test_section_template_overrides_global_default() -> None:
    planner_config = _config(
        {
            "monthly": {"enabled": True},
            "notes": {"enabled": True, "template_name": "breadcrumb"},
        }
    )
    monthly, notes = Sectioner(planner_config, build_registry()).sections()
    assert isinstance(monthly, mos.MonthlySection)
    assert type(monthly.header) is mos.MonthlyHeader
    assert type(notes.header) is breadcrumb.NotesHeader
    assert type(notes.body) is mos.NotesBody


def test_unregistered_section_name() -> None:
    planner_config = _config({"agenda": {"enabled": True}})
    with pytest.raises(ComponentNotFoundError) as excinfo:
        resolve(planner_config, build_registry())
    assert excinfo.value.section == "agenda"


def test_unknown_family() -> None:
    planner_config = _config({"title": {"enabled": True}}, template_name="nope")
    with pytest.raises(ComponentNotFoundError) as excinfo:
        resolve(planner_config, build_registry())
    assert excinfo.value.family == "nope"


def test_disabled_sections_are_never_constructed() -> None:
    built = []

    class Recording(Component):
        def __init__(self, *args) -> None:
            built.append(type(self))
            super().__init__(*args)

    registry = ComponentRegistry()
    registry.register_section("mos", "notes", mos.NotesSection, Recording, Recording)
    resolve(_config({"notes": {"enabled": False}, "agenda": {}}), registry)
    assert built == []


def test_nothing_is_constructed_when_a_component_is_missing() -> None:
    built = []

    class Recording(Component):
        def __init__(self, *args) -> None:
            built.append(type(self))
            super().__init__(*args)

    registry = ComponentRegistry()
    registry.register("mos", "notes", Role.HEADER, Recording)
    registry.register("mos", "notes", Role.SECTION, mos.NotesSection)
    with pytest.raises(ComponentNotFoundError) as excinfo:
        resolve(_config({"notes": {"enabled": True}}), registry)
    assert excinfo.value.identifier == "mos.Components.NotesBody"
    assert built == []


def test_resolved_families() -> None:
    planner_config = _config(
        {"title": {"enabled": True}, "notes": {"enabled": True, "template_name": "breadcrumb"}, "daily": {}}
    )
    sectioner = Sectioner(planner_config, build_registry())
    assert sectioner.resolved_families() == [("title", "mos"), ("notes", "breadcrumb")]
