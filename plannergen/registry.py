from __future__ import annotations

import importlib
import logging
from enum import Enum
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional, Type

from . import config
from .errors import ComponentNotFoundError, UnimplementedPageSequenceError
from .section import Component, Section


logger = logging.getLogger(__name__)


class Role(str, Enum):
    HEADER = "header"
    BODY = "body"
    SECTION = "section"


class ComponentKey(NamedTuple):
    family: str
    section: str
    role: Role

    @property
    def identifier(self) -> str:
        camel = "".join(part[:1].upper() + part[1:] for part in self.section.split("_"))
        if self.role is Role.SECTION:
            return f"{self.family}.Sections.{camel}"
        return f"{self.family}.Components.{camel}{self.role.value.capitalize()}"


ComponentFactory = Callable[..., Component]
SectionFactory = Callable[..., Section]


class ComponentRegistry:
    """(template family, section name, role) -> factory, filled by each family's register()."""

    def __init__(self) -> None:
        self._factories: Dict[ComponentKey, Callable] = {}

    def register(self, family: str, section: str, role: Role, factory: Callable) -> None:
        key = ComponentKey(family, section, Role(role))
        if key in self._factories:
            raise ValueError(f"{key.identifier} is already registered")
        if key.role is Role.SECTION and isinstance(factory, type) and issubclass(factory, Section):
            if not factory.supplies_pages():
                raise UnimplementedPageSequenceError(factory)
        logger.debug("Registered %s", key.identifier)
        self._factories[key] = factory

    def register_section(
        self,
        family: str,
        section: str,
        section_cls: Type[Section],
        header_cls: ComponentFactory,
        body_cls: ComponentFactory,
    ) -> None:
        # section first: a class without pages() must not leave a half-registered entry
        self.register(family, section, Role.SECTION, section_cls)
        self.register(family, section, Role.HEADER, header_cls)
        self.register(family, section, Role.BODY, body_cls)

    def lookup(self, family: str, section: str, role: Role) -> Callable:
        key = ComponentKey(family, section, Role(role))
        try:
            return self._factories[key]
        except KeyError:
            raise ComponentNotFoundError(key.identifier, section, family) from None

    def families(self) -> List[str]:
        return sorted({key.family for key in self._factories})

    def sections(self, family: str) -> List[str]:
        return sorted({key.section for key in self._factories if key.family == family})

    def __contains__(self, key: object) -> bool:
        return key in self._factories

    def __len__(self) -> int:
        return len(self._factories)


def load_families(registry: ComponentRegistry, names: Iterable[str]) -> ComponentRegistry:
    for name in names:
        module = importlib.import_module(f"{__package__}.templates.{name}")
        module.register(registry)
        logger.debug("Loaded template family %s", name)
    return registry


def build_registry(names: Optional[Iterable[str]] = None) -> ComponentRegistry:
    return load_families(ComponentRegistry(), config.BUILTIN_FAMILIES if names is None else names)
