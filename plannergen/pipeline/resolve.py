from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..models import PlannerConfig, SectionOptions, normalize_identifier
from ..registry import ComponentRegistry, Role, build_registry
from ..section import Section


logger = logging.getLogger(__name__)


class Sectioner:
    """Turns the enabled sections of a config into constructed Section objects, in config order."""

    def __init__(self, config: PlannerConfig, registry: ComponentRegistry) -> None:
        self.config = config
        self.registry = registry

    def sections(self) -> List[Section]:
        return [
            self.make_section(name, options)
            for name, options in self.config.sections.items()
            if options.enabled
        ]

    def resolved_families(self) -> List[Tuple[str, str]]:
        return [
            (name, self.template_name(options))
            for name, options in self.config.sections.items()
            if options.enabled
        ]

    def template_name(self, options: SectionOptions) -> str:
        return normalize_identifier(self.config.template_for(options))

    def make_section(self, name: str, options: SectionOptions) -> Section:
        section_name = normalize_identifier(name)
        family = self.template_name(options)
        # every lookup happens before anything is constructed
        header_factory = self.registry.lookup(family, section_name, Role.HEADER)
        body_factory = self.registry.lookup(family, section_name, Role.BODY)
        section_factory = self.registry.lookup(family, section_name, Role.SECTION)

        header = header_factory(self.config, options)
        body = body_factory(self.config, options)
        logger.info("Resolved section %s with template %s", section_name, family)
        return section_factory(self.config, options, header, body)


def resolve(config: PlannerConfig, registry: Optional[ComponentRegistry] = None) -> List[Section]:
    return Sectioner(config, registry if registry is not None else build_registry()).sections()
