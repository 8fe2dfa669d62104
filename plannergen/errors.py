from __future__ import annotations


class PlannerError(Exception):
    """Base class for every error raised by plannergen."""


class ConfigError(PlannerError, ValueError):
    pass


class ComponentNotFoundError(PlannerError, LookupError):
    def __init__(self, identifier: str, section: str, family: str) -> None:
        self.identifier = identifier
        self.section = section
        self.family = family
        super().__init__(
            f"Component {identifier} not found for section '{section}' in template family '{family}'"
        )


class InvalidMeasurementError(PlannerError, ValueError):
    pass


class InvalidDimensionError(PlannerError, ValueError):
    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a positive length, got {value!r}")


class UnimplementedPageSequenceError(PlannerError, NotImplementedError):
    def __init__(self, section_type: type) -> None:
        self.section_type = section_type
        super().__init__(f"{section_type.__qualname__} does not supply a page sequence (pages() is not implemented)")


class MissingTranslationError(PlannerError, KeyError):
    def __init__(self, locale: str, key: str) -> None:
        self.locale = locale
        self.key = key
        super().__init__(f"Missing translation '{key}' for locale '{locale}'")

    def __str__(self) -> str:
        return str(self.args[0])


class CompileError(PlannerError, RuntimeError):
    pass
