from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Dict, List

from . import config
from .errors import ConfigError, MissingTranslationError


@lru_cache(maxsize=None)
def _load_table(locale: str) -> Dict[str, Any]:
    path = config.LOCALES_DIR / f"{locale}.json"
    if not path.exists():
        raise ConfigError(f"Unsupported locale: {locale}")
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def available_locales() -> List[str]:
    return sorted(path.stem for path in config.LOCALES_DIR.glob("*.json"))


class Translator:
    def __init__(self, locale: str = config.DEFAULT_LOCALE) -> None:
        self.locale = locale
        self._table = _load_table(locale)

    def t(self, key: str) -> str:
        node: Any = self._table
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                raise MissingTranslationError(self.locale, key)
            node = node[part]
        if not isinstance(node, str):
            raise MissingTranslationError(self.locale, key)
        return node

    __call__ = t
