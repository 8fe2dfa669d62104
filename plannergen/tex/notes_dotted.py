from __future__ import annotations

import math
import re
from typing import Union

from .. import config
from ..errors import InvalidDimensionError
from .measurement import Measurement


_WHITESPACE_RE = re.compile(r"\s+")

_DOT_GRID = r"""
\leavevmode\multido{\dC=0mm+5mm}{%(rows)d}{
    \multido{\dR=0mm+5mm}{%(columns)d}{
        \put(\dR,\dC){\circle*{0.1}}
    }
}
"""


class NotesDotted:
    def __init__(
        self,
        width: Union[str, Measurement] = config.DEFAULT_DOT_GRID_SIZE,
        height: Union[str, Measurement] = config.DEFAULT_DOT_GRID_SIZE,
    ) -> None:
        self.width = self._dimension("width", width)
        self.height = self._dimension("height", height)
        self.spacing = Measurement.parse(config.DOT_SPACING)

    @staticmethod
    def _dimension(name: str, value: Union[str, Measurement]) -> Measurement:
        measurement = Measurement.parse(value)
        if not measurement.is_positive():
            raise InvalidDimensionError(name, value)
        return measurement

    @property
    def rows(self) -> int:
        # top and bottom boundary both get a row of dots
        return math.ceil(self.height / self.spacing) + 1

    @property
    def columns(self) -> int:
        return math.ceil(self.width / self.spacing)

    def __str__(self) -> str:
        markup = _DOT_GRID % {"rows": self.rows, "columns": self.columns}
        return _WHITESPACE_RE.sub("", markup)
