from __future__ import annotations

import math
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Union

from reportlab.lib.units import cm, inch, mm, pica

from ..errors import InvalidMeasurementError


# points per unit, same table reportlab's toLength() understands
UNIT_POINTS: Dict[str, float] = {
    "pt": 1.0,
    "mm": mm,
    "cm": cm,
    "in": inch,
    "pica": pica,
}

_MEASUREMENT_RE = re.compile(r"^\s*(?P<quantity>[+-]?(?:\d+(?:\.\d+)?|\.\d+))\s*(?P<unit>[a-z]+)\s*$")

# float noise from unit conversion stays far below this
_RATIO_PRECISION = 10**6


@dataclass(frozen=True)
class Measurement:
    quantity: Fraction
    unit: str

    @classmethod
    def parse(cls, value: Union[str, "Measurement"]) -> "Measurement":
        """
        "10mm", "1.5 cm", "2in", "12pt", "1pica" 형태의 길이를 읽는다.
        단위가 없는 숫자는 모호해서 받지 않는다.
        """
        if isinstance(value, Measurement):
            return value
        match = _MEASUREMENT_RE.match(str(value).lower())
        if match is None:
            raise InvalidMeasurementError(f"Can't convert {value!r} to a length")
        unit = match.group("unit")
        if unit not in UNIT_POINTS:
            raise InvalidMeasurementError(f"Unknown length unit {unit!r} in {value!r}")
        return cls(Fraction(match.group("quantity")), unit)

    @property
    def points(self) -> float:
        return float(self.quantity) * UNIT_POINTS[self.unit]

    def is_positive(self) -> bool:
        return self.quantity > 0

    def __truediv__(self, other: "Measurement") -> Fraction:
        if not isinstance(other, Measurement):
            return NotImplemented
        if other.quantity == 0:
            raise ZeroDivisionError(f"Division by zero length {other}")
        if self.unit == other.unit:
            return self.quantity / other.quantity
        return Fraction(self.points / other.points).limit_denominator(_RATIO_PRECISION)

    def ceil(self) -> int:
        return math.ceil(self.quantity)

    def __str__(self) -> str:
        if self.quantity.denominator == 1:
            return f"{self.quantity.numerator}{self.unit}"
        return f"{float(self.quantity):g}{self.unit}"


def ceil_ratio(length: Union[str, Measurement], step: Union[str, Measurement]) -> int:
    return math.ceil(Measurement.parse(length) / Measurement.parse(step))
