"""Linear mapping between two real-valued ranges, with clamping and integration."""

from __future__ import annotations

import math
from typing import Optional


def _divide(numerator: float, denominator: float) -> float:
    """Floating point division that yields inf or nan instead of raising."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Mapper:
    """Maps x in [x1, x2] linearly onto y in [y1, y2].

    Inputs outside the x range are clamped to its nearest end.
    """

    def __init__(
        self, x1: float = 0.0, x2: float = 1.0, y1: float = 0.0, y2: float = 1.0
    ) -> None:
        self.min_x = 0.0
        self.max_x = 0.0
        self.slope = 0.0
        self.intercept = 0.0
        self.set_values(x1, x2, y1, y2)

    def set_values(self, x1: float, x2: float, y1: float, y2: float) -> None:
        """Set both ranges and precompute the line."""
        self.max_x = max(x1, x2)
        self.min_x = min(x1, x2)
        self.slope = _divide(y1 - y2, x1 - x2)
        self.intercept = y1 - self.slope * x1

    def map(self, value: float) -> float:
        """Map ``value`` from x to y, clamping it to the x range first."""
        if value < self.min_x:
            value = self.min_x
        elif value > self.max_x:
            value = self.max_x
        return self.slope * value + self.intercept

    def integrate(self, x1: Optional[float] = None, x2: Optional[float] = None) -> float:
        """Area under the line from ``x1`` to ``x2``; the whole range by default."""
        if x1 is None:
            x1 = self.min_x
        if x2 is None:
            x2 = self.max_x
        if x1 < self.min_x:
            x1 = self.min_x
        if x2 > self.max_x:
            x2 = self.max_x
        return ((self.map(x1) + self.map(x2)) / 2) * (x2 - x1)