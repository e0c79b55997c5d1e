"""A running average over the last n values, with statistics and outlier limits."""

from __future__ import annotations

import math


class RunningAvg:
    """Keeps the last ``num_data`` values and their average.

    Optional upper and lower limits drop incoming values outside them;
    changing the limits does not touch values already stored.
    """

    def __init__(self, num_data: int) -> None:
        if num_data <= 0:
            raise ValueError("num_data must be positive")
        self._max_data = num_data
        self._values: list[float] = []
        self._index = 0
        self._result = 0.0
        self._oldest = 0.0
        self._latest = 0.0
        self._upper: float | None = None
        self._lower: float | None = None

    def add_data(self, value: float) -> float:
        """Store ``value`` and return the new average; rejected values leave it unchanged."""
        if self._lower is not None and value < self._lower:
            return self._result
        if self._upper is not None and value > self._upper:
            return self._result
        self._latest = value
        if len(self._values) < self._max_data:
            self._values.append(value)
            self._index = len(self._values)
            self._oldest = self._values[0]
        else:
            if self._index >= self._max_data:
                self._index = 0
            self._values[self._index] = value
            self._index += 1
            if self._index == self._max_data:
                self._oldest = self._values[0]
            else:
                self._oldest = self._values[self._index]
        self._result = sum(self._values) / len(self._values)
        return self._result

    def average(self) -> float:
        """The average as of the last accepted value."""
        return self._result

    def maximum(self) -> float:
        """Largest stored value; 0 when empty."""
        return max(self._values, default=0.0)

    def minimum(self) -> float:
        """Smallest stored value; 0 when empty."""
        return min(self._values, default=0.0)

    def delta(self) -> float:
        """Spread of the stored values: maximum minus minimum."""
        return self.maximum() - self.minimum()

    def endpoint_delta(self) -> float:
        """Latest value minus oldest stored value, a signed trend."""
        return self._latest - self._oldest

    def std_dev(self) -> float:
        """Population standard deviation of the stored values; 0 when empty."""
        if not self._values:
            return 0.0
        total = sum((value - self._result) ** 2 for value in self._values)
        return math.sqrt(total / len(self._values))

    def data_item(self, index: int) -> float:
        """The value in storage slot ``index``, or 0 if there is none."""
        if 0 <= index < len(self._values):
            return self._values[index]
        return 0.0

    def __len__(self) -> int:
        return len(self._values)

    def set_upper_limit(self, limit: float) -> None:
        self._upper = limit

    def clear_upper_limit(self) -> None:
        self._upper = None

    def set_lower_limit(self, limit: float) -> None:
        self._lower = limit

    def clear_lower_limit(self) -> None:
        self._lower = None

    def set_limits(self, lower: float, upper: float) -> None:
        self.set_lower_limit(lower)
        self.set_upper_limit(upper)

    def clear_limits(self) -> None:
        self.clear_upper_limit()
        self.clear_lower_limit()