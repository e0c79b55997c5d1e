"""Piecewise linear curve fitting through an arbitrary set of points."""

from __future__ import annotations

from dataclasses import dataclass

from lcbasetools.mapper import Mapper


@dataclass
class _Point:
    x: float
    y: float


class MultiMap:
    """A curve made of straight segments joining the points added to it.

    Points may be added in any order. Below the first point the curve holds
    the first point's y, above the last it holds the last point's y.
    """

    def __init__(self) -> None:
        self._points: list[_Point] = []
        self._segments: list[Mapper] = []
        self._ready = False

    def add_point(self, x: float, y: float) -> None:
        """Add a point to the curve."""
        self._points.append(_Point(x, y))
        self._ready = False

    def clear_map(self) -> None:
        """Remove every point."""
        self._points.clear()
        self._segments.clear()
        self._ready = False

    def __len__(self) -> int:
        return len(self._points)

    def _set_up(self) -> bool:
        self._ready = False
        if self._points:
            self._points.sort(key=lambda point: point.x)
            self._segments = [
                Mapper(low.x, high.x, low.y, high.y)
                for low, high in zip(self._points, self._points[1:])
            ]
            self._ready = True
        return self._ready

    def _prepared(self) -> bool:
        return bool(self._points) and (self._ready or self._set_up())

    def map(self, value: float) -> float:
        """The curve's y at ``value``; 0 when there are no points."""
        if not self._prepared():
            return 0.0
        for point, segment in zip(self._points, self._segments):
            if value <= point.x:
                return point.y
            if value <= segment.max_x:
                return segment.map(value)
        return self._points[-1].y

    def integrate(self, x1: float, x2: float) -> float:
        """Area under the curve's segments between ``x1`` and ``x2``, in either order."""
        if not self._prepared():
            return 0.0
        low, high = min(x1, x2), max(x1, x2)
        total = 0.0
        for segment in self._segments:
            if low <= segment.min_x:
                if high == segment.max_x:
                    return total + segment.integrate()
                if high < segment.max_x:
                    return total + segment.integrate(low, high)
                total += segment.integrate()
            elif low >= segment.max_x:
                continue
            else:
                total += segment.integrate(low, high)
                if high <= segment.max_x:
                    return total
        return total