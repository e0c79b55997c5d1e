"""24 bit RGB colours, 16 bit (565) packing, and colour blending and mapping."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from lcbasetools.mapper import Mapper
from lcbasetools.multimap import MultiMap

LC_BLACK = (0, 0, 0)
LC_CHARCOAL = (50, 50, 50)
LC_DARK_GREY = (140, 140, 140)
LC_GREY = (185, 185, 185)
LC_LIGHT_GREY = (250, 250, 250)
LC_WHITE = (255, 255, 255)

LC_RED = (255, 0, 0)
LC_PINK = (255, 130, 208)

LC_GREEN = (0, 255, 0)
LC_DARK_GREEN = (0, 30, 0)
LC_OLIVE = (30, 30, 1)

LC_BLUE = (0, 0, 255)
LC_LIGHT_BLUE = (164, 205, 255)
LC_NAVY = (0, 0, 30)

LC_PURPLE = (140, 0, 255)
LC_LAVENDER = (218, 151, 255)
LC_ORANGE = (255, 128, 0)

LC_CYAN = (0, 255, 255)
LC_MAGENTA = (255, 0, 255)
LC_YELLOW = (255, 255, 0)

# Packed 16 bit values of the named colours, so they unpack back to exactly
# the 24 bit colour they came from.
KNOWN_COLOR16 = {
    0x0000: LC_BLACK,
    0x3186: LC_CHARCOAL,
    0x8C71: LC_DARK_GREY,
    0xBDD7: LC_GREY,
    0xFFDF: LC_LIGHT_GREY,
    0xFFFF: LC_WHITE,
    0xF800: LC_RED,
    0xFC1A: LC_PINK,
    0x07E0: LC_GREEN,
    0x00E0: LC_DARK_GREEN,
    0x18E0: LC_OLIVE,
    0x001F: LC_BLUE,
    0xA67F: LC_LIGHT_BLUE,
    0x0003: LC_NAVY,
    0x881F: LC_PURPLE,
    0xDCBF: LC_LAVENDER,
    0xFC00: LC_ORANGE,
    0x07FF: LC_CYAN,
    0xF81F: LC_MAGENTA,
    0xFFE0: LC_YELLOW,
}

_PERCENT_START = 0
_PERCENT_END = 100


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def _byte(value: float) -> int:
    return int(value) & 0xFF


@dataclass
class RGBPack:
    """Compact storage of one colour: three bytes."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass
class ColorObj:
    """A 24 bit colour, one byte per channel."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        self.set_color(self.red, self.green, self.blue)

    @classmethod
    def from_color16(cls, value: int) -> ColorObj:
        """A colour unpacked from a 16 bit 565 value."""
        color = cls()
        color.set_color16(value)
        return color

    @classmethod
    def from_pack(cls, pack: RGBPack) -> ColorObj:
        return cls(pack.r, pack.g, pack.b)

    def set_color(self, red: int, green: int, blue: int) -> None:
        self.red = _byte(red)
        self.green = _byte(green)
        self.blue = _byte(blue)

    def set_color16(self, value: int) -> None:
        """Unpack a 16 bit colour; named colours come back exactly."""
        value &= 0xFFFF
        known = KNOWN_COLOR16.get(value)
        if known is not None:
            self.set_color(*known)
            return
        self.red = (value >> 8) & 0xF8
        self.green = (((value >> 5) & 0xFF) << 2) & 0xFF
        self.blue = ((value & 0xFF) << 3) & 0xFF

    def copy_from(self, other: ColorObj) -> None:
        self.set_color(other.red, other.green, other.blue)

    def color16(self) -> int:
        """This colour packed as 16 bit 565."""
        return ((self.red & 0xF8) << 8) | ((self.green & 0xFC) << 3) | (self.blue >> 3)

    def greyscale(self) -> int:
        """The channels averaged into one byte."""
        return _round((self.red + self.green + self.blue) / 3.0)

    def pack(self) -> RGBPack:
        return RGBPack(self.red, self.green, self.blue)

    def mix_colors(self, other: ColorObj, percent: float) -> ColorObj:
        """A new colour ``percent`` of the way from this one to ``other``."""
        if percent >= 100:
            return ColorObj(other.red, other.green, other.blue)
        if percent <= 0:
            return ColorObj(self.red, self.green, self.blue)
        return ColorMapper(self, other).map(percent)

    def blend(self, other: ColorObj, percent: float) -> None:
        """Move this colour ``percent`` of the way towards ``other``."""
        if percent >= 100:
            self.copy_from(other)
        elif percent > 0:
            self.copy_from(ColorMapper(self, other).map(percent))


RED = ColorObj(*LC_RED)
BLUE = ColorObj(*LC_BLUE)
WHITE = ColorObj(*LC_WHITE)
BLACK = ColorObj(*LC_BLACK)
GREEN = ColorObj(*LC_GREEN)
CYAN = ColorObj(*LC_CYAN)
MAGENTA = ColorObj(*LC_MAGENTA)
YELLOW = ColorObj(*LC_YELLOW)


class ColorMapper:
    """Maps a percentage 0..100 onto the colours between a start and an end colour."""

    def __init__(
        self, start: Optional[ColorObj] = None, end: Optional[ColorObj] = None
    ) -> None:
        self._red = Mapper(_PERCENT_START, _PERCENT_END, 0, 0)
        self._green = Mapper(_PERCENT_START, _PERCENT_END, 0, 0)
        self._blue = Mapper(_PERCENT_START, _PERCENT_END, 0, 0)
        if start is not None and end is not None:
            self.set_colors(start, end)

    @classmethod
    def from_color16(cls, start: int, end: int) -> ColorMapper:
        return cls(ColorObj.from_color16(start), ColorObj.from_color16(end))

    def set_colors(self, start: ColorObj, end: ColorObj) -> None:
        self._red.set_values(_PERCENT_START, _PERCENT_END, start.red, end.red)
        self._green.set_values(_PERCENT_START, _PERCENT_END, start.green, end.green)
        self._blue.set_values(_PERCENT_START, _PERCENT_END, start.blue, end.blue)

    def map(self, percent: float) -> ColorObj:
        """The colour at ``percent``, clamped to 0..100."""
        return ColorObj(
            _round(self._red.map(percent)),
            _round(self._green.map(percent)),
            _round(self._blue.map(percent)),
        )


class ColorMultiMap:
    """A colour gradient through any number of colours placed on a numeric axis."""

    def __init__(self) -> None:
        self._red = MultiMap()
        self._green = MultiMap()
        self._blue = MultiMap()

    def add_color(self, x: float, color: Optional[ColorObj]) -> None:
        """At ``x`` the gradient is exactly ``color``."""
        if color is not None:
            self._red.add_point(x, color.red)
            self._green.add_point(x, color.green)
            self._blue.add_point(x, color.blue)

    def clear_map(self) -> None:
        self._red.clear_map()
        self._green.clear_map()
        self._blue.clear_map()

    def map(self, value: float) -> ColorObj:
        """The gradient's colour at ``value``; black when no colours were added."""
        return ColorObj(
            _round(self._red.map(value)),
            _round(self._green.map(value)),
            _round(self._blue.map(value)),
        )