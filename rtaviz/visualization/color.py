"""A seagreen-gold-red colour gradient for highlighting values."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Sequence, Tuple

_Rgba = Tuple[float, float, float, float]

_HTML_COLORS = {
    "seagreen": (46, 139, 87),
    "gold": (255, 215, 0),
    "red": (255, 0, 0),
}


def _to_f32(x: float) -> float:
    return struct.unpack("f", struct.pack("f", x))[0]


def _channel_to_u8(x: float) -> int:
    return max(0, min(255, math.floor(x * 255.0 + 0.5)))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels, shown as ``#RRGGBBAA``."""

    r: int
    g: int
    b: int
    a: int = 255

    def __str__(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"


class ColorGradient:
    """A linear RGB gradient over evenly spaced stops in ``[0, 1]``."""

    def __init__(self, names: Sequence[str] = ("seagreen", "gold", "red")) -> None:
        try:
            self._stops: Tuple[_Rgba, ...] = tuple(
                tuple(c / 255.0 for c in _HTML_COLORS[name]) + (1.0,)  # type: ignore[misc]
                for name in names
            )
        except KeyError as exc:
            raise ValueError(f"unknown colour name: {exc.args[0]}") from None
        if len(self._stops) < 2:
            raise ValueError("a gradient needs at least two colours")

    def _at(self, t: float) -> _Rgba:
        if math.isnan(t):
            return (0.0, 0.0, 0.0, 1.0)
        if t <= 0.0:
            return self._stops[0]
        if t >= 1.0:
            return self._stops[-1]
        segments = len(self._stops) - 1
        pos = t * segments
        index = min(int(pos), segments - 1)
        local = pos - index
        start, end = self._stops[index], self._stops[index + 1]
        return tuple(a + local * (b - a) for a, b in zip(start, end))  # type: ignore[return-value]

    def color(self, value: float) -> Color:
        """Return the colour for ``value`` in ``[0, 1]``; values outside are clamped."""
        r, g, b, a = self._at(_to_f32(value))
        return Color(_channel_to_u8(r), _channel_to_u8(g), _channel_to_u8(b), _channel_to_u8(a))

    def color_for_range(self, value: int, min: int, max: int) -> Color:
        """Return the colour for ``value`` scaled from ``[min, max]`` to ``[0, 1]``."""
        numerator = value - min
        denominator = max - min
        if denominator == 0:
            if numerator == 0:
                position = math.nan
            else:
                position = math.copysign(math.inf, numerator)
        else:
            position = numerator / denominator
        return self.color(position)


COLOR_GRADIENT = ColorGradient()