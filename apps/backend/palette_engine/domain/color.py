"""
Immutable RGB color value.

Hue rotation happens in HSL (via colorsys). Darken/brighten move the CIE L*
lightness of the color (D65 Lab) and convert back to clamped 8-bit RGB.
"""

import colorsys
import math
import re
from dataclasses import dataclass, field
from typing import Any, Tuple

from palette_engine.config import LAB_LIGHTNESS_STEP
from palette_engine.exceptions import InvalidColorFormat

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")

# D65 reference white
_XN = 0.950470
_YN = 1.0
_ZN = 1.088830

_T0 = 4 / 29
_T1 = 6 / 29
_T2 = 3 * _T1 ** 2
_T3 = _T1 ** 3


def _round_channel(value: float) -> int:
    """Clamp to 0-255 and round half up."""
    value = min(255.0, max(0.0, value))
    return int(math.floor(value + 0.5))


def _linearize(channel: int) -> float:
    c = channel / 255.0
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def _rgb_xyz(channel: int) -> float:
    c = channel / 255.0
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def _xyz_lab(t: float) -> float:
    return t ** (1 / 3) if t > _T3 else t / _T2 + _T0


def _lab_xyz(t: float) -> float:
    return t ** 3 if t > _T1 else _T2 * (t - _T0)


def _xyz_rgb(c: float) -> float:
    return 255 * (12.92 * c if c <= 0.00304 else 1.055 * c ** (1 / 2.4) - 0.055)


def rgb_to_lab(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert 8-bit sRGB to CIE Lab (D65)."""
    rl, gl, bl = _rgb_xyz(r), _rgb_xyz(g), _rgb_xyz(b)
    x = _xyz_lab((0.4124564 * rl + 0.3575761 * gl + 0.1804375 * bl) / _XN)
    y = _xyz_lab((0.2126729 * rl + 0.7151522 * gl + 0.0721750 * bl) / _YN)
    z = _xyz_lab((0.0193339 * rl + 0.1191920 * gl + 0.9503041 * bl) / _ZN)
    lightness = 116 * y - 16
    return (max(lightness, 0.0), 500 * (x - y), 200 * (y - z))


def lab_to_rgb(lightness: float, a: float, b: float) -> Tuple[int, int, int]:
    """Convert CIE Lab (D65) back to clamped 8-bit sRGB."""
    y = (lightness + 16) / 116
    x = y + a / 500
    z = y - b / 200

    y = _YN * _lab_xyz(y)
    x = _XN * _lab_xyz(x)
    z = _ZN * _lab_xyz(z)

    r = _xyz_rgb(3.2404542 * x - 1.5371385 * y - 0.4985314 * z)
    g = _xyz_rgb(-0.9692660 * x + 1.8760108 * y + 0.0415560 * z)
    b_ = _xyz_rgb(0.0556434 * x - 0.2040259 * y + 1.0572252 * z)
    return (_round_channel(r), _round_channel(g), _round_channel(b_))


@dataclass(frozen=True)
class Color:
    """A 24-bit RGB color with its WCAG relative luminance.

    Two colors are equal iff their channel triples are equal, so
    ``Color.from_hex("#FFF5F5") == Color.from_hex("fff5f5")``.
    """
    r: int
    g: int
    b: int
    luminance: float = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise InvalidColorFormat((self.r, self.g, self.b), "RGB channels must be integers in 0-255")
        luminance = (
            0.2126 * _linearize(self.r)
            + 0.7152 * _linearize(self.g)
            + 0.0722 * _linearize(self.b)
        )
        object.__setattr__(self, 'luminance', luminance)

    @classmethod
    def from_hex(cls, value: Any) -> 'Color':
        """Parse ``#RRGGBB`` or ``RRGGBB`` (case-insensitive)."""
        if isinstance(value, Color):
            return value
        if not isinstance(value, str):
            raise InvalidColorFormat(value)
        match = _HEX_RE.match(value.strip())
        if not match:
            raise InvalidColorFormat(value)
        digits = match.group(1)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Color':
        return cls(r, g, b)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_hex(self) -> str:
        return self.hex

    def is_light(self, threshold: float = 0.5) -> bool:
        return self.luminance > threshold

    def to_lab(self) -> Tuple[float, float, float]:
        return rgb_to_lab(self.r, self.g, self.b)

    def rotate_hue(self, degrees: float) -> 'Color':
        """Rotate the HSL hue; saturation and lightness are kept."""
        h, l, s = colorsys.rgb_to_hls(self.r / 255.0, self.g / 255.0, self.b / 255.0)
        if s == 0:
            return self
        h = (h + degrees / 360.0) % 1.0
        r, g, b = colorsys.hls_to_rgb(h, l, s)
        return Color(_round_channel(r * 255), _round_channel(g * 255), _round_channel(b * 255))

    def darken(self, amount: float = 1.0) -> 'Color':
        lightness, a, b = self.to_lab()
        return Color(*lab_to_rgb(lightness - LAB_LIGHTNESS_STEP * amount, a, b))

    def brighten(self, amount: float = 1.0) -> 'Color':
        return self.darken(-amount)

    def __str__(self):
        return self.hex


def as_color(value: Any) -> Color:
    """Accept a Color or a hex string."""
    return Color.from_hex(value)
