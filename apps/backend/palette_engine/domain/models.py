"""
Domain models representing contrast checks, scores and palettes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from palette_engine.domain.color import Color


class ContrastLevel(str, Enum):
    """WCAG compliance level of a contrast ratio."""
    AAA = "AAA"
    AA = "AA"
    FAIL = "Fail"


class HarmonyType(str, Enum):
    """Hue-relationship scheme used to derive a palette."""
    COMPLEMENTARY = "complementary"
    SPLIT_COMPLEMENTARY = "split-complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    MONOCHROMATIC = "monochromatic"


@dataclass(frozen=True)
class ContrastResult:
    """Contrast ratio between two colors and its WCAG classification."""
    ratio: float
    passes_aa: bool
    passes_aaa: bool
    level: ContrastLevel

    def to_dict(self) -> Dict[str, Any]:
        return {
            'ratio': self.ratio,
            'passesAA': self.passes_aa,
            'passesAAA': self.passes_aaa,
            'level': self.level.value
        }


@dataclass(frozen=True)
class AccessibilityScore:
    """0-100 score for a palette plus the messages that produced it."""
    score: int
    issues: Tuple[str, ...] = ()
    passes: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'issues': list(self.issues),
            'passes': list(self.passes)
        }


@dataclass(frozen=True)
class ColorPalette:
    """Harmony colors followed by the fixed neutrals."""
    colors: Tuple[Color, ...]
    harmony: HarmonyType
    base_color: Color

    @property
    def hex_colors(self) -> List[str]:
        return [c.hex for c in self.colors]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'colors': self.hex_colors,
            'harmony': self.harmony.value,
            'baseColor': self.base_color.hex
        }


@dataclass(frozen=True)
class ButtonColors:
    background: Color
    text: Color

    def to_dict(self) -> Dict[str, str]:
        return {'background': self.background.hex, 'text': self.text.hex}


@dataclass(frozen=True)
class ColorVariations:
    """Tints and shades of a base color, nearest first."""
    lighter: Tuple[Color, ...] = field(default_factory=tuple)
    darker: Tuple[Color, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            'lighter': [c.hex for c in self.lighter],
            'darker': [c.hex for c in self.darker]
        }


@dataclass(frozen=True)
class ExtractedColor:
    """A dominant color found in a logo and its share of sampled pixels."""
    color: Color
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'hex': self.color.hex,
            'rgb': {'r': self.color.r, 'g': self.color.g, 'b': self.color.b},
            'percentage': self.percentage
        }
