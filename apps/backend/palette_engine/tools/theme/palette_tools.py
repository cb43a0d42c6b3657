"""Palette generation tools: color harmonies and tint/shade variations."""

from typing import Callable, Dict, List, Union

from palette_engine.config import NEUTRAL_COLORS
from palette_engine.domain.color import Color, as_color
from palette_engine.domain.models import ColorPalette, ColorVariations, HarmonyType
from palette_engine.exceptions import UnsupportedHarmony
from palette_engine.generation.contrast import ColorLike
from setup_logging_optimized import get_logger

logger = get_logger(__name__)

# Hue rotations in degrees, in output order
HUE_OFFSETS: Dict[HarmonyType, List[int]] = {
    HarmonyType.COMPLEMENTARY: [0, 180],
    HarmonyType.SPLIT_COMPLEMENTARY: [0, 150, -150],
    HarmonyType.ANALOGOUS: [-30, 0, 30],
    HarmonyType.TRIADIC: [0, 120, -120],
    HarmonyType.TETRADIC: [0, 90, 180, -90],
}

# Lightness steps for the monochromatic scheme
MONOCHROMATIC_STEPS: List[Callable[[Color], Color]] = [
    lambda c: c.brighten(1),
    lambda c: c,
    lambda c: c.darken(1),
    lambda c: c.darken(2),
]

_NEUTRALS = tuple(Color.from_hex(c) for c in NEUTRAL_COLORS)


def resolve_harmony(scheme: Union[HarmonyType, str, None]) -> HarmonyType:
    """Accept a HarmonyType or its string value; None means complementary."""
    if scheme is None:
        return HarmonyType.COMPLEMENTARY
    if isinstance(scheme, HarmonyType):
        return scheme
    try:
        return HarmonyType(str(scheme).strip().lower())
    except ValueError as e:
        raise UnsupportedHarmony(scheme, cause=e)


def generate_harmony(
    base_color: ColorLike,
    scheme: Union[HarmonyType, str, None] = HarmonyType.COMPLEMENTARY
) -> ColorPalette:
    """Generate a palette from a base color using a harmony strategy.

    Args:
        base_color: Hex color (usually extracted from a logo)
        scheme: Harmony strategy

    Returns:
        ColorPalette with the harmony colors followed by white, near-white
        and dark gray
    """
    base = as_color(base_color)
    harmony = resolve_harmony(scheme)

    if harmony is HarmonyType.MONOCHROMATIC:
        colors = [step(base) for step in MONOCHROMATIC_STEPS]
    else:
        colors = [base if offset == 0 else base.rotate_hue(offset) for offset in HUE_OFFSETS[harmony]]

    colors.extend(_NEUTRALS)
    logger.debug(f"Generated {harmony.value} palette from {base.hex}: {[c.hex for c in colors]}")

    return ColorPalette(colors=tuple(colors), harmony=harmony, base_color=base)


def generate_color_variations(base_color: ColorLike) -> ColorVariations:
    """Calculate tints and shades of a base color."""
    base = as_color(base_color)
    amounts = (0.5, 1.0, 1.5)
    return ColorVariations(
        lighter=tuple(base.brighten(a) for a in amounts),
        darker=tuple(base.darken(a) for a in amounts)
    )
