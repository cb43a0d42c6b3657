"""
WCAG contrast evaluation.
WCAG AA: 4.5:1 for normal text, 3:1 for large text
WCAG AAA: 7:1 for normal text, 4.5:1 for large text
"""

import math
from typing import Union

from palette_engine.config import (
    AA_NORMAL_TEXT,
    AA_LARGE_TEXT,
    AAA_NORMAL_TEXT,
    AAA_LARGE_TEXT
)
from palette_engine.domain.color import Color, as_color
from palette_engine.domain.models import ContrastLevel, ContrastResult

ColorLike = Union[Color, str]


def round_ratio(ratio: float) -> float:
    """Round to two decimals, halves away from zero."""
    return math.floor(ratio * 100 + 0.5) / 100


def contrast_ratio(color1: ColorLike, color2: ColorLike) -> float:
    """Calculate the unrounded WCAG contrast ratio between two colors."""
    lum1 = as_color(color1).luminance
    lum2 = as_color(color2).luminance

    # Ensure lum1 is the lighter color
    if lum1 < lum2:
        lum1, lum2 = lum2, lum1

    return (lum1 + 0.05) / (lum2 + 0.05)


def thresholds(is_large_text: bool = False):
    """Return the (AA, AAA) thresholds for the text size."""
    if is_large_text:
        return AA_LARGE_TEXT, AAA_LARGE_TEXT
    return AA_NORMAL_TEXT, AAA_NORMAL_TEXT


def evaluate(
    foreground: ColorLike,
    background: ColorLike,
    is_large_text: bool = False
) -> ContrastResult:
    """Check the WCAG contrast ratio between two colors.

    Pass/fail is decided on the exact ratio; the reported ratio is rounded
    to two decimals.
    """
    ratio = contrast_ratio(foreground, background)
    aa_threshold, aaa_threshold = thresholds(is_large_text)

    passes_aa = ratio >= aa_threshold
    passes_aaa = ratio >= aaa_threshold

    if passes_aaa:
        level = ContrastLevel.AAA
    elif passes_aa:
        level = ContrastLevel.AA
    else:
        level = ContrastLevel.FAIL

    return ContrastResult(
        ratio=round_ratio(ratio),
        passes_aa=passes_aa,
        passes_aaa=passes_aaa,
        level=level
    )
