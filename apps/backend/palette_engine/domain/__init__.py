"""
Domain models and value objects.
"""

from palette_engine.domain.color import Color, as_color
from palette_engine.domain.models import (
    ContrastLevel,
    HarmonyType,
    ContrastResult,
    AccessibilityScore,
    ColorPalette,
    ButtonColors,
    ColorVariations,
    ExtractedColor
)

__all__ = [
    'Color',
    'as_color',
    'ContrastLevel',
    'HarmonyType',
    'ContrastResult',
    'AccessibilityScore',
    'ColorPalette',
    'ButtonColors',
    'ColorVariations',
    'ExtractedColor'
]
