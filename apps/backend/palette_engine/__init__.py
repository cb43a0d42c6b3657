"""
Brand color harmony and WCAG contrast engine.
"""

from palette_engine.domain import (
    Color,
    ContrastLevel,
    HarmonyType,
    ContrastResult,
    AccessibilityScore,
    ColorPalette,
    ButtonColors
)
from palette_engine.exceptions import (
    PaletteEngineError,
    InvalidColorFormat,
    UnsupportedHarmony,
    InvalidSearchParameters,
    ColorExtractionError
)
from palette_engine.generation import (
    evaluate,
    contrast_ratio,
    find_accessible,
    ColorContrastManager,
    text_color_for,
    header_text_color_for,
    button_colors_for
)
from palette_engine.tools.theme import (
    score_palette,
    generate_harmony,
    generate_color_variations,
    extract_logo_colors
)

__all__ = [
    'Color',
    'ContrastLevel',
    'HarmonyType',
    'ContrastResult',
    'AccessibilityScore',
    'ColorPalette',
    'ButtonColors',
    'PaletteEngineError',
    'InvalidColorFormat',
    'UnsupportedHarmony',
    'InvalidSearchParameters',
    'ColorExtractionError',
    'evaluate',
    'contrast_ratio',
    'find_accessible',
    'ColorContrastManager',
    'text_color_for',
    'header_text_color_for',
    'button_colors_for',
    'score_palette',
    'generate_harmony',
    'generate_color_variations',
    'extract_logo_colors'
]
