"""Theme-specific tools for palette generation, scoring and logo colors."""

from .accessibility_tools import score_palette, validate_contrast_report
from .image_color_extractor import ImageColorExtractor, extract_logo_colors
from .palette_tools import (
    HUE_OFFSETS,
    generate_harmony,
    generate_color_variations,
    resolve_harmony
)

__all__ = [
    "score_palette",
    "validate_contrast_report",
    "ImageColorExtractor",
    "extract_logo_colors",
    "HUE_OFFSETS",
    "generate_harmony",
    "generate_color_variations",
    "resolve_harmony"
]
