"""
Contrast evaluation, accessible color search and contrast-safe selectors.
"""

from palette_engine.generation.contrast import evaluate, contrast_ratio
from palette_engine.generation.accessible_search import (
    AccessibleColorSearch,
    SearchOutcome,
    SearchPhase,
    find_accessible
)
from palette_engine.generation.color_contrast_manager import (
    ColorContrastManager,
    text_color_for,
    header_text_color_for,
    button_colors_for
)

__all__ = [
    'evaluate',
    'contrast_ratio',
    'AccessibleColorSearch',
    'SearchOutcome',
    'SearchPhase',
    'find_accessible',
    'ColorContrastManager',
    'text_color_for',
    'header_text_color_for',
    'button_colors_for'
]
