"""
Color Contrast Manager for ensuring readable text on backgrounds.
Picks WCAG-compliant text, header and button colors, falling back to the
accessible color search when the default choice is not readable.
"""

from typing import Optional

from palette_engine.config import (
    AA_NORMAL_TEXT,
    DARK_TEXT_COLOR,
    HEADER_DARK_TEXT_COLOR,
    LIGHT_LUMINANCE_THRESHOLD,
    LIGHT_TEXT_COLOR
)
from palette_engine.domain.color import Color, as_color
from palette_engine.domain.models import ButtonColors
from palette_engine.generation.accessible_search import AccessibleColorSearch
from palette_engine.generation.contrast import ColorLike, contrast_ratio
from setup_logging_optimized import get_logger

logger = get_logger(__name__)


class ColorContrastManager:
    """Manages color contrast for readable text on various backgrounds."""

    def __init__(self, searcher: Optional[AccessibleColorSearch] = None):
        self.searcher = searcher or AccessibleColorSearch()
        self.dark_text = Color.from_hex(DARK_TEXT_COLOR)
        self.light_text = Color.from_hex(LIGHT_TEXT_COLOR)
        self.header_dark_text = Color.from_hex(HEADER_DARK_TEXT_COLOR)

    @staticmethod
    def is_light_color(color: ColorLike) -> bool:
        """Light backgrounds (luminance > 0.5) get dark text."""
        return as_color(color).is_light(LIGHT_LUMINANCE_THRESHOLD)

    def _ensure_contrast(self, default: Color, background: Color, target_ratio: float) -> Color:
        if contrast_ratio(default, background) >= target_ratio:
            return default

        outcome = self.searcher.search(default, background, target_ratio)
        logger.debug(
            f"{default.hex} on {background.hex} below {target_ratio}:1, "
            f"search {'converged' if outcome.converged else 'gave up'} at {outcome.color.hex}"
        )
        return outcome.color

    def text_color_for(self, background: ColorLike, target_ratio: float = AA_NORMAL_TEXT) -> Color:
        """
        Get a contrast-safe text color for a background.

        Starts from near-black on light backgrounds and white on dark ones.

        Args:
            background: Background color
            target_ratio: Minimum contrast ratio (4.5 for AA, 7.0 for AAA)

        Returns:
            The default color if it is readable, otherwise the search result
        """
        background = as_color(background)
        default = self.dark_text if self.is_light_color(background) else self.light_text
        return self._ensure_contrast(default, background, target_ratio)

    def header_text_color_for(self, background: ColorLike) -> Color:
        """Professional header text: dark slate on light backgrounds, white on dark."""
        background = as_color(background)
        default = self.header_dark_text if self.is_light_color(background) else self.light_text
        return self._ensure_contrast(default, background, AA_NORMAL_TEXT)

    def button_colors_for(self, brand: ColorLike) -> ButtonColors:
        """Button keeps the brand color as background; text is chosen for contrast."""
        brand = as_color(brand)
        return ButtonColors(background=brand, text=self.text_color_for(brand, AA_NORMAL_TEXT))


_default_manager: Optional[ColorContrastManager] = None


def get_contrast_manager() -> ColorContrastManager:
    global _default_manager
    if _default_manager is None:
        _default_manager = ColorContrastManager()
    return _default_manager


def text_color_for(background: ColorLike, target_ratio: float = AA_NORMAL_TEXT) -> Color:
    return get_contrast_manager().text_color_for(background, target_ratio)


def header_text_color_for(background: ColorLike) -> Color:
    return get_contrast_manager().header_text_color_for(background)


def button_colors_for(brand: ColorLike) -> ButtonColors:
    return get_contrast_manager().button_colors_for(brand)
