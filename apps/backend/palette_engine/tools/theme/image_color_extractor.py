"""Extract dominant brand colors from logo image bytes."""

import io
import math
from collections import Counter
from typing import List, Optional, Tuple

from PIL import Image, UnidentifiedImageError

from palette_engine.config import (
    EXTRACT_BUCKET,
    EXTRACT_MAX_BRIGHTNESS,
    EXTRACT_MAX_COLORS,
    EXTRACT_MAX_SIZE,
    EXTRACT_MIN_ALPHA,
    EXTRACT_MIN_BRIGHTNESS,
    EXTRACT_SAMPLE_EVERY,
    EXTRACT_TOP_BUCKETS
)
from palette_engine.domain.color import Color
from palette_engine.domain.models import ExtractedColor
from palette_engine.exceptions import ColorExtractionError
from setup_logging_optimized import get_logger

logger = get_logger(__name__)


class ImageColorExtractor:
    """Extract dominant colors from images, particularly brand logos.

    Colors are grouped by snapping each channel to the nearest multiple of
    ``bucket``; near-black and near-white buckets are dropped as likely
    background.
    """

    def __init__(
        self,
        max_size: Tuple[int, int] = EXTRACT_MAX_SIZE,
        sample_every: int = EXTRACT_SAMPLE_EVERY,
        bucket: int = EXTRACT_BUCKET
    ):
        self.max_size = max_size
        self.sample_every = max(1, sample_every)
        self.bucket = bucket

    def _load(self, image_data: bytes) -> Image.Image:
        try:
            image = Image.open(io.BytesIO(image_data))
            image = image.convert('RGBA')
        except (UnidentifiedImageError, OSError) as e:
            raise ColorExtractionError("Failed to decode logo image", cause=e)
        image.thumbnail(self.max_size)
        return image

    def _snap(self, channel: int) -> int:
        return min(255, int(math.floor(channel / self.bucket + 0.5)) * self.bucket)

    @staticmethod
    def _brightness(color: Color) -> float:
        return 0.299 * color.r + 0.587 * color.g + 0.114 * color.b

    def quantize(self, image: Image.Image) -> List[ExtractedColor]:
        """Group sampled pixels into buckets, most frequent first."""
        pixels = list(image.getdata())
        counts = Counter()
        for r, g, b, a in pixels[::self.sample_every]:
            # Skip transparent pixels
            if a < EXTRACT_MIN_ALPHA:
                continue
            counts[(self._snap(r), self._snap(g), self._snap(b))] += 1

        total_pixels = len(pixels) or 1
        return [
            ExtractedColor(color=Color(*rgb), percentage=count / total_pixels * 100)
            for rgb, count in counts.most_common(EXTRACT_TOP_BUCKETS)
        ]

    def extract(self, image_data: bytes, max_colors: int = EXTRACT_MAX_COLORS) -> List[ExtractedColor]:
        """
        Extract dominant colors from logo image data.

        Args:
            image_data: Encoded image (PNG, JPEG, ...)
            max_colors: Maximum number of colors to return

        Returns:
            Extracted colors ordered by frequency
        """
        image = self._load(image_data)
        colors = [
            extracted for extracted in self.quantize(image)
            if EXTRACT_MIN_BRIGHTNESS < self._brightness(extracted.color) < EXTRACT_MAX_BRIGHTNESS
        ]
        logger.debug(f"Extracted {len(colors)} candidate colors from logo")
        return colors[:max_colors]


def extract_logo_colors(
    image_data: bytes,
    max_colors: int = EXTRACT_MAX_COLORS,
    extractor: Optional[ImageColorExtractor] = None
) -> List[ExtractedColor]:
    return (extractor or ImageColorExtractor()).extract(image_data, max_colors)
