"""
Configuration settings for the palette engine.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


#==============================================================================
# WCAG THRESHOLDS
#==============================================================================

AA_NORMAL_TEXT = 4.5
AA_LARGE_TEXT = 3.0
AAA_NORMAL_TEXT = 7.0
AAA_LARGE_TEXT = 4.5

# Backgrounds above this relative luminance get dark text
LIGHT_LUMINANCE_THRESHOLD = 0.5

#==============================================================================
# DEFAULT TEXT COLORS
#==============================================================================

DARK_TEXT_COLOR = "#1a1a1a"
LIGHT_TEXT_COLOR = "#ffffff"
# Softer professional tone for navigation / header text on light backgrounds
HEADER_DARK_TEXT_COLOR = "#2d3748"

# Defaults used when scoring a palette without an explicit text/background pair
DEFAULT_SCORE_TEXT_COLOR = "#333333"
DEFAULT_SCORE_BACKGROUND_COLOR = "#FFFFFF"

#==============================================================================
# PALETTE NEUTRALS
#==============================================================================

# Appended after every harmony, in this order
NEUTRAL_COLORS = ("#FFFFFF", "#F5F5F5", "#333333")
# Skipped by the palette scorer
SCORER_SKIPPED_NEUTRALS = ("#FFFFFF", "#F5F5F5")

#==============================================================================
# ACCESSIBLE COLOR SEARCH
#==============================================================================

SEARCH_MAX_ATTEMPTS_PER_DIRECTION = _env_int("PALETTE_SEARCH_MAX_ATTEMPTS", 20)
SEARCH_STEP = _env_float("PALETTE_SEARCH_STEP", 0.2)

# CIE L* units moved per unit of darken()/brighten()
LAB_LIGHTNESS_STEP = 18.0

#==============================================================================
# LOGO COLOR EXTRACTION
#==============================================================================

EXTRACT_MAX_SIZE = (200, 200)
EXTRACT_SAMPLE_EVERY = 4
EXTRACT_BUCKET = 32
EXTRACT_TOP_BUCKETS = 10
EXTRACT_MIN_ALPHA = 128
EXTRACT_MIN_BRIGHTNESS = 30
EXTRACT_MAX_BRIGHTNESS = 225
EXTRACT_MAX_COLORS = 5

#==============================================================================
# API
#==============================================================================

ENVIRONMENT = (
    os.getenv("ENVIRONMENT")
    or os.getenv("ENV")
    or "development"
).lower()

ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("PALETTE_ALLOWED_ORIGINS", "").split(",")
    if origin.strip()
]
