import math
from typing import Any, Dict, Iterable, Optional

from palette_engine.config import (
    DEFAULT_SCORE_BACKGROUND_COLOR,
    DEFAULT_SCORE_TEXT_COLOR,
    SCORER_SKIPPED_NEUTRALS
)
from palette_engine.domain.color import Color, as_color
from palette_engine.domain.models import AccessibilityScore
from palette_engine.exceptions import InvalidColorFormat
from palette_engine.generation.color_contrast_manager import ColorContrastManager, get_contrast_manager
from palette_engine.generation.contrast import ColorLike, evaluate
from setup_logging_optimized import get_logger

logger = get_logger(__name__)

_SKIPPED = frozenset(Color.from_hex(c) for c in SCORER_SKIPPED_NEUTRALS)


def _fmt_ratio(ratio: float) -> str:
    return f"{ratio:g}"


def score_palette(
    colors: Iterable[ColorLike],
    text_color: ColorLike = DEFAULT_SCORE_TEXT_COLOR,
    background_color: ColorLike = DEFAULT_SCORE_BACKGROUND_COLOR
) -> AccessibilityScore:
    """Evaluate a palette for accessibility issues.

    The text/background pair records a pass or an issue. Every palette color
    except white and near-white is checked against the background and only
    failures are recorded. The score keeps the historical arithmetic
    ``passes + (colors - issues + 1)`` over ``1 + colors``, which can run past
    100, so it is clamped to 0-100.
    """
    palette = [as_color(c) for c in colors]
    text = as_color(text_color)
    background = as_color(background_color)

    issues = []
    passes = []

    text_contrast = evaluate(text, background)
    if not text_contrast.passes_aa:
        issues.append(
            f"Text color {text.hex} on {background.hex} fails WCAG AA "
            f"(ratio: {_fmt_ratio(text_contrast.ratio)}:1)"
        )
    else:
        passes.append(
            f"Text contrast {text_contrast.level.value} compliant ({_fmt_ratio(text_contrast.ratio)}:1)"
        )

    for color in palette:
        if color in _SKIPPED:
            continue
        contrast = evaluate(color, background)
        if not contrast.passes_aa:
            issues.append(
                f"Color {color.hex} may be difficult to read on white background "
                f"(ratio: {_fmt_ratio(contrast.ratio)}:1)"
            )

    total_checks = 1 + len(palette)
    passed_checks = len(passes) + (len(palette) - len(issues) + 1)
    score = math.floor(100 * passed_checks / total_checks + 0.5)

    return AccessibilityScore(
        score=max(0, min(score, 100)),
        issues=tuple(issues),
        passes=tuple(passes)
    )


def validate_contrast_report(
    theme_colors: Dict[str, Any],
    manager: Optional[ColorContrastManager] = None
) -> Dict[str, Any]:
    """Return a lightweight contrast report for a theme's primary text/background.
    Does not mutate; callers can apply the recommended text color.
    """
    ccm = manager or get_contrast_manager()
    palette = theme_colors or {}
    pb = palette.get('primary_background') or palette.get('background')
    pt = palette.get('primary_text') or palette.get('text')
    if not isinstance(pb, str) or not isinstance(pt, str):
        return {"ok": False, "issue": "missing_colors"}
    try:
        result = evaluate(pt, pb)
        recommended = ccm.text_color_for(pb)
    except InvalidColorFormat as e:
        logger.warning(f"validate_contrast_report rejected colors: {e}")
        return {"ok": False, "error": str(e)}
    return {
        "ok": result.passes_aa,
        "ratio": result.ratio,
        "level": result.level.value,
        "recommended_text": recommended.hex,
    }
