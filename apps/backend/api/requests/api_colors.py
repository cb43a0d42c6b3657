"""
Color endpoints: harmony palettes, contrast checks, palette scoring,
contrast-safe text colors and logo color extraction.
"""

import logging
from typing import Optional

from fastapi import APIRouter, File, Query, UploadFile
from fastapi.responses import JSONResponse

from models.requests import (
    AccessibilityScoreResponse,
    ContrastRequest,
    ContrastResponse,
    EvaluatePaletteRequest,
    ExtractColorsResponse,
    HarmonizeRequest,
    HarmonizeResponse,
    TextColorRequest,
    TextColorResponse
)
from palette_engine.exceptions import ColorExtractionError, PaletteEngineError
from palette_engine.generation.color_contrast_manager import get_contrast_manager
from palette_engine.generation.contrast import evaluate
from palette_engine.tools.theme import (
    extract_logo_colors,
    generate_color_variations,
    generate_harmony,
    score_palette
)

router = APIRouter(prefix="/api/colors", tags=["colors"])

logger = logging.getLogger(__name__)


def _bad_request(error: str, exc: Optional[Exception] = None) -> JSONResponse:
    content = {"error": error}
    if exc is not None:
        content["message"] = str(exc)
        logger.warning(f"{error}: {exc}")
    return JSONResponse(content, status_code=400)


@router.post("/harmonize", response_model=HarmonizeResponse)
def harmonize(request: HarmonizeRequest):
    """Generate a harmony palette from a brand color (defaults to complementary)."""
    if not request.baseColor:
        return _bad_request("Base color is required")

    try:
        palette = generate_harmony(request.baseColor, request.harmony)
        variations = generate_color_variations(palette.base_color) if request.includeVariations else None
    except PaletteEngineError as e:
        return _bad_request("Failed to generate color harmony", e)

    return {
        "success": True,
        "palette": palette.to_dict(),
        "variations": variations.to_dict() if variations else None,
    }


@router.post("/contrast", response_model=ContrastResponse)
def check_contrast(request: ContrastRequest):
    try:
        result = evaluate(request.foreground, request.background, request.isLargeText)
    except PaletteEngineError as e:
        return _bad_request("Failed to check contrast", e)
    return result.to_dict()


@router.post("/evaluate", response_model=AccessibilityScoreResponse)
def evaluate_palette(request: EvaluatePaletteRequest):
    try:
        score = score_palette(request.colors, request.textColor, request.backgroundColor)
    except PaletteEngineError as e:
        return _bad_request("Failed to evaluate palette", e)
    return score.to_dict()


@router.post("/text-color", response_model=TextColorResponse)
def contrast_safe_colors(request: TextColorRequest):
    """Return contrast-safe body text, header text and button colors for a background."""
    manager = get_contrast_manager()
    try:
        text = manager.text_color_for(request.background, request.targetRatio)
        header = manager.header_text_color_for(request.background)
        button = manager.button_colors_for(request.background)
        text_contrast = evaluate(text, request.background)
    except PaletteEngineError as e:
        return _bad_request("Failed to compute text color", e)

    return {
        "background": button.background.hex,
        "text": text.hex,
        "header": header.hex,
        "button": button.to_dict(),
        "textContrast": text_contrast.to_dict(),
    }


@router.post("/extract", response_model=ExtractColorsResponse)
def extract_colors(
    file: UploadFile = File(...),
    harmony: Optional[str] = None,
    max_colors: int = Query(5, ge=1),
):
    """Extract dominant logo colors; with ``harmony`` set, also build a palette from the top color."""
    content = file.file.read()
    try:
        colors = extract_logo_colors(content, max_colors=max_colors)
        palette = generate_harmony(colors[0].color, harmony) if (harmony and colors) else None
    except ColorExtractionError as e:
        return _bad_request("Failed to extract logo colors", e)
    except PaletteEngineError as e:
        return _bad_request("Failed to generate color harmony", e)

    return {
        "colors": [c.to_dict() for c in colors],
        "palette": palette.to_dict() if palette else None,
    }
