from pydantic import BaseModel, Field
from typing import Optional, List, Dict


class HarmonizeRequest(BaseModel):
    baseColor: Optional[str] = Field(None, description="Brand hex color (e.g., '#2563EB'), usually extracted from a logo.")
    harmony: Optional[str] = Field(
        None,
        description="Harmony strategy: complementary | split-complementary | analogous | triadic | tetradic | monochromatic"
    )
    includeVariations: bool = Field(False, description="Also return tints and shades of the base color.")

class PaletteResponse(BaseModel):
    colors: List[str]
    harmony: str
    baseColor: str

class HarmonizeResponse(BaseModel):
    success: bool
    palette: PaletteResponse
    variations: Optional[Dict[str, List[str]]] = None

class ContrastRequest(BaseModel):
    foreground: str = Field(description="Foreground (text) hex color.")
    background: str = Field(description="Background hex color.")
    isLargeText: bool = Field(False, description="Use WCAG large-text thresholds (3:1 AA, 4.5:1 AAA).")

class ContrastResponse(BaseModel):
    ratio: float
    passesAA: bool
    passesAAA: bool
    level: str

class EvaluatePaletteRequest(BaseModel):
    colors: List[str] = Field(description="Palette hex colors to check against the background.")
    textColor: str = Field("#333333", description="Body text hex color.")
    backgroundColor: str = Field("#FFFFFF", description="Page background hex color.")

class AccessibilityScoreResponse(BaseModel):
    score: int = Field(ge=0, le=100)
    issues: List[str]
    passes: List[str]

class TextColorRequest(BaseModel):
    background: str = Field(description="Background (or brand) hex color.")
    targetRatio: float = Field(4.5, gt=1.0, le=21.0, description="Minimum contrast ratio for body text.")

class TextColorResponse(BaseModel):
    background: str
    text: str
    header: str
    button: Dict[str, str]
    textContrast: ContrastResponse

class ExtractedColorItem(BaseModel):
    hex: str
    rgb: Dict[str, int]
    percentage: float

class ExtractColorsResponse(BaseModel):
    colors: List[ExtractedColorItem]
    palette: Optional[PaletteResponse] = None
