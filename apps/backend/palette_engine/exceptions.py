"""
Exception hierarchy for the palette engine.

Malformed input is fatal to the single call and is surfaced to the caller.
Non-convergence of the accessible color search is not an error.
"""

from typing import Optional, Dict, Any


class PaletteEngineError(Exception):
    """Base exception for all palette engine errors"""

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.cause = cause
        self.context = context or {}

    def __str__(self):
        parts = [super().__str__()]
        if self.cause:
            parts.append(f" (caused by: {type(self.cause).__name__}: {str(self.cause)})")
        if self.context:
            parts.append(f" Context: {self.context}")
        return "".join(parts)


# === Input exceptions ===

class InvalidColorFormat(PaletteEngineError, ValueError):
    """Color string is not 6 hex digits (optionally prefixed with #)"""

    def __init__(self, value: Any, message: Optional[str] = None, **kwargs):
        super().__init__(message or f"Invalid color format: {value!r}", **kwargs)
        self.value = value
        self.context.setdefault('value', value)


class UnsupportedHarmony(PaletteEngineError, ValueError):
    """Requested harmony scheme is not known"""

    def __init__(self, scheme: Any, **kwargs):
        super().__init__(f"Unsupported harmony scheme: {scheme!r}", **kwargs)
        self.scheme = scheme


class InvalidSearchParameters(PaletteEngineError, ValueError):
    """Accessible color search was given an unusable budget or step"""
    pass


# === Extraction exceptions ===

class ColorExtractionError(PaletteEngineError):
    """Image could not be decoded for color extraction"""
    pass
