"""
Bounded search for a color that meets a contrast target against a fixed background.

Darkening or brightening moves luminance monotonically in one direction, so a
short hill-climb in each direction is enough in practice. The search runs as a
small state machine:

    DARKENING -> BRIGHTENING -> BEST_EFFORT

Each phase steps ``max_attempts_per_direction`` times and evaluates contrast
after every step, so ``search`` never evaluates more than twice that budget.
Both phases start from the starting color, which ``search`` does not evaluate;
``find`` returns an already compliant start unchanged after one check outside
the phase budget. When neither phase reaches the target, the last brightened
color is returned and the outcome is marked as not converged.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from palette_engine.config import SEARCH_MAX_ATTEMPTS_PER_DIRECTION, SEARCH_STEP
from palette_engine.domain.color import Color, as_color
from palette_engine.exceptions import InvalidSearchParameters
from palette_engine.generation.contrast import ColorLike, contrast_ratio
from setup_logging_optimized import get_logger

logger = get_logger(__name__)


class SearchPhase(str, Enum):
    DARKENING = "darkening"
    BRIGHTENING = "brightening"
    BEST_EFFORT = "best_effort"


@dataclass(frozen=True)
class SearchOutcome:
    """Result of a search plus the trace needed to check the postcondition."""
    color: Color
    converged: bool
    phase: SearchPhase
    evaluations: int
    ratio: float


class AccessibleColorSearch:
    """Two-phase bounded hill-climb toward a target contrast ratio."""

    def __init__(
        self,
        max_attempts_per_direction: Optional[int] = None,
        step: Optional[float] = None
    ):
        self.max_attempts = (
            SEARCH_MAX_ATTEMPTS_PER_DIRECTION if max_attempts_per_direction is None
            else max_attempts_per_direction
        )
        self.step = SEARCH_STEP if step is None else step

        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int) or self.max_attempts < 1:
            raise InvalidSearchParameters(
                "max_attempts_per_direction must be a positive integer",
                context={'max_attempts_per_direction': self.max_attempts}
            )
        if not self.step > 0:
            raise InvalidSearchParameters("step must be positive", context={'step': self.step})

    def search(
        self,
        start: ColorLike,
        background: ColorLike,
        target_ratio: float = 4.5
    ) -> SearchOutcome:
        start = as_color(start)
        background = as_color(background)

        phase = SearchPhase.DARKENING
        candidate = start
        attempts = 0
        evaluations = 0
        ratio = 0.0

        while True:
            if phase is SearchPhase.DARKENING:
                if attempts == self.max_attempts:
                    phase = SearchPhase.BRIGHTENING
                    candidate = start
                    attempts = 0
                    continue
                candidate = candidate.darken(self.step)
            elif phase is SearchPhase.BRIGHTENING:
                if attempts == self.max_attempts:
                    phase = SearchPhase.BEST_EFFORT
                    continue
                candidate = candidate.brighten(self.step)
            else:
                logger.debug(
                    f"No color reached {target_ratio}:1 from {start.hex} on {background.hex}; "
                    f"returning {candidate.hex} ({ratio:.2f}:1)"
                )
                return SearchOutcome(candidate, False, phase, evaluations, ratio)

            attempts += 1
            evaluations += 1
            ratio = contrast_ratio(candidate, background)
            if ratio >= target_ratio:
                return SearchOutcome(candidate, True, phase, evaluations, ratio)

    def find(
        self,
        start: ColorLike,
        background: ColorLike,
        target_ratio: float = 4.5
    ) -> Color:
        start = as_color(start)
        if contrast_ratio(start, background) >= target_ratio:
            return start
        return self.search(start, background, target_ratio).color


def find_accessible(
    start: ColorLike,
    background: ColorLike,
    target_ratio: float = 4.5,
    max_attempts_per_direction: Optional[int] = None,
    step: Optional[float] = None
) -> Color:
    """Suggest a color near ``start`` that reaches ``target_ratio`` against ``background``.

    A start that already meets the target is returned unchanged.
    Best effort: if no candidate converges, the last brightened color is
    returned. Callers needing a hard guarantee must re-check the ratio.
    """
    searcher = AccessibleColorSearch(max_attempts_per_direction, step)
    return searcher.find(start, background, target_ratio)
