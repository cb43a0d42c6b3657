"""
Two-phase bounded search: convergence, phase order, evaluation budget and
best-effort fallback.
"""

import pytest

import palette_engine.generation.accessible_search as accessible_search
from palette_engine.domain.color import Color
from palette_engine.exceptions import InvalidSearchParameters
from palette_engine.generation.accessible_search import (
    AccessibleColorSearch,
    SearchPhase,
    find_accessible
)
from palette_engine.generation.contrast import contrast_ratio


@pytest.fixture
def counted_evaluations(monkeypatch):
    calls = []

    def counting_ratio(a, b):
        calls.append((a, b))
        return contrast_ratio(a, b)

    monkeypatch.setattr(accessible_search, "contrast_ratio", counting_ratio)
    return calls


def test_converges_on_mid_gray_by_darkening():
    outcome = AccessibleColorSearch().search("#888888", "#808080", 4.5)
    assert outcome.converged
    assert outcome.phase is SearchPhase.DARKENING
    assert outcome.evaluations <= 20
    assert contrast_ratio(outcome.color, "#808080") >= 4.5
    assert outcome.ratio == pytest.approx(contrast_ratio(outcome.color, "#808080"))


def test_find_accessible_meets_target():
    color = find_accessible("#888888", "#808080", 4.5)
    assert isinstance(color, Color)
    assert contrast_ratio(color, "#808080") >= 4.5


def test_find_returns_compliant_start_after_one_check(counted_evaluations):
    color = AccessibleColorSearch().find("#000000", "#ffffff", 4.5)
    assert color == Color.from_hex("#000000")
    assert len(counted_evaluations) == 1


def test_search_darkens_before_first_evaluation(counted_evaluations):
    start = Color.from_hex("#1a1a1a")
    outcome = AccessibleColorSearch().search(start, "#ffffff", 18.0)
    assert outcome.converged
    assert outcome.phase is SearchPhase.DARKENING
    assert outcome.evaluations == 1
    assert counted_evaluations[0][0] == start.darken(0.2)


def test_darkening_uses_its_full_budget():
    # White on #b4b4b4 only passes after the twentieth darken(0.2) step
    start = Color.from_hex("#ffffff")
    expected = start
    for _ in range(20):
        expected = expected.darken(0.2)

    outcome = AccessibleColorSearch(max_attempts_per_direction=20, step=0.2).search(start, "#b4b4b4", 4.5)
    assert outcome.converged
    assert outcome.phase is SearchPhase.DARKENING
    assert outcome.evaluations == 20
    assert outcome.color == expected
    assert contrast_ratio(outcome.color, "#b4b4b4") >= 4.5


@pytest.mark.parametrize("max_attempts", [1, 3, 5])
def test_each_phase_steps_its_full_budget(counted_evaluations, max_attempts):
    start = Color.from_hex("#777777")
    AccessibleColorSearch(max_attempts_per_direction=max_attempts, step=0.2).search(start, "#808080", 22.0)

    candidates = [a for a, _ in counted_evaluations]
    darker, lighter = [], []
    color = start
    for _ in range(max_attempts):
        color = color.darken(0.2)
        darker.append(color)
    color = start
    for _ in range(max_attempts):
        color = color.brighten(0.2)
        lighter.append(color)

    assert candidates == darker + lighter
    assert start not in candidates


def test_falls_through_to_brightening_on_dark_background():
    outcome = AccessibleColorSearch().search("#333333", "#000000", 4.5)
    assert outcome.converged
    assert outcome.phase is SearchPhase.BRIGHTENING
    assert outcome.evaluations > 20
    assert contrast_ratio(outcome.color, "#000000") >= 4.5
    assert outcome.color.luminance > Color.from_hex("#333333").luminance


@pytest.mark.parametrize("max_attempts", [1, 5, 20])
def test_never_exceeds_two_budgets_of_evaluations(counted_evaluations, max_attempts):
    # 22:1 is above the WCAG maximum, so no candidate can ever pass
    outcome = AccessibleColorSearch(max_attempts_per_direction=max_attempts).search("#777777", "#808080", 22.0)
    assert not outcome.converged
    assert outcome.phase is SearchPhase.BEST_EFFORT
    assert outcome.evaluations == 2 * max_attempts
    assert len(counted_evaluations) == 2 * max_attempts


def test_best_effort_returns_last_brightened_color():
    start = Color.from_hex("#777777")
    expected = start
    for _ in range(5):
        expected = expected.brighten(0.2)

    color = find_accessible(start, "#808080", 22.0, max_attempts_per_direction=5, step=0.2)
    assert color == expected


def test_search_is_deterministic():
    first = find_accessible("#6b7280", "#4b5563", 4.5)
    second = find_accessible("#6b7280", "#4b5563", 4.5)
    assert first == second


@pytest.mark.parametrize("kwargs", [
    {"max_attempts_per_direction": 0},
    {"max_attempts_per_direction": -3},
    {"step": 0},
    {"step": -0.2},
])
def test_invalid_parameters_raise(kwargs):
    with pytest.raises(InvalidSearchParameters):
        AccessibleColorSearch(**kwargs)
