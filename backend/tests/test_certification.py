"""Tests for the step/score to certification mapping."""

import pytest
from hypothesis import given, strategies as st

from app.certification import CERTIFICATION_LEVELS, IN_PROGRESS, certify
from app.question_selector import InvalidStepError


@pytest.mark.parametrize(
    "step, score, level, proceed",
    [
        (1, 0, "Failed", False),
        (1, 10, "Failed", False),
        (1, 24, "Failed", False),
        (1, 25, "A1", False),
        (1, 30, "A1", False),
        (1, 49, "A1", False),
        (1, 50, "A2", False),
        (1, 60, "A2", False),
        (1, 74, "A2", False),
        (1, 75, "A2", True),
        (1, 80, "A2", True),
        (1, 100, "A2", True),
        (2, 10, "A2", False),
        (2, 25, "B1", False),
        (2, 49, "B1", False),
        (2, 50, "B2", False),
        (2, 60, "B2", False),
        (2, 75, "B2", True),
        (2, 100, "B2", True),
        (3, 0, "B2", False),
        (3, 24, "B2", False),
        (3, 25, "C1", False),
        (3, 49, "C1", False),
        (3, 50, "C2", False),
        (3, 74, "C2", False),
        (3, 100, "C2", False),
    ],
)
def test_certification_table(step: int, score: int, level: str, proceed: bool) -> None:
    result = certify(step, score)
    assert result.level == level
    assert result.proceed_to_next_step is proceed
    assert result.step == step
    assert result.score == score


def test_next_step_only_when_advancing() -> None:
    assert certify(1, 80).next_step == 2
    assert certify(2, 90).next_step == 3
    assert certify(1, 60).next_step is None
    assert certify(3, 100).next_step is None


def test_terminal_outcomes() -> None:
    assert certify(1, 75).is_terminal is False
    assert certify(1, 74).is_terminal is True
    assert certify(3, 100).is_terminal is True


@given(step=st.sampled_from([1, 2, 3]), score=st.integers(min_value=0, max_value=100))
def test_every_valid_input_has_a_label(step: int, score: int) -> None:
    result = certify(step, score)
    assert result.level in CERTIFICATION_LEVELS
    assert result.level != IN_PROGRESS
    assert result.proceed_to_next_step == (step < 3 and score >= 75)


@given(score=st.integers(min_value=0, max_value=100))
def test_final_step_never_advances(score: int) -> None:
    assert certify(3, score).proceed_to_next_step is False


@pytest.mark.parametrize("step", [0, 4, "2", None])
def test_invalid_step_rejected(step) -> None:
    with pytest.raises(InvalidStepError):
        certify(step, 50)
