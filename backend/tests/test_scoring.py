"""Tests for the signed-point scorer and per-answer grading."""

from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from app.question_bank import Question, question_bank
from app.question_selector import get_questions_for_step
from app.scoring import Answer, calculate_score, grade_answers

ALL_QUESTIONS: List[Question] = list(question_bank)


def _right(q: Question) -> Answer:
    return Answer(question_id=q.id, answer=q.correct_answer)


def _wrong(q: Question) -> Answer:
    return Answer(question_id=q.id, answer=(q.correct_answer + 1) % len(q.options))


def test_all_correct_scores_100() -> None:
    first = ALL_QUESTIONS[:44]
    assert calculate_score([_right(q) for q in first], 44) == 100


def test_all_wrong_clamps_to_zero() -> None:
    first = ALL_QUESTIONS[:44]
    assert calculate_score([_wrong(q) for q in first], 44) == 0


def test_nothing_answered_scores_zero() -> None:
    assert calculate_score([], 44) == 0


def test_unanswered_costs_the_same_as_wrong() -> None:
    first = ALL_QUESTIONS[:10]
    eight_right = [_right(q) for q in first[:8]]
    # 8 - 2 * 0.5 = 7 out of 10
    assert calculate_score(eight_right + [_wrong(q) for q in first[8:]], 10) == 70
    assert calculate_score(eight_right, 10) == 70


def test_unknown_ids_count_as_unanswered() -> None:
    first = ALL_QUESTIONS[:10]
    answers = [_right(q) for q in first[:8]]
    answers += [Answer(question_id="bogus-1", answer=0), Answer(question_id="bogus-2", answer=1)]
    assert calculate_score(answers, 10) == 70


def test_rounds_half_up() -> None:
    # 14 right, 26 missing: 14 - 13 = 1 point of 40 -> 2.5%
    answers = [_right(q) for q in ALL_QUESTIONS[:14]]
    assert calculate_score(answers, 40) == 3


def test_repeated_answers_cannot_exceed_100() -> None:
    q = ALL_QUESTIONS[0]
    assert calculate_score([_right(q)] * 5, 2) == 100


@pytest.mark.parametrize("answers", [None, "1-A1", 42, {"question_id": "1-A1", "answer": 1}])
def test_non_sequence_answers_treated_as_empty(answers) -> None:
    assert calculate_score(answers, 44) == 0


def test_mapping_answers_accepted() -> None:
    answers = [
        {"questionId": q.id, "answer": q.correct_answer} for q in ALL_QUESTIONS[:3]
    ] + [{"question_id": ALL_QUESTIONS[3].id, "answer": ALL_QUESTIONS[3].correct_answer}]
    assert calculate_score(answers, 4) == 100


def test_malformed_entries_skipped() -> None:
    q = ALL_QUESTIONS[0]
    answers = [_right(q), "junk", {"answer": 1}, None]
    # 1 right, 1 missing: 0.5 of 2
    assert calculate_score(answers, 2) == 25


def test_bool_is_not_an_option_index() -> None:
    q = question_bank.get_by_id("1-A1")
    assert q.correct_answer == 1
    assert calculate_score([Answer(question_id=q.id, answer=True)], 1) == 0


def test_total_questions_defaults_and_clamps() -> None:
    right = [_right(q) for q in ALL_QUESTIONS[:20]]
    assert calculate_score(right, 0) == 100
    assert calculate_score(right, None) == 100
    everything = [_right(q) for q in ALL_QUESTIONS]
    assert calculate_score(everything, 1000) == 100
    assert calculate_score(everything, -3) == 0


def test_step_questions_all_correct() -> None:
    step_questions = get_questions_for_step(2)
    assert calculate_score([_right(q) for q in step_questions], 44) == 100


answer_strategy = st.builds(
    Answer,
    question_id=st.one_of(st.sampled_from([q.id for q in ALL_QUESTIONS]), st.text(max_size=6)),
    answer=st.integers(min_value=-2, max_value=6),
)


@settings(max_examples=200, deadline=None)
@given(
    answers=st.lists(answer_strategy, max_size=80),
    total=st.integers(min_value=-5, max_value=200),
)
def test_score_always_within_bounds(answers: List[Answer], total: int) -> None:
    """
    Property: the percentage is an int in [0, 100] for any submission.
    """
    score = calculate_score(answers, total)
    assert isinstance(score, int)
    assert 0 <= score <= 100


@settings(max_examples=100, deadline=None)
@given(n=st.integers(min_value=1, max_value=len(ALL_QUESTIONS)))
def test_missing_and_wrong_are_interchangeable(n: int) -> None:
    first = ALL_QUESTIONS[:n]
    assert calculate_score([_wrong(q) for q in first], n) == calculate_score([], n) == 0


def test_grade_answers_details() -> None:
    q = question_bank.get_by_id("3-B2")
    graded = grade_answers(
        [
            Answer(question_id=q.id, answer=2, time_spent=12),
            Answer(question_id="4-A1", answer=0),
            Answer(question_id="4-A2", answer=9, time_spent=5),
            Answer(question_id="missing", answer=1),
        ],
        default_time_spent=30,
    )
    assert graded[0] == {
        "question_id": "3-B2",
        "answer": 2,
        "time_spent": 12,
        "is_correct": True,
        "question_text": 'What does "übermorgen" mean?',
        "selected_option": "the day after tomorrow",
        "correct_option": "the day after tomorrow",
    }
    assert graded[1]["is_correct"] is False
    assert graded[1]["time_spent"] == 30
    assert graded[1]["selected_option"] == "Vater"
    assert graded[1]["correct_option"] == "Mutter"
    assert graded[2]["selected_option"] == "No answer"
    assert graded[3] == {
        "question_id": "missing",
        "answer": 1,
        "time_spent": 30,
        "is_correct": False,
        "question_text": "Question not found",
        "selected_option": "Unknown",
        "correct_option": "Unknown",
    }
