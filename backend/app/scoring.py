from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Set

from .question_bank import QuestionBank, question_bank


CORRECT_POINTS = 1.0
WRONG_PENALTY = 0.5
UNANSWERED_PENALTY = 0.5
DEFAULT_TOTAL_QUESTIONS = 20
DEFAULT_TIME_SPENT = 30


@dataclass(frozen=True)
class Answer:
	question_id: str
	answer: Any
	time_spent: Optional[float] = None


def _coerce_answer(item: Any) -> Optional[Answer]:
	if isinstance(item, Answer):
		return item
	if isinstance(item, Mapping):
		qid = item.get("question_id", item.get("questionId"))
		if not isinstance(qid, str):
			return None
		return Answer(question_id=qid, answer=item.get("answer"), time_spent=item.get("time_spent", item.get("timeSpent")))
	return None


def _coerce_answers(answers: Any) -> List[Answer]:
	if not isinstance(answers, (list, tuple)):
		return []
	coerced: List[Answer] = []
	for item in answers:
		a = _coerce_answer(item)
		if a is not None:
			coerced.append(a)
	return coerced


def _is_correct(selected: Any, correct_index: int) -> bool:
	# bool is an int subclass; True must not match option 1
	if isinstance(selected, bool) or not isinstance(selected, int):
		return False
	return selected == correct_index


def _round_half_up(value: float) -> int:
	return int(math.floor(value + 0.5))


def calculate_score(answers: Any, total_questions: Optional[int], bank: Optional[QuestionBank] = None) -> int:
	bank = bank or question_bank
	n = min(total_questions or DEFAULT_TOTAL_QUESTIONS, bank.size)
	if n <= 0:
		return 0

	raw = 0.0
	answered: Set[str] = set()
	for a in _coerce_answers(answers):
		question = bank.get_by_id(a.question_id)
		if question is None:
			continue
		answered.add(a.question_id)
		if _is_correct(a.answer, question.correct_answer):
			raw += CORRECT_POINTS
		else:
			raw -= WRONG_PENALTY

	unanswered = max(0, n - len(answered))
	raw -= unanswered * UNANSWERED_PENALTY

	# Multiply before dividing so exact halves stay exact
	percentage = _round_half_up(max(0.0, raw) * 100 / n)
	return max(0, min(100, percentage))


def grade_answers(answers: Any, bank: Optional[QuestionBank] = None, default_time_spent: float = DEFAULT_TIME_SPENT) -> List[Dict[str, Any]]:
	"""Per-item detail stored on a submitted test record."""
	bank = bank or question_bank
	graded: List[Dict[str, Any]] = []
	for a in _coerce_answers(answers):
		time_spent = a.time_spent or default_time_spent
		question = bank.get_by_id(a.question_id)
		if question is None:
			graded.append({
				"question_id": a.question_id,
				"answer": a.answer,
				"time_spent": time_spent,
				"is_correct": False,
				"question_text": "Question not found",
				"selected_option": "Unknown",
				"correct_option": "Unknown",
			})
			continue
		graded.append({
			"question_id": a.question_id,
			"answer": a.answer,
			"time_spent": time_spent,
			"is_correct": _is_correct(a.answer, question.correct_answer),
			"question_text": question.text,
			"selected_option": question.option_text(a.answer) or "No answer",
			"correct_option": question.options[question.correct_answer],
		})
	return graded
