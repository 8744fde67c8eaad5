from __future__ import annotations
import random
from typing import Dict, List, Optional, Sequence, Tuple

from .question_bank import Question, QuestionBank, question_bank


STEPS: Tuple[int, ...] = (1, 2, 3)

LEVELS_BY_STEP: Dict[int, Tuple[str, str]] = {
	1: ("A1", "A2"),
	2: ("B1", "B2"),
	3: ("C1", "C2"),
}

QUESTIONS_PER_COMPETENCY = 2
MAX_QUESTIONS_PER_STEP = 44


class InvalidStepError(ValueError):
	def __init__(self, step: object) -> None:
		super().__init__(f"step must be one of {list(STEPS)}, got {step!r}")
		self.step = step


def validate_step(step: object) -> int:
	if isinstance(step, bool) or not isinstance(step, int) or step not in LEVELS_BY_STEP:
		raise InvalidStepError(step)
	return step


def levels_for_step(step: int) -> Tuple[str, str]:
	return LEVELS_BY_STEP[validate_step(step)]


def get_questions_for_step(step: int, bank: Optional[QuestionBank] = None) -> List[Question]:
	bank = bank or question_bank
	levels = levels_for_step(step)
	selected: List[Question] = []
	for competency in bank.competencies:
		matches = bank.filter_by_competency_and_levels(competency, levels)
		# Competencies without a full pair are skipped entirely
		if len(matches) >= QUESTIONS_PER_COMPETENCY:
			selected.extend(matches[:QUESTIONS_PER_COMPETENCY])
	return selected[:MAX_QUESTIONS_PER_STEP]


def shuffle_questions(questions: Sequence[Question], rng: Optional[random.Random] = None) -> List[Question]:
	rng = rng or random.Random()
	shuffled = list(questions)
	for i in range(len(shuffled) - 1, 0, -1):
		j = rng.randint(0, i)
		shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
	return shuffled
