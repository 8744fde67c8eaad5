from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from .question_selector import validate_step


IN_PROGRESS = "In Progress"
FAILED = "Failed"

CERTIFICATION_LEVELS: List[str] = ["A1", "A2", "B1", "B2", "C1", "C2", FAILED, IN_PROGRESS]

ADVANCE_THRESHOLD = 75
FINAL_STEP = 3


@dataclass(frozen=True)
class CertificationResult:
	step: int
	score: int
	level: str
	proceed_to_next_step: bool

	@property
	def next_step(self) -> Optional[int]:
		return self.step + 1 if self.proceed_to_next_step else None

	@property
	def is_terminal(self) -> bool:
		return not self.proceed_to_next_step


def certify(step: int, score: int) -> CertificationResult:
	step = validate_step(step)
	proceed = False
	if step == 1:
		if score < 25:
			level = FAILED
		elif score >= ADVANCE_THRESHOLD:
			level = "A2"
			proceed = True
		elif score >= 50:
			level = "A2"
		else:
			level = "A1"
	elif step == 2:
		if score < 25:
			level = "A2"
		elif score >= ADVANCE_THRESHOLD:
			level = "B2"
			proceed = True
		elif score >= 50:
			level = "B2"
		else:
			level = "B1"
	else:
		# Final step never advances and has no separate band at 75
		if score < 25:
			level = "B2"
		elif score >= 50:
			level = "C2"
		else:
			level = "C1"
	return CertificationResult(step=step, score=score, level=level, proceed_to_next_step=proceed)
