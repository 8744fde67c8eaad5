from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from ..certification import certify
from ..db import get_db
from ..models import PlacementTest, STATUS_COMPLETED, STATUS_IN_PROGRESS
from ..question_bank import question_bank
from ..question_selector import LEVELS_BY_STEP, InvalidStepError, get_questions_for_step, shuffle_questions, validate_step
from ..scoring import Answer, calculate_score, grade_answers
from ..settings import settings
from .auth import User, get_current_user, require_admin


router = APIRouter(prefix="/test", tags=["placement_test"])

logger = logging.getLogger(__name__)


class StartRequest(BaseModel):
    step: int = Field(default=1, description="Assessment step 1 (A1/A2), 2 (B1/B2) or 3 (C1/C2)")


class SubmittedAnswer(BaseModel):
    question_id: str
    answer: int
    time_spent: Optional[float] = Field(default=None, ge=0)


class SubmitRequest(BaseModel):
    test_id: str
    answers: List[SubmittedAnswer]
    total_completion_time: Optional[int] = Field(default=0, ge=0, description="Seconds")


class SubmitResponse(BaseModel):
    score: int
    certification_level: str
    proceed_to_next_step: bool
    next_step: Optional[int] = None


def _get_own_test(db: Session, user: User, test_id: str, status: str) -> Optional[PlacementTest]:
    return (
        db.query(PlacementTest)
        .filter(PlacementTest.id == test_id, PlacementTest.username == user.username, PlacementTest.status == status)
        .first()
    )


def _completed_for(db: Session, username: str, limit: int) -> List[PlacementTest]:
    return (
        db.query(PlacementTest)
        .filter(PlacementTest.username == username, PlacementTest.status == STATUS_COMPLETED)
        .order_by(PlacementTest.completed_at.desc())
        .limit(limit)
        .all()
    )


@router.get("/competencies")
async def get_competencies():
    return {
        "competencies": list(question_bank.competencies),
        "levels_by_step": {str(step): list(levels) for step, levels in LEVELS_BY_STEP.items()},
        "questions_per_step": settings.questions_per_step,
    }


@router.post("/start")
async def start_test(req: StartRequest, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        step = validate_step(req.step)
    except InvalidStepError as e:
        raise HTTPException(status_code=400, detail=str(e))

    test = (
        db.query(PlacementTest)
        .filter(
            PlacementTest.username == user.username,
            PlacementTest.step == step,
            PlacementTest.status == STATUS_IN_PROGRESS,
        )
        .first()
    )
    if not test:
        test = PlacementTest(username=user.username, step=step, score=0, status=STATUS_IN_PROGRESS)
        test.questions = []
        db.add(test)
        db.commit()
        db.refresh(test)
        logger.info("started step %d test %s for %s", step, test.id, user.username)

    questions = shuffle_questions(get_questions_for_step(step))
    return {
        "test_id": test.id,
        "step": step,
        "questions": [q.public() for q in questions],
    }


@router.post("/submit", response_model=SubmitResponse)
async def submit_test(req: SubmitRequest, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    test = _get_own_test(db, user, req.test_id, STATUS_IN_PROGRESS)
    if not test:
        raise HTTPException(status_code=404, detail="Test not found or already completed")

    answers = [Answer(question_id=a.question_id, answer=a.answer, time_spent=a.time_spent) for a in req.answers]
    score = calculate_score(answers, settings.questions_per_step)
    result = certify(test.step, score)

    test.questions = grade_answers(answers, default_time_spent=settings.default_time_spent)
    test.score = score
    test.certification_level = result.level
    # An advancing step stays open; the learner continues with the next step
    test.status = STATUS_IN_PROGRESS if result.proceed_to_next_step else STATUS_COMPLETED
    test.total_completion_time = req.total_completion_time or 0
    test.completed_at = None if result.proceed_to_next_step else datetime.utcnow()
    db.commit()

    logger.info(
        "test %s step %d for %s scored %d%% -> %s (advance=%s)",
        test.id,
        test.step,
        user.username,
        score,
        result.level,
        result.proceed_to_next_step,
    )

    return SubmitResponse(
        score=score,
        certification_level=result.level,
        proceed_to_next_step=result.proceed_to_next_step,
        next_step=result.next_step,
    )


@router.get("/results")
async def get_results(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    tests = _completed_for(db, user.username, settings.results_limit)
    return {"tests": [t.summary() for t in tests]}


@router.get("/history")
async def get_history(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    tests = _completed_for(db, user.username, settings.history_limit)
    return {"tests": [t.summary() for t in tests]}


@router.get("/rankings")
async def get_rankings(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    completed = db.query(PlacementTest).filter(PlacementTest.status == STATUS_COMPLETED).all()
    best: Dict[str, int] = {}
    for t in completed:
        if t.username not in best or best[t.username] < t.score:
            best[t.username] = t.score

    if user.username not in best:
        return {
            "exam_score": None,
            "exam_rank": None,
            "total_users": 0,
            "has_completed_tests": False,
        }

    # sorted() is stable, so ties keep first-seen order
    rankings = sorted(
        ({"username": name, "score": score} for name, score in best.items()),
        key=lambda entry: entry["score"],
        reverse=True,
    )
    rank = next(i for i, entry in enumerate(rankings, start=1) if entry["username"] == user.username)
    return {
        "exam_score": best[user.username],
        "exam_rank": rank,
        "total_users": len(rankings),
        "has_completed_tests": True,
        "rankings": rankings[:10],
    }


@router.get("/certificate/{test_id}")
async def get_certificate(test_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    test = _get_own_test(db, user, test_id, STATUS_COMPLETED)
    if not test:
        raise HTTPException(status_code=404, detail="Test not found")
    completed_at = test.completed_at or datetime.utcnow()
    return {
        "name": user.username,
        "score": test.score,
        "level": test.certification_level,
        "step": test.step,
        "date": completed_at.date().isoformat(),
    }


@router.get("/admin/reports")
async def get_reports(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=200),
    username: Optional[str] = None,
    step: Optional[int] = None,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    query = db.query(PlacementTest).filter(PlacementTest.status == STATUS_COMPLETED)
    if username:
        query = query.filter(PlacementTest.username == username)
    if step is not None:
        query = query.filter(PlacementTest.step == step)
    total = query.count()
    tests = (
        query.order_by(PlacementTest.completed_at.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return {
        "tests": [t.summary() for t in tests],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "pages": math.ceil(total / limit),
        },
    }


@router.get("/admin/details/{test_id}")
async def get_details(test_id: str, admin: User = Depends(require_admin), db: Session = Depends(get_db)):
    test = db.get(PlacementTest, test_id)
    if not test:
        raise HTTPException(status_code=404, detail="Test not found")
    detail: Dict[str, Any] = test.summary()
    detail["questions"] = [
        {
            "question_number": i,
            "question_id": q.get("question_id"),
            "question_text": q.get("question_text"),
            "selected_option": q.get("selected_option"),
            "correct_option": q.get("correct_option"),
            "is_correct": bool(q.get("is_correct")),
            "time_spent": q.get("time_spent"),
        }
        for i, q in enumerate(test.questions, start=1)
    ]
    return detail
