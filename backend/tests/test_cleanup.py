"""Tests for purging abandoned attempts and idle sessions."""

from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from app.certification import certify
from app.cleanup import purge_stale_attempts
from app.models import AuthSession, PlacementTest, STATUS_COMPLETED, STATUS_IN_PROGRESS


def _attempt(db: Session, status: str, age_days: int) -> str:
    stamp = datetime.utcnow() - timedelta(days=age_days)
    test = PlacementTest(username="lena", step=1, status=status, created_at=stamp, updated_at=stamp)
    db.add(test)
    db.commit()
    return test.id


def test_stale_in_progress_attempts_removed(db: Session) -> None:
    stale = _attempt(db, STATUS_IN_PROGRESS, age_days=10)
    fresh = _attempt(db, STATUS_IN_PROGRESS, age_days=1)
    finished = _attempt(db, STATUS_COMPLETED, age_days=30)

    assert purge_stale_attempts(db, days=7) == 1

    db.expire_all()
    assert db.get(PlacementTest, stale) is None
    assert db.get(PlacementTest, fresh) is not None
    assert db.get(PlacementTest, finished) is not None


def test_idle_sessions_removed(db: Session) -> None:
    old = datetime.utcnow() - timedelta(days=8)
    db.add(AuthSession(session_id="old", username="lena", created_at=old, last_activity_at=old))
    db.add(AuthSession(session_id="new", username="lena"))
    db.commit()

    assert purge_stale_attempts(db, days=7) == 1

    db.expire_all()
    assert db.get(AuthSession, "old") is None
    assert db.get(AuthSession, "new") is not None


def test_non_positive_window_is_a_no_op(db: Session) -> None:
    stale = _attempt(db, STATUS_IN_PROGRESS, age_days=100)
    assert purge_stale_attempts(db, days=0) == 0
    assert db.get(PlacementTest, stale) is not None


def test_scored_advancing_step_survives(db: Session) -> None:
    stamp = datetime.utcnow() - timedelta(days=8)
    result = certify(1, 90)
    test = PlacementTest(
        username="lena",
        step=1,
        score=90,
        certification_level=result.level,
        status=STATUS_IN_PROGRESS,
        created_at=stamp,
        updated_at=stamp,
    )
    db.add(test)
    db.commit()
    kept = test.id
    assert result.proceed_to_next_step is True

    assert purge_stale_attempts(db, days=7) == 0

    db.expire_all()
    row = db.get(PlacementTest, kept)
    assert row is not None
    assert row.score == 90
    assert row.certification_level == "A2"
