from __future__ import annotations
import logging
from datetime import datetime, timedelta
from sqlalchemy import delete
from sqlalchemy.orm import Session

from .certification import IN_PROGRESS
from .models import AuthSession, PlacementTest, STATUS_IN_PROGRESS


logger = logging.getLogger(__name__)


def purge_stale_attempts(db: Session, days: int = 7) -> int:
	if days <= 0:
		return 0
	threshold = datetime.utcnow() - timedelta(days=days)
	removed = 0

	# Only never-submitted attempts go; scored steps that advanced stay in-progress and are kept
	res = db.execute(
		delete(PlacementTest).where(
			PlacementTest.status == STATUS_IN_PROGRESS,
			PlacementTest.certification_level == IN_PROGRESS,
			PlacementTest.updated_at < threshold,
		)
	)
	removed += res.rowcount or 0

	res = db.execute(delete(AuthSession).where(AuthSession.last_activity_at < threshold))
	removed += res.rowcount or 0

	db.commit()
	if removed:
		logger.info("purged %d stale rows older than %d days", removed, days)
	return removed
