import asyncio
import logging

from fastapi import FastAPI

from .db import Base, engine, get_db, ensure_schema
from .cleanup import purge_stale_attempts
from .settings import settings
from .routers import auth
from .routers import placement

logging.basicConfig(
	level=settings.log_level.upper(),
	format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_title)
app.include_router(auth.router)
app.include_router(placement.router)


@app.get("/info")
def root():
	return {"status": "ok", "questions_per_step": settings.questions_per_step}


def _run_cleanup() -> None:
	db = next(get_db())
	try:
		purge_stale_attempts(db, days=settings.stale_attempt_days)
	finally:
		db.close()


async def _cleanup_watcher():
	while True:
		await asyncio.sleep(24 * 60 * 60)
		try:
			_run_cleanup()
		except Exception:
			logger.exception("daily cleanup failed")


@app.on_event("startup")
async def startup_event():
	# Initialize DB schema
	Base.metadata.create_all(bind=engine)
	# Apply lightweight dev migrations
	try:
		ensure_schema()
	except Exception:
		logger.exception("schema migration failed")
	try:
		_run_cleanup()
	except Exception:
		logger.exception("startup cleanup failed")
	# Start periodic cleanup loop
	asyncio.create_task(_cleanup_watcher())
	logger.info("%s ready", settings.app_title)
