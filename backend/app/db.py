from __future__ import annotations
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import sessionmaker, declarative_base
from .settings import settings


DATABASE_URL = settings.database_url or "sqlite:///./placement.db"

_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=_connect_args, future=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)
Base = declarative_base()


def get_db():
	db = SessionLocal()
	try:
		yield db
	finally:
		db.close()


# Best-effort lightweight migrations for development (SQLite-friendly)
def ensure_schema(bind=None) -> None:
	bind = bind or engine
	try:
		inspector = inspect(bind)
		tables = set(inspector.get_table_names())
	except Exception:
		return
	if "auth_users" in tables:
		cols = {c["name"] for c in inspector.get_columns("auth_users")}
		with bind.begin() as conn:
			if "email" not in cols:
				conn.exec_driver_sql("ALTER TABLE auth_users ADD COLUMN email VARCHAR(256)")
			if "role" not in cols:
				conn.exec_driver_sql("ALTER TABLE auth_users ADD COLUMN role VARCHAR(32) DEFAULT 'student' NOT NULL")
	if "placement_tests" in tables:
		cols = {c["name"] for c in inspector.get_columns("placement_tests")}
		with bind.begin() as conn:
			if "total_completion_time" not in cols:
				conn.exec_driver_sql("ALTER TABLE placement_tests ADD COLUMN total_completion_time INTEGER DEFAULT 0 NOT NULL")
