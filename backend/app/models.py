from __future__ import annotations
import json
import uuid
from datetime import datetime
from typing import Any, Dict, List
from sqlalchemy import Column, String, DateTime, Integer, Text, Index
from .db import Base


ROLE_STUDENT = "student"
ROLE_ADMIN = "admin"

STATUS_IN_PROGRESS = "in-progress"
STATUS_COMPLETED = "completed"


class AuthUser(Base):
	__tablename__ = "auth_users"
	# Primary key is username
	username = Column(String(128), primary_key=True, index=True)
	password_hash = Column(String(256), nullable=False)
	email = Column(String(256), nullable=True)
	role = Column(String(32), default=ROLE_STUDENT, nullable=False)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class AuthSession(Base):
	__tablename__ = "auth_sessions"
	# jti of the issued access token
	session_id = Column(String(64), primary_key=True)
	username = Column(String(128), nullable=False, index=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	last_activity_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class PlacementTest(Base):
	__tablename__ = "placement_tests"
	__table_args__ = (
		Index("ix_placement_tests_user_status", "username", "status"),
		Index("ix_placement_tests_user_created", "username", "created_at"),
	)
	id = Column(String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
	username = Column(String(128), nullable=False)
	step = Column(Integer, nullable=False)
	questions_json = Column(Text, nullable=True)  # graded answers as a JSON list
	score = Column(Integer, default=0, nullable=False)
	certification_level = Column(String(16), default="In Progress", nullable=False)
	status = Column(String(16), default=STATUS_IN_PROGRESS, nullable=False)
	total_completion_time = Column(Integer, default=0, nullable=False)  # seconds
	completed_at = Column(DateTime, nullable=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

	@property
	def questions(self) -> List[Dict[str, Any]]:
		if not self.questions_json:
			return []
		try:
			data = json.loads(self.questions_json)
		except ValueError:
			return []
		return data if isinstance(data, list) else []

	@questions.setter
	def questions(self, items: List[Dict[str, Any]]) -> None:
		self.questions_json = json.dumps(items)

	def summary(self) -> Dict[str, Any]:
		items = self.questions
		return {
			"id": self.id,
			"username": self.username,
			"step": self.step,
			"score": self.score,
			"certification_level": self.certification_level,
			"status": self.status,
			"total_completion_time": self.total_completion_time,
			"questions_attempted": len(items),
			"correct_answers": sum(1 for q in items if q.get("is_correct")),
			"completed_at": self.completed_at.isoformat() if self.completed_at else None,
			"created_at": self.created_at.isoformat() if self.created_at else None,
		}
