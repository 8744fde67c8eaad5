from datetime import datetime, timedelta, timezone
from typing import Optional, Dict
import uuid

from fastapi import APIRouter, HTTPException, Depends
from fastapi.security import OAuth2PasswordRequestForm, OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel
import logging

from ..settings import settings
from sqlalchemy.orm import Session
from ..db import get_db
from ..models import AuthUser, AuthSession, ROLE_ADMIN, ROLE_STUDENT

router = APIRouter(prefix="/auth", tags=["auth"])

logger = logging.getLogger(__name__)
logging.getLogger('passlib').setLevel(logging.ERROR)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")

# bcrypt ignores anything past 72 bytes
MAX_PASSWORD_BYTES = 72
MIN_PASSWORD_LENGTH = 6


class Token(BaseModel):
	access_token: str
	token_type: str = "bearer"


class User(BaseModel):
	username: str
	role: str = ROLE_STUDENT


_users: Dict[str, str] = {}


def _ensure_seed_user() -> None:
	username = settings.seed_username
	password = settings.seed_password_plain
	if username and password and username not in _users:
		password_bytes = password.encode('utf-8')
		if len(password_bytes) > MAX_PASSWORD_BYTES:
			password_bytes = password_bytes[:MAX_PASSWORD_BYTES]
		_users[username] = pwd_context.hash(password_bytes.decode('utf-8', errors='ignore'))


def verify_password(plain_password: str, hashed_password: str) -> bool:
	return pwd_context.verify(plain_password, hashed_password)


def authenticate_user(db: Session, username: str, password: str) -> Optional[User]:
	if len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
		return None
	# Try DB-backed users first
	user_row = db.query(AuthUser).filter(AuthUser.username == username).first()
	if user_row and verify_password(password, user_row.password_hash):
		return User(username=username, role=user_row.role)
	# Fallback to seed in-memory user for dev convenience; it administers the instance
	_ensure_seed_user()
	hashed = _users.get(username)
	if hashed and verify_password(password, hashed):
		return User(username=username, role=ROLE_ADMIN)
	return None


def _resolve_expiry(expires_delta: Optional[timedelta]) -> datetime:
	delta = expires_delta
	if delta is None:
		minutes = settings.access_token_expire_minutes
		if minutes > 0:
			delta = timedelta(minutes=minutes)
		else:
			delta = timedelta(days=30)
	now = datetime.now(timezone.utc)
	try:
		return now + delta
	except OverflowError:
		return datetime.max.replace(tzinfo=timezone.utc)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
	to_encode = data.copy()
	expire = _resolve_expiry(expires_delta)
	to_encode.update({"exp": expire})
	encoded_jwt = jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
	return encoded_jwt


@router.post("/token", response_model=Token)
async def login(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
	user = authenticate_user(db, form_data.username, form_data.password)
	if not user:
		raise HTTPException(status_code=401, detail="Incorrect username or password")
	# Create a new session id (jti) and persist server-side
	session_id = uuid.uuid4().hex
	access_token = create_access_token({"sub": user.username, "jti": session_id})
	try:
		row = AuthSession(session_id=session_id, username=user.username)
		db.merge(row)
		db.commit()
	except Exception:
		db.rollback()
		logger.exception("could not persist session for %s", user.username)
		raise HTTPException(status_code=500, detail="Could not create session")
	return Token(access_token=access_token)


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
	credentials_exception = HTTPException(status_code=401, detail="Could not validate credentials")
	try:
		payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
		username: str | None = payload.get("sub")
		jti: str | None = payload.get("jti")
		if username is None or jti is None:
			raise credentials_exception
	except JWTError:
		raise credentials_exception
	# The session row must still exist so revoked tokens stop working
	try:
		row = db.get(AuthSession, jti)
		if not row or row.username != username:
			raise credentials_exception
		row.last_activity_at = datetime.utcnow()
		db.add(row)
		db.commit()
		user_row = db.get(AuthUser, username)
	except HTTPException:
		raise
	except Exception:
		# On DB errors, fail closed
		raise credentials_exception
	if user_row is not None:
		return User(username=username, role=user_row.role)
	if username == settings.seed_username:
		return User(username=username, role=ROLE_ADMIN)
	raise credentials_exception


def require_admin(user: User = Depends(get_current_user)) -> User:
	if user.role != ROLE_ADMIN:
		raise HTTPException(status_code=403, detail="Admin access required")
	return user


@router.get("/me", response_model=User)
async def me(user: User = Depends(get_current_user)):
	return user


class RegisterRequest(BaseModel):
	username: str
	password: str
	email: str


@router.post("/register", status_code=201)
async def register(req: RegisterRequest, db: Session = Depends(get_db)):
	username = (req.username or "").strip()
	password = req.password or ""
	email = (req.email or "").strip()
	if not username or not password:
		raise HTTPException(status_code=400, detail="username and password are required")
	if not email:
		raise HTTPException(status_code=400, detail="email is required")
	if len(username) < 3 or len(username) > 128:
		raise HTTPException(status_code=400, detail="username must be 3-128 characters")
	if len(password) < MIN_PASSWORD_LENGTH:
		raise HTTPException(status_code=400, detail=f"password must be at least {MIN_PASSWORD_LENGTH} characters")
	if len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
		raise HTTPException(status_code=400, detail=f"password must be at most {MAX_PASSWORD_BYTES} bytes")
	existing = db.query(AuthUser).filter(AuthUser.username == username).first()
	if existing:
		raise HTTPException(status_code=409, detail="username already exists")
	row = AuthUser(username=username, password_hash=pwd_context.hash(password), email=email, role=ROLE_STUDENT)
	db.add(row)
	db.commit()
	logger.info("registered user %s", username)
	return {"ok": True}
