from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	app_title: str = Field(default="German Placement Test API", validation_alias="APP_TITLE")
	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# Auth configuration
	jwt_secret_key: str = Field(default="change-me", validation_alias="JWT_SECRET_KEY")
	jwt_algorithm: str = Field(default="HS256", validation_alias="JWT_ALGORITHM")
	access_token_expire_minutes: int = Field(default=120, validation_alias="ACCESS_TOKEN_EXPIRE_MINUTES")
	# Seed user (local development only)
	seed_username: str | None = Field(default=None, validation_alias="SEED_USERNAME")
	seed_password_plain: str | None = Field(default=None, validation_alias="SEED_PASSWORD")

	# Placement test
	# Denominator used when scoring a submitted step (22 competencies x 2 items)
	questions_per_step: int = Field(default=44, validation_alias="QUESTIONS_PER_STEP")
	# Seconds recorded for an answer submitted without timing
	default_time_spent: int = Field(default=30, validation_alias="DEFAULT_TIME_SPENT")
	results_limit: int = Field(default=10, validation_alias="RESULTS_LIMIT")
	history_limit: int = Field(default=50, validation_alias="HISTORY_LIMIT")

	# In-progress attempts untouched for this many days are purged (0 disables)
	stale_attempt_days: int = Field(default=7, validation_alias="STALE_ATTEMPT_DAYS")

	# Database
	database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
