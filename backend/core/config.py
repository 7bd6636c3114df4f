from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic.aliases import AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


BACKEND_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=BACKEND_DIR / ".env", env_file_encoding="utf-8")

    database_url: str

    # Audit actor resolution (no login flow lives in this service).
    jwt_secret_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("jwt_secret_key", "jwt_secret", "JWT_SECRET_KEY", "JWT_SECRET"),
    )
    jwt_algorithm: str = Field(default="HS256", validation_alias=AliasChoices("jwt_algorithm", "JWT_ALGORITHM"))
    default_actor_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("default_actor_id", "DEFAULT_ACTOR_ID"),
    )

    # Runtime
    environment: str = Field(default="development", validation_alias=AliasChoices("environment", "ENVIRONMENT"))
    log_level: str | None = Field(default=None, validation_alias=AliasChoices("log_level", "LOG_LEVEL"))
    frontend_origin: str = Field(
        default="http://localhost:5173",
        validation_alias=AliasChoices("frontend_origin", "FRONTEND_ORIGIN"),
    )

    # Listing
    default_per_page: int = Field(default=15, validation_alias=AliasChoices("default_per_page", "DEFAULT_PER_PAGE"))
    max_per_page: int = Field(default=100, validation_alias=AliasChoices("max_per_page", "MAX_PER_PAGE"))

    # Library
    library_fine_per_day: float = Field(
        default=10.0,
        validation_alias=AliasChoices("library_fine_per_day", "LIBRARY_FINE_PER_DAY"),
    )

    @field_validator("frontend_origin")
    @classmethod
    def _normalize_frontend_origin(cls, v: str) -> str:
        # Starlette CORS expects the Origin to match exactly (no trailing slash).
        return v.strip().rstrip("/")

    @field_validator("environment")
    @classmethod
    def _normalize_environment(cls, v: str) -> str:
        return (v or "development").strip().lower()

    @field_validator("jwt_secret_key")
    @classmethod
    def _normalize_jwt_secret_key(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    @field_validator("default_per_page", "max_per_page")
    @classmethod
    def _positive_page_size(cls, v: int) -> int:
        if int(v) < 1:
            raise ValueError("page sizes must be >= 1")
        return int(v)


settings = Settings()
