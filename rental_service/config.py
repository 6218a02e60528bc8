# rental_service/config.py
"""Service configuration read from the environment and an optional .env file."""
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DATABASE_PARTS = ("database_host", "database_port", "database_user", "database_password", "database_name")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_ignore_empty=True, extra="ignore"
    )

    postgres_url: Optional[str] = None
    database_host: Optional[str] = None
    database_port: Optional[str] = None
    database_user: Optional[str] = None
    database_password: Optional[str] = None
    database_name: Optional[str] = None

    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_statement_timeout_ms: int = 5000
    near_threshold_radius: int = Field(100, validation_alias="NEAR_THRESHOLD_RADIUS_IN_MILES")
    log_level: str = "INFO"
    server_host: str = "0.0.0.0"
    server_port: int = 8000

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def _require_database(self) -> "Settings":
        if not self.postgres_url:
            missing = [name.upper() for name in _DATABASE_PARTS if not getattr(self, name)]
            if missing:
                raise ValueError(f"POSTGRES_URL not set and undefined environment variables: {', '.join(missing)}")
        return self

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL, from POSTGRES_URL or assembled from the DATABASE_* parts."""
        if self.postgres_url:
            # SQLAlchemy 2.x doesn't accept 'postgres://'
            if self.postgres_url.startswith("postgres://"):
                return self.postgres_url.replace("postgres://", "postgresql+psycopg2://", 1)
            return self.postgres_url
        return (
            f"postgresql+psycopg2://{self.database_user}:{self.database_password}"
            f"@{self.database_host}:{self.database_port}/{self.database_name}"
        )


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise RuntimeError(f"invalid configuration: {e}") from e
