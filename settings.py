"""Application settings loaded from environment variables."""
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Process-wide configuration.

    Secrets have no defaults: a missing ``JWT_SECRET`` (or a database
    password when no ``DATABASE_URL`` is given) makes construction fail,
    so the server refuses to start instead of running with known keys.
    """

    # ── Database ─────────────────────────────────────────────────────────
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: Optional[str] = None
    db_name: str = "zen_social"
    database_url: Optional[str] = None   # full URL, overrides the parts above

    # ── Tokens ───────────────────────────────────────────────────────────
    jwt_secret: str = Field(..., min_length=16)
    jwt_algorithm: str = "HS256"
    access_token_expire_hours: int = Field(default=24, ge=1)

    # ── Server ───────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 3000
    allowed_origins: str = "*"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def check_database_credentials(self) -> "Settings":
        if not self.database_url and not self.db_password:
            raise ValueError("DB_PASSWORD or DATABASE_URL must be set")
        return self

    @property
    def sqlalchemy_url(self) -> str:
        """Connection URL handed to SQLAlchemy."""
        if self.database_url:
            return self.database_url
        return URL.create(
            drivername="postgresql+psycopg2",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)

    @property
    def origins(self) -> List[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Settings for the process entry point, read once."""
    return Settings()
