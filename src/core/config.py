from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment."""

    app_name: str = Field(default="Tune Works API", validation_alias="APP_NAME")
    environment: str = Field(default="local", validation_alias="APP_ENV")
    version: str = Field(default="0.1.0")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=5000, validation_alias="PORT")

    access_token_secret: str = Field(
        default="replace-with-secure-secret", validation_alias="ACCESS_TOKEN_SECRET"
    )
    jwt_algorithm: str = Field(default="HS256", validation_alias="JWT_ALGORITHM")
    # Tokens are issued for one day
    access_token_ttl_seconds: int = Field(default=86400, validation_alias="ACCESS_TOKEN_TTL_SECONDS")

    db_uri: str = Field(default="mongodb://localhost:27017", validation_alias="DB_URI")
    db_name: str = Field(default="twmi", validation_alias="DB_NAME")
    db_server_selection_timeout_ms: int = Field(
        default=30000, validation_alias="DB_SERVER_SELECTION_TIMEOUT_MS"
    )

    stripe_secret_key: str = Field(default="", validation_alias="STRIPE_SECRET_KEY")
    payment_currency: str = Field(default="usd", validation_alias="PAYMENT_CURRENCY")

    cors_origins: list[str] = Field(default=["*"], validation_alias="CORS_ORIGINS")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="allow")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
