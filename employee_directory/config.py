# config.py
import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SECRET_KEY = "fallback_secret_key"

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Service configuration loaded from environment variables and .env."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    secret_key: str = DEFAULT_SECRET_KEY
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    host: str = "0.0.0.0"
    port: int = 4000
    log_level: str = "INFO"
    graphql_debug: bool = False

    @field_validator("secret_key", mode="before")
    @classmethod
    def blank_secret_uses_fallback(cls, value):
        return value or DEFAULT_SECRET_KEY

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    if settings.secret_key == DEFAULT_SECRET_KEY:
        logger.warning("SECRET_KEY is not set, signing tokens with the fallback key")
    return settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
