"""Billtracker: Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./database/bills.db"
    DATABASE_ECHO: bool = False

    # Security
    PASSWORD_SCHEMES: list[str] = ["pbkdf2_sha256"]

    # Default admin seeded on bootstrap
    DEFAULT_ADMIN_PHONE: str = "13800000000"
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: str = "admin123"

    # Timezone
    TIMEZONE: str = "Asia/Shanghai"

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
