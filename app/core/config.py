"""
Application configuration for the HR Records Service.

Settings are loaded from environment variables and an optional .env file.
"""

import sys

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    """
    Service settings.

    Every attribute can be overridden with an environment variable of the same name.
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE, env_file_encoding="utf-8", extra="ignore"
    )

    # Application
    APP_NAME: str = "hr-records-service"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./hr_records.db"
    DATABASE_ECHO: bool = False

    # Redis
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_PASSWORD: str | None = None
    REDIS_SOCKET_TIMEOUT: float = 2.0

    # Employee listing cache
    EMPLOYEES_CACHE_TTL_SECONDS: int = 300
    EMPLOYEES_CACHE_INVALIDATE_PAGES: bool = False

    # Security
    JWT_SECRET_KEY: str = "change-me-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 60

    # CORS
    CORS_ORIGINS: str = "*"
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list[str] = ["*"]
    CORS_ALLOW_HEADERS: list[str] = ["*"]

    # Import
    IMPORT_FILE_PATH: str = "data/employees.csv"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list, handling '*' for development"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


settings = Settings()
