"""PredictStore - Configuration Management.

Environment-based configuration using Pydantic settings. Values come from
process environment variables, falling back to a local ``.env`` file.
"""

from functools import lru_cache
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

SERVICE_ACCOUNT_KEY_ENV = "SERVICE_ACCOUNT_KEY"


class Settings(BaseSettings):
    """Application settings."""

    # Environment settings
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Server settings
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8080, alias="PORT")

    # Google Cloud service account JSON, newline-escaped private key allowed
    service_account_key: str | None = Field(
        default=None, alias=SERVICE_ACCOUNT_KEY_ENV
    )
    firestore_database: str = Field(default="(default)", alias="FIRESTORE_DATABASE")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown log level: {value}"
            raise ValueError(msg)
        return level

    def log_configuration_summary(self) -> None:
        """Log configuration summary for debugging."""
        logger.info("PredictStore configuration summary:")
        logger.info("   - Environment: %s", self.environment)
        logger.info("   - Debug mode: %s", self.debug)
        logger.info("   - Log level: %s", self.log_level)
        logger.info("   - Bind address: %s:%s", self.host, self.port)
        logger.info(
            "   - Service account key: %s",
            "set" if self.service_account_key else "Not set",
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    settings = Settings()

    if settings.debug or settings.log_level == "DEBUG":
        settings.log_configuration_summary()

    return settings
