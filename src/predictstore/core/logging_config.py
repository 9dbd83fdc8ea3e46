"""PredictStore - Logging Configuration.

Structured console logging with configurable levels for development and
production environments.
"""

import logging
import logging.config
import sys
from typing import Any

from predictstore.core.config import Settings, get_settings

# Track if logging has been configured
_logging_configured = False


def build_logging_config(settings: Settings) -> dict[str, Any]:
    """Build the ``dictConfig`` mapping for the given settings."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": (
                    "%(asctime)s | %(name)s | %(levelname)s | "
                    "%(filename)s:%(lineno)d | %(funcName)s | %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "simple": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.log_level,
                "formatter": "detailed" if settings.debug else "simple",
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "predictstore": {
                "level": settings.log_level,
                "handlers": ["console"],
                "propagate": False,
            },
            "uvicorn": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
            "uvicorn.access": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": ["console"],
        },
    }


def setup_logging(settings: Settings | None = None, *, force: bool = False) -> None:
    """Configure logging for the application based on environment settings.

    Args:
        settings: Settings to configure from; defaults to the cached settings.
        force: Reconfigure even if logging was already set up.
    """
    global _logging_configured  # noqa: PLW0603

    if _logging_configured and not force:
        return

    settings = settings or get_settings()
    logging.config.dictConfig(build_logging_config(settings))
    _logging_configured = True

    logging.getLogger(__name__).info(
        "Logging configured for %s environment with level %s",
        settings.environment,
        settings.log_level,
    )
