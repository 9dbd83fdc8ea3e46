"""Exception hierarchy for PredictStore.

Startup problems (missing or malformed credentials, a client that cannot be
built) are raised as exceptions and are expected to abort the process.
Per-call store failures are never raised; they are returned as
``StoreResult`` values instead.
"""

from typing import Any


class PredictStoreError(Exception):
    """Base exception for all PredictStore specific errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {super().__str__()}"
        return super().__str__()


# ==============================================================================
# Configuration Exceptions
# ==============================================================================


class ConfigurationError(PredictStoreError):
    """Raised when configuration is invalid or missing."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        error_code: str = "CONFIGURATION_ERROR",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code=error_code, **kwargs)
        self.config_key = config_key


class ConfigMissingError(ConfigurationError):
    """Raised when a required configuration value is absent."""

    def __init__(self, config_key: str) -> None:
        message = (
            f"{config_key} not found in the environment or .env file. "
            "Make sure it is set and contains valid service account credentials."
        )
        super().__init__(message, config_key=config_key, error_code="CONFIG_MISSING")


class ConfigMalformedError(ConfigurationError):
    """Raised when a configuration value is present but cannot be used."""

    def __init__(self, config_key: str, reason: str | None = None) -> None:
        message = f"{config_key} could not be parsed"
        if reason:
            message += f" ({reason})"
        super().__init__(
            message,
            config_key=config_key,
            error_code="CONFIG_MALFORMED",
            details={"reason": reason} if reason else None,
        )
        self.reason = reason


# ==============================================================================
# Store Exceptions
# ==============================================================================


class StoreError(PredictStoreError):
    """Base class for document store errors."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("error_code", "STORE_ERROR")
        super().__init__(message, **kwargs)


class StoreConnectionError(StoreError):
    """Raised when the Firestore client cannot be constructed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_code="STORE_CONNECTION_ERROR")
