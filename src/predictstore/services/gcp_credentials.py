"""Google Cloud service account credential loading.

The service account JSON is expected in a single configuration value
(``SERVICE_ACCOUNT_KEY``). Environment files commonly carry the PEM private
key on one line with escaped newlines, so those are restored here before the
key reaches the Google auth libraries.
"""

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from predictstore.core.config import SERVICE_ACCOUNT_KEY_ENV, Settings
from predictstore.core.exceptions import ConfigMalformedError, ConfigMissingError

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"


class ServiceAccountCredential(BaseModel):
    """Parsed service account identity and key material."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    project_id: str
    client_email: str
    private_key: str
    type: str = "service_account"
    private_key_id: str | None = None
    client_id: str | None = None
    token_uri: str = DEFAULT_TOKEN_URI

    @field_validator("private_key")
    @classmethod
    def unescape_newlines(cls, value: str) -> str:
        return value.replace("\\n", "\n")

    def to_service_account_info(self) -> dict[str, Any]:
        """Return the mapping accepted by ``credentials.Certificate``."""
        return self.model_dump(exclude_none=True)


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "<root>"
        if error["type"] == "missing":
            problems.append(f"missing field '{field}'")
        else:
            problems.append(f"invalid field '{field}': {error['msg']}")
    return "; ".join(problems)


def load_service_account_credential(
    raw: str | None, *, config_key: str = SERVICE_ACCOUNT_KEY_ENV
) -> ServiceAccountCredential:
    """Parse and validate a serialized service account credential.

    Args:
        raw: JSON text of the service account key
        config_key: Name of the configuration value, used in error messages

    Returns:
        ServiceAccountCredential with a newline-normalized private key

    Raises:
        ConfigMissingError: If ``raw`` is absent or blank
        ConfigMalformedError: If ``raw`` is not a JSON object or lacks
            required fields
    """
    if raw is None or not raw.strip():
        logger.error("%s is not set", config_key)
        raise ConfigMissingError(config_key)

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", config_key, e)
        raise ConfigMalformedError(config_key, "invalid JSON") from e

    if not isinstance(payload, dict):
        logger.error("%s must be a JSON object", config_key)
        raise ConfigMalformedError(config_key, "expected a JSON object")

    try:
        credential = ServiceAccountCredential.model_validate(payload)
    except ValidationError as e:
        reason = _describe_validation_error(e)
        logger.error("Invalid service account in %s: %s", config_key, reason)
        raise ConfigMalformedError(config_key, reason) from e

    logger.info(
        "Service account credential loaded for project %s (%s)",
        credential.project_id,
        credential.client_email,
    )
    return credential


def load_credential_from_settings(settings: Settings) -> ServiceAccountCredential:
    """Load the service account credential configured in ``settings``."""
    return load_service_account_credential(settings.service_account_key)
