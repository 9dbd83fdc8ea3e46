"""Startup wiring for the prediction store.

The store is built explicitly by whichever entry point is starting up (the
HTTP lifespan or a CLI command) and then passed along to its consumers.
"""

import logging

from predictstore.core.config import Settings, get_settings
from predictstore.services.gcp_credentials import load_credential_from_settings
from predictstore.storage.firestore_client import PredictionStore

logger = logging.getLogger(__name__)


def create_prediction_store(settings: Settings | None = None) -> PredictionStore:
    """Load credentials and construct the process-wide prediction store.

    Raises:
        ConfigMissingError: If the service account key is not configured
        ConfigMalformedError: If the service account key cannot be parsed
        StoreConnectionError: If the Firestore client cannot be created
    """
    settings = settings or get_settings()
    credential = load_credential_from_settings(settings)
    store = PredictionStore.from_credential(
        credential, database_name=settings.firestore_database
    )
    logger.info("Prediction store initialized")
    return store
