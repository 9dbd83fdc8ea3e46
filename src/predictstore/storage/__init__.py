"""PredictStore - Storage Layer.

Firestore-backed persistence for prediction documents.
"""

from predictstore.storage.firestore_client import (
    NOT_FOUND_MESSAGE,
    PREDICTIONS_COLLECTION,
    PredictionStore,
)

__all__ = ["NOT_FOUND_MESSAGE", "PREDICTIONS_COLLECTION", "PredictionStore"]
