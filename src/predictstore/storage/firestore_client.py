"""PredictStore - Firestore Client.

Async access layer for the ``predictions`` collection in Google Cloud
Firestore. The store is built once at startup from a service account
credential and shared by every caller afterwards.

Every operation is a single round trip with no retries, transactions or
batching. Failures are logged and returned as ``StoreResult`` values; they
never propagate past the operation boundary.
"""

import logging
from typing import Any

from firebase_admin import credentials  # type: ignore[import-untyped]
from google.cloud import firestore_v1 as firestore  # type: ignore[import-untyped]

from predictstore.core.exceptions import StoreConnectionError
from predictstore.models.result import StoreErrorKind, StoreResult
from predictstore.ports.storage import PredictionStoragePort
from predictstore.services.gcp_credentials import ServiceAccountCredential

logger = logging.getLogger(__name__)

PREDICTIONS_COLLECTION = "predictions"
DEFAULT_DATABASE = "(default)"

NOT_FOUND_MESSAGE = "Dokumen tidak ditemukan"
STORE_FAILED_MESSAGE = "Gagal menyimpan data"
READ_FAILED_MESSAGE = "Gagal membaca data"
DELETE_FAILED_MESSAGE = "Gagal menghapus data"


def _invalid_id_reason(document_id: str) -> str | None:
    if not isinstance(document_id, str) or not document_id:
        return "Document ID must be a non-empty string"
    if "/" in document_id:
        return "Document ID must not contain '/'"
    return None


class PredictionStore(PredictionStoragePort):
    """Firestore-backed store for prediction documents."""

    def __init__(
        self,
        credential: ServiceAccountCredential | None = None,
        *,
        client: firestore.AsyncClient | None = None,
        database_name: str = DEFAULT_DATABASE,
    ) -> None:
        """Initialize the store.

        Args:
            credential: Service account used to authenticate
            client: Pre-built async Firestore client; skips credential handling
            database_name: Firestore database name

        Raises:
            StoreConnectionError: If the Firestore client cannot be created
        """
        if client is None:
            if credential is None:
                msg = "Either a credential or a client is required"
                raise StoreConnectionError(msg)
            client = self._create_client(credential, database_name)

        self._client = client
        self._collection = client.collection(PREDICTIONS_COLLECTION)
        self.project_id = credential.project_id if credential else None
        self.database_name = database_name

        logger.info(
            "Prediction store bound to collection '%s' (project: %s)",
            PREDICTIONS_COLLECTION,
            self.project_id or "injected client",
        )

    @classmethod
    def from_credential(
        cls,
        credential: ServiceAccountCredential,
        database_name: str = DEFAULT_DATABASE,
    ) -> "PredictionStore":
        return cls(credential, database_name=database_name)

    @staticmethod
    def _create_client(
        credential: ServiceAccountCredential, database_name: str
    ) -> firestore.AsyncClient:
        """Build the async Firestore client; no network round trip happens here."""
        try:
            certificate = credentials.Certificate(credential.to_service_account_info())
            client = firestore.AsyncClient(
                project=credential.project_id,
                credentials=certificate.get_credential(),
                database=database_name,
            )
        except Exception as e:
            logger.exception("Failed to create Firestore client")
            msg = f"Firestore connection failed: {e}"
            raise StoreConnectionError(msg) from e

        logger.info("Async Firestore client created for project %s", credential.project_id)
        return client

    @property
    def client(self) -> firestore.AsyncClient:
        return self._client

    @property
    def collection(self) -> firestore.AsyncCollectionReference:
        """Direct reference to the ``predictions`` collection."""
        return self._collection

    # Document Operations

    async def store_data(self, document_id: str, data: dict[str, Any]) -> StoreResult:
        """Create or fully overwrite a prediction document.

        Args:
            document_id: Document ID in the predictions collection
            data: Document payload, stored as-is

        Returns:
            StoreResult: ``success`` only, or the failure reason
        """
        reason = _invalid_id_reason(document_id)
        if reason:
            logger.error("Refusing to store document with invalid ID %r", document_id)
            return StoreResult.fail(StoreErrorKind.INVALID_ID, reason)

        try:
            await self._collection.document(document_id).set(data)
        except Exception as e:
            logger.error(
                "Failed to store document %s/%s: %s", PREDICTIONS_COLLECTION, document_id, e
            )
            return StoreResult.fail(
                StoreErrorKind.REMOTE_FAILURE, str(e) or STORE_FAILED_MESSAGE
            )

        logger.info(
            "Document stored: %s/%s %s", PREDICTIONS_COLLECTION, document_id, data
        )
        return StoreResult.ok()

    async def get_data(self, document_id: str) -> StoreResult:
        """Retrieve a prediction document by ID.

        Returns:
            StoreResult with ``data`` set, or a ``NOT_FOUND`` failure when the
            document does not exist
        """
        reason = _invalid_id_reason(document_id)
        if reason:
            logger.error("Refusing to read document with invalid ID %r", document_id)
            return StoreResult.fail(StoreErrorKind.INVALID_ID, reason)

        try:
            snapshot = await self._collection.document(document_id).get()
        except Exception as e:
            logger.error(
                "Failed to read document %s/%s: %s", PREDICTIONS_COLLECTION, document_id, e
            )
            return StoreResult.fail(
                StoreErrorKind.REMOTE_FAILURE, str(e) or READ_FAILED_MESSAGE
            )

        if not snapshot.exists:
            logger.warning("Document not found: %s/%s", PREDICTIONS_COLLECTION, document_id)
            return StoreResult.fail(StoreErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

        data = snapshot.to_dict() or {}
        logger.info(
            "Document retrieved: %s/%s %s", PREDICTIONS_COLLECTION, document_id, data
        )
        return StoreResult.ok(data)

    async def delete_data(self, document_id: str) -> StoreResult:
        """Delete a prediction document.

        Firestore deletes succeed whether or not the document exists, so no
        existence check is made.
        """
        reason = _invalid_id_reason(document_id)
        if reason:
            logger.error("Refusing to delete document with invalid ID %r", document_id)
            return StoreResult.fail(StoreErrorKind.INVALID_ID, reason)

        try:
            await self._collection.document(document_id).delete()
        except Exception as e:
            logger.error(
                "Failed to delete document %s/%s: %s", PREDICTIONS_COLLECTION, document_id, e
            )
            return StoreResult.fail(
                StoreErrorKind.REMOTE_FAILURE, str(e) or DELETE_FAILED_MESSAGE
            )

        logger.info("Document deleted: %s/%s", PREDICTIONS_COLLECTION, document_id)
        return StoreResult.ok()

    async def close(self) -> None:
        """Close the underlying Firestore client."""
        self._client.close()
        logger.info("Firestore client closed")
