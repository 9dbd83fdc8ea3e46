"""Storage port for prediction documents.

HTTP handlers and the CLI depend on this abstraction rather than on the
Firestore implementation, so a fake store can be substituted in tests.
"""

from abc import ABC, abstractmethod
from typing import Any

from predictstore.models.result import StoreResult


class PredictionStoragePort(ABC):
    """Contract for the prediction document store.

    Implementations must never raise for per-call failures: every method
    returns exactly one ``StoreResult``.
    """

    @abstractmethod
    async def store_data(self, document_id: str, data: dict[str, Any]) -> StoreResult:
        """Create or fully overwrite the document at ``document_id``."""

    @abstractmethod
    async def get_data(self, document_id: str) -> StoreResult:
        """Fetch the document at ``document_id``.

        A missing document yields a failed result with
        ``StoreErrorKind.NOT_FOUND``.
        """

    @abstractmethod
    async def delete_data(self, document_id: str) -> StoreResult:
        """Delete the document at ``document_id``; missing documents are not an error."""

    async def close(self) -> None:
        """Release underlying resources."""
