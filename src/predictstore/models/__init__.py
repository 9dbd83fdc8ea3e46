"""PredictStore data models."""

from predictstore.models.result import StoreErrorKind, StoreResult

__all__ = ["StoreErrorKind", "StoreResult"]
