"""Port interfaces."""

from predictstore.ports.storage import PredictionStoragePort

__all__ = ["PredictionStoragePort"]
