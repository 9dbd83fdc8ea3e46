"""Uniform outcome envelope returned by every store operation."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class StoreErrorKind(StrEnum):
    """Why a store operation did not succeed."""

    NOT_FOUND = "not_found"
    REMOTE_FAILURE = "remote_failure"
    INVALID_ID = "invalid_id"


class StoreResult(BaseModel):
    """Result of a store, get or delete call."""

    success: bool = Field(description="Whether the operation succeeded")
    data: dict[str, Any] | None = Field(
        default=None, description="Document contents, set only on a successful read"
    )
    error: str | None = Field(default=None, description="Human-readable failure")
    error_kind: StoreErrorKind | None = Field(
        default=None, description="Machine-readable failure category"
    )

    @classmethod
    def ok(cls, data: dict[str, Any] | None = None) -> "StoreResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, kind: StoreErrorKind, error: str) -> "StoreResult":
        return cls(success=False, error=error, error_kind=kind)

    @property
    def is_not_found(self) -> bool:
        return self.error_kind is StoreErrorKind.NOT_FOUND

    def to_dict(self) -> dict[str, Any]:
        """Wire shape ``{success, data?, error?}``."""
        return self.model_dump(include={"success", "data", "error"}, exclude_none=True)
