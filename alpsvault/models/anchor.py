"""
Anchor model and the conflict-as-value save result.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from alpsvault.models.base import VaultRecord, dedupe


class Anchor(VaultRecord):
    """
    A uniquely titled bundle of artifact references.

    Title uniqueness is global: trashed anchors still own their title.
    """

    title: str = Field(..., description="Globally unique title")
    artifact_ids: list[str] = Field(default_factory=list, description="Ordered artifact ids")
    is_trashed: bool = False

    @field_validator("artifact_ids")
    @classmethod
    def _dedupe_ids(cls, ids: list[str]) -> list[str]:
        return dedupe(ids)


class SaveStatus(str, Enum):
    """Outcome of a conflict-checked anchor save."""

    SUCCESS = "success"
    CONFLICT = "conflict"


class AnchorSaveResult(BaseModel):
    """
    Tagged result of an anchor add/update.

    SUCCESS carries the saved anchor; CONFLICT carries the existing anchor that
    already owns the requested title. A conflict is an expected outcome that the
    caller resolves (merge, replace or cancel), never an exception.
    """

    status: SaveStatus
    anchor: Anchor | None = None
    existing: Anchor | None = None

    @classmethod
    def success(cls, anchor: Anchor) -> "AnchorSaveResult":
        return cls(status=SaveStatus.SUCCESS, anchor=anchor)

    @classmethod
    def conflict(cls, existing: Anchor) -> "AnchorSaveResult":
        return cls(status=SaveStatus.CONFLICT, existing=existing)

    @property
    def is_conflict(self) -> bool:
        return self.status == SaveStatus.CONFLICT
