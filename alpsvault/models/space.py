"""
Space model: explicit or tag-derived ("smart") grouping of artifacts.
"""

from pydantic import Field, field_validator

from alpsvault.models.base import VaultRecord, dedupe


class Space(VaultRecord):
    """
    A user-defined grouping.

    Explicit spaces own the artifacts whose ``space_id`` points at them. Smart
    spaces own nothing: their members are computed on every read as the
    artifacts sharing at least one tag with ``tags``. Membership is never
    stored, so there is nothing to invalidate when an artifact's tags change.
    """

    name: str = Field(..., description="Display name")
    color: str = Field(default="#808080", description="Folder colour (hex)")
    is_smart: bool = Field(default=False, description="Membership computed from tags")
    tags: list[str] = Field(default_factory=list, description="Tags for smart membership")

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, tags: list[str]) -> list[str]:
        return dedupe(tags)

    def matches_tags(self, tags: list[str]) -> bool:
        """True if ``tags`` intersects this space's tags."""
        return bool(set(self.tags).intersection(tags))
