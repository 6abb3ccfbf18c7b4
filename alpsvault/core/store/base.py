"""
Base interface for the vault's persistent key-value store.

One collection per entity kind, keyed by ``id``, with an ``updated_at``
ordering index on every kind, a ``space_id`` lookup index on artifacts and a
unique ``title`` index on anchors.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from enum import Enum

from alpsvault.models.anchor import Anchor
from alpsvault.models.artifact import Artifact
from alpsvault.models.space import Space


class EntityKind(str, Enum):
    """Entity collections held by the store."""

    ARTIFACTS = "artifacts"
    ANCHORS = "anchors"
    SPACES = "spaces"


Record = Artifact | Anchor | Space

RECORD_TYPES: dict[EntityKind, type[Record]] = {
    EntityKind.ARTIFACTS: Artifact,
    EntityKind.ANCHORS: Anchor,
    EntityKind.SPACES: Space,
}


class VaultStore(ABC):
    """Abstract base class for vault storage implementations."""

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the store (create tables and indexes)."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection."""
        pass

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """
        Group several writes into one all-or-nothing unit.

        Usage:
            async with store.transaction():
                await store.put(...)
                await store.delete(...)

        Readers never observe a partially applied transaction.
        """
        pass

    # ═══════════════════════════════════════════════════════════
    # RECORD OPERATIONS
    # ═══════════════════════════════════════════════════════════

    @abstractmethod
    async def put(self, kind: EntityKind, record: Record) -> None:
        """
        Insert or fully replace a record keyed by its id.

        Args:
            kind: Entity collection
            record: Complete record to persist

        Raises:
            StoreError: If the backend rejects the write (including a
                duplicate anchor title)
        """
        pass

    @abstractmethod
    async def get(self, kind: EntityKind, record_id: str) -> Record | None:
        """
        Retrieve a record by id.

        Returns:
            The record, or None if not found
        """
        pass

    @abstractmethod
    async def delete(self, kind: EntityKind, record_id: str) -> None:
        """Delete a record; deleting a missing id is a no-op."""
        pass

    @abstractmethod
    async def clear(self, kind: EntityKind) -> None:
        """Remove every record of one kind."""
        pass

    @abstractmethod
    async def list_all(self, kind: EntityKind) -> list[Record]:
        """All records of one kind, most recently updated first."""
        pass

    # ═══════════════════════════════════════════════════════════
    # SECONDARY INDEXES
    # ═══════════════════════════════════════════════════════════

    @abstractmethod
    async def artifact_ids_for_space(self, space_id: str) -> list[str]:
        """IDs of artifacts explicitly assigned to ``space_id``."""
        pass

    @abstractmethod
    async def get_anchor_by_title(self, title: str) -> Anchor | None:
        """Anchor owning exactly ``title`` (trashed anchors included)."""
        pass
