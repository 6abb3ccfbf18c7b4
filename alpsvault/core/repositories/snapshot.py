"""
Whole-vault export and per-kind wholesale import.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from alpsvault.core.store.base import EntityKind, VaultStore
from alpsvault.models.snapshot import Snapshot
from alpsvault.utils.exceptions import ValidationError
from alpsvault.utils.logger import get_logger

logger = get_logger(__name__)


class SnapshotRepository:
    """Export the three collections, or replace any of them from a snapshot."""

    def __init__(self, store: VaultStore):
        self.store = store

    async def export(self) -> Snapshot:
        """Snapshot of artifacts, spaces and anchors."""
        snapshot = Snapshot(
            artifacts=await self.store.list_all(EntityKind.ARTIFACTS),
            spaces=await self.store.list_all(EntityKind.SPACES),
            anchors=await self.store.list_all(EntityKind.ANCHORS),
        )
        logger.info("Exported vault snapshot", extra=snapshot.counts())
        return snapshot

    async def import_snapshot(self, snapshot: Snapshot | dict[str, Any]) -> dict[str, int]:
        """
        Replace every collection present in ``snapshot``.

        The whole snapshot is validated before anything is written. Each
        included kind is cleared and refilled in its own transaction; kinds
        absent from the snapshot are left untouched.

        Returns:
            Number of records written per imported kind

        Raises:
            ValidationError: If the snapshot is malformed or repeats an id or
                anchor title
            StoreError: If the store rejects a write
        """
        if not isinstance(snapshot, Snapshot):
            try:
                snapshot = Snapshot.model_validate(snapshot)
            except PydanticValidationError as e:
                errors = e.errors(include_url=False)
                raise ValidationError(
                    f"Invalid snapshot: {len(errors)} error(s), first: {errors[0]['msg']}",
                    context={"errors": errors},
                ) from e

        collections = (
            (EntityKind.ARTIFACTS, snapshot.artifacts),
            (EntityKind.SPACES, snapshot.spaces),
            (EntityKind.ANCHORS, snapshot.anchors),
        )
        for kind, records in collections:
            if records is None:
                continue
            async with self.store.transaction():
                await self.store.clear(kind)
                for record in records:
                    await self.store.put(kind, record)
            logger.info(f"Imported {len(records)} {kind.value}")

        return snapshot.counts()
