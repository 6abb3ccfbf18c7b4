"""
Shared read-modify-write plumbing for the entity repositories.
"""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import ValidationError as PydanticValidationError

from alpsvault.core.store.base import RECORD_TYPES, EntityKind, VaultStore
from alpsvault.models.base import VaultRecord
from alpsvault.utils.exceptions import NotFoundError, ValidationError
from alpsvault.utils.id_generator import generate_vault_id
from alpsvault.utils.logger import get_logger

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=VaultRecord)

# Assigned once at creation, never changed by update()
IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


class BaseRepository(Generic[RecordT]):
    """
    Repository over one entity kind of a VaultStore.

    Every mutation writes the complete record; ``update`` loads the current
    record, shallow-merges the supplied fields and stamps ``updated_at``.
    """

    kind: EntityKind

    def __init__(self, store: VaultStore):
        self.store = store
        self.record_type: type[RecordT] = RECORD_TYPES[self.kind]

    # ═══════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════

    async def get(self, record_id: str) -> RecordT | None:
        """Retrieve a record by id, or None."""
        return await self.store.get(self.kind, record_id)

    async def require(self, record_id: str) -> RecordT:
        """Retrieve a record by id, raising NotFoundError when missing."""
        record = await self.store.get(self.kind, record_id)
        if record is None:
            raise NotFoundError(
                f"{self.record_type.__name__} not found: {record_id}",
                context={"id": record_id, "kind": self.kind.value},
            )
        return record

    async def list_all(self) -> list[RecordT]:
        """All records, most recently updated first."""
        return await self.store.list_all(self.kind)

    # ═══════════════════════════════════════════════════════════
    # WRITES
    # ═══════════════════════════════════════════════════════════

    async def delete(self, record_id: str) -> None:
        """Hard-delete one record."""
        await self.store.delete(self.kind, record_id)
        logger.info(f"Deleted {self.kind.value[:-1]} {record_id}")

    async def update(self, record_id: str, **changes: Any) -> RecordT:
        """
        Read-modify-write update.

        Args:
            record_id: ID of the record to update
            **changes: Fields to overwrite (snake_case names)

        Returns:
            The persisted record

        Raises:
            NotFoundError: If the record doesn't exist
            ValidationError: If changes touch immutable fields or are invalid
        """
        existing = await self.require(record_id)
        updated = self._merge(existing, changes)
        await self.store.put(self.kind, updated)
        logger.debug(
            f"Updated {self.kind.value[:-1]} {record_id}",
            extra={"fields": sorted(changes)},
        )
        return updated

    # ═══════════════════════════════════════════════════════════
    # HELPER METHODS
    # ═══════════════════════════════════════════════════════════

    def _new(self, record_id: str | None = None, **fields: Any) -> RecordT:
        """Build a fresh record with id and both timestamps assigned."""
        now = datetime.now()
        return self._validate(
            {
                **fields,
                "id": record_id or generate_vault_id(now),
                "created_at": now,
                "updated_at": now,
            }
        )

    def _merge(self, existing: RecordT, changes: dict[str, Any]) -> RecordT:
        """Shallow-merge ``changes`` over ``existing`` and stamp updated_at."""
        illegal = IMMUTABLE_FIELDS.intersection(changes)
        if illegal:
            raise ValidationError(
                f"Cannot change immutable fields: {', '.join(sorted(illegal))}",
                context={"id": existing.id, "fields": sorted(illegal)},
            )

        unknown = set(changes) - set(self.record_type.model_fields)
        if unknown:
            raise ValidationError(
                f"Unknown fields: {', '.join(sorted(unknown))}",
                context={"id": existing.id, "fields": sorted(unknown)},
            )

        data = existing.model_dump()
        data.update(changes)
        # Keep updated_at monotonic even if the clock moved backwards
        data["updated_at"] = max(datetime.now(), existing.updated_at)
        return self._validate(data)

    def _validate(self, data: dict[str, Any]) -> RecordT:
        try:
            return self.record_type.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid {self.record_type.__name__}: {e.error_count()} error(s)",
                context={"errors": e.errors(include_url=False)},
            ) from e
