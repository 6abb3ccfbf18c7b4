"""
Space repository.

Deleting a space clears ``space_id`` on every artifact pointing at it before the
space record goes away, all inside one store transaction.
"""

from datetime import datetime

from alpsvault.core.repositories.base import BaseRepository
from alpsvault.core.store.base import EntityKind
from alpsvault.models.artifact import Artifact
from alpsvault.models.space import Space
from alpsvault.utils.exceptions import ValidationError
from alpsvault.utils.logger import get_logger

logger = get_logger(__name__)


class SpaceRepository(BaseRepository[Space]):
    """Durable storage of Spaces and their explicit artifact assignments."""

    kind = EntityKind.SPACES

    async def add(
        self,
        name: str,
        color: str = "#808080",
        is_smart: bool = False,
        tags: list[str] | None = None,
        space_id: str | None = None,
    ) -> Space:
        """Create and persist a new space."""
        if not (name or "").strip():
            raise ValidationError("Space name is required")

        space = self._new(
            space_id, name=name.strip(), color=color, is_smart=is_smart, tags=tags or []
        )
        await self.store.put(self.kind, space)
        logger.info(f"Added {'smart ' if is_smart else ''}space {space.id} '{space.name}'")
        return space

    async def delete(self, space_id: str) -> None:
        """
        Delete a space and detach every artifact assigned to it.

        All matching artifact ids are gathered first, then every artifact is
        cleared, then the space is removed, as one transaction.
        """
        async with self.store.transaction():
            member_ids = await self.store.artifact_ids_for_space(space_id)
            now = datetime.now()

            for artifact_id in member_ids:
                artifact = await self.store.get(EntityKind.ARTIFACTS, artifact_id)
                if artifact is None:
                    continue
                detached = artifact.model_copy(
                    update={"space_id": None, "updated_at": max(now, artifact.updated_at)}
                )
                await self.store.put(EntityKind.ARTIFACTS, detached)

            await self.store.delete(self.kind, space_id)

        logger.info(f"Deleted space {space_id} ({len(member_ids)} artifacts detached)")

    async def add_artifacts(self, space_id: str, artifact_ids: list[str]) -> list[Artifact]:
        """
        Assign several artifacts to a space in one transaction.

        Raises:
            NotFoundError: If the space doesn't exist
            ValidationError: If any artifact id is unknown (nothing is saved;
                ``context["missing_ids"]`` lists them)
        """
        await self.require(space_id)

        artifacts: list[Artifact] = []
        missing: list[str] = []
        for artifact_id in dict.fromkeys(artifact_ids):
            artifact = await self.store.get(EntityKind.ARTIFACTS, artifact_id)
            if artifact is None:
                missing.append(artifact_id)
            else:
                artifacts.append(artifact)

        if missing:
            raise ValidationError(
                f"Unknown artifact ids: {', '.join(missing)}",
                context={"missing_ids": missing},
            )

        now = datetime.now()
        assigned = [
            a.model_copy(update={"space_id": space_id, "updated_at": max(now, a.updated_at)})
            for a in artifacts
        ]
        async with self.store.transaction():
            for artifact in assigned:
                await self.store.put(EntityKind.ARTIFACTS, artifact)

        logger.info(f"Assigned {len(assigned)} artifacts to space {space_id}")
        return assigned
