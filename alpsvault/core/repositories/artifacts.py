"""
Artifact repository: add/update/toggle/delete plus bulk detonate and
empty-trash operations.
"""

from typing import Any

from alpsvault.core.repositories.base import BaseRepository
from alpsvault.core.store.base import EntityKind
from alpsvault.models.artifact import ARTIFACT_FLAGS, Artifact, ArtifactType
from alpsvault.utils.exceptions import ValidationError
from alpsvault.utils.logger import get_logger

logger = get_logger(__name__)


class ArtifactRepository(BaseRepository[Artifact]):
    """Durable storage of Artifacts, most recently updated first."""

    kind = EntityKind.ARTIFACTS

    async def add(
        self,
        artifact_type: ArtifactType | str,
        artifact_id: str | None = None,
        **fields: Any,
    ) -> Artifact:
        """
        Create and persist a new artifact.

        Flags default to False and tags to an empty list.

        Args:
            artifact_type: Artifact kind
            artifact_id: Caller-supplied id (idempotent import only)
            **fields: title, content, tags, space_id, source, lead_image_url, meta

        Returns:
            The persisted artifact
        """
        artifact = self._new(artifact_id, type=artifact_type, **fields)
        await self.store.put(self.kind, artifact)
        logger.info(
            f"Added {artifact.type.value} artifact {artifact.id}",
            extra={"space_id": artifact.space_id, "tags": artifact.tags},
        )
        return artifact

    async def toggle_state(self, artifact_id: str, flag: str) -> Artifact:
        """
        Flip one boolean flag (is_pinned, is_favorited, is_trashed, is_hidden).

        Raises:
            ValidationError: If ``flag`` is not an artifact flag
            NotFoundError: If the artifact doesn't exist
        """
        if flag not in ARTIFACT_FLAGS:
            raise ValidationError(
                f"Unknown artifact flag: {flag}",
                context={"flag": flag, "allowed": list(ARTIFACT_FLAGS)},
            )
        existing = await self.require(artifact_id)
        return await self.update(artifact_id, **{flag: not getattr(existing, flag)})

    async def delete_all(self) -> None:
        """Detonate: remove every artifact. Anchors and spaces are untouched."""
        await self.store.clear(self.kind)
        logger.warning("Detonated artifact collection")

    async def empty_trash(self) -> int:
        """Hard-delete every trashed artifact and return how many were removed."""
        trashed = [a.id for a in await self.list_all() if a.is_trashed]
        async with self.store.transaction():
            for artifact_id in trashed:
                await self.store.delete(self.kind, artifact_id)
        logger.info(f"Emptied artifact trash ({len(trashed)} removed)")
        return len(trashed)

    async def pending_extraction(self) -> list[Artifact]:
        """Artifacts flagged for deferred article extraction."""
        return [a for a in await self.list_all() if a.needs_article_extraction]
