"""
Anchor repository with conflict-checked saves.

A title already owned by another anchor (trashed or not) yields an
AnchorSaveResult with status CONFLICT carrying that anchor; nothing is written.
"""

from alpsvault.core.repositories.base import BaseRepository
from alpsvault.core.store.base import EntityKind
from alpsvault.models.anchor import Anchor, AnchorSaveResult
from alpsvault.utils.exceptions import ValidationError
from alpsvault.utils.logger import get_logger

logger = get_logger(__name__)


class AnchorRepository(BaseRepository[Anchor]):
    """Durable storage of Anchors with global title uniqueness."""

    kind = EntityKind.ANCHORS

    async def get_by_title(self, title: str) -> Anchor | None:
        return await self.store.get_anchor_by_title(title)

    async def add(self, title: str, artifact_ids: list[str]) -> AnchorSaveResult:
        """
        Create an anchor unless its title is taken.

        Args:
            title: Unique title
            artifact_ids: Referenced artifact ids

        Returns:
            SUCCESS with the new anchor, or CONFLICT with the existing one
        """
        title = self._require_title(title)

        existing = await self.get_by_title(title)
        if existing is not None:
            logger.info(f"Anchor title conflict on add: '{title}' owned by {existing.id}")
            return AnchorSaveResult.conflict(existing)

        anchor = self._new(title=title, artifact_ids=artifact_ids)
        await self.store.put(self.kind, anchor)
        logger.info(f"Added anchor {anchor.id} '{title}' ({len(anchor.artifact_ids)} artifacts)")
        return AnchorSaveResult.success(anchor)

    async def save(
        self,
        anchor_id: str,
        title: str | None = None,
        artifact_ids: list[str] | None = None,
    ) -> AnchorSaveResult:
        """
        Update an anchor, checking the new title for collisions.

        Returns:
            SUCCESS with the updated anchor, or CONFLICT with the anchor that
            already owns ``title``

        Raises:
            NotFoundError: If the anchor doesn't exist
        """
        current = await self.require(anchor_id)
        changes: dict = {}

        if title is not None:
            title = self._require_title(title)
            if title != current.title:
                existing = await self.get_by_title(title)
                if existing is not None and existing.id != anchor_id:
                    logger.info(
                        f"Anchor title conflict on update: '{title}' owned by {existing.id}"
                    )
                    return AnchorSaveResult.conflict(existing)
            changes["title"] = title

        if artifact_ids is not None:
            changes["artifact_ids"] = artifact_ids

        return AnchorSaveResult.success(await self.update(anchor_id, **changes))

    async def toggle_trashed(self, anchor_id: str) -> Anchor:
        """Move an anchor to or from the trash. Trashed anchors keep their title."""
        current = await self.require(anchor_id)
        return await self.update(anchor_id, is_trashed=not current.is_trashed)

    async def empty_trash(self) -> int:
        """Hard-delete every trashed anchor and return how many were removed."""
        trashed = [a.id for a in await self.list_all() if a.is_trashed]
        async with self.store.transaction():
            for anchor_id in trashed:
                await self.store.delete(self.kind, anchor_id)
        logger.info(f"Emptied anchor trash ({len(trashed)} removed)")
        return len(trashed)

    def _require_title(self, title: str) -> str:
        title = (title or "").strip()
        if not title:
            raise ValidationError("Anchor title is required")
        return title
