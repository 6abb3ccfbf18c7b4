"""
Anchor save session with interactive title-conflict resolution.

States::

    EDITING -> SAVING -> SUCCESS
                      -> CONFLICT -> MERGED | REPLACED
                                  -> EDITING (cancel)

The merge/replace target is the anchor being edited when the collision came
from an edit, otherwise the pre-existing anchor that owns the title. Only the
target's artifact ids change.
"""

import re
from enum import Enum

from alpsvault.core.repositories.anchors import AnchorRepository
from alpsvault.core.repositories.artifacts import ArtifactRepository
from alpsvault.models.anchor import Anchor, AnchorSaveResult
from alpsvault.models.base import dedupe
from alpsvault.services.notifications import NotificationSink, notify
from alpsvault.utils.exceptions import ValidationError
from alpsvault.utils.logger import get_logger

logger = get_logger(__name__)

_ID_SEPARATORS = re.compile(r"[\s,]+")


class MergeState(str, Enum):
    EDITING = "editing"
    SAVING = "saving"
    SUCCESS = "success"
    CONFLICT = "conflict"
    MERGED = "merged"
    REPLACED = "replaced"


class ConflictResolution(str, Enum):
    MERGE = "merge"
    REPLACE = "replace"
    CANCEL = "cancel"


def parse_artifact_ids(value: str | list[str]) -> list[str]:
    """Split a comma/whitespace separated id list, dropping blanks and repeats."""
    parts = _ID_SEPARATORS.split(value) if isinstance(value, str) else value
    return dedupe([p.strip() for p in parts if p and p.strip()])


class AnchorMergeSession:
    """
    One anchor editor session: create a new anchor or edit ``editing``.

    A title collision is not an error: ``save`` returns the CONFLICT result and
    the session waits for ``resolve``.
    """

    def __init__(
        self,
        anchors: AnchorRepository,
        artifacts: ArtifactRepository,
        editing: Anchor | None = None,
        notifications: NotificationSink | None = None,
    ):
        self.anchors = anchors
        self.artifacts = artifacts
        self.editing = editing
        self.notifications = notifications

        self.state = MergeState.EDITING
        self.anchor: Anchor | None = None
        self.conflict: Anchor | None = None
        self._pending_title = ""
        self._pending_ids: list[str] = []

    async def save(self, title: str, artifact_ids: str | list[str]) -> AnchorSaveResult:
        """
        Validate and attempt to save.

        Raises:
            ValidationError: If title or ids are missing, any id is unknown
                (``context["missing_ids"]``), or the session isn't editing
        """
        self._expect(MergeState.EDITING)

        title = (title or "").strip()
        ids = parse_artifact_ids(artifact_ids or [])
        if not title or not ids:
            raise ValidationError("Please provide both a title and at least one artifact ID.")

        missing = [i for i in ids if await self.artifacts.get(i) is None]
        if missing:
            raise ValidationError(
                f"The following IDs do not exist: {', '.join(missing)}",
                context={"missing_ids": missing},
            )

        self.state = MergeState.SAVING
        try:
            if self.editing is not None:
                result = await self.anchors.save(self.editing.id, title=title, artifact_ids=ids)
            else:
                result = await self.anchors.add(title, ids)
        except Exception:
            self.state = MergeState.EDITING
            raise

        if result.is_conflict:
            self.state = MergeState.CONFLICT
            self.conflict = result.existing
            self._pending_title = title
            self._pending_ids = ids
            return result

        self.state = MergeState.SUCCESS
        self.anchor = result.anchor
        notify(self.notifications, "Anchor Updated" if self.editing else "Anchor Saved")
        return result

    async def resolve(self, resolution: ConflictResolution | str) -> Anchor | None:
        """
        Settle a pending conflict.

        Returns:
            The updated target anchor, or None when cancelled

        Raises:
            ValidationError: If there is no pending conflict
        """
        self._expect(MergeState.CONFLICT)
        resolution = ConflictResolution(resolution)

        if resolution == ConflictResolution.CANCEL:
            logger.debug(f"Anchor conflict on '{self._pending_title}' cancelled")
            self.state = MergeState.EDITING
            self.conflict = None
            return None

        target_id = self.editing.id if self.editing is not None else self.conflict.id
        target = await self.anchors.require(target_id)

        if resolution == ConflictResolution.MERGE:
            ids = dedupe(target.artifact_ids + self._pending_ids)
            outcome = MergeState.MERGED
            notice = ("Anchor Merged", f'Added new IDs to "{self._pending_title}".')
        else:
            ids = list(self._pending_ids)
            outcome = MergeState.REPLACED
            notice = ("Anchor Updated", f'Replaced IDs for "{self._pending_title}".')

        self.anchor = await self.anchors.update(target_id, artifact_ids=ids)
        self.state = outcome
        logger.info(f"Anchor {target_id} {self.state.value} with {len(ids)} artifact ids")
        notify(self.notifications, *notice)
        return self.anchor

    def _expect(self, state: MergeState) -> None:
        if self.state != state:
            raise ValidationError(
                f"Anchor session is {self.state.value}, expected {state.value}",
                context={"state": self.state.value},
            )
