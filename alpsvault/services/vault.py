"""
Vault facade: wires the store, repositories, classifier, anchor sessions,
query engine and offline queue behind one object for the UI layer.
"""

from datetime import datetime
from typing import Any

from alpsvault.config import Config
from alpsvault.core.enrichment.base import ArticleExtractor, ReadmeFetcher, VideoMetadataClient
from alpsvault.core.factory import EnrichmentFactory, VaultStoreFactory
from alpsvault.core.repositories import (
    AnchorRepository,
    ArtifactRepository,
    SnapshotRepository,
    SpaceRepository,
)
from alpsvault.core.store.base import VaultStore
from alpsvault.core.temporal.date_parser import DateRange
from alpsvault.models.anchor import Anchor
from alpsvault.models.artifact import Artifact, ArtifactType
from alpsvault.models.capture import CaptureContext, FileCapture, SharePayload
from alpsvault.models.space import Space
from alpsvault.services import query
from alpsvault.services.anchor_merge import AnchorMergeSession
from alpsvault.services.classifier import IngestionClassifier
from alpsvault.services.notifications import (
    LogNotificationSink,
    NotificationSink,
    notify,
    notify_error,
)
from alpsvault.services.offline_queue import OfflineEnrichmentQueue
from alpsvault.utils.exceptions import StoreError, ValidationError
from alpsvault.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

SHARED_NOTE_TITLE = "Shared Note"

# (message when the flag turns on, message when it turns off)
FLAG_MESSAGES = {
    "is_pinned": ("Pinned to top", "Unpinned"),
    "is_favorited": ("Added to favorites", "Removed from favorites"),
    "is_trashed": ("Moved to trash", "Restored from trash"),
    "is_hidden": ("Artifact hidden", "Artifact unhidden"),
}


class Vault:
    """
    Local-first knowledge vault.

    Features:
    - Capture of text, links and files with typed classification and enrichment
    - Conflict-checked anchors with merge/replace resolution
    - Explicit and smart (tag-derived) spaces
    - Keyword and natural-language date search
    - Deferred extraction of links saved offline
    - JSON snapshot export/import
    """

    def __init__(
        self,
        store: VaultStore,
        article_extractor: ArticleExtractor,
        video_client: VideoMetadataClient,
        readme_fetcher: ReadmeFetcher,
        config: Config | None = None,
        notifications: NotificationSink | None = None,
    ):
        """
        Initialize the vault.

        Args:
            store: Persistent store (initialized by ``initialize``)
            article_extractor: Article extraction collaborator
            video_client: Video metadata collaborator
            readme_fetcher: Repository readme collaborator
            config: Configuration (defaults when omitted)
            notifications: User notification sink
        """
        self.config = config or Config()
        self.store = store
        self.notifications = notifications
        self.article_extractor = article_extractor
        self.video_client = video_client
        self.readme_fetcher = readme_fetcher

        self.artifacts = ArtifactRepository(store)
        self.anchors = AnchorRepository(store)
        self.spaces = SpaceRepository(store)
        self.snapshots = SnapshotRepository(store)

        proxy_host = self.config.enrichment.medium_proxy_host
        self.classifier = IngestionClassifier(
            artifacts=self.artifacts,
            article_extractor=article_extractor,
            video_client=video_client,
            readme_fetcher=readme_fetcher,
            notifications=notifications,
            medium_proxy_host=proxy_host,
        )
        self.offline_queue = OfflineEnrichmentQueue(
            artifacts=self.artifacts,
            article_extractor=article_extractor,
            notifications=notifications,
            medium_proxy_host=proxy_host,
        )

    @classmethod
    def from_config(
        cls, config: Config | None = None, notifications: NotificationSink | None = None
    ) -> "Vault":
        """Build a vault with the configured store, HTTP collaborators and logging."""
        config = config or Config()
        setup_logging(config.logging)
        enrichment = config.enrichment
        return cls(
            store=VaultStoreFactory.create(config.storage),
            article_extractor=EnrichmentFactory.create_article_extractor(enrichment),
            video_client=EnrichmentFactory.create_video_client(enrichment),
            readme_fetcher=EnrichmentFactory.create_readme_fetcher(enrichment),
            config=config,
            notifications=notifications or LogNotificationSink(),
        )

    async def initialize(self, process_offline_queue: bool = True, online: bool = True) -> None:
        """
        Prepare the store and, shortly after, retry deferred links.

        Args:
            process_offline_queue: Schedule the offline queue after load
            online: Current connectivity
        """
        logger.info("Initializing vault")
        await self.store.initialize()
        if process_offline_queue:
            self.offline_queue.schedule(self.config.enrichment.offline_retry_delay, online=online)
        logger.info("Vault ready")

    async def close(self) -> None:
        """Cancel background work and release the store and HTTP clients."""
        await self.offline_queue.cancel()
        await self.article_extractor.close()
        await self.video_client.close()
        await self.readme_fetcher.close()
        await self.store.close()
        logger.info("Vault closed")

    async def __aenter__(self) -> "Vault":
        await self.initialize(process_offline_queue=False)
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # ═══════════════════════════════════════════════════════════
    # CAPTURE
    # ═══════════════════════════════════════════════════════════

    async def capture(
        self, raw: str | FileCapture, context: CaptureContext | None = None
    ) -> Artifact:
        """Classify, enrich and store a paste, drop or edit."""
        return await self.classifier.classify(raw, context)

    async def ingest_share(self, payload: SharePayload) -> int:
        """
        Capture content handed over by the OS share sheet.

        Files take precedence over a URL, which takes precedence over text.

        Returns:
            Number of artifacts added
        """
        added = 0
        if payload.files:
            for file in payload.files:
                await self.classifier.classify(file)
                added += 1
        elif payload.url:
            await self.classifier.classify(payload.url, CaptureContext(title=payload.title or ""))
            added = 1
        elif payload.text and payload.text.strip():
            await self.artifacts.add(
                ArtifactType.NOTE,
                title=payload.title or SHARED_NOTE_TITLE,
                content=payload.text,
            )
            added = 1

        notify(
            self.notifications,
            "Content Imported",
            f"{added} item(s) have been added to your vault.",
        )
        return added

    async def process_offline_queue(self, online: bool = True) -> list[Artifact]:
        return await self.offline_queue.process_pending(online=online)

    # ═══════════════════════════════════════════════════════════
    # ARTIFACTS
    # ═══════════════════════════════════════════════════════════

    async def toggle_artifact_state(self, artifact_id: str, flag: str) -> Artifact:
        """Flip one artifact flag and tell the user what changed."""
        artifact = await self.artifacts.toggle_state(artifact_id, flag)
        turned_on, turned_off = FLAG_MESSAGES[flag]
        notify(
            self.notifications,
            "Artifact Updated",
            turned_on if getattr(artifact, flag) else turned_off,
        )
        return artifact

    async def delete_artifact(self, artifact_id: str) -> None:
        await self.artifacts.delete(artifact_id)
        notify_error(
            self.notifications, "Artifact Deleted", "Artifact has been permanently deleted."
        )

    async def detonate(self) -> None:
        """Permanently delete every artifact; anchors and spaces stay."""
        await self.artifacts.delete_all()
        notify_error(
            self.notifications,
            "Detonation Complete",
            "All artifacts have been permanently deleted.",
        )

    async def empty_artifact_trash(self) -> int:
        return await self.artifacts.empty_trash()

    # ═══════════════════════════════════════════════════════════
    # ANCHORS
    # ═══════════════════════════════════════════════════════════

    def anchor_session(self, editing: Anchor | None = None) -> AnchorMergeSession:
        """Start an anchor editor session (new anchor, or edit ``editing``)."""
        return AnchorMergeSession(
            anchors=self.anchors,
            artifacts=self.artifacts,
            editing=editing,
            notifications=self.notifications,
        )

    async def toggle_anchor_trashed(self, anchor_id: str) -> Anchor:
        anchor = await self.anchors.toggle_trashed(anchor_id)
        notify(
            self.notifications,
            "Anchor Updated",
            "Moved anchor to trash" if anchor.is_trashed else "Restored anchor from trash",
        )
        return anchor

    async def empty_anchor_trash(self) -> int:
        return await self.anchors.empty_trash()

    # ═══════════════════════════════════════════════════════════
    # SPACES
    # ═══════════════════════════════════════════════════════════

    async def delete_space(self, space_id: str) -> None:
        await self.spaces.delete(space_id)
        notify_error(
            self.notifications,
            "Space Deleted",
            "Space removed. Its artifacts are now unassigned.",
        )

    async def add_artifacts_to_space(
        self, artifact_ids: list[str], space_id: str
    ) -> list[Artifact]:
        """Assign artifacts to a space; unknown ids reject the whole request."""
        assigned = await self.spaces.add_artifacts(space_id, artifact_ids)
        notify(
            self.notifications, "Artifacts Added", f"{len(assigned)} artifact(s) added to space."
        )
        return assigned

    async def space_members(self, space_id: str) -> list[Artifact]:
        space = await self.spaces.require(space_id)
        return query.space_members(space, await self.artifacts.list_all())

    # ═══════════════════════════════════════════════════════════
    # QUERIES
    # ═══════════════════════════════════════════════════════════

    def time_filter(self, text: str, now: datetime | None = None) -> DateRange | None:
        """Date range for a submitted search phrase, or None if not a date."""
        return query.resolve_time_filter(text, now=now, week_start=self.config.query.week_start)

    async def search_artifacts(
        self,
        search_text: str = "",
        space_id: str | None = None,
        time_range: DateRange | None = None,
        view: query.VaultView = query.VaultView.ARTIFACTS,
    ) -> list[Artifact]:
        active_space: Space | None = None
        if space_id is not None:
            active_space = await self.spaces.require(space_id)
        return query.query_artifacts(
            await self.artifacts.list_all(),
            active_space=active_space,
            search_text=search_text,
            time_range=time_range,
            view=view,
        )

    async def search_anchors(self, search_text: str = "") -> list[Anchor]:
        return query.query_anchors(await self.anchors.list_all(), search_text)

    async def search_spaces(self, search_text: str = "") -> list[Space]:
        return query.query_spaces(await self.spaces.list_all(), search_text)

    # ═══════════════════════════════════════════════════════════
    # SNAPSHOTS
    # ═══════════════════════════════════════════════════════════

    async def export_snapshot(self) -> dict[str, Any]:
        """Whole vault in backup (camelCase JSON) form."""
        snapshot = await self.snapshots.export()
        return snapshot.to_wire()

    async def import_snapshot(self, data: dict[str, Any]) -> dict[str, int]:
        """
        Replace each collection included in ``data``.

        Raises:
            ValidationError: If ``data`` is not a valid snapshot
            StoreError: If the store rejects the import
        """
        try:
            counts = await self.snapshots.import_snapshot(data)
        except (ValidationError, StoreError) as e:
            notify_error(self.notifications, "Import Failed", e.message)
            raise

        summary = ", ".join(f"{count} {name}" for name, count in counts.items())
        notify(self.notifications, "Import Successful", f"{summary} imported.")
        return counts
