"""
Deferred article extraction for links captured while offline.

Links saved offline are plain notes flagged ``needs_article_extraction``. Once
connectivity returns, each flagged artifact gets one extraction attempt: on
success it becomes an article, on failure it stays a note. Either way the
flag is cleared so nothing is retried forever.
"""

import asyncio
from contextlib import suppress

from alpsvault.core.enrichment.article import rewrite_for_extraction
from alpsvault.core.enrichment.base import ArticleExtractor
from alpsvault.core.repositories.artifacts import ArtifactRepository
from alpsvault.models.artifact import Artifact, ArtifactMeta, ArtifactType
from alpsvault.services.notifications import NotificationSink, notify, notify_error
from alpsvault.utils.exceptions import VaultError
from alpsvault.utils.logger import get_logger

logger = get_logger(__name__)


class OfflineEnrichmentQueue:
    """Sequential retry of deferred article extraction."""

    def __init__(
        self,
        artifacts: ArtifactRepository,
        article_extractor: ArticleExtractor,
        notifications: NotificationSink | None = None,
        medium_proxy_host: str | None = "freedium.cfd",
    ):
        self.artifacts = artifacts
        self.article_extractor = article_extractor
        self.notifications = notifications
        self.medium_proxy_host = medium_proxy_host
        self._task: asyncio.Task | None = None

    async def process_pending(self, online: bool = True) -> list[Artifact]:
        """
        Attempt extraction for every flagged artifact.

        Args:
            online: Current connectivity; nothing happens while offline

        Returns:
            The artifacts as written back (articles and cleared notes)

        Raises:
            StoreError: If the store fails; extraction failures never raise
        """
        if not online:
            return []

        pending = await self.artifacts.pending_extraction()
        if not pending:
            return []

        logger.info(f"Processing {len(pending)} deferred link(s)")
        notify(self.notifications, "Back online!", f"Processing {len(pending)} saved link(s)...")

        processed = []
        for artifact in pending:
            processed.append(await self._process_one(artifact))
        return processed

    async def _process_one(self, artifact: Artifact) -> Artifact:
        original_url = artifact.source or artifact.content
        cleared_meta = self._cleared_meta(artifact)

        try:
            article = await self.article_extractor.extract(
                rewrite_for_extraction(original_url, self.medium_proxy_host)
            )
        except Exception as e:
            reason = e.message if isinstance(e, VaultError) else str(e)
            logger.warning(f"Deferred extraction failed for {artifact.id}: {reason}")
            notify_error(
                self.notifications, "Import Failed", f"Could not process link: {artifact.content}"
            )
            return await self.artifacts.update(artifact.id, meta=cleared_meta)

        updated = await self.artifacts.update(
            artifact.id,
            title=article.title or artifact.title,
            content=article.content,
            type=ArtifactType.ARTICLE,
            lead_image_url=article.lead_image_url,
            source=original_url,
            meta=cleared_meta,
        )
        notify(self.notifications, "Article Imported", f"Processed: {updated.title}")
        return updated

    def _cleared_meta(self, artifact: Artifact) -> ArtifactMeta:
        return artifact.meta.model_copy(update={"needs_article_extraction": False})

    # ═══════════════════════════════════════════════════════════
    # SCHEDULING
    # ═══════════════════════════════════════════════════════════

    def schedule(self, delay: float = 1.0, online: bool = True) -> asyncio.Task:
        """Run ``process_pending`` once after ``delay`` seconds in the background."""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._run_after(delay, online))
        return self._task

    async def cancel(self) -> None:
        """Cancel a pending or running pass and wait for it to stop."""
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task

    async def _run_after(self, delay: float, online: bool) -> None:
        try:
            await asyncio.sleep(delay)
            await self.process_pending(online=online)
        except asyncio.CancelledError:
            logger.info("Offline queue run cancelled")
            raise
        except Exception as e:
            logger.error(f"Offline queue run failed: {e}")
