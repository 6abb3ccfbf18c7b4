"""
Tests for OfflineEnrichmentQueue.
"""

import asyncio

import pytest

from alpsvault.models import ArtifactMeta, ArtifactType, NotificationKind
from alpsvault.services.offline_queue import OfflineEnrichmentQueue
from alpsvault.utils.exceptions import EnrichmentError


@pytest.fixture
def queue(artifact_repo, article_extractor, sink):
    return OfflineEnrichmentQueue(artifact_repo, article_extractor, notifications=sink)


async def add_deferred(artifact_repo, url="https://example.com/post"):
    return await artifact_repo.add(
        ArtifactType.NOTE,
        content=url,
        source=url,
        tags=["later"],
        meta=ArtifactMeta(needs_article_extraction=True),
    )


class TestProcessPending:
    """Tests for one processing pass."""

    @pytest.mark.asyncio
    async def test_success_becomes_article(self, queue, artifact_repo, sink):
        """Test a deferred link is upgraded to an article."""
        deferred = await add_deferred(artifact_repo)

        processed = await queue.process_pending()

        assert [a.id for a in processed] == [deferred.id]
        article = await artifact_repo.get(deferred.id)
        assert article.type == ArtifactType.ARTICLE
        assert article.title == "Extracted Title"
        assert article.source == "https://example.com/post"
        assert article.tags == ["later"]
        assert not article.needs_article_extraction
        assert sink.titles == ["Back online!", "Article Imported"]

    @pytest.mark.asyncio
    async def test_failure_clears_flag(self, queue, artifact_repo, article_extractor, sink):
        """Test a failed extraction leaves a note and never retries."""
        deferred = await add_deferred(artifact_repo)
        article_extractor.error = EnrichmentError("Failed to extract article")

        await queue.process_pending()

        note = await artifact_repo.get(deferred.id)
        assert note.type == ArtifactType.NOTE
        assert not note.needs_article_extraction
        error = sink.notifications[-1]
        assert error.kind == NotificationKind.ERROR
        assert error.title == "Import Failed"
        assert error.description == "Could not process link: https://example.com/post"

        article_extractor.error = None
        assert await queue.process_pending() == []

    @pytest.mark.asyncio
    async def test_offline_does_nothing(self, queue, artifact_repo, article_extractor, sink):
        """Test nothing is attempted while offline."""
        await add_deferred(artifact_repo)

        assert await queue.process_pending(online=False) == []
        assert article_extractor.calls == []
        assert sink.notifications == []

    @pytest.mark.asyncio
    async def test_nothing_pending(self, queue, artifact_repo, sink):
        """Test no notification is sent when there is nothing to do."""
        await artifact_repo.add(ArtifactType.NOTE, content="plain")

        assert await queue.process_pending() == []
        assert sink.notifications == []

    @pytest.mark.asyncio
    async def test_medium_links_use_proxy(self, queue, artifact_repo, article_extractor):
        """Test deferred Medium links are extracted through the proxy."""
        await add_deferred(artifact_repo, "https://medium.com/@a/story")

        await queue.process_pending()

        assert article_extractor.calls == ["https://freedium.cfd/medium.com/@a/story"]

    @pytest.mark.asyncio
    async def test_one_failure_does_not_stop_others(
        self, queue, artifact_repo, article_extractor
    ):
        """Test each link gets its own attempt."""
        await add_deferred(artifact_repo, "https://example.com/a")
        await add_deferred(artifact_repo, "https://example.com/b")
        article_extractor.error = EnrichmentError("down")

        processed = await queue.process_pending()

        assert len(processed) == 2
        assert len(article_extractor.calls) == 2


class TestScheduling:
    """Tests for background scheduling."""

    @pytest.mark.asyncio
    async def test_scheduled_run(self, queue, artifact_repo):
        """Test a scheduled run processes pending links."""
        deferred = await add_deferred(artifact_repo)

        await queue.schedule(delay=0)

        assert (await artifact_repo.get(deferred.id)).type == ArtifactType.ARTICLE

    @pytest.mark.asyncio
    async def test_schedule_reuses_running_task(self, queue):
        """Test scheduling twice while waiting returns the same task."""
        first = queue.schedule(delay=10)
        second = queue.schedule(delay=10)

        assert first is second
        await queue.cancel()
        assert first.cancelled()

    @pytest.mark.asyncio
    async def test_cancel(self, queue, artifact_repo, article_extractor):
        """Test a cancelled run never processes anything."""
        await add_deferred(artifact_repo)
        task = queue.schedule(delay=10)

        await queue.cancel()

        assert task.cancelled()
        assert article_extractor.calls == []

    @pytest.mark.asyncio
    async def test_cancel_waits_for_running_pass(self, queue, artifact_repo, article_extractor):
        """Test cancel returns only once an in-flight pass has stopped."""
        deferred = await add_deferred(artifact_repo)
        started = asyncio.Event()

        async def slow_extract(url):
            article_extractor.calls.append(url)
            started.set()
            await asyncio.sleep(10)

        article_extractor.extract = slow_extract
        task = queue.schedule(delay=0)
        await started.wait()

        await queue.cancel()

        assert task.done()
        assert (await artifact_repo.get(deferred.id)).meta.needs_article_extraction

    @pytest.mark.asyncio
    async def test_cancel_without_task(self, queue):
        """Test cancelling with nothing scheduled is a no-op."""
        await queue.cancel()
