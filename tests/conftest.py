"""
Shared fixtures.

Every test gets its own SQLite database under ``tmp_path``. Network
collaborators are replaced by in-process mocks whose results (or errors) a
test sets directly on the fixture, e.g. ``article_extractor.error = ...``.
"""

from collections.abc import AsyncGenerator

import pytest

from alpsvault.config import Config
from alpsvault.core.enrichment.base import (
    ArticleExtractor,
    ExtractedArticle,
    ReadmeFetcher,
    VideoMetadataClient,
)
from alpsvault.core.repositories import (
    AnchorRepository,
    ArtifactRepository,
    SnapshotRepository,
    SpaceRepository,
)
from alpsvault.core.store.sqlite_store import SQLiteVaultStore
from alpsvault.services.classifier import IngestionClassifier
from alpsvault.services.notifications import RecordingNotificationSink
from alpsvault.services.vault import Vault

# Mock collaborators


class MockArticleExtractor(ArticleExtractor):
    def __init__(self):
        self.article = ExtractedArticle(
            title="Extracted Title",
            content="<p>Extracted body</p>",
            lead_image_url="https://example.com/lead.png",
        )
        self.error: Exception | None = None
        self.calls: list[str] = []
        self.closed = False

    async def extract(self, url: str) -> ExtractedArticle:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.article

    async def close(self):
        self.closed = True


class MockVideoClient(VideoMetadataClient):
    def __init__(self):
        self.thumbnail = "https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg"
        self.title: str | None = "Mock Video Title"
        self.thumbnail_calls: list[str] = []
        self.title_calls: list[str] = []
        self.closed = False

    async def fetch_thumbnail(self, video_id: str) -> str:
        self.thumbnail_calls.append(video_id)
        return self.thumbnail

    async def fetch_title(self, url: str) -> str | None:
        self.title_calls.append(url)
        return self.title

    async def close(self):
        self.closed = True


class MockReadmeFetcher(ReadmeFetcher):
    def __init__(self):
        self.readme: str | None = "# Project\n\nReadme body"
        self.calls: list[str] = []
        self.closed = False

    async def fetch(self, repo_path: str) -> str | None:
        self.calls.append(repo_path)
        return self.readme

    async def close(self):
        self.closed = True


# Store and repositories


@pytest.fixture
async def store(tmp_path) -> AsyncGenerator[SQLiteVaultStore, None]:
    """Initialized SQLite store in a temporary directory."""
    vault_store = SQLiteVaultStore(db_path=str(tmp_path / "vault.db"))
    await vault_store.initialize()
    yield vault_store
    await vault_store.close()


@pytest.fixture
def artifact_repo(store) -> ArtifactRepository:
    return ArtifactRepository(store)


@pytest.fixture
def anchor_repo(store) -> AnchorRepository:
    return AnchorRepository(store)


@pytest.fixture
def space_repo(store) -> SpaceRepository:
    return SpaceRepository(store)


@pytest.fixture
def snapshot_repo(store) -> SnapshotRepository:
    return SnapshotRepository(store)


# Collaborators


@pytest.fixture
def article_extractor() -> MockArticleExtractor:
    return MockArticleExtractor()


@pytest.fixture
def video_client() -> MockVideoClient:
    return MockVideoClient()


@pytest.fixture
def readme_fetcher() -> MockReadmeFetcher:
    return MockReadmeFetcher()


@pytest.fixture
def sink() -> RecordingNotificationSink:
    return RecordingNotificationSink()


# Services


@pytest.fixture
def classifier(
    artifact_repo, article_extractor, video_client, readme_fetcher, sink
) -> IngestionClassifier:
    return IngestionClassifier(
        artifacts=artifact_repo,
        article_extractor=article_extractor,
        video_client=video_client,
        readme_fetcher=readme_fetcher,
        notifications=sink,
    )


@pytest.fixture
async def vault(
    tmp_path, article_extractor, video_client, readme_fetcher, sink
) -> AsyncGenerator[Vault, None]:
    """Vault over a fresh database with mock collaborators."""
    config = Config()
    config.storage.db_path = str(tmp_path / "vault.db")
    instance = Vault(
        store=SQLiteVaultStore(db_path=config.storage.db_path),
        article_extractor=article_extractor,
        video_client=video_client,
        readme_fetcher=readme_fetcher,
        config=config,
        notifications=sink,
    )
    await instance.initialize(process_offline_queue=False)
    yield instance
    await instance.close()
