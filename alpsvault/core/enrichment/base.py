"""
Abstract interfaces for network enrichment collaborators.

Each collaborator is best-effort: callers treat EnrichmentError (or a None
result) as "use the fallback", never as a reason to abort a capture.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field


class ExtractedArticle(BaseModel):
    """Readable article content returned by the extraction service."""

    title: str | None = None
    content: str = Field(default="", description="Article body (HTML)")
    lead_image_url: str | None = None


class ArticleExtractor(ABC):
    """
    Article extraction service.

    Responsibilities:
    - Fetch a web page and return its readable title, body and lead image
    """

    @abstractmethod
    async def extract(self, url: str) -> ExtractedArticle:
        """
        Extract the article at ``url``.

        Raises:
            EnrichmentError: On a non-OK response or transport failure; the
                message is the service's own when it supplies one
        """
        pass

    @abstractmethod
    async def close(self):
        """Close any open connections."""


class VideoMetadataClient(ABC):
    """Public video thumbnail and title endpoints."""

    @abstractmethod
    async def fetch_thumbnail(self, video_id: str) -> str:
        """
        Best available thumbnail URL.

        Never fails: falls back to a low resolution that always exists.
        """
        pass

    @abstractmethod
    async def fetch_title(self, url: str) -> str | None:
        """Video title, or None when the metadata endpoint fails."""
        pass

    @abstractmethod
    async def close(self):
        """Close any open connections."""


class ReadmeFetcher(ABC):
    """Raw readme fetch for a code-hosting repository."""

    @abstractmethod
    async def fetch(self, repo_path: str) -> str | None:
        """
        Readme text for ``owner/repo``.

        Returns:
            The first readme found across the branch candidates, or None
            when none exists (not an error)
        """
        pass

    @abstractmethod
    async def close(self):
        """Close any open connections."""
