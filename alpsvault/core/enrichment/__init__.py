"""Network enrichment collaborators."""

from alpsvault.core.enrichment.article import HttpArticleExtractor, rewrite_for_extraction
from alpsvault.core.enrichment.base import (
    ArticleExtractor,
    ExtractedArticle,
    ReadmeFetcher,
    VideoMetadataClient,
)
from alpsvault.core.enrichment.readme import GitHubReadmeFetcher
from alpsvault.core.enrichment.video import YouTubeMetadataClient

__all__ = [
    "ArticleExtractor",
    "ExtractedArticle",
    "VideoMetadataClient",
    "ReadmeFetcher",
    "HttpArticleExtractor",
    "YouTubeMetadataClient",
    "GitHubReadmeFetcher",
    "rewrite_for_extraction",
]
