"""
Factory for creating network enrichment collaborators.
"""

from alpsvault.config import EnrichmentConfig
from alpsvault.core.enrichment.article import HttpArticleExtractor
from alpsvault.core.enrichment.readme import GitHubReadmeFetcher
from alpsvault.core.enrichment.video import YouTubeMetadataClient


class EnrichmentFactory:
    """Factory for creating enrichment clients from configuration."""

    @staticmethod
    def create_article_extractor(config: EnrichmentConfig) -> HttpArticleExtractor:
        return HttpArticleExtractor(
            endpoint=config.extraction_endpoint,
            timeout=config.timeout,
            user_agent=config.user_agent,
        )

    @staticmethod
    def create_video_client(config: EnrichmentConfig) -> YouTubeMetadataClient:
        return YouTubeMetadataClient(
            timeout=config.timeout,
            min_bytes=config.thumbnail_min_bytes,
            user_agent=config.user_agent,
        )

    @staticmethod
    def create_readme_fetcher(config: EnrichmentConfig) -> GitHubReadmeFetcher:
        return GitHubReadmeFetcher(
            branches=config.readme_branches,
            timeout=config.timeout,
            user_agent=config.user_agent,
        )
