"""
GitHub readme fetch across conventional branch names.
"""

import httpx

from alpsvault.core.enrichment.base import ReadmeFetcher
from alpsvault.utils.logger import get_logger

logger = get_logger(__name__)

RAW_CONTENT_BASE = "https://raw.githubusercontent.com"


class GitHubReadmeFetcher(ReadmeFetcher):
    """Tries ``README.md`` on each branch candidate in order; first success wins."""

    def __init__(
        self,
        branches: list[str] | None = None,
        timeout: float = 15.0,
        user_agent: str = "alpsvault/0.1",
        client: httpx.AsyncClient | None = None,
    ):
        self.branches = branches or ["main", "master"]
        self.client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": user_agent},
            follow_redirects=True,
        )

    async def fetch(self, repo_path: str) -> str | None:
        for branch in self.branches:
            url = f"{RAW_CONTENT_BASE}/{repo_path}/{branch}/README.md"
            try:
                response = await self.client.get(url)
            except httpx.HTTPError as e:
                logger.debug(f"Readme fetch failed for {url}: {e}")
                continue
            if response.is_success:
                return response.text

        logger.info(f"No readme found for {repo_path} on {', '.join(self.branches)}")
        return None

    async def close(self):
        await self.client.aclose()
