"""
HTTP client for the article extraction service.
"""

from urllib.parse import urlsplit

import httpx

from alpsvault.core.enrichment.base import ArticleExtractor, ExtractedArticle
from alpsvault.utils.exceptions import EnrichmentError
from alpsvault.utils.logger import get_logger

logger = get_logger(__name__)


def rewrite_for_extraction(url: str, proxy_host: str | None) -> str:
    """
    URL to hand to the extractor.

    Articles on ``*.medium.com`` go through a proxy host as
    ``https://<proxy>/<host><path>?<query>#<fragment>``; everything else, and
    anything that fails to parse, is returned unchanged.
    """
    if not proxy_host:
        return url
    try:
        parts = urlsplit(url)
    except ValueError:
        logger.warning(f"Could not parse URL for proxy check, using original: {url}")
        return url

    host = parts.hostname or ""
    if not host.endswith("medium.com"):
        return url

    query = f"?{parts.query}" if parts.query else ""
    fragment = f"#{parts.fragment}" if parts.fragment else ""
    return f"https://{proxy_host}/{host}{parts.path}{query}{fragment}"


class HttpArticleExtractor(ArticleExtractor):
    """
    Article extractor backed by an HTTP extraction endpoint.

    POSTs ``{"url": ...}`` and expects ``{title, content, lead_image_url}``.
    Failed responses carry ``{"message": ...}`` which is surfaced verbatim.
    """

    def __init__(
        self,
        endpoint: str,
        timeout: float = 15.0,
        user_agent: str = "alpsvault/0.1",
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the extractor.

        Args:
            endpoint: Extraction service URL
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
            client: Optional preconfigured client (shared or mocked)
        """
        self.endpoint = endpoint
        self.client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": user_agent, "Content-Type": "application/json"},
        )

    async def extract(self, url: str) -> ExtractedArticle:
        try:
            response = await self.client.post(self.endpoint, json={"url": url})
        except httpx.HTTPError as e:
            logger.warning(f"Article extraction request failed for {url}: {e}")
            raise EnrichmentError(f"Could not reach extraction service: {e}", {"url": url}) from e

        if not response.is_success:
            message = self._error_message(response) or "Failed to extract article"
            logger.warning(f"Article extraction failed for {url}: {response.status_code} {message}")
            raise EnrichmentError(message, {"url": url, "status_code": response.status_code})

        try:
            data = response.json()
        except ValueError as e:
            raise EnrichmentError("Extraction service returned invalid JSON", {"url": url}) from e

        return ExtractedArticle(
            title=data.get("title") or None,
            content=data.get("content") or "",
            lead_image_url=data.get("lead_image_url") or None,
        )

    async def close(self):
        await self.client.aclose()

    def _error_message(self, response: httpx.Response) -> str | None:
        try:
            data = response.json()
        except ValueError:
            return None
        return data.get("message") if isinstance(data, dict) else None
