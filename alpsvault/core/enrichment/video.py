"""
YouTube thumbnail probing and oEmbed title lookup.
"""

from urllib.parse import urlencode

import httpx

from alpsvault.core.enrichment.base import VideoMetadataClient
from alpsvault.utils.logger import get_logger

logger = get_logger(__name__)

THUMBNAIL_BASE = "https://img.youtube.com/vi"
OEMBED_ENDPOINT = "https://www.youtube.com/oembed"

# Best first; the last one always exists
THUMBNAIL_RESOLUTIONS = (
    "maxresdefault",
    "sddefault",
    "hqdefault",
    "mqdefault",
    "default",
)
FALLBACK_RESOLUTION = "hqdefault"


def thumbnail_url(video_id: str, resolution: str) -> str:
    return f"{THUMBNAIL_BASE}/{video_id}/{resolution}.jpg"


class YouTubeMetadataClient(VideoMetadataClient):
    """
    Video metadata over the public YouTube endpoints.

    Missing resolutions come back as 404 or as a tiny placeholder image, so a
    thumbnail is accepted only when its payload exceeds ``min_bytes``.
    """

    def __init__(
        self,
        timeout: float = 15.0,
        min_bytes: int = 1000,
        user_agent: str = "alpsvault/0.1",
        client: httpx.AsyncClient | None = None,
    ):
        self.min_bytes = min_bytes
        self.client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": user_agent},
            follow_redirects=True,
        )

    async def fetch_thumbnail(self, video_id: str) -> str:
        for resolution in THUMBNAIL_RESOLUTIONS:
            url = thumbnail_url(video_id, resolution)
            try:
                response = await self.client.get(url)
            except httpx.HTTPError as e:
                logger.warning(f"Could not fetch video thumbnail {url}: {e}")
                continue
            if response.is_success and len(response.content) > self.min_bytes:
                return url

        return thumbnail_url(video_id, FALLBACK_RESOLUTION)

    async def fetch_title(self, url: str) -> str | None:
        oembed_url = f"{OEMBED_ENDPOINT}?{urlencode({'url': url, 'format': 'json'})}"
        try:
            response = await self.client.get(oembed_url)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Video title lookup failed for {url}: {e}")
            return None

        title = data.get("title") if isinstance(data, dict) else None
        return title or None

    async def close(self):
        await self.client.aclose()
