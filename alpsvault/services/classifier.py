"""
Ingestion classifier: turns a paste, drop or share into a typed artifact.

Detection runs an ordered list of cheap syntactic detectors against the
input; the first that matches hands its payload to an async handler, which is
the only place network enrichment happens. Enrichment failures never abort a
capture: the handler falls back (plain note, default thumbnail, placeholder
readme) and the user is told through the notification sink.
"""

from collections.abc import Awaitable, Callable
from typing import Any, NamedTuple

from alpsvault.core.enrichment.article import rewrite_for_extraction
from alpsvault.core.enrichment.base import ArticleExtractor, ReadmeFetcher, VideoMetadataClient
from alpsvault.core.enrichment.media import extract_cover_art, to_data_uri
from alpsvault.core.enrichment.video import FALLBACK_RESOLUTION, thumbnail_url
from alpsvault.core.repositories.artifacts import ArtifactRepository
from alpsvault.models.artifact import Artifact, ArtifactMeta, ArtifactType
from alpsvault.models.capture import CaptureContext, FileCapture
from alpsvault.services import detectors
from alpsvault.services.notifications import NotificationSink, notify, notify_error
from alpsvault.utils.colors import color_name_for
from alpsvault.utils.exceptions import ValidationError, VaultError
from alpsvault.utils.logger import get_logger
from alpsvault.utils.wikilinks import to_savable_content

logger = get_logger(__name__)

VIDEO_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
DEFAULT_VIDEO_TITLE = "YouTube Video"


class Detector(NamedTuple):
    """Pure ``detect(text) -> payload | None`` paired with its async handler."""

    name: str
    detect: Callable[[str], Any]
    handle: Callable[[Any, str, CaptureContext], Awaitable[Artifact]]


class IngestionClassifier:
    """
    Classifies raw input and commits the resulting artifact.

    Detection order: colour, quote, repository URL, video reference, bare URL,
    then plain note. Files skip text detection and branch on media type.
    """

    def __init__(
        self,
        artifacts: ArtifactRepository,
        article_extractor: ArticleExtractor,
        video_client: VideoMetadataClient,
        readme_fetcher: ReadmeFetcher,
        notifications: NotificationSink | None = None,
        medium_proxy_host: str | None = "freedium.cfd",
    ):
        """
        Initialize the classifier.

        Args:
            artifacts: Repository new artifacts are committed to
            article_extractor: Article extraction collaborator
            video_client: Video thumbnail/title collaborator
            readme_fetcher: Repository readme collaborator
            notifications: Optional user notification sink
            medium_proxy_host: Proxy used for medium.com articles (None disables)
        """
        self.artifacts = artifacts
        self.article_extractor = article_extractor
        self.video_client = video_client
        self.readme_fetcher = readme_fetcher
        self.notifications = notifications
        self.medium_proxy_host = medium_proxy_host

        self.detectors: list[Detector] = [
            Detector("color", self._detect_color, self._save_color),
            Detector("quote", detectors.extract_quote, self._save_quote),
            Detector("repo", detectors.github_repo_path, self._save_repo),
            Detector("video", detectors.extract_video_id, self._save_video),
            Detector("url", self._detect_url, self._save_url),
        ]

    async def classify(
        self, raw: str | FileCapture, context: CaptureContext | None = None
    ) -> Artifact:
        """
        Classify and persist one capture.

        Args:
            raw: Text (pasted or typed) or a file
            context: Destination space, tags, title, connectivity and draft

        Returns:
            The committed artifact (new, or the edited one)

        Raises:
            ValidationError: If a new capture has neither content nor title
            StoreError: If the store rejects the write
        """
        context = context or CaptureContext()

        if isinstance(raw, FileCapture):
            artifact = await self._save_file(raw, context)
        else:
            artifact = await self._classify_text(raw.strip(), context)

        if context.draft is not None:
            context.draft.clear()
        return artifact

    async def _classify_text(self, text: str, context: CaptureContext) -> Artifact:
        editing = context.editing
        if not text and not context.title.strip():
            if editing is None or editing.has_editable_content:
                raise ValidationError("Nothing to save: content and title are both empty")

        if editing is not None:
            return await self._update_existing(editing, text, context)

        detection = detectors.unescape_markdown(text)
        for detector in self.detectors:
            payload = detector.detect(detection)
            if payload is not None:
                logger.debug(f"Capture detected as {detector.name}")
                return await detector.handle(payload, detection, context)

        return await self._add(
            context,
            ArtifactType.NOTE,
            content=to_savable_content(text),
            notice=("Artifact Created", "New note artifact saved."),
        )

    # ═══════════════════════════════════════════════════════════
    # DETECTORS
    # ═══════════════════════════════════════════════════════════

    def _detect_color(self, text: str) -> str | None:
        return text if detectors.is_hex_color(text) else None

    def _detect_url(self, text: str) -> str | None:
        return detectors.normalize_url(text) if detectors.is_bare_url(text) else None

    # ═══════════════════════════════════════════════════════════
    # HANDLERS
    # ═══════════════════════════════════════════════════════════

    async def _save_color(self, hex_color: str, text: str, context: CaptureContext) -> Artifact:
        title = context.title.strip() or color_name_for(hex_color) or hex_color
        return await self._add(
            context,
            ArtifactType.COLOR,
            title=title,
            content=hex_color,
            notice=("Artifact Created", "New color artifact saved."),
        )

    async def _save_quote(self, body: str, text: str, context: CaptureContext) -> Artifact:
        return await self._add(context, ArtifactType.QUOTE, content=body, notice=("Quote Saved",))

    async def _save_repo(self, repo_path: str, text: str, context: CaptureContext) -> Artifact:
        readme = None
        try:
            readme = await self.readme_fetcher.fetch(repo_path)
        except Exception as e:
            logger.warning(f"Readme fetch failed for {repo_path}: {e}")

        repo_name = repo_path.split("/")[1]
        return await self._add(
            context,
            ArtifactType.REPO,
            title=context.title.strip() or repo_name,
            content=readme or f"Could not fetch README for {repo_path}.",
            source=text,
            notice=(
                "GitHub Repo Saved",
                "Successfully imported README." if readme else "Could not find README.",
            ),
        )

    async def _save_video(self, video_id: str, text: str, context: CaptureContext) -> Artifact:
        watch_url = VIDEO_WATCH_URL.format(video_id=video_id)

        try:
            thumbnail = await self.video_client.fetch_thumbnail(video_id)
        except Exception as e:
            logger.warning(f"Thumbnail lookup failed for video {video_id}: {e}")
            thumbnail = thumbnail_url(video_id, FALLBACK_RESOLUTION)

        try:
            video_title = await self.video_client.fetch_title(watch_url)
        except Exception as e:
            logger.warning(f"Title lookup failed for video {video_id}: {e}")
            video_title = None

        return await self._add(
            context,
            ArtifactType.VIDEO,
            title=video_title or context.title.strip() or DEFAULT_VIDEO_TITLE,
            content=watch_url,
            source=text,
            lead_image_url=thumbnail,
            notice=("YouTube Video Saved",),
        )

    async def _save_url(self, url: str, text: str, context: CaptureContext) -> Artifact:
        if not context.is_online:
            return await self._add(
                context,
                ArtifactType.NOTE,
                content=url,
                source=url,
                meta=ArtifactMeta(needs_article_extraction=True),
                notice=(
                    "You're offline",
                    "Link saved. It will be imported when you're back online.",
                ),
            )

        try:
            article = await self.article_extractor.extract(
                rewrite_for_extraction(url, self.medium_proxy_host)
            )
        except Exception as e:
            reason = e.message if isinstance(e, VaultError) else str(e)
            logger.warning(f"Article extraction failed for {url}, saving as note: {reason}")
            notify_error(
                self.notifications,
                "Article Import Failed",
                reason or "Could not fetch content. Saving as a regular note.",
            )
            return await self._add(context, ArtifactType.NOTE, content=url, source=url)

        return await self._add(
            context,
            ArtifactType.ARTICLE,
            title=article.title or context.title.strip(),
            content=article.content,
            source=url,
            lead_image_url=article.lead_image_url,
            notice=("Article Imported",),
        )

    async def _save_file(self, file: FileCapture, context: CaptureContext) -> Artifact:
        media_type = file.media_type or ""
        fields: dict[str, Any] = {
            "title": file.stem,
            "meta": ArtifactMeta(file_name=file.name, file_type=media_type, file_size=file.size),
        }

        if media_type.startswith("text/"):
            return await self._add(
                context,
                ArtifactType.NOTE,
                content=file.data.decode("utf-8", errors="replace"),
                notice=("Text File Imported", f"Saved {file.name}"),
                **fields,
            )

        source = to_data_uri(file.data, media_type)

        if media_type.startswith("audio/"):
            return await self._add(
                context,
                ArtifactType.AUDIO,
                content=file.name,
                source=source,
                lead_image_url=extract_cover_art(file),
                notice=("Audio File Imported", f"Saved {file.name}"),
                **fields,
            )

        if media_type.startswith("image/"):
            artifact_type, content = ArtifactType.IMAGE, ""
        elif media_type.startswith("video/"):
            artifact_type, content = ArtifactType.VIDEO, file.name
        else:
            artifact_type, content = ArtifactType.FILE, file.name

        return await self._add(
            context,
            artifact_type,
            content=content,
            source=source,
            notice=("File Imported", f"Saved {file.name}"),
            **fields,
        )

    async def _update_existing(
        self, editing: Artifact, text: str, context: CaptureContext
    ) -> Artifact:
        """Edits skip detection; read-only content types keep their content."""
        changes: dict[str, Any] = {
            "title": context.title.strip(),
            "tags": context.tags,
            "space_id": context.space_id,
        }
        if editing.has_editable_content:
            changes["content"] = to_savable_content(text)

        artifact = await self.artifacts.update(editing.id, **changes)
        notify(self.notifications, "Artifact Updated", "Artifact has been successfully updated.")
        return artifact

    # ═══════════════════════════════════════════════════════════
    # HELPER METHODS
    # ═══════════════════════════════════════════════════════════

    async def _add(
        self,
        context: CaptureContext,
        artifact_type: ArtifactType,
        notice: tuple[str, ...] | None = None,
        **fields: Any,
    ) -> Artifact:
        """Commit with the context's title, tags and space unless overridden."""
        fields.setdefault("title", context.title.strip())
        artifact = await self.artifacts.add(
            artifact_type,
            tags=context.tags,
            space_id=context.space_id,
            **fields,
        )
        if notice:
            notify(self.notifications, *notice)
        return artifact
