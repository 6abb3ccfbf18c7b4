"""
Artifact model: a single captured unit of knowledge.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from alpsvault.models.base import VaultRecord, dedupe


class ArtifactType(str, Enum):
    """Kinds of captured content."""

    NOTE = "note"
    COLOR = "color"
    ARTICLE = "article"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"
    QUOTE = "quote"
    REPO = "repo"


# Types whose content is produced by enrichment or a file, never by the editor
READONLY_CONTENT_TYPES = frozenset(
    {
        ArtifactType.IMAGE,
        ArtifactType.VIDEO,
        ArtifactType.AUDIO,
        ArtifactType.COLOR,
        ArtifactType.FILE,
        ArtifactType.REPO,
        ArtifactType.ARTICLE,
    }
)

ARTIFACT_FLAGS = ("is_pinned", "is_favorited", "is_trashed", "is_hidden")


class ArtifactMeta(BaseModel):
    """Optional metadata bag: deferred enrichment flag and file details."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    needs_article_extraction: bool = False
    file_name: str | None = None
    file_type: str | None = None
    file_size: int | None = None


class Artifact(VaultRecord):
    """
    A captured knowledge item.

    Every mutation replaces the whole record keyed by ``id``. ``space_id`` is a
    weak reference: it is cleared explicitly when its Space is deleted.
    """

    type: ArtifactType = Field(..., description="Artifact kind")
    title: str = Field(default="", description="Display title")
    content: str = Field(
        default="",
        description="Type-dependent payload: markdown, hex colour, raw URL or file name",
    )
    tags: list[str] = Field(default_factory=list, description="Ordered, duplicate-free tags")
    space_id: str | None = Field(default=None, description="Explicit space assignment")
    source: str | None = Field(default=None, description="Origin URL or data URI")
    lead_image_url: str | None = Field(default=None, description="Cover image reference")

    is_pinned: bool = False
    is_favorited: bool = False
    is_trashed: bool = False
    is_hidden: bool = False

    meta: ArtifactMeta | None = None

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, tags: list[str]) -> list[str]:
        return dedupe(tags)

    @property
    def needs_article_extraction(self) -> bool:
        return bool(self.meta and self.meta.needs_article_extraction)

    @property
    def has_editable_content(self) -> bool:
        return self.type not in READONLY_CONTENT_TYPES
