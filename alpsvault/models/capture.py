"""
Capture input models: raw text/file input, destination context, draft session
and share-target payloads.
"""

from pydantic import BaseModel, Field

from alpsvault.models.artifact import Artifact


class FileCapture(BaseModel):
    """A dropped or picked file with its declared media type."""

    name: str = Field(..., description="Original file name")
    media_type: str = Field(default="", description="Declared MIME type, e.g. 'audio/mpeg'")
    data: bytes = Field(default=b"", description="File contents")

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def stem(self) -> str:
        """File name without its final extension."""
        stem, dot, _ = self.name.rpartition(".")
        return stem if dot and stem else self.name


class DraftSession(BaseModel):
    """
    Auto-saved draft of a single capture dialog.

    The UI layer owns one instance per open capture session and passes it in
    the CaptureContext; it is cleared only after a successful commit.
    """

    title: str = ""
    content: str = ""
    tags: list[str] = Field(default_factory=list)

    def save(self, title: str, content: str, tags: list[str]) -> None:
        self.title = title
        self.content = content
        self.tags = list(tags)

    def clear(self) -> None:
        self.title = ""
        self.content = ""
        self.tags = []

    @property
    def is_empty(self) -> bool:
        return not (self.title or self.content or self.tags)


class CaptureContext(BaseModel):
    """
    Destination and state for one capture.

    ``editing`` is set when an existing artifact is being edited instead of a
    new one captured; detection is skipped in that case.
    """

    title: str = ""
    tags: list[str] = Field(default_factory=list)
    space_id: str | None = None
    is_online: bool = True
    editing: Artifact | None = None
    draft: DraftSession | None = None


class SharePayload(BaseModel):
    """Content handed over by the OS share sheet."""

    title: str | None = None
    text: str | None = None
    url: str | None = None
    files: list[FileCapture] = Field(default_factory=list)
