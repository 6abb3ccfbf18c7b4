"""
Data models for alpsvault.

Core models:
- Artifact, ArtifactType, ArtifactMeta: captured knowledge items
- Anchor, AnchorSaveResult, SaveStatus: uniquely titled bundles and the
  conflict-as-value save result
- Space: explicit or smart (tag-derived) groupings
- Snapshot: export/import shape
- FileCapture, CaptureContext, DraftSession, SharePayload: capture inputs
- Notification, NotificationKind: user messages
"""

from alpsvault.models.anchor import Anchor, AnchorSaveResult, SaveStatus
from alpsvault.models.artifact import (
    ARTIFACT_FLAGS,
    READONLY_CONTENT_TYPES,
    Artifact,
    ArtifactMeta,
    ArtifactType,
)
from alpsvault.models.capture import CaptureContext, DraftSession, FileCapture, SharePayload
from alpsvault.models.notification import Notification, NotificationKind
from alpsvault.models.snapshot import Snapshot
from alpsvault.models.space import Space

__all__ = [
    # Artifacts
    "Artifact",
    "ArtifactType",
    "ArtifactMeta",
    "ARTIFACT_FLAGS",
    "READONLY_CONTENT_TYPES",
    # Anchors
    "Anchor",
    "AnchorSaveResult",
    "SaveStatus",
    # Spaces
    "Space",
    # Snapshot
    "Snapshot",
    # Capture
    "FileCapture",
    "CaptureContext",
    "DraftSession",
    "SharePayload",
    # Notifications
    "Notification",
    "NotificationKind",
]
