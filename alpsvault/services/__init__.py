"""
Services for alpsvault.

High-level business logic:
- Vault: facade over every operation
- IngestionClassifier: typed capture with enrichment
- AnchorMergeSession: anchor saves with conflict resolution
- OfflineEnrichmentQueue: deferred article extraction
- query: pure filter/sort functions
"""

from alpsvault.services.anchor_merge import (
    AnchorMergeSession,
    ConflictResolution,
    MergeState,
    parse_artifact_ids,
)
from alpsvault.services.classifier import IngestionClassifier
from alpsvault.services.notifications import (
    LogNotificationSink,
    NotificationSink,
    RecordingNotificationSink,
)
from alpsvault.services.offline_queue import OfflineEnrichmentQueue
from alpsvault.services.vault import Vault

__all__ = [
    "Vault",
    "IngestionClassifier",
    "AnchorMergeSession",
    "MergeState",
    "ConflictResolution",
    "parse_artifact_ids",
    "OfflineEnrichmentQueue",
    "NotificationSink",
    "LogNotificationSink",
    "RecordingNotificationSink",
]
