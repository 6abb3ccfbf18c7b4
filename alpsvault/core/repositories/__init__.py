"""Entity repositories over a VaultStore."""

from alpsvault.core.repositories.anchors import AnchorRepository
from alpsvault.core.repositories.artifacts import ArtifactRepository
from alpsvault.core.repositories.snapshot import SnapshotRepository
from alpsvault.core.repositories.spaces import SpaceRepository

__all__ = [
    "ArtifactRepository",
    "AnchorRepository",
    "SpaceRepository",
    "SnapshotRepository",
]
