"""
Query, filter and sort over in-memory snapshots of the vault.

All functions are pure: they take the current records and return a new,
ordered list without touching the store.
"""

from datetime import datetime
from enum import Enum

from alpsvault.core.temporal.date_parser import DateRange, match_patterns, range_for
from alpsvault.models.anchor import Anchor
from alpsvault.models.artifact import Artifact, ArtifactType
from alpsvault.models.space import Space

TRASH_KEYWORD = "trash"
HIDDEN_KEYWORD = "\\show"
FAVORITE_KEYWORDS = frozenset({"favorites", "fav"})
MIN_ID_PREFIX_LENGTH = 4

_TYPE_NAMES = frozenset(t.value for t in ArtifactType)


class VaultView(str, Enum):
    """Top-level browsing views."""

    ARTIFACTS = "artifacts"
    ANCHORS = "anchors"
    SPACES = "spaces"


def normalize_search(search_text: str | None) -> str:
    return (search_text or "").strip().lower()


def space_members(space: Space, artifacts: list[Artifact]) -> list[Artifact]:
    """
    Artifacts belonging to ``space``.

    Smart spaces with tags match by tag intersection, computed here on every
    call; other spaces (and smart spaces without tags) match by ``space_id``.
    """
    if space.is_smart and space.tags:
        return [a for a in artifacts if space.matches_tags(a.tags)]
    return [a for a in artifacts if a.space_id == space.id]


def query_artifacts(
    artifacts: list[Artifact],
    active_space: Space | None = None,
    search_text: str | None = "",
    time_range: DateRange | None = None,
    view: VaultView = VaultView.ARTIFACTS,
) -> list[Artifact]:
    """
    Visible artifacts for the current view, search text and time filter.

    Args:
        artifacts: Every artifact in the vault
        active_space: Space being browsed, if any
        search_text: Raw search box text
        time_range: Inclusive ``createdAt`` range
        view: Browsing view; without an active space only the artifacts view
            has a pool

    Returns:
        Pinned artifacts first, each group by descending ``updated_at``
    """
    if active_space is not None:
        pool = space_members(active_space, artifacts)
    elif view == VaultView.ARTIFACTS:
        pool = list(artifacts)
    else:
        pool = []

    search = normalize_search(search_text)

    if search == HIDDEN_KEYWORD:
        result = [a for a in pool if a.is_hidden]
    elif search == TRASH_KEYWORD:
        result = [a for a in pool if a.is_trashed]
    else:
        result = [a for a in pool if not a.is_trashed and not a.is_hidden]

    if time_range is not None:
        start, end = time_range
        result = [a for a in result if start <= a.created_at <= end]

    keyword = "" if search in (TRASH_KEYWORD, HIDDEN_KEYWORD) else search
    if keyword:
        result = [a for a in result if _matches_keyword(a, keyword)]

    return sort_artifacts(result)


def _matches_keyword(artifact: Artifact, keyword: str) -> bool:
    if keyword.isascii() and keyword.isdigit() and len(keyword) >= MIN_ID_PREFIX_LENGTH:
        return artifact.id.startswith(keyword)
    if keyword in FAVORITE_KEYWORDS:
        return artifact.is_favorited
    if keyword in _TYPE_NAMES:
        return artifact.type.value == keyword
    return (
        keyword in artifact.title.lower()
        or keyword in artifact.content.lower()
        or any(keyword in tag.lower() for tag in artifact.tags)
    )


def sort_artifacts(artifacts: list[Artifact]) -> list[Artifact]:
    by_recency = sorted(artifacts, key=lambda a: a.updated_at, reverse=True)
    return sorted(by_recency, key=lambda a: not a.is_pinned)


def query_anchors(anchors: list[Anchor], search_text: str | None = "") -> list[Anchor]:
    """
    Visible anchors sorted by title (case-insensitive).

    ``trash`` shows only trashed anchors; other text matches a title substring
    or a substring of any referenced artifact id.
    """
    search = normalize_search(search_text)

    if search == TRASH_KEYWORD:
        result = [a for a in anchors if a.is_trashed]
    else:
        result = [a for a in anchors if not a.is_trashed]
        if search:
            result = [
                a
                for a in result
                if search in a.title.lower() or any(search in i for i in a.artifact_ids)
            ]

    return sorted(result, key=lambda a: a.title.casefold())


def query_spaces(spaces: list[Space], search_text: str | None = "") -> list[Space]:
    """Spaces whose name contains the search text (case-insensitive)."""
    search = normalize_search(search_text)
    if not search:
        return list(spaces)
    return [s for s in spaces if search in s.name.lower()]


def resolve_time_filter(
    text: str | None,
    now: datetime | None = None,
    week_start: int = 0,
) -> DateRange | None:
    """
    Range for a submitted search phrase, using its first recognised pattern.

    Unrecognised text or an impossible date gives None, meaning "no filter".
    """
    matches = match_patterns((text or "").strip())
    if not matches:
        return None
    return range_for(matches[0], now=now, week_start=week_start)
