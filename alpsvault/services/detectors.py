"""
Syntactic detectors for raw captured text.

Every function here is pure and synchronous; none touches the network. The
classifier runs them in order and only then performs enrichment I/O.
"""

import re
from urllib.parse import urlsplit

from alpsvault.utils.colors import HEX_COLOR_PATTERN

GITHUB_HOST = "github.com"

# Editors escape punctuation ("\#fff", "\[\[id\]\]"); strip those escapes
_MARKDOWN_ESCAPE = re.compile(r"\\([^\w\s])")

# Opening mark, body (may span lines), closing mark
QUOTE_PATTERN = re.compile(r"^[\"“](.*)[\"”]$", re.DOTALL)

VIDEO_URL_PATTERN = re.compile(r"^.*(youtu\.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*")
VIDEO_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{11}")
VIDEO_ID_LENGTH = 11

BARE_URL_PATTERN = re.compile(r"^(https?://)?([a-zA-Z0-9-]+\.)+[a-zA-Z]{2,}(/\S*)?$")


def unescape_markdown(text: str) -> str:
    return _MARKDOWN_ESCAPE.sub(r"\1", text)


def is_hex_color(text: str) -> bool:
    return bool(HEX_COLOR_PATTERN.match(text))


def extract_quote(text: str) -> str | None:
    """Quote body with the wrapping marks removed, or None if not a quote."""
    if len(text) < 2:
        return None
    m = QUOTE_PATTERN.match(text)
    return m.group(1).strip() if m else None


def github_repo_path(text: str) -> str | None:
    """``owner/repo`` for a repository URL on the code host, else None."""
    try:
        parts = urlsplit(text)
    except ValueError:
        return None
    if not parts.scheme or parts.hostname != GITHUB_HOST:
        return None

    segments = [s for s in parts.path.split("/") if s]
    if len(segments) != 2:
        return None
    return "/".join(segments)


def extract_video_id(text: str) -> str | None:
    """YouTube video id from a known URL shape, or a bare 11-character id."""
    if not text:
        return None
    m = VIDEO_URL_PATTERN.match(text)
    if m and len(m.group(2)) == VIDEO_ID_LENGTH:
        return m.group(2)
    if VIDEO_ID_PATTERN.fullmatch(text):
        return text
    return None


def is_bare_url(text: str) -> bool:
    """A single whitespace-free token shaped like ``host.tld[/path]``."""
    return len(text.split()) == 1 and bool(BARE_URL_PATTERN.match(text))


def normalize_url(text: str) -> str:
    return text if text.startswith("http") else f"https://{text}"
