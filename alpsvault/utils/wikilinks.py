"""
Wiki-link transform between the editable ``[[id]]`` syntax and stored markdown.

Stored form: ``[#id](wm://open/id)``. Both directions are idempotent, so
repeated edit/save cycles never double-wrap a link.
"""

import re

WIKI_LINK_SCHEME = "wm://open/"

# Characters allowed in a linked artifact id
_ID_CHARS = r"[a-zA-Z0-9\-._~]+"

_STORED_LINK = re.compile(r"\[#(" + _ID_CHARS + r")\]\(wm://open/\1\)")
_EDITABLE_LINK = re.compile(r"\[\[\s*(" + _ID_CHARS + r")\s*\]\]")


def to_savable_content(editable: str) -> str:
    """Rewrite ``[[id]]`` references into canonical markdown links."""
    if not editable:
        return ""
    # Editors escape brackets; undo that first so escaped references still match
    unescaped = editable.replace("\\[", "[").replace("\\]", "]")
    return _EDITABLE_LINK.sub(
        lambda m: f"[#{m.group(1)}]({WIKI_LINK_SCHEME}{m.group(1)})", unescaped
    )


def to_editable_content(stored: str) -> str:
    """Rewrite canonical markdown links back into ``[[id]]`` references."""
    if not stored:
        return ""
    return _STORED_LINK.sub(lambda m: f"[[{m.group(1)}]]", stored)

