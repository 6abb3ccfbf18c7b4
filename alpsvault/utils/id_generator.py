"""
ID generation utilities for alpsvault.

Every entity (artifact, anchor, space) gets a time-derived ID followed by a
random suffix: ``YYYYMMDDHHMMSS`` + 5 base-36 characters, e.g.
``20240728143015k3x9a``. The numeric prefix is what makes id-prefix search
("2024", "202407") useful.
"""

import secrets
import string
from datetime import datetime

ID_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase
ID_SUFFIX_LENGTH = 5


def generate_vault_id(now: datetime | None = None) -> str:
    """
    Generate a unique entity ID.

    Args:
        now: Timestamp to derive the prefix from (default: current time)

    Returns:
        ID in format "YYYYMMDDHHMMSSxxxxx"
    """
    now = now or datetime.now()
    suffix = "".join(secrets.choice(ID_SUFFIX_ALPHABET) for _ in range(ID_SUFFIX_LENGTH))
    return f"{now:%Y%m%d%H%M%S}{suffix}"
