"""Utility modules for alpsvault."""

from alpsvault.utils.colors import (
    ColorMatch,
    color_name_for,
    find_closest_color,
    find_exact_color,
    get_contrasting_text_color,
    hex_to_rgb,
)
from alpsvault.utils.exceptions import (
    ConfigurationError,
    EnrichmentError,
    NotFoundError,
    StoreError,
    ValidationError,
    VaultError,
)
from alpsvault.utils.id_generator import generate_vault_id
from alpsvault.utils.logger import get_logger, setup_logging
from alpsvault.utils.wikilinks import to_editable_content, to_savable_content

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # ID Generators
    "generate_vault_id",
    # Colours
    "ColorMatch",
    "hex_to_rgb",
    "find_exact_color",
    "find_closest_color",
    "color_name_for",
    "get_contrasting_text_color",
    # Wiki links
    "to_savable_content",
    "to_editable_content",
    # Exceptions
    "VaultError",
    "StoreError",
    "ValidationError",
    "NotFoundError",
    "EnrichmentError",
    "ConfigurationError",
]
