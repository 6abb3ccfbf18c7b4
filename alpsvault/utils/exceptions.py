"""
Custom exception hierarchy for alpsvault.

Provides structured error types for better error handling and debugging.
All exceptions inherit from VaultError for easy catching.

Anchor title collisions are deliberately absent: they are returned as
AnchorSaveResult values, not raised.
"""


class VaultError(Exception):
    """
    Base exception for all alpsvault errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize vault error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class StoreError(VaultError):
    """
    Persistent store errors.
    Raised when the storage backend is unavailable or rejects a write.
    Never retried automatically.
    """

    pass


class ValidationError(VaultError):
    """
    Validation errors.
    Raised before any mutation when input is missing or references
    records that do not exist.
    """

    pass


class NotFoundError(VaultError):
    """
    Resource not found errors.
    Raised when a requested artifact, anchor or space doesn't exist.
    """

    pass


class EnrichmentError(VaultError):
    """
    Enrichment errors.
    Raised by network collaborators (article extraction, video metadata,
    readme fetch). Callers degrade to a fallback instead of propagating.
    """

    pass


class ConfigurationError(VaultError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass
