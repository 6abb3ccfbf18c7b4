"""
Factory for creating vault stores.
"""

from alpsvault.config import StorageConfig
from alpsvault.core.store.base import VaultStore
from alpsvault.core.store.sqlite_store import SQLiteVaultStore
from alpsvault.utils.exceptions import ConfigurationError


class VaultStoreFactory:
    """Factory for creating vault stores from configuration."""

    @staticmethod
    def create(config: StorageConfig) -> VaultStore:
        """
        Create vault store from configuration.

        Args:
            config: Storage configuration

        Returns:
            VaultStore instance (not yet initialized)

        Raises:
            ConfigurationError: If backend is not supported
        """
        if config.backend == "sqlite":
            return SQLiteVaultStore(db_path=config.db_path)
        raise ConfigurationError(
            f"Unsupported store backend: {config.backend}",
            context={"backend": config.backend},
        )
