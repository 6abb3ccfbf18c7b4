"""Persistent vault store implementations."""

from alpsvault.core.store.base import RECORD_TYPES, EntityKind, Record, VaultStore
from alpsvault.core.store.sqlite_store import SQLiteVaultStore

__all__ = ["VaultStore", "EntityKind", "Record", "RECORD_TYPES", "SQLiteVaultStore"]
