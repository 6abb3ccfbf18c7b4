"""
Factory modules for creating alpsvault components.

Provides factories for the persistent store and the enrichment clients.
"""

from alpsvault.core.factory.enrichment_factory import EnrichmentFactory
from alpsvault.core.factory.store_factory import VaultStoreFactory

__all__ = [
    "VaultStoreFactory",
    "EnrichmentFactory",
]
