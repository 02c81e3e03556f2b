"""In-Memory Catalog Infrastructure."""

from discovery.infrastructure.persistence_memory.business_catalog_memory import (
    DEFAULT_SEED_PATH,
    InMemoryBusinessCatalog,
)

__all__ = ["DEFAULT_SEED_PATH", "InMemoryBusinessCatalog"]
