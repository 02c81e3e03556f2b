"""Catalog Row Mappers."""

from discovery.infrastructure.mappers.business_mapper import (
    map_business,
    map_businesses,
    try_map_business,
)

__all__ = ["map_business", "map_businesses", "try_map_business"]
