"""Nearby Business Discovery Application Layer."""

from discovery.application.discovery.dto import FilterOptions, PaginatedResult, TextSearchOptions
from discovery.application.discovery.ports import BusinessCatalog
from discovery.application.discovery.policy import DiscoveryPolicy
from discovery.application.discovery.services import (
    BusinessFilterPipeline,
    CategoryCatalogService,
    OperatingHoursEvaluator,
    distance_km,
    is_open_now,
    paginate,
)
from discovery.application.discovery.facade import DiscoveryFacade

__all__ = [
    "BusinessCatalog",
    "BusinessFilterPipeline",
    "CategoryCatalogService",
    "DiscoveryFacade",
    "DiscoveryPolicy",
    "FilterOptions",
    "OperatingHoursEvaluator",
    "PaginatedResult",
    "TextSearchOptions",
    "distance_km",
    "is_open_now",
    "paginate",
]
