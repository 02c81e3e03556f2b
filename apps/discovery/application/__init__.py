"""Discovery Application Layer."""

from discovery.application.discovery import (
    BusinessCatalog,
    DiscoveryFacade,
    DiscoveryPolicy,
    FilterOptions,
    OperatingHoursEvaluator,
    PaginatedResult,
    TextSearchOptions,
)

__all__ = [
    "BusinessCatalog",
    "DiscoveryFacade",
    "DiscoveryPolicy",
    "FilterOptions",
    "OperatingHoursEvaluator",
    "PaginatedResult",
    "TextSearchOptions",
]
