"""Application Queries."""

from discovery.application.discovery.queries.featured_businesses import FeaturedBusinessesQuery
from discovery.application.discovery.queries.get_business_detail import GetBusinessDetailQuery
from discovery.application.discovery.queries.nearby_search import NearbySearchQuery
from discovery.application.discovery.queries.recommended_businesses import (
    RecommendedBusinessesQuery,
)
from discovery.application.discovery.queries.text_search import TextSearchQuery

__all__ = [
    "FeaturedBusinessesQuery",
    "GetBusinessDetailQuery",
    "NearbySearchQuery",
    "RecommendedBusinessesQuery",
    "TextSearchQuery",
]
