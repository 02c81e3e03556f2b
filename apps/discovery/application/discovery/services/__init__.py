"""Application Services."""

from discovery.application.discovery.services.business_filter import (
    BusinessFilterPipeline,
    NamedPredicate,
    ensure_well_formed,
)
from discovery.application.discovery.services.catalog_access import call_catalog
from discovery.application.discovery.services.category_catalog import CategoryCatalogService
from discovery.application.discovery.services.distance import (
    BoundingBox,
    bounding_box,
    distance_km,
    format_distance,
)
from discovery.application.discovery.services.operating_hours import (
    OperatingHoursEvaluator,
    is_open_now,
)
from discovery.application.discovery.services.pagination import paginate

__all__ = [
    "BoundingBox",
    "BusinessFilterPipeline",
    "CategoryCatalogService",
    "NamedPredicate",
    "OperatingHoursEvaluator",
    "bounding_box",
    "call_catalog",
    "distance_km",
    "ensure_well_formed",
    "format_distance",
    "is_open_now",
    "paginate",
]
