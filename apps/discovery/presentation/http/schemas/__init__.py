"""HTTP Schemas."""

from discovery.presentation.http.schemas.business import (
    AddressSchema,
    BusinessDetail,
    BusinessEntry,
    CategoryEntry,
    ContactInfoSchema,
    PaginatedBusinesses,
)

__all__ = [
    "AddressSchema",
    "BusinessDetail",
    "BusinessEntry",
    "CategoryEntry",
    "ContactInfoSchema",
    "PaginatedBusinesses",
]
