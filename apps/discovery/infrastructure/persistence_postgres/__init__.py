"""PostgreSQL Infrastructure."""

from discovery.infrastructure.persistence_postgres.business_catalog_sqla import (
    SqlaBusinessCatalog,
)
from discovery.infrastructure.persistence_postgres.models import (
    Base,
    BusinessCategoryRow,
    BusinessRow,
)

__all__ = ["SqlaBusinessCatalog", "Base", "BusinessCategoryRow", "BusinessRow"]
