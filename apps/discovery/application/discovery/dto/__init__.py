"""Application DTOs."""

from discovery.application.discovery.dto.filter_options import FilterOptions, TextSearchOptions
from discovery.application.discovery.dto.paginated_result import PaginatedResult

__all__ = ["FilterOptions", "TextSearchOptions", "PaginatedResult"]
