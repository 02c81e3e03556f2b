"""Application Exceptions."""

from discovery.application.common.exceptions.base import ApplicationError
from discovery.application.common.exceptions.catalog import CatalogUnavailableError
from discovery.application.common.exceptions.validation import (
    InvalidArgumentError,
    InvalidInteractionTypeError,
)

__all__ = [
    "ApplicationError",
    "CatalogUnavailableError",
    "InvalidArgumentError",
    "InvalidInteractionTypeError",
]
