"""도메인 예외."""

from discovery.domain.exceptions.base import DomainError
from discovery.domain.exceptions.business import BusinessNotFoundError, MalformedRecordError

__all__ = [
    "DomainError",
    "BusinessNotFoundError",
    "MalformedRecordError",
]
