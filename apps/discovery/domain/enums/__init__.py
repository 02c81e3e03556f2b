"""Domain Enums."""

from discovery.domain.enums.business_status import BusinessStatus
from discovery.domain.enums.interaction_type import InteractionType

__all__ = ["BusinessStatus", "InteractionType"]
