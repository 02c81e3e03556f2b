"""Domain Entities."""

from discovery.domain.entities.business import Address, BusinessRecord, ContactInfo
from discovery.domain.entities.business_category import BusinessCategory

__all__ = ["Address", "BusinessCategory", "BusinessRecord", "ContactInfo"]
