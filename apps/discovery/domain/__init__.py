"""Discovery Domain Layer."""

from discovery.domain.entities import Address, BusinessCategory, BusinessRecord, ContactInfo
from discovery.domain.enums import BusinessStatus, InteractionType
from discovery.domain.value_objects import DaySchedule, LocationReading, OperatingHours, TimeSlot

__all__ = [
    "Address",
    "BusinessCategory",
    "BusinessRecord",
    "BusinessStatus",
    "ContactInfo",
    "DaySchedule",
    "InteractionType",
    "LocationReading",
    "OperatingHours",
    "TimeSlot",
]
