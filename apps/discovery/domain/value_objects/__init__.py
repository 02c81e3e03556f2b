"""Domain Value Objects."""

from discovery.domain.value_objects.location import LocationReading
from discovery.domain.value_objects.operating_hours import (
    WEEKDAYS,
    DaySchedule,
    OperatingHours,
    TimeSlot,
)

__all__ = ["LocationReading", "DaySchedule", "OperatingHours", "TimeSlot", "WEEKDAYS"]
