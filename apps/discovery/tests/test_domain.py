"""Domain Layer 단위 테스트."""

from __future__ import annotations

import math

import pytest

from discovery.domain.entities import BusinessRecord
from discovery.domain.enums import BusinessStatus, InteractionType
from discovery.domain.exceptions import BusinessNotFoundError, MalformedRecordError
from discovery.domain.value_objects import (
    WEEKDAYS,
    DaySchedule,
    LocationReading,
    OperatingHours,
    TimeSlot,
)


class TestLocationReading:
    """LocationReading Value Object 테스트."""

    def test_valid_location(self) -> None:
        loc = LocationReading(latitude=19.076, longitude=72.8777, label="Mumbai")
        assert loc.latitude == 19.076
        assert loc.label == "Mumbai"

    @pytest.mark.parametrize("lat", [-90.1, 90.1, math.nan, math.inf])
    def test_invalid_latitude(self, lat: float) -> None:
        with pytest.raises(ValueError, match="Invalid latitude"):
            LocationReading(latitude=lat, longitude=0)

    @pytest.mark.parametrize("lon", [-180.1, 180.1, math.nan])
    def test_invalid_longitude(self, lon: float) -> None:
        with pytest.raises(ValueError, match="Invalid longitude"):
            LocationReading(latitude=0, longitude=lon)

    def test_boundary_values(self) -> None:
        assert LocationReading(latitude=90, longitude=180).longitude == 180
        assert LocationReading(latitude=-90, longitude=-180).latitude == -90


class TestInteractionType:
    """InteractionType 파싱 테스트."""

    def test_parse_wire_value(self) -> None:
        assert InteractionType.parse(" Book ") is InteractionType.BOOK

    @pytest.mark.parametrize(
        ("legacy", "expected"),
        [
            ("type_a", InteractionType.ORDER),
            ("TYPE_B", InteractionType.BOOK),
            ("type_c", InteractionType.CONSULT),
        ],
    )
    def test_parse_legacy_value(self, legacy: str, expected: InteractionType) -> None:
        assert InteractionType.parse(legacy) is expected

    def test_parse_unknown_raises(self) -> None:
        with pytest.raises(ValueError):
            InteractionType.parse("deliver")


class TestDaySchedule:
    """DaySchedule 테스트."""

    def test_closed_day_rejects_times(self) -> None:
        with pytest.raises(ValueError, match="Closed day"):
            DaySchedule(is_open=False, open_time="09:00", close_time="18:00")

    @pytest.mark.parametrize("value", ["9:00", "24:00", "09:60", "0900"])
    def test_rejects_malformed_time(self, value: str) -> None:
        with pytest.raises(ValueError, match="HH:MM"):
            DaySchedule(is_open=True, open_time=value, close_time="18:00")

    def test_overnight_detection(self) -> None:
        assert DaySchedule(is_open=True, open_time="18:00", close_time="02:00").is_overnight
        assert not DaySchedule(is_open=True, open_time="09:00", close_time="18:00").is_overnight
        assert not DaySchedule(is_open=True, is_24_hours=True).is_overnight

    def test_from_mapping_accepts_break_times(self) -> None:
        day = DaySchedule.from_mapping(
            {
                "is_open": True,
                "open_time": "08:00",
                "close_time": "20:00",
                "break_times": [{"start_time": "13:00", "end_time": "14:00"}],
            }
        )
        assert day.breaks == (TimeSlot("13:00", "14:00"),)

    def test_from_mapping_drops_times_for_closed_day(self) -> None:
        day = DaySchedule.from_mapping({"is_open": False, "open_time": "09:00"})
        assert day == DaySchedule.closed()


class TestTimeSlot:
    def test_half_open_interval(self) -> None:
        slot = TimeSlot("13:00", "14:00")
        assert slot.contains("13:00")
        assert slot.contains("13:59")
        assert not slot.contains("14:00")
        assert not slot.contains("12:59")


class TestOperatingHours:
    """OperatingHours 테스트."""

    def test_missing_days_are_closed(self) -> None:
        hours = OperatingHours.from_mapping(
            {"Monday": {"is_open": True, "open_time": "09:00", "close_time": "18:00"}}
        )
        assert set(hours.days) == set(WEEKDAYS)
        assert hours.for_day("monday").is_open
        assert hours.for_day("sunday") == DaySchedule.closed()

    def test_always_open(self) -> None:
        hours = OperatingHours.always_open()
        assert all(hours.for_day(d).is_24_hours for d in WEEKDAYS)

    @pytest.mark.parametrize(
        "data",
        [
            ["09:00-18:00"],
            {"monday": "closed"},
            {"monday": {"is_open": True, "breaks": ["13:00-14:00"]}},
        ],
    )
    def test_rejects_non_mapping_entries(self, data: object) -> None:
        with pytest.raises(ValueError, match="expected mapping"):
            OperatingHours.from_mapping(data)


class TestBusinessRecord:
    def test_is_active(self) -> None:
        record = BusinessRecord(id="b1", name="Shop", status=BusinessStatus.ACTIVE)
        assert record.is_active
        assert not BusinessRecord(id="b2", name="Shop").is_active

    def test_defaults(self) -> None:
        record = BusinessRecord(id="b1", name="Shop")
        assert record.status is BusinessStatus.PENDING
        assert record.specialized_categories == frozenset()
        assert record.contact_info.phone is None


class TestDomainExceptions:
    def test_business_not_found_message(self) -> None:
        error = BusinessNotFoundError("b1")
        assert error.message == "Business not found"
        assert error.business_id == "b1"

    def test_malformed_record_keeps_reason(self) -> None:
        error = MalformedRecordError("b1", "missing location")
        assert error.record_id == "b1"
        assert error.reason == "missing location"
        assert "missing location" in error.message
