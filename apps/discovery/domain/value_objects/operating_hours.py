"""Operating Hours Value Objects.

요일별 영업 스케줄. 시간은 0으로 채운 "HH:MM" 문자열이며,
같은 형식끼리의 문자열 비교가 시각 비교와 동일하다는 점에 의존합니다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _check_time(value: str | None, name: str) -> None:
    if value is not None and not _HHMM.match(value):
        raise ValueError(f"Invalid {name} '{value}', expected zero-padded HH:MM")


@dataclass(frozen=True)
class TimeSlot:
    """휴게 시간 구간 [start_time, end_time)."""

    start_time: str
    end_time: str

    def __post_init__(self) -> None:
        _check_time(self.start_time, "start_time")
        _check_time(self.end_time, "end_time")

    def contains(self, hhmm: str) -> bool:
        return self.start_time <= hhmm < self.end_time


@dataclass(frozen=True)
class DaySchedule:
    """하루 영업 스케줄."""

    is_open: bool
    open_time: str | None = None
    close_time: str | None = None
    is_24_hours: bool = False
    breaks: tuple[TimeSlot, ...] = ()

    def __post_init__(self) -> None:
        if not self.is_open and (self.open_time is not None or self.close_time is not None):
            raise ValueError("Closed day must not define open_time/close_time")
        _check_time(self.open_time, "open_time")
        _check_time(self.close_time, "close_time")

    @property
    def is_overnight(self) -> bool:
        """close_time < open_time 인 자정을 넘기는 영업인지 여부."""
        return (
            self.is_open
            and not self.is_24_hours
            and self.open_time is not None
            and self.close_time is not None
            and self.close_time < self.open_time
        )

    @classmethod
    def closed(cls) -> "DaySchedule":
        return cls(is_open=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DaySchedule":
        if not isinstance(data, Mapping):
            raise ValueError(f"Invalid day schedule {data!r}, expected mapping")
        is_open = bool(data.get("is_open", False))
        raw_breaks = data.get("breaks") or data.get("break_times") or ()
        if any(not isinstance(b, Mapping) for b in raw_breaks):
            raise ValueError("Invalid break entry, expected mapping")
        return cls(
            is_open=is_open,
            open_time=(data.get("open_time") or None) if is_open else None,
            close_time=(data.get("close_time") or None) if is_open else None,
            is_24_hours=bool(data.get("is_24_hours", False)),
            breaks=tuple(
                TimeSlot(start_time=b["start_time"], end_time=b["end_time"]) for b in raw_breaks
            ),
        )


@dataclass(frozen=True)
class OperatingHours:
    """요일 이름 -> DaySchedule 매핑."""

    days: Mapping[str, DaySchedule] = field(default_factory=dict)

    def for_day(self, weekday: str) -> DaySchedule | None:
        return self.days.get(weekday)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "OperatingHours":
        """카탈로그 데이터로부터 생성합니다. 누락된 요일은 휴무로 채웁니다."""
        if not isinstance(data, Mapping):
            raise ValueError(f"Invalid operating hours {data!r}, expected mapping")
        normalized = {str(key).strip().lower(): value for key, value in data.items()}
        days: dict[str, DaySchedule] = {}
        for weekday in WEEKDAYS:
            raw = normalized.get(weekday)
            if raw is None:
                days[weekday] = DaySchedule.closed()
            elif isinstance(raw, DaySchedule):
                days[weekday] = raw
            else:
                days[weekday] = DaySchedule.from_mapping(raw)
        return cls(days=days)

    @classmethod
    def always_open(cls) -> "OperatingHours":
        return cls(days={d: DaySchedule(is_open=True, is_24_hours=True) for d in WEEKDAYS})
