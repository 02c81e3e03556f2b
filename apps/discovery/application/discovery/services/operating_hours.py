"""Operating-Hours Evaluator.

주간 영업 스케줄과 현재 시각으로 영업 중 여부를 판정합니다.
Port 의존성이 없는 순수 로직입니다.

정책:
    - 시간 비교는 0으로 채운 "HH:MM" 문자열 비교 (경계 포함)
    - close_time < open_time 이면 자정을 넘기는 영업으로 간주.
      당일은 open_time부터 자정까지, 다음 날은 자정부터 close_time까지 영업
    - 휴게 시간(breaks)은 [start, end) 구간 동안 휴무
    - is_24_hours 는 시간/휴게와 무관하게 영업
"""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from discovery.domain.value_objects import WEEKDAYS, DaySchedule, OperatingHours


def is_open_now(hours: OperatingHours | None, now: datetime) -> bool:
    """now 의 벽시계 시각 기준으로 영업 중인지 판정합니다."""
    if hours is None:
        return False

    weekday_index = now.weekday()
    current = now.strftime("%H:%M")

    today = hours.for_day(WEEKDAYS[weekday_index])
    if today is not None and _open_on_day(today, current):
        return True

    # 전날 자정을 넘긴 영업이 이어지는 경우
    yesterday = hours.for_day(WEEKDAYS[(weekday_index - 1) % 7])
    return yesterday is not None and _open_after_midnight(yesterday, current)


def _open_on_day(day: DaySchedule, current: str) -> bool:
    if not day.is_open:
        return False
    if day.is_24_hours:
        return True
    if day.open_time is None or day.close_time is None:
        return False

    if day.is_overnight:
        within = current >= day.open_time
    else:
        within = day.open_time <= current <= day.close_time
    return within and not _in_break(day, current)


def _open_after_midnight(day: DaySchedule, current: str) -> bool:
    return day.is_overnight and current <= day.close_time and not _in_break(day, current)


def _in_break(day: DaySchedule, current: str) -> bool:
    return any(slot.contains(current) for slot in day.breaks)


class OperatingHoursEvaluator:
    """설정된 시간대를 기준으로 영업 여부를 판정합니다.

    timezone-aware 시각은 설정 시간대로 변환하고, naive 시각은
    이미 현지 시각인 것으로 간주합니다. 비즈니스별 시간대는 저장하지 않습니다.
    """

    def __init__(self, timezone: ZoneInfo) -> None:
        self._tz = timezone

    @property
    def timezone(self) -> ZoneInfo:
        return self._tz

    def now(self) -> datetime:
        return datetime.now(self._tz)

    def localize(self, now: datetime) -> datetime:
        if now.tzinfo is None:
            return now
        return now.astimezone(self._tz)

    def is_open(self, hours: OperatingHours | None, now: datetime) -> bool:
        return is_open_now(hours, self.localize(now))
