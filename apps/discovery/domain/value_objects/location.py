"""LocationReading Value Object."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class LocationReading:
    """기기 위치 또는 사용자가 선택한 위치.

    한 번 생성되면 변경되지 않습니다.
    """

    latitude: float
    longitude: float
    label: str | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.latitude) or not -90 <= self.latitude <= 90:
            raise ValueError(f"Invalid latitude: {self.latitude}")
        if not math.isfinite(self.longitude) or not -180 <= self.longitude <= 180:
            raise ValueError(f"Invalid longitude: {self.longitude}")
