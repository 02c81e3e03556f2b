"""Distance Calculator.

Port 의존성이 없는 순수 로직입니다.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0
KM_PER_DEGREE_LAT = 111.045


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """두 좌표 간 대원 거리를 km로 계산합니다 (Haversine).

    전제 조건: 위도 [-90, 90], 경도 [-180, 180] 범위의 유한한 값.
    범위 검사는 하지 않으며 NaN 입력은 NaN으로 전파됩니다.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def format_distance(km: float | None) -> str | None:
    if km is None:
        return None
    meters = km * 1000
    if meters < 1000:
        return f"{int(meters)}m"
    return f"{km:.1f}km"


@dataclass(frozen=True)
class BoundingBox:
    """반경을 포함하는 위경도 사각형.

    경도 구간이 ±180°를 넘으면 두 구간으로 나뉩니다.
    """

    min_lat: float
    max_lat: float
    lon_ranges: tuple[tuple[float, float], ...]

    @property
    def covers_all_longitudes(self) -> bool:
        return self.lon_ranges == ((-180.0, 180.0),)


def bounding_box(latitude: float, longitude: float, radius_km: float) -> BoundingBox:
    """인덱스 프리필터용 bounding box. 실제 반경 판정은 distance_km로 합니다."""
    d_lat = radius_km / KM_PER_DEGREE_LAT
    min_lat = max(-90.0, latitude - d_lat)
    max_lat = min(90.0, latitude + d_lat)

    cos_lat = math.cos(math.radians(latitude))
    d_lon = 180.0 if cos_lat < 1e-6 else d_lat / cos_lat
    # 극점을 포함하면 모든 경도가 반경 안에 들어올 수 있음
    if d_lon >= 180.0 or min_lat <= -90.0 or max_lat >= 90.0:
        return BoundingBox(min_lat, max_lat, ((-180.0, 180.0),))

    west, east = longitude - d_lon, longitude + d_lon
    if west < -180.0:
        lon_ranges = ((west + 360.0, 180.0), (-180.0, east))
    elif east > 180.0:
        lon_ranges = ((west, 180.0), (-180.0, east - 360.0))
    else:
        lon_ranges = ((west, east),)
    return BoundingBox(min_lat, max_lat, lon_ranges)
