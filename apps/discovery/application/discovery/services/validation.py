"""Request Validation.

Facade 경계에서 즉시 실패(fail-fast)하는 입력 검증.
"""

from __future__ import annotations

import math

from discovery.application.common.exceptions import InvalidArgumentError
from discovery.application.discovery.policy import DiscoveryPolicy


def validate_radius(radius_km: float, policy: DiscoveryPolicy) -> None:
    if not math.isfinite(radius_km) or radius_km <= 0:
        raise InvalidArgumentError("radius_km", "must be a positive number")
    if radius_km > policy.max_radius_km:
        raise InvalidArgumentError("radius_km", f"must not exceed {policy.max_radius_km}")


def validate_limit(limit: int, policy: DiscoveryPolicy) -> None:
    if limit <= 0:
        raise InvalidArgumentError("limit", "must be greater than 0")
    if limit > policy.max_limit:
        raise InvalidArgumentError("limit", f"must not exceed {policy.max_limit}")


def validate_min_rating(min_rating: float) -> None:
    if not math.isfinite(min_rating) or not 0 <= min_rating <= 5:
        raise InvalidArgumentError("min_rating", "must be between 0 and 5")
