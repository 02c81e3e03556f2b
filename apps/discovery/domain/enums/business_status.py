"""Business Status Enum."""

from __future__ import annotations

from enum import Enum


class BusinessStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"
    PENDING = "pending"
