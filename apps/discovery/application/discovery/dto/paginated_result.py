"""Paginated Result DTO."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class PaginatedResult(Generic[T]):
    """페이지네이션 결과 (파생 값, 저장하지 않음)."""

    data: list[T] = field(default_factory=list)
    page: int = 1
    limit: int = 0
    total: int = 0
    total_pages: int = 0
    has_next: bool = False
    has_prev: bool = False
