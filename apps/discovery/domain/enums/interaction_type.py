"""Interaction Type Enum."""

from __future__ import annotations

from enum import Enum


class InteractionType(str, Enum):
    """고객이 비즈니스와 상호작용하는 방식."""

    ORDER = "order"  # 바로 주문/구매
    BOOK = "book"  # 서비스 예약
    CONSULT = "consult"  # 문의/상담

    @classmethod
    def parse(cls, value: str) -> "InteractionType":
        """와이어 값 또는 레거시 값(type_a/b/c)을 Enum으로 변환합니다."""
        normalized = value.strip().lower()
        legacy = LEGACY_INTERACTION_TYPES.get(normalized)
        if legacy is not None:
            return legacy
        return cls(normalized)


LEGACY_INTERACTION_TYPES: dict[str, InteractionType] = {
    "type_a": InteractionType.ORDER,
    "type_b": InteractionType.BOOK,
    "type_c": InteractionType.CONSULT,
}
