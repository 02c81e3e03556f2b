"""BusinessCategory Entity."""

from __future__ import annotations

from dataclasses import dataclass

from discovery.domain.enums import InteractionType


@dataclass(frozen=True)
class BusinessCategory:
    """비즈니스 카테고리 (정적 참조 데이터)."""

    id: str
    name: str
    interaction_type: InteractionType
    description: str = ""
    icon: str = ""
    is_active: bool = True
    display_order: int = 0
