"""Category Controller."""

from __future__ import annotations

from fastapi import APIRouter, Query

from discovery.application.discovery import DiscoveryFacade
from discovery.presentation.http.controllers.discovery import (
    parse_interaction_type,
    to_category_entry,
)
from discovery.presentation.http.schemas import CategoryEntry

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryEntry], summary="List business categories")
async def categories(
    interaction_type: str | None = Query(None, description="order | book | consult"),
) -> list[CategoryEntry]:
    """활성 카테고리를 표시 순서대로 반환합니다."""
    items = DiscoveryFacade.list_categories(parse_interaction_type(interaction_type))
    return [to_category_entry(c) for c in items]
