"""SQLAlchemy ORM Models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class BusinessCategoryRow(Base):
    """business_categories 테이블 (정적 참조 데이터)."""

    __tablename__ = "business_categories"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    icon_url: Mapped[Optional[str]] = mapped_column(String(256))
    interaction_type: Mapped[str] = mapped_column(String(16), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    display_order: Mapped[int] = mapped_column(Integer, default=0)


class BusinessRow(Base):
    """businesses 테이블."""

    __tablename__ = "businesses"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    owner_id: Mapped[Optional[str]] = mapped_column(String(64))
    business_name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    latitude: Mapped[Optional[float]] = mapped_column(Float, index=True)
    longitude: Mapped[Optional[float]] = mapped_column(Float, index=True)
    address: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON)
    contact_info: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON)
    operating_hours: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON)
    category_id: Mapped[Optional[str]] = mapped_column(
        String(64), ForeignKey("business_categories.id")
    )
    interaction_type: Mapped[Optional[str]] = mapped_column(String(16))
    specialized_categories: Mapped[Optional[list[str]]] = mapped_column(JSON)
    supports_delivery: Mapped[bool] = mapped_column(Boolean, default=False)
    is_approved: Mapped[bool] = mapped_column(Boolean, default=False)
    status: Mapped[str] = mapped_column(String(32), default="pending")
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False)
    avg_rating: Mapped[Optional[float]] = mapped_column(Float, default=0.0)
    total_reviews: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
