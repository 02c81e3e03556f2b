"""Category Catalog Service.

비즈니스 카테고리 정적 참조 데이터. 시작 시 한 번 로드되며 변경되지 않습니다.
"""

from __future__ import annotations

from discovery.domain.entities import BusinessCategory
from discovery.domain.enums import InteractionType

_ORDER = InteractionType.ORDER
_BOOK = InteractionType.BOOK
_CONSULT = InteractionType.CONSULT

BUSINESS_CATEGORIES: tuple[BusinessCategory, ...] = (
    # ORDER: 바로 주문
    BusinessCategory(
        "grocery_store", "Grocery Store", _ORDER,
        "Fresh produce, packaged goods, household items", "🛒", True, 1,
    ),
    BusinessCategory(
        "pharmacy", "Pharmacy", _ORDER,
        "OTC medicines, health products, wellness items", "💊", True, 2,
    ),
    BusinessCategory(
        "bakery_sweets", "Bakery & Sweets", _ORDER,
        "Fresh cakes, pastries, traditional sweets", "🧁", True, 3,
    ),
    BusinessCategory(
        "tailoring_products", "Tailoring Products", _ORDER,
        "Ready-made apparel, fabrics, accessories", "👕", True, 4,
    ),
    BusinessCategory(
        "organic_farming", "Organic Farming", _ORDER,
        "Fresh farm produce, organic dairy, natural products", "🌱", True, 5,
    ),
    BusinessCategory(
        "stationary_books", "Stationary & Books", _ORDER,
        "School supplies, office items, books", "📚", True, 6,
    ),
    # BOOK: 서비스 예약
    BusinessCategory(
        "electrician", "Electrician", _BOOK,
        "Electrical repairs, installations, wiring", "⚡", True, 7,
    ),
    BusinessCategory(
        "plumber", "Plumber", _BOOK,
        "Plumbing repairs, installations, maintenance", "🔧", True, 8,
    ),
    BusinessCategory(
        "sports_coach", "Sports Coach", _BOOK,
        "Personal training, fitness, sports coaching", "🏃", True, 9,
    ),
    BusinessCategory(
        "elderly_care", "Elderly Care", _BOOK,
        "Home care, companionship, medical assistance", "👵", True, 10,
    ),
    BusinessCategory(
        "tailoring_services", "Tailoring Services", _BOOK,
        "Custom stitching, alterations, embroidery", "✂️", True, 11,
    ),
    BusinessCategory(
        "beauty_salon", "Beauty & Salon", _BOOK,
        "Haircuts, facials, beauty treatments", "💅", True, 12,
    ),
    BusinessCategory(
        "appliance_repair", "Appliance Repair", _BOOK,
        "Home appliance repairs and maintenance", "🔌", True, 13,
    ),
    BusinessCategory(
        "it_repair", "IT Repair", _BOOK,
        "Computer, laptop, mobile phone repairs", "💻", True, 14,
    ),
    # CONSULT: 문의/상담
    BusinessCategory(
        "travel_agency", "Travel Agency", _CONSULT,
        "Custom tours, flight bookings, travel planning", "✈️", True, 15,
    ),
    BusinessCategory(
        "real_estate", "Real Estate", _CONSULT,
        "Property buying, selling, rentals", "🏠", True, 16,
    ),
    BusinessCategory(
        "construction_handyman", "Construction & Handyman", _CONSULT,
        "Renovation, carpentry, construction projects", "🔨", True, 17,
    ),
    BusinessCategory(
        "architecture_interior", "Architecture & Interior", _CONSULT,
        "Architectural design, interior decoration", "🏛️", True, 18,
    ),
    BusinessCategory(
        "legal_consultancy", "Legal & Consultancy", _CONSULT,
        "Legal advice, business consultancy", "⚖️", True, 19,
    ),
)

_BY_ID: dict[str, BusinessCategory] = {c.id: c for c in BUSINESS_CATEGORIES}


class CategoryCatalogService:
    """카테고리 조회 서비스."""

    @staticmethod
    def list_categories(interaction_type: InteractionType | None = None) -> list[BusinessCategory]:
        """활성 카테고리를 display_order 순으로 반환합니다."""
        categories = [
            c
            for c in BUSINESS_CATEGORIES
            if c.is_active
            and (interaction_type is None or c.interaction_type == interaction_type)
        ]
        return sorted(categories, key=lambda c: c.display_order)

    @staticmethod
    def get(category_id: str) -> BusinessCategory | None:
        return _BY_ID.get(category_id)
