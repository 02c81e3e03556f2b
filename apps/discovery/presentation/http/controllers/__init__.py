"""HTTP Controllers."""

from discovery.presentation.http.controllers.categories import router as categories_router
from discovery.presentation.http.controllers.discovery import router as discovery_router
from discovery.presentation.http.controllers.health import router as health_router

__all__ = ["categories_router", "discovery_router", "health_router"]
