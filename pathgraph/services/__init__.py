"""Services layer - Orchestration over ports."""

from .route_service import RouteService

__all__ = ["RouteService"]
