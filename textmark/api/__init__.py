"""FastAPI routers and dependencies."""

from textmark.api.annotations import router as annotations_router
from textmark.api.deps import get_app_settings, get_component_factory

__all__ = [
    "annotations_router",
    "get_app_settings",
    "get_component_factory",
]
