"""Core configuration and factory components."""

from textmark.core.config import Settings, get_settings
from textmark.core.factory import ComponentFactory, get_factory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
    "get_factory",
]
