"""FastAPI dependencies for dependency injection.

Provides reusable dependencies for routes including:
- Application settings
- The component factory bound to those settings
- Request size limits
"""

import logging

from fastapi import HTTPException, Request, status

from textmark.core.config import Settings
from textmark.core.factory import ComponentFactory

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


def get_component_factory(request: Request) -> ComponentFactory:
    """Return the application's component factory."""
    return request.app.state.factory


def ensure_text_length(text: str, settings: Settings) -> None:
    """Reject documents longer than the configured limit.

    Raises:
        HTTPException: 422 if the text is too long.
    """
    if len(text) > settings.max_text_length:
        logger.warning(
            f"Rejected text of {len(text)} chars (limit {settings.max_text_length})"
        )
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Text exceeds {settings.max_text_length} characters",
        )
