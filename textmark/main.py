"""FastAPI application entry point.

Main application setup with middleware, routing, and lifecycle management.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from textmark import __version__
from textmark.api.annotations import router as annotations_router
from textmark.api.schemas import ErrorResponse
from textmark.core.config import Settings, get_settings
from textmark.core.factory import ComponentFactory
from textmark.core.logging_config import setup_logging
from textmark.interfaces.annotator import AnnotationError, PatternError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Installs file logging on startup and drops cached strategies on shutdown.
    """
    settings: Settings = app.state.settings

    # Startup
    setup_logging(settings)
    logger.info("Starting Text Annotation Engine API...")
    logger.info(f"Grammar mode: {settings.grammar_mode}")

    yield

    # Shutdown
    logger.info("Shutting down Text Annotation Engine API...")
    app.state.factory.clear_cache()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings. If None, loads from environment.

    Returns:
        Configured FastAPI application instance.
    """
    try:
        settings = settings or get_settings()

        app = FastAPI(
            title="Text Annotation Engine",
            description="Grammar suggestion and AI sentence annotation for plain-text documents",
            version=__version__,
            lifespan=lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        # Store settings and strategies in app state
        app.state.settings = settings
        app.state.factory = ComponentFactory(settings)

        # CORS middleware
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],  # Configure appropriately for production
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        app.include_router(annotations_router)
        logger.info("Registered annotations router")

        # Health check endpoint
        @app.get("/health", tags=["health"])
        async def health_check():
            """Health check endpoint for load balancers and monitoring."""
            return {
                "status": "healthy",
                "service": "text-annotation-api",
                "version": __version__,
            }

        # Exception handlers
        @app.exception_handler(PatternError)
        async def pattern_exception_handler(request: Request, exc: PatternError):
            """Handle invalid grammar finding patterns."""
            logger.warning(f"Invalid pattern: {exc}")
            return JSONResponse(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                content=ErrorResponse(
                    detail=str(exc),
                    error_code="INVALID_PATTERN",
                    extra={"pattern": exc.pattern, "finding_index": exc.finding_index},
                ).model_dump(),
            )

        @app.exception_handler(AnnotationError)
        async def annotation_exception_handler(request: Request, exc: AnnotationError):
            """Handle other annotation failures."""
            logger.error(f"Annotation error: {exc}", exc_info=True)
            return JSONResponse(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                content=ErrorResponse(
                    detail=str(exc),
                    error_code="ANNOTATION_ERROR",
                ).model_dump(),
            )

        @app.exception_handler(RequestValidationError)
        async def validation_exception_handler(request: Request, exc: RequestValidationError):
            """Handle Pydantic validation errors."""
            logger.warning(f"Validation error: {exc.errors()}")
            return JSONResponse(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                content={
                    "detail": "Validation error",
                    "errors": jsonable_encoder(exc.errors()),
                },
            )

        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle uncaught exceptions."""
            logger.error(f"Unhandled exception: {exc}", exc_info=True)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=ErrorResponse(
                    detail="Internal server error",
                    error_code="INTERNAL_ERROR",
                ).model_dump(),
            )

        logger.info("FastAPI application created successfully")
        return app

    except Exception as e:
        logger.error(f"Failed to create FastAPI app: {e}", exc_info=True)
        raise


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info("Starting uvicorn server on port 8000...")
    uvicorn.run(
        "textmark.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )
