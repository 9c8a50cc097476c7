"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
and provides type-safe access throughout the application.
"""

import logging
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

GrammarMode = Literal["sequential", "safe"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Strategy Selection
    grammar_mode: GrammarMode = Field(
        default="sequential",
        description="Grammar annotator to use: 'sequential' (cumulative) or 'safe' (span-based).",
    )

    # Markup
    grammar_mark_class: str = Field(
        default="bg-indigo-100 text-indigo-800 rounded px-1",
        description="CSS classes for grammar suggestion highlights.",
    )
    ai_mark_class: str = Field(
        default="bg-purple-100 text-purple-800 px-1 rounded",
        description="CSS classes for AI-flagged sentence highlights.",
    )

    # Heuristic analysis
    ai_threshold: int = Field(
        default=70,
        ge=0,
        le=100,
        description="AI-likelihood (0-100) at or above which a sentence is flagged.",
    )

    # API limits
    max_text_length: int = Field(
        default=200_000,
        gt=0,
        description="Maximum accepted document length in characters.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path = Field(
        default=Path("./logs"),
        description="Directory for info.log and error.log.",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    @field_validator("grammar_mode", mode="before")
    @classmethod
    def normalize_grammar_mode(cls, v: str) -> str:
        """Normalize grammar mode to lowercase."""
        return v.lower() if isinstance(v, str) else v

    def configure_logging(self) -> None:
        """Configure global logging based on settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=level,
        )

        logger.setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings
