"""Component Factory for strategy instantiation.

The Factory Pattern allows the application to instantiate
different strategy implementations at runtime based on
configuration or environment variables.
"""

import logging

from textmark.core.config import Settings, get_settings
from textmark.interfaces.analyzer import BaseAnalyzer
from textmark.interfaces.annotator import BaseAnnotator
from textmark.interfaces.highlighter import BaseHighlighter
from textmark.strategies.analyzers import HeuristicAnalyzer
from textmark.strategies.annotators import (
    AISentenceAnnotator,
    GrammarAnnotator,
    IssueHighlighter,
    SpanGrammarAnnotator,
)

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        factory = ComponentFactory(get_settings())

        grammar = factory.get_grammar_annotator()
        html = grammar.annotate(text, findings)
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._grammar_cache: dict[str, BaseAnnotator] = {}
        self._ai_annotator_cache: BaseAnnotator | None = None
        self._highlighter_cache: BaseHighlighter | None = None
        self._analyzer_cache: BaseAnalyzer | None = None

    def get_grammar_annotator(self, mode: str | None = None) -> BaseAnnotator:
        """Get a grammar annotator for the given mode.

        Args:
            mode: 'sequential' or 'safe'. If None, uses settings.

        Returns:
            A BaseAnnotator implementation instance.

        Raises:
            ValueError: If the mode is unknown.
        """
        mode = (mode or self._settings.grammar_mode).lower()

        if mode not in self._grammar_cache:
            logger.info(f"Instantiating grammar annotator: {mode}")

            match mode:
                case "sequential":
                    annotator = GrammarAnnotator(css_class=self._settings.grammar_mark_class)
                case "safe":
                    annotator = SpanGrammarAnnotator(css_class=self._settings.grammar_mark_class)
                case _:
                    raise ValueError(
                        f"Unknown grammar mode: {mode}. "
                        f"Valid options: 'sequential', 'safe'"
                    )
            self._grammar_cache[mode] = annotator

        return self._grammar_cache[mode]

    def get_ai_annotator(self) -> BaseAnnotator:
        """Get the AI sentence annotator."""
        if self._ai_annotator_cache is None:
            logger.info("Instantiating AI sentence annotator")
            self._ai_annotator_cache = AISentenceAnnotator(css_class=self._settings.ai_mark_class)

        return self._ai_annotator_cache

    def get_issue_highlighter(self) -> BaseHighlighter:
        """Get the issue highlighter."""
        if self._highlighter_cache is None:
            logger.info("Instantiating issue highlighter")
            self._highlighter_cache = IssueHighlighter()

        return self._highlighter_cache

    def get_analyzer(self) -> BaseAnalyzer:
        """Get the text analyzer."""
        if self._analyzer_cache is None:
            logger.info("Instantiating heuristic analyzer")
            self._analyzer_cache = HeuristicAnalyzer(ai_threshold=self._settings.ai_threshold)

        return self._analyzer_cache

    def clear_cache(self) -> None:
        """Clear all cached component instances.

        This forces new instances to be created on next access.
        Useful for testing or when settings change.
        """
        self._grammar_cache.clear()
        self._ai_annotator_cache = None
        self._highlighter_cache = None
        self._analyzer_cache = None
        logger.debug("Component factory cache cleared")


# Global factory instance
_factory: ComponentFactory | None = None


def get_factory() -> ComponentFactory:
    """Get or create the global ComponentFactory instance.

    Returns:
        The singleton ComponentFactory instance.
    """
    global _factory
    if _factory is None:
        _factory = ComponentFactory()
    return _factory
