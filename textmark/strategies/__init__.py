"""Concrete strategy implementations."""

from textmark.strategies.analyzers import (
    HeuristicAnalyzer,
)
from textmark.strategies.annotators import (
    AISentenceAnnotator,
    GrammarAnnotator,
    IssueHighlighter,
    SpanGrammarAnnotator,
)

__all__ = [
    "AISentenceAnnotator",
    "GrammarAnnotator",
    "HeuristicAnalyzer",
    "IssueHighlighter",
    "SpanGrammarAnnotator",
]
