"""Abstract base classes for annotation and analysis strategies."""

from textmark.interfaces.analyzer import (
    AnalysisReport,
    BaseAnalyzer,
    SentenceAnalysis,
    SentenceLabel,
)
from textmark.interfaces.annotator import (
    AISentenceFinding,
    AnnotationError,
    BaseAnnotator,
    GrammarFinding,
    PatternError,
)
from textmark.interfaces.highlighter import BaseHighlighter, Issue

__all__ = [
    "AISentenceFinding",
    "AnalysisReport",
    "AnnotationError",
    "BaseAnalyzer",
    "BaseAnnotator",
    "BaseHighlighter",
    "GrammarFinding",
    "Issue",
    "PatternError",
    "SentenceAnalysis",
    "SentenceLabel",
]
