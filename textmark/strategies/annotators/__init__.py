"""Concrete annotator implementations."""

from textmark.strategies.annotators.ai_sentence import AISentenceAnnotator, split_sentences
from textmark.strategies.annotators.grammar import GrammarAnnotator, SpanGrammarAnnotator
from textmark.strategies.annotators.issues import IssueHighlighter

__all__ = [
    "AISentenceAnnotator",
    "GrammarAnnotator",
    "IssueHighlighter",
    "SpanGrammarAnnotator",
    "split_sentences",
]
