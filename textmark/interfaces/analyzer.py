"""Analyzer interfaces.

Defines the report produced by text analyzers. Analyzers are the upstream
producers of the findings consumed by the annotators.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from textmark.interfaces.annotator import AISentenceFinding, GrammarFinding


class SentenceLabel(str, Enum):
    """Label assigned to an analyzed sentence, in priority order."""

    PLAGIARIZED = "plagiarized"
    GRAMMAR = "grammar"
    AI_SUSPECT = "ai-suspect"
    UNIQUE = "unique"


@dataclass(frozen=True)
class SentenceAnalysis:
    """Per-sentence analysis result.

    Attributes:
        sentence: The trimmed sentence text.
        label: Highest-priority label that applies.
        grammar: Messages of the grammar rules that fired.
        phrase_similarity: Best similarity against the phrase corpus (0..1).
        duplicate: Whether the sentence nearly duplicates another one.
    """

    sentence: str
    label: SentenceLabel
    grammar: tuple[str, ...] = ()
    phrase_similarity: float = 0.0
    duplicate: bool = False


@dataclass(frozen=True)
class AnalysisReport:
    """Document-level analysis result.

    Attributes:
        originality: Share of sentences not flagged as plagiarized (0..100).
        grammar_score: Share of sentences without grammar issues (0..100).
        clarity: Share of sentences that are not overly long (0..100).
        ai_score: AI-likelihood of the whole text (0..100).
        counts: Number of sentences per label.
        total: Number of analyzed sentences.
        sentences: Per-sentence results.
        grammar_findings: Findings ready for the grammar annotator.
        ai_findings: Findings ready for the AI sentence annotator.
    """

    originality: int
    grammar_score: int
    clarity: int
    ai_score: int
    counts: dict[str, int]
    total: int
    sentences: list[SentenceAnalysis] = field(default_factory=list)
    grammar_findings: list[GrammarFinding] = field(default_factory=list)
    ai_findings: list[AISentenceFinding] = field(default_factory=list)


class BaseAnalyzer(ABC):
    """Abstract base class for text analysis strategies."""

    @abstractmethod
    def analyze(self, text: str) -> AnalysisReport:
        """Analyze a document.

        Args:
            text: The raw document text.

        Returns:
            An AnalysisReport with scores, sentence labels and findings.
        """
        ...
