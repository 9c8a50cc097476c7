"""Offline heuristic text analyzer.

Produces a document report without any external service: rule-based
grammar checks, similarity against a small reference phrase corpus,
near-duplicate detection between sentences and an AI-likeness score
derived from sentence length, vocabulary diversity and repetition.

The report also carries findings for the annotators. AI sentence findings
are indexed with `split_sentences`, the same segmentation the AI sentence
annotator uses, so they can be passed to it directly.
"""

import logging
import math
import re
from collections.abc import Iterable

from textmark.interfaces.analyzer import (
    AnalysisReport,
    BaseAnalyzer,
    SentenceAnalysis,
    SentenceLabel,
)
from textmark.interfaces.annotator import AISentenceFinding, GrammarFinding
from textmark.strategies.annotators.ai_sentence import split_sentences

logger = logging.getLogger(__name__)

REFERENCE_PHRASES = (
    "freedom of speech",
    "equality before law",
    "natural justice",
    "due process of law",
    "burden of proof lies on the prosecution",
    "beyond reasonable doubt",
    "principles of natural justice",
    "rule of law",
    "fundamental rights are enforceable",
    "separation of powers",
    "presumption of innocence",
    "writ of habeas corpus",
    "stare decisis",
    "actus reus and mens rea",
    "reasonable restrictions in the interests of public order",
    "basic structure doctrine",
    "procedural fairness",
    "audi alteram partem",
    "res judicata",
    "locus standi",
)

LONG_SENTENCE_WORDS = 28
PHRASE_SIMILARITY_CUTOFF = 0.55
DUPLICATE_SIMILARITY_CUTOFF = 0.6

MSG_CAPITAL = "Start sentence with a capital letter."
MSG_PUNCTUATION = "Add proper ending punctuation."
MSG_SPACES = "Remove extra spaces."
MSG_REPEATED = "Avoid repeated words."
MSG_PLURAL = "Use 'are' with plural subjects."
MSG_SINGULAR = "Use 'is' with singular subjects."
MSG_LONG = "Sentence too long; try splitting."

_WORD = re.compile(r"[a-zA-Z]+")
_REPEATED_WORD = re.compile(r"\b(\w+)\s+\1\b", re.IGNORECASE)
_PEOPLE_IS = re.compile(r"\bpeople is\b", re.IGNORECASE)
_EVERYONE_ARE = re.compile(r"\beveryone are\b", re.IGNORECASE)
_REPORT_BOUNDARY = re.compile(r"(?<=[.!?])\s+|\n+")


def _round(value: float) -> int:
    """Round half up, as score displays expect."""
    return math.floor(value + 0.5)


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def tokenize(sentence: str) -> list[str]:
    """Lowercase alphabetic tokens."""
    return _WORD.findall(sentence.lower())


def report_sentences(text: str) -> list[str]:
    """Sentences used for scoring: trimmed and non-empty.

    Inner whitespace is kept so the extra-spaces rule can see it.
    """
    return [s.strip() for s in _REPORT_BOUNDARY.split(text) if s.strip()]


def jaccard(a: str, b: str) -> float:
    """Jaccard similarity of the token sets of two strings."""
    left = set(tokenize(a))
    right = set(tokenize(b))
    if not left and not right:
        return 0.0
    inter = len(left & right)
    return inter / (len(left) + len(right) - inter)


def grammar_issues(sentence: str) -> list[str]:
    """Messages for every grammar rule the sentence breaks."""
    issues: list[str] = []
    if re.match(r"[a-z]", sentence):
        issues.append(MSG_CAPITAL)
    if not re.search(r"[.!?]$", sentence):
        issues.append(MSG_PUNCTUATION)
    if re.search(r"\s{2,}", sentence):
        issues.append(MSG_SPACES)
    if _REPEATED_WORD.search(sentence):
        issues.append(MSG_REPEATED)
    if _PEOPLE_IS.search(sentence):
        issues.append(MSG_PLURAL)
    if _EVERYONE_ARE.search(sentence):
        issues.append(MSG_SINGULAR)
    if len(tokenize(sentence)) > LONG_SENTENCE_WORDS:
        issues.append(MSG_LONG)
    return issues


def ai_likelihood(text: str) -> int:
    """AI-likeness of a text on a 0..100 scale.

    Long average sentences weigh 40, low vocabulary diversity 35 and
    immediate word repetition 25.
    """
    sentences = report_sentences(text)
    tokens = tokenize(text)
    total = len(tokens) or 1

    type_token_ratio = len(set(tokens)) / total
    avg_len = sum(len(tokenize(s)) for s in sentences) / max(len(sentences), 1)
    repeats = sum(1 for i in range(1, len(tokens)) if tokens[i] == tokens[i - 1]) / total

    score = 0.0
    score += _clamp((avg_len - 18) / 20) * 40
    score += _clamp((0.55 - type_token_ratio) / 0.55) * 35
    score += min(repeats * 8, 1) * 25

    return _round(_clamp(score, 0, 100))


class HeuristicAnalyzer(BaseAnalyzer):
    """Rule-based analyzer that needs no external service.

    Attributes:
        ai_threshold: Likelihood at or above which a sentence is AI-suspect.
        phrases: Reference phrases for similarity checks.
    """

    def __init__(
        self,
        ai_threshold: int = 70,
        phrases: Iterable[str] = REFERENCE_PHRASES,
    ) -> None:
        self._ai_threshold = ai_threshold
        self._phrases = tuple(phrases)

    def analyze(self, text: str) -> AnalysisReport:
        """Score a document and build findings for the annotators.

        Args:
            text: The raw document text.

        Returns:
            The analysis report.
        """
        sentences = report_sentences(text)
        logger.info(f"Analyzing {len(sentences)} sentences ({len(text)} chars)")

        detailed = [self._analyze_sentence(i, s, sentences) for i, s in enumerate(sentences)]

        total = len(sentences) or 1
        counts = {
            "plagiarized": sum(1 for d in detailed if d.label is SentenceLabel.PLAGIARIZED),
            "grammar": sum(1 for d in detailed if d.label is SentenceLabel.GRAMMAR),
            "ai": sum(1 for d in detailed if d.label is SentenceLabel.AI_SUSPECT),
            "unique": sum(1 for d in detailed if d.label is SentenceLabel.UNIQUE),
        }
        long_sentences = sum(
            1 for d in detailed if len(tokenize(d.sentence)) > LONG_SENTENCE_WORDS
        )

        report = AnalysisReport(
            originality=_round(100 * (1 - counts["plagiarized"] / total)),
            grammar_score=max(0, _round(100 - counts["grammar"] * 100 / total)),
            clarity=max(0, _round(100 - long_sentences * 100 / total)),
            ai_score=ai_likelihood(text),
            counts=counts,
            total=total,
            sentences=detailed,
            grammar_findings=self.grammar_findings(text),
            ai_findings=self.ai_findings(text),
        )
        logger.info(
            f"Analysis done: originality={report.originality}, "
            f"grammar={report.grammar_score}, ai={report.ai_score}"
        )
        return report

    def grammar_findings(self, text: str) -> list[GrammarFinding]:
        """Pattern findings for word-level rules, in document order.

        Each distinct offending phrase yields one escaped, word-bounded
        pattern so the grammar annotator wraps exactly that phrase.
        """
        located: list[tuple[int, str, str]] = []
        for match in _REPEATED_WORD.finditer(text):
            word = re.escape(match.group(1))
            located.append((match.start(), rf"\b{word}\s+{word}\b", MSG_REPEATED))
        for match in _PEOPLE_IS.finditer(text):
            located.append((match.start(), r"\bpeople\s+is\b", MSG_PLURAL))
        for match in _EVERYONE_ARE.finditer(text):
            located.append((match.start(), r"\beveryone\s+are\b", MSG_SINGULAR))

        findings: list[GrammarFinding] = []
        seen: set[str] = set()
        for _start, pattern, message in sorted(located, key=lambda item: item[0]):
            key = pattern.lower()
            if key in seen:
                continue
            seen.add(key)
            findings.append(GrammarFinding(error=pattern, suggestion=message))
        return findings

    def ai_findings(self, text: str) -> list[AISentenceFinding]:
        """One finding per sentence, indexed like the AI sentence annotator."""
        findings = []
        for i, sentence in enumerate(split_sentences(text)):
            likelihood = ai_likelihood(sentence)
            findings.append(
                AISentenceFinding(
                    index=i,
                    is_ai=likelihood >= self._ai_threshold,
                    score=round(likelihood / 100, 2),
                )
            )
        return findings

    def _analyze_sentence(self, idx: int, sentence: str, sentences: list[str]) -> SentenceAnalysis:
        issues = grammar_issues(sentence)
        similarity = max((jaccard(sentence, p) for p in self._phrases), default=0.0)
        duplicate = any(
            jaccard(sentence, other) >= DUPLICATE_SIMILARITY_CUTOFF
            for i, other in enumerate(sentences)
            if i != idx
        )

        # plagiarized > grammar > ai-suspect > unique
        if similarity >= PHRASE_SIMILARITY_CUTOFF or duplicate:
            label = SentenceLabel.PLAGIARIZED
        elif issues:
            label = SentenceLabel.GRAMMAR
        elif ai_likelihood(sentence) >= self._ai_threshold:
            label = SentenceLabel.AI_SUSPECT
        else:
            label = SentenceLabel.UNIQUE

        return SentenceAnalysis(
            sentence=sentence,
            label=label,
            grammar=tuple(issues),
            phrase_similarity=round(similarity, 2),
            duplicate=duplicate,
        )

    @property
    def ai_threshold(self) -> int:
        return self._ai_threshold
