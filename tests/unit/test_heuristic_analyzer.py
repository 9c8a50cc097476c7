"""Unit tests for the heuristic analyzer."""

import pytest

from textmark.interfaces.analyzer import SentenceLabel
from textmark.interfaces.annotator import GrammarFinding
from textmark.strategies.analyzers.heuristic import (
    MSG_CAPITAL,
    MSG_PLURAL,
    MSG_PUNCTUATION,
    MSG_REPEATED,
    MSG_SINGULAR,
    MSG_SPACES,
    HeuristicAnalyzer,
    ai_likelihood,
    grammar_issues,
    jaccard,
    report_sentences,
)
from textmark.strategies.annotators import AISentenceAnnotator, GrammarAnnotator, split_sentences

ALTERNATING = " ".join(["Alpha", "beta"] + ["alpha", "beta"] * 13) + "."


class TestHeuristicHelpers:
    """Test suite for the analyzer's building blocks."""

    def test_report_sentences_trimmed(self):
        """Test that scoring sentences are trimmed and non-empty."""
        assert report_sentences("  One.\n\nTwo!  three ") == ["One.", "Two!", "three"]

    def test_report_sentences_keep_inner_spacing(self):
        """Test that whitespace inside a sentence is left alone."""
        assert report_sentences("I  walked home. Done.") == ["I  walked home.", "Done."]

    def test_jaccard(self):
        """Test token-set similarity."""
        assert jaccard("rule of law", "Rule of LAW") == 1.0
        assert jaccard("the rule of law", "rule of law") == 0.75
        assert jaccard("", "") == 0.0

    def test_grammar_issues_repeated_and_lowercase(self):
        """Test several rules firing on one sentence."""
        issues = grammar_issues("the the cat")

        assert MSG_CAPITAL in issues
        assert MSG_PUNCTUATION in issues
        assert MSG_REPEATED in issues

    def test_grammar_issues_agreement(self):
        """Test subject-verb agreement heuristics."""
        assert grammar_issues("People is here.") == [MSG_PLURAL]
        assert grammar_issues("Everyone are here.") == [MSG_SINGULAR]

    def test_clean_sentence(self):
        """Test that a well-formed sentence has no issues."""
        assert grammar_issues("I walked home yesterday.") == []

    def test_ai_likelihood_repetitive_text(self):
        """Test that long, repetitive text scores high."""
        assert ai_likelihood(" ".join(["word"] * 40) + ".") == 98

    def test_ai_likelihood_varied_text(self):
        """Test that short, varied text scores zero."""
        assert ai_likelihood("I walked home yesterday.") == 0


class TestHeuristicAnalyzer:
    """Test suite for HeuristicAnalyzer."""

    @pytest.fixture
    def analyzer(self):
        """Create an analyzer with the default threshold."""
        return HeuristicAnalyzer()

    # =========================================================================
    # Label Tests
    # =========================================================================

    def test_reference_phrase_is_plagiarized(self, analyzer):
        """Test that a sentence close to a reference phrase is plagiarized."""
        report = analyzer.analyze("The rule of law.")

        assert report.sentences[0].label is SentenceLabel.PLAGIARIZED
        assert report.sentences[0].phrase_similarity == 0.75
        assert report.originality == 0

    def test_duplicates_are_plagiarized(self, analyzer):
        """Test that repeated sentences flag each other."""
        report = analyzer.analyze("The cat sat on the mat. The cat sat on the mat.")

        assert [s.duplicate for s in report.sentences] == [True, True]
        assert report.counts["plagiarized"] == 2

    def test_grammar_and_unique(self, analyzer):
        """Test label priority and score computation."""
        report = analyzer.analyze("people is happy. I walked home yesterday.")

        assert [s.label for s in report.sentences] == [SentenceLabel.GRAMMAR, SentenceLabel.UNIQUE]
        assert report.counts == {"plagiarized": 0, "grammar": 1, "ai": 0, "unique": 1}
        assert report.total == 2
        assert report.grammar_score == 50
        assert report.originality == 100
        assert report.clarity == 100

    def test_double_space_is_grammar_issue(self, analyzer):
        """Test that extra spaces inside a sentence are reported."""
        report = analyzer.analyze("I  walked home yesterday.")

        assert report.sentences[0].grammar == (MSG_SPACES,)
        assert report.sentences[0].label is SentenceLabel.GRAMMAR

    def test_ai_suspect_with_lower_threshold(self):
        """Test that a clean but repetitive sentence is AI-suspect."""
        report = HeuristicAnalyzer(ai_threshold=40).analyze(ALTERNATING)

        assert report.sentences[0].label is SentenceLabel.AI_SUSPECT
        assert report.counts["ai"] == 1

    def test_empty_text(self, analyzer):
        """Test that empty text produces a neutral report."""
        report = analyzer.analyze("")

        assert report.sentences == []
        assert report.total == 1
        assert report.originality == 100
        assert report.grammar_findings == []

    # =========================================================================
    # Finding Tests
    # =========================================================================

    def test_grammar_findings_in_document_order(self, analyzer):
        """Test escaped, word-bounded patterns for word-level rules."""
        findings = analyzer.grammar_findings("The the cat. people is here. Everyone are. the THE end.")

        assert findings == [
            GrammarFinding(r"\bThe\s+The\b", MSG_REPEATED),
            GrammarFinding(r"\bpeople\s+is\b", MSG_PLURAL),
            GrammarFinding(r"\beveryone\s+are\b", MSG_SINGULAR),
        ]

    def test_grammar_findings_feed_annotator(self, analyzer):
        """Test that produced findings wrap the offending phrases."""
        text = "The the cat sat."
        report = analyzer.analyze(text)

        html = GrammarAnnotator(css_class="hl").annotate(text, report.grammar_findings)

        assert html == f'<mark class="hl" title="Suggestion: {MSG_REPEATED}">The the</mark> cat sat.'

    def test_ai_findings_keyed_to_annotator_split(self, analyzer):
        """Test one finding per annotator sentence, indexed from zero."""
        text = "One.  Two!\nThree?"
        findings = analyzer.ai_findings(text)

        assert [f.index for f in findings] == list(range(len(split_sentences(text))))
        assert all(0 <= f.score <= 1 for f in findings)

    def test_ai_findings_feed_annotator(self):
        """Test that flagged sentences are wrapped by the AI annotator."""
        analyzer = HeuristicAnalyzer(ai_threshold=40)
        text = f"Short one. {ALTERNATING}"

        findings = analyzer.ai_findings(text)
        html = AISentenceAnnotator(css_class="ai").annotate(text, findings)

        assert [f.is_ai for f in findings] == [False, True]
        assert findings[1].score == 0.5
        assert html == f'Short one. <mark class="ai" title="AI score: 0.5">{ALTERNATING}</mark>'
