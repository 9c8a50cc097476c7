"""Unit tests for the AI sentence annotator."""

import pytest

from textmark.interfaces.annotator import AISentenceFinding
from textmark.strategies.annotators.ai_sentence import (
    AISentenceAnnotator,
    format_score,
    split_sentences,
)

AI_CLASS = "bg-purple-100 text-purple-800 px-1 rounded"


def flagged(sentence: str, score: str) -> str:
    return f'<mark class="{AI_CLASS}" title="AI score: {score}">{sentence}</mark>'


class TestSplitSentences:
    """Test suite for the sentence boundary rule."""

    def test_terminal_punctuation(self):
        """Test splitting after '.', '!' and '?' followed by whitespace."""
        assert split_sentences("One. Two! Three?") == ["One.", "Two!", "Three?"]

    def test_whitespace_run_consumed(self):
        """Test that any run of whitespace is consumed as one separator."""
        assert split_sentences("One.  \n Two.") == ["One.", "Two."]

    def test_punctuation_without_whitespace(self):
        """Test that punctuation inside a token is not a boundary."""
        assert split_sentences("Version 1.2 is out. Yes") == ["Version 1.2 is out.", "Yes"]

    def test_abbreviations_are_boundaries(self):
        """Test that the rule is purely mechanical (no abbreviation handling)."""
        assert split_sentences("Dr. Smith arrived. He left") == ["Dr.", "Smith arrived.", "He left"]

    def test_ellipsis(self):
        """Test that an ellipsis followed by whitespace ends a sentence."""
        assert split_sentences("Wait... what?") == ["Wait...", "what?"]

    def test_empty_text(self):
        """Test that empty text yields a single empty sentence."""
        assert split_sentences("") == [""]

    def test_trailing_whitespace(self):
        """Test that trailing whitespace yields a trailing empty sentence."""
        assert split_sentences("One. ") == ["One.", ""]


class TestAISentenceAnnotator:
    """Test suite for AISentenceAnnotator."""

    @pytest.fixture
    def annotator(self):
        """Create an annotator with default markup."""
        return AISentenceAnnotator()

    # =========================================================================
    # Pass-through Tests
    # =========================================================================

    def test_none_findings_returns_text(self, annotator):
        """Test that absent findings return the text with spacing intact."""
        text = "One.  Two.\nThree."
        assert annotator.annotate(text, None) == text

    def test_empty_findings_returns_text(self, annotator):
        """Test that an empty finding list returns the text unchanged."""
        text = "One.  Two."
        assert annotator.annotate(text, []) == text

    # =========================================================================
    # Annotation Tests
    # =========================================================================

    def test_flags_single_sentence(self, annotator):
        """Test that only the flagged sentence is wrapped."""
        findings = [AISentenceFinding(index=1, is_ai=True, score=0.9)]

        result = annotator.annotate("One. Two! Three?", findings)

        assert result == f"One. {flagged('Two!', '0.9')} Three?"

    def test_out_of_range_index_ignored(self, annotator):
        """Test that an index past the last sentence changes nothing."""
        findings = [AISentenceFinding(index=10, is_ai=True, score=0.9)]

        result = annotator.annotate("One. Two! Three?", findings)

        assert result == "One. Two! Three?"

    def test_negative_index_ignored(self, annotator):
        """Test that negative indices never match a sentence."""
        findings = [AISentenceFinding(index=-1, is_ai=True, score=0.9)]
        assert annotator.annotate("One. Two.", findings) == "One. Two."

    def test_not_ai_never_wrapped(self, annotator):
        """Test that is_ai=False findings produce no markup."""
        findings = [AISentenceFinding(index=0, is_ai=False, score=0.99)]

        result = annotator.annotate("One. Two.", findings)

        assert "<mark" not in result
        assert result == "One. Two."

    def test_spacing_normalized_when_findings_present(self, annotator):
        """Test that sentences are rejoined with single spaces."""
        findings = [AISentenceFinding(index=5, is_ai=True, score=0.5)]

        result = annotator.annotate("One.  Two.\nThree.", findings)

        assert result == "One. Two. Three."

    def test_first_matching_finding_wins(self, annotator):
        """Test that duplicates for one index resolve to the first listed."""
        not_ai_first = [
            AISentenceFinding(index=0, is_ai=False, score=0.1),
            AISentenceFinding(index=0, is_ai=True, score=0.8),
        ]
        ai_first = list(reversed(not_ai_first))

        assert annotator.annotate("One. Two.", not_ai_first) == "One. Two."
        assert annotator.annotate("One. Two.", ai_first) == f"{flagged('One.', '0.8')} Two."

    def test_multiple_sentences(self, annotator):
        """Test that findings are matched regardless of list order."""
        findings = [
            AISentenceFinding(index=2, is_ai=True, score=0.7),
            AISentenceFinding(index=0, is_ai=True, score=0.6),
        ]

        result = annotator.annotate("One. Two. Three.", findings)

        assert result == f"{flagged('One.', '0.6')} Two. {flagged('Three.', '0.7')}"

    def test_trailing_whitespace_kept_as_separator(self, annotator):
        """Test that a trailing empty sentence leaves a trailing space."""
        findings = [AISentenceFinding(index=0, is_ai=True, score=1)]

        result = annotator.annotate("One. ", findings)

        assert result == f"{flagged('One.', '1')} "

    def test_accepts_wire_form(self, annotator):
        """Test that dicts with 'i', 'isAI' and 'score' are accepted."""
        result = annotator.annotate("One. Two.", [{"i": 0, "isAI": True, "score": 0.5}])
        assert result == f"{flagged('One.', '0.5')} Two."

    @pytest.mark.parametrize(
        "wire",
        [
            {"isAI": True, "score": 0.5},
            {"i": None, "isAI": True, "score": 0.5},
            {"i": "1", "isAI": True, "score": 0.5},
            {"i": 1.5, "isAI": True, "score": 0.5},
            {"i": True, "isAI": True, "score": 0.5},
        ],
    )
    def test_wire_finding_without_integer_index_ignored(self, annotator, wire):
        """Test that a missing or non-integer index matches no sentence."""
        assert annotator.annotate("One. Two.", [wire]) == "One. Two."

    def test_malformed_wire_finding_does_not_hide_valid_ones(self, annotator):
        """Test that valid findings still apply next to malformed ones."""
        findings = [{"i": "0", "isAI": True, "score": 0.9}, {"i": 0, "isAI": True, "score": 0.4}]

        result = annotator.annotate("One. Two.", findings)

        assert result == f"{flagged('One.', '0.4')} Two."

    def test_from_dict_rejects_non_integer_index(self):
        """Test that wire conversion refuses to coerce the index."""
        with pytest.raises(ValueError, match="integer"):
            AISentenceFinding.from_dict({"i": 1.5, "isAI": True})

    def test_custom_class(self):
        """Test that the highlight class is configurable."""
        annotator = AISentenceAnnotator(css_class="ai")
        result = annotator.annotate("One.", [AISentenceFinding(0, True, 0.4)])
        assert result == '<mark class="ai" title="AI score: 0.4">One.</mark>'


class TestFormatScore:
    """Test suite for tooltip score rendering."""

    @pytest.mark.parametrize(
        "score, expected",
        [(0.9, "0.9"), (1.0, "1"), (1, "1"), (0.123, "0.123"), (87, "87")],
    )
    def test_format(self, score, expected):
        """Test that integral values drop the fractional part."""
        assert format_score(score) == expected

    @pytest.mark.parametrize(
        "score, expected",
        [(float("inf"), "Infinity"), (float("-inf"), "-Infinity"), (float("nan"), "NaN")],
    )
    def test_non_finite(self, score, expected):
        """Test the tooltip spelling of non-finite scores."""
        assert format_score(score) == expected
