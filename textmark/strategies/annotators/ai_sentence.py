"""Per-sentence AI-origin annotator.

Sentences are found with a deliberately simple rule: a boundary follows
any `.`, `!` or `?` that is followed by whitespace. Findings produced
upstream are keyed to sentence indices under exactly this rule, so it must
not be swapped for a linguistic sentence splitter.
"""

import logging
import math
import re
from collections.abc import Mapping, Sequence
from typing import Any

from textmark.interfaces.annotator import AISentenceFinding, BaseAnnotator, is_wire_index
from textmark.strategies.annotators.markup import mark

logger = logging.getLogger(__name__)

DEFAULT_AI_CLASS = "bg-purple-100 text-purple-800 px-1 rounded"
SCORE_PREFIX = "AI score: "

SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def split_sentences(text: str) -> list[str]:
    """Split text into sentences, consuming the separating whitespace.

    Args:
        text: The raw document text.

    Returns:
        Sentences in document order. Empty text yields one empty sentence.
    """
    return SENTENCE_BOUNDARY.split(text)


def format_score(score: float) -> str:
    """Render a score the way it is shown in tooltips (1.0 -> "1", 0.9 -> "0.9")."""
    if isinstance(score, float) and math.isnan(score):
        return "NaN"
    if isinstance(score, float) and math.isinf(score):
        return "Infinity" if score > 0 else "-Infinity"
    if isinstance(score, float) and score.is_integer():
        return str(int(score))
    return str(score)


class AISentenceAnnotator(BaseAnnotator):
    """Highlights sentences flagged as AI-generated.

    Sentences are rejoined with single spaces, so the original spacing
    between sentences (double spaces, newlines) is normalized away.

    Attributes:
        css_class: Classes applied to each highlighted sentence.
    """

    def __init__(self, css_class: str = DEFAULT_AI_CLASS) -> None:
        self._css_class = css_class

    def annotate(
        self,
        text: str,
        findings: Sequence[AISentenceFinding | Mapping[str, Any]] | None,
    ) -> str:
        """Wrap every sentence whose first matching finding has is_ai set.

        Args:
            text: The raw document text.
            findings: Sentence findings. None or empty returns text unchanged.
                Out-of-range indices are ignored.

        Returns:
            The annotated text.
        """
        if not findings:
            return text

        # First finding per index wins, as with a linear scan.
        flags: dict[int, AISentenceFinding] = {}
        skipped = 0
        for item in findings:
            if isinstance(item, AISentenceFinding):
                finding = item
            elif is_wire_index(item.get("i")):
                finding = AISentenceFinding.from_dict(item)
            else:
                # A finding without an integer index matches no sentence.
                skipped += 1
                continue
            flags.setdefault(finding.index, finding)
        if skipped:
            logger.debug(f"Skipped {skipped} findings without an integer index")

        sentences = split_sentences(text)
        out: list[str] = []
        flagged = 0
        for i, sentence in enumerate(sentences):
            flag = flags.get(i)
            if flag is not None and flag.is_ai:
                out.append(mark(self._css_class, SCORE_PREFIX + format_score(flag.score), sentence))
                flagged += 1
            else:
                out.append(sentence)

        logger.debug(f"Flagged {flagged} of {len(sentences)} sentences")
        return " ".join(out)

    @property
    def css_class(self) -> str:
        return self._css_class
