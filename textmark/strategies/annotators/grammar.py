"""Grammar suggestion annotators.

Two strategies share one contract:

- GrammarAnnotator applies findings one after another to the growing,
  already annotated string. A later pattern may match inside markup
  inserted by an earlier one; callers rely on later findings re-wrapping
  regions of earlier ones, so this is kept as is.
- SpanGrammarAnnotator (safe mode) matches every pattern against the
  original text, keeps a set of non-overlapping spans and renders once,
  escaping the source text and tooltips.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from textmark.interfaces.annotator import BaseAnnotator, GrammarFinding
from textmark.strategies.annotators.markup import compile_pattern, escape, mark

logger = logging.getLogger(__name__)

DEFAULT_GRAMMAR_CLASS = "bg-indigo-100 text-indigo-800 rounded px-1"
SUGGESTION_PREFIX = "Suggestion: "


def _as_finding(item: GrammarFinding | Mapping[str, Any]) -> GrammarFinding:
    if isinstance(item, GrammarFinding):
        return item
    return GrammarFinding.from_dict(item)


class GrammarAnnotator(BaseAnnotator):
    """Sequential, cumulative grammar annotator.

    Every finding's pattern is compiled case-insensitively and every
    non-overlapping match in the current text is wrapped in a highlight
    whose tooltip carries the suggestion. The output of one finding is
    the input of the next.

    Attributes:
        css_class: Classes applied to each highlight.
    """

    def __init__(self, css_class: str = DEFAULT_GRAMMAR_CLASS) -> None:
        self._css_class = css_class

    def annotate(
        self,
        text: str,
        findings: Sequence[GrammarFinding | Mapping[str, Any]] | None,
    ) -> str:
        """Wrap every match of every finding, in list order.

        Args:
            text: The raw document text.
            findings: Grammar findings. None or empty returns text unchanged.

        Returns:
            The annotated text.

        Raises:
            PatternError: If any finding's pattern is invalid. No partial
                result is returned.
        """
        if not findings:
            return text

        highlighted = text
        for position, item in enumerate(findings):
            finding = _as_finding(item)
            pattern = compile_pattern(finding.error, position)
            title = SUGGESTION_PREFIX + finding.suggestion

            highlighted, count = pattern.subn(
                lambda match: mark(self._css_class, title, match.group(0)),
                highlighted,
            )
            logger.debug(f"Finding {position} ({finding.error!r}) wrapped {count} matches")

        return highlighted

    @property
    def css_class(self) -> str:
        return self._css_class


class SpanGrammarAnnotator(BaseAnnotator):
    """Span-based grammar annotator used in safe mode.

    Overlaps are resolved left to right: the earliest match wins, ties go
    to the finding listed first. Empty matches are ignored.
    """

    def __init__(self, css_class: str = DEFAULT_GRAMMAR_CLASS) -> None:
        self._css_class = css_class

    def annotate(
        self,
        text: str,
        findings: Sequence[GrammarFinding | Mapping[str, Any]] | None,
    ) -> str:
        if not findings:
            return text

        candidates: list[tuple[int, int, int, str]] = []
        for position, item in enumerate(findings):
            finding = _as_finding(item)
            pattern = compile_pattern(finding.error, position)
            for match in pattern.finditer(text):
                start, end = match.span()
                if end > start:
                    candidates.append((start, position, end, finding.suggestion))

        candidates.sort(key=lambda c: (c[0], c[1]))

        out: list[str] = []
        cursor = 0
        dropped = 0
        for start, _position, end, suggestion in candidates:
            if start < cursor:
                dropped += 1
                continue
            out.append(escape(text[cursor:start]))
            out.append(
                mark(
                    self._css_class,
                    escape(SUGGESTION_PREFIX + suggestion),
                    escape(text[start:end]),
                )
            )
            cursor = end
        out.append(escape(text[cursor:]))

        logger.debug(
            f"Safe mode kept {len(candidates) - dropped} spans, dropped {dropped} overlaps"
        )
        return "".join(out)

    @property
    def css_class(self) -> str:
        return self._css_class
