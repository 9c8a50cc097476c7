"""Issue highlighter.

Renders issues returned by a grammar analysis service as escaped HTML.
Two kinds of issue are understood:

- token issues (spelling, repetition, style) that reference a token index
  in the word-boundary split of the text;
- range issues (type "length") that reference a character range, used for
  overly long sentences.

When any range issue is present the range rendering replaces the token
rendering; the two layers are not merged.
"""

import logging
import math
import re
from collections import defaultdict
from collections.abc import Mapping, Sequence
from typing import Any

from textmark.interfaces.highlighter import BaseHighlighter, Issue
from textmark.strategies.annotators.markup import escape, mark

logger = logging.getLogger(__name__)

# Token indices are computed upstream with ASCII word characters.
WORD_BOUNDARY = re.compile(r"\b", re.ASCII)
WORD_CHAR = re.compile(r"\w", re.ASCII)

TOKEN_CLASSES = {
    "spelling": "bg-rose-100 text-rose-900",
    "repetition": "bg-amber-100 text-amber-900",
}
DEFAULT_TOKEN_CLASS = "bg-indigo-100 text-indigo-900"
RANGE_CLASS = "bg-yellow-100 text-yellow-900"
MARK_PADDING = "rounded px-0.5"


def tokenize(text: str) -> list[str]:
    """Split text on word boundaries, keeping every character."""
    return [token for token in WORD_BOUNDARY.split(text) if token]


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _tip_for(issue: Issue, token: str) -> str:
    match issue.type:
        case "spelling":
            suggestion = ", ".join(issue.suggestions[:3]) or "no suggestion"
            return f'Spelling: "{token}" → {suggestion}'
        case "repetition":
            return "Repeated word"
        case "style":
            return issue.message or "Possible passive voice"
        case None | "":
            return "issue"
        case _:
            return issue.type


class IssueHighlighter(BaseHighlighter):
    """Highlights token-level and range-level issues with escaped HTML."""

    def highlight(
        self,
        text: str,
        issues: Sequence[Issue | Mapping[str, Any]] | None,
    ) -> str:
        """Render issues over text.

        Args:
            text: The raw document text.
            issues: Token or range issues. Malformed entries are skipped.

        Returns:
            Escaped HTML. Empty text yields an empty string.
        """
        raw = text or ""
        if not raw:
            return ""

        parsed = [
            item if isinstance(item, Issue) else Issue.from_dict(item)
            for item in issues or []
            if item
        ]

        token_layer = self._render_tokens(raw, parsed)

        ranges = [
            issue
            for issue in parsed
            if issue.type == "length"
            and _is_finite_number(issue.char_start)
            and _is_finite_number(issue.char_end)
            and issue.char_end > issue.char_start
        ]
        if not ranges:
            return token_layer

        return self._render_ranges(raw, ranges)

    def _render_tokens(self, raw: str, issues: list[Issue]) -> str:
        by_index: dict[int, list[Issue]] = defaultdict(list)
        for issue in issues:
            if isinstance(issue.index, int) and not isinstance(issue.index, bool):
                by_index[issue.index].append(issue)

        out: list[str] = []
        marked = 0
        for i, token in enumerate(tokenize(raw)):
            listed = by_index.get(i)
            if not WORD_CHAR.search(token) or not listed:
                out.append(escape(token))
                continue

            css_class = TOKEN_CLASSES.get(listed[0].type, DEFAULT_TOKEN_CLASS)
            tip = " | ".join(_tip_for(issue, token) for issue in listed)
            out.append(mark(f"{css_class} {MARK_PADDING}", escape(tip), escape(token)))
            marked += 1

        logger.debug(f"Marked {marked} tokens")
        return "".join(out)

    def _render_ranges(self, raw: str, ranges: list[Issue]) -> str:
        out: list[str] = []
        pos = 0
        marked = 0
        for issue in sorted(ranges, key=lambda r: r.char_start):
            start = int(max(0, min(len(raw), issue.char_start)))
            end = int(max(start, min(len(raw), issue.char_end)))
            # Overlapping ranges continue from the end of the previous one.
            start = max(start, pos)
            if end <= start:
                continue
            if start > pos:
                out.append(escape(raw[pos:start]))
            tip = f"Long sentence ({issue.words or 'many'} words)"
            out.append(
                mark(f"{RANGE_CLASS} {MARK_PADDING}", escape(tip), escape(raw[start:end]))
            )
            pos = end
            marked += 1
        if pos < len(raw):
            out.append(escape(raw[pos:]))

        logger.debug(f"Marked {marked} of {len(ranges)} long-sentence ranges")
        return "".join(out)
