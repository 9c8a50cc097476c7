"""Abstract base class for issue highlighters.

Highlighters render structured issues (token-indexed or character-range)
as escaped HTML over the raw document text.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Issue:
    """A single issue reported against a document.

    Token issues carry `index`, the position in the word-boundary token
    sequence. Range issues (type ``"length"``) carry `char_start` and
    `char_end` over the raw text.

    Attributes:
        type: Issue kind: spelling, repetition, style, length, or other.
        index: Token index for token-level issues.
        suggestions: Replacement candidates for spelling issues.
        message: Free-text explanation for style issues.
        char_start: Range start (inclusive) for range issues.
        char_end: Range end (exclusive) for range issues.
        words: Word count reported for long sentences.
    """

    type: str | None = None
    index: int | None = None
    suggestions: tuple[str, ...] = field(default_factory=tuple)
    message: str | None = None
    char_start: float | None = None
    char_end: float | None = None
    words: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Issue":
        """Build an issue from its wire form (camelCase range keys)."""
        return cls(
            type=data.get("type"),
            index=data.get("index"),
            suggestions=tuple(data.get("suggestions") or ()),
            message=data.get("message"),
            char_start=data.get("charStart"),
            char_end=data.get("charEnd"),
            words=data.get("words"),
        )


class BaseHighlighter(ABC):
    """Abstract base class for issue highlighting strategies."""

    @abstractmethod
    def highlight(self, text: str, issues: Sequence[Issue] | None) -> str:
        """Render issues over text as escaped HTML.

        Args:
            text: The raw document text.
            issues: Issues to render.

        Returns:
            HTML with every source character escaped exactly once.
        """
        ...
