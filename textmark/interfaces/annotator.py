"""Abstract base classes for text annotation strategies.

An annotator overlays a list of findings onto a plain-text document and
returns the marked-up text. Findings are produced elsewhere (an analysis
service or the heuristic analyzer) and are treated as read-only input.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GrammarFinding:
    """A grammar or style suggestion matched by pattern.

    Attributes:
        error: Case-insensitive search pattern. Regex metacharacters are
            interpreted, not escaped.
        suggestion: Tooltip text shown for every match.
    """

    error: str
    suggestion: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GrammarFinding":
        return cls(error=str(data["error"]), suggestion=str(data.get("suggestion", "")))


def is_wire_index(value: Any) -> bool:
    """True for a usable sentence index: an int, never a bool or a float."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class AISentenceFinding:
    """A per-sentence AI-origin flag.

    Attributes:
        index: Zero-based sentence index in the annotator's segmentation.
        is_ai: Whether the sentence should be highlighted.
        score: Likelihood shown in the tooltip.
    """

    index: int
    is_ai: bool
    score: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AISentenceFinding":
        """Build a finding from its wire form (``i``, ``isAI``, ``score``).

        Raises:
            ValueError: If ``i`` is missing or not an integer.
        """
        if not is_wire_index(data.get("i")):
            raise ValueError(f"Sentence index must be an integer, got {data.get('i')!r}")
        return cls(
            index=data["i"],
            is_ai=bool(data.get("isAI", False)),
            score=data.get("score", 0),
        )


class BaseAnnotator(ABC):
    """Abstract base class for annotation strategies.

    All concrete annotators must inherit from this class and implement
    the `annotate` method. Implementations are pure: they never mutate
    their inputs and keep no state between calls.

    Example:
        ```python
        class GrammarAnnotator(BaseAnnotator):
            def annotate(self, text: str, findings: Sequence[GrammarFinding] | None) -> str:
                # Wrap every match of every finding
                pass
        ```
    """

    @abstractmethod
    def annotate(self, text: str, findings: Sequence[Any] | None) -> str:
        """Overlay findings onto text.

        Args:
            text: The raw document text.
            findings: Findings to overlay. None or empty returns text unchanged.

        Returns:
            The annotated text.

        Raises:
            AnnotationError: If a finding cannot be applied.
        """
        ...


class AnnotationError(Exception):
    """Exception raised when annotation fails."""

    pass


class PatternError(AnnotationError):
    """Raised when a grammar finding's pattern does not compile.

    Attributes:
        pattern: The offending pattern.
        finding_index: Position of the finding in the input list.
    """

    def __init__(self, pattern: str, finding_index: int, reason: str) -> None:
        self.pattern = pattern
        self.finding_index = finding_index
        self.reason = reason
        super().__init__(
            f"Invalid pattern {pattern!r} in finding {finding_index}: {reason}"
        )
