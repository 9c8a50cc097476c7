"""Shared markup helpers for annotators."""

import html
import re

from textmark.interfaces.annotator import PatternError


def mark(css_class: str, title: str, body: str) -> str:
    """Wrap `body` in a highlight element with a hover tooltip.

    Arguments are inserted verbatim; callers escape them when needed.
    """
    return f'<mark class="{css_class}" title="{title}">{body}</mark>'


def escape(text: str) -> str:
    """Escape &, <, > and double quotes (single quotes are left alone)."""
    return html.escape(text, quote=False).replace('"', "&quot;")


def compile_pattern(pattern: str, finding_index: int) -> re.Pattern[str]:
    """Compile a case-insensitive finding pattern.

    Raises:
        PatternError: If the pattern is not a valid regular expression.
    """
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        raise PatternError(pattern, finding_index, str(exc)) from exc
