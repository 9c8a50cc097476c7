"""Concrete analyzer implementations."""

from textmark.strategies.analyzers.heuristic import HeuristicAnalyzer

__all__ = [
    "HeuristicAnalyzer",
]
