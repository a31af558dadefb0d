"""Selecting which diagnostics a panel shows.

Each stage is a pure function returning a new value, so the stages can be
composed in any order by a caller without aliasing surprises:

    shown, hidden = take_with_overflow(
        sort_by_severity(filter_line(diagnostics, line)), max_lines
    )
"""

from __future__ import annotations

from typing import Iterable, NamedTuple

from inline_diagnostics.model.diagnostic import Diagnostic


def filter_line(diagnostics: Iterable[Diagnostic], current_line: int) -> list[Diagnostic]:
    """Diagnostics on ``current_line``, in their original relative order."""
    return [d for d in diagnostics if d.line == current_line]


def sort_by_severity(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Stable sort by severity priority; equal priorities keep input order."""
    return sorted(diagnostics, key=lambda d: d.severity.priority)


class Overflow(NamedTuple):
    """Diagnostics kept for display and the number cut off after them."""

    shown: list[Diagnostic]
    hidden: int


def take_with_overflow(diagnostics: list[Diagnostic], max_lines: int) -> Overflow:
    """Cap ``diagnostics`` at ``max_lines``, counting the rest as hidden.

    A limit below 1 is treated as 1: a line with diagnostics always shows
    at least its first one.
    """
    limit = max(1, max_lines)
    if len(diagnostics) > limit:
        return Overflow(shown=list(diagnostics[:limit]), hidden=len(diagnostics) - limit)
    return Overflow(shown=list(diagnostics), hidden=0)
