"""Terminal node types: source positions and identifiers."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class LineColumn:
    """A position in source text. Lines are 1-based, columns 0-based."""
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass
class Span:
    """A range of source text, from `start` up to (not including) `end`."""
    start: LineColumn
    end: LineColumn

    def join(self, other: Span) -> Span:
        """Smallest span enclosing both `self` and `other`."""
        return Span(min(self.start, other.start), max(self.end, other.end))

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass
class Ident:
    name: str
    span: Span

    def __str__(self) -> str:
        return self.name
