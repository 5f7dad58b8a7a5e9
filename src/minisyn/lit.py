"""Literals."""

from __future__ import annotations

from visitgen.runtime import Span, ast_enum, ast_struct, variant


@ast_struct(manual_extra_traits=True)
class Lit:
    """A literal. Two literals are equal when their values are, wherever they appear."""
    kind: LitKind
    span: Span

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lit):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash((type(self.kind).__name__, self.kind[0]))


@ast_enum
class LitKind:
    Str = variant(str)
    Int = variant(int)
    Float = variant(float)
    Bool = variant(bool)
