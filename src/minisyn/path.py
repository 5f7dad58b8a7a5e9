"""Paths: `a`, `a::b`, `::root::c`."""

from __future__ import annotations
from typing import Optional

from visitgen.runtime import Delimited, Ident, ast_struct

from .tokens import Colon2


@ast_struct
class Path:
    leading_colon: Optional[Colon2]
    segments: Delimited[PathSegment, Colon2]

    def is_ident(self) -> bool:
        """True for a single-segment path without a leading `::`."""
        return self.leading_colon is None and len(self.segments) == 1


@ast_struct
class PathSegment:
    ident: Ident
