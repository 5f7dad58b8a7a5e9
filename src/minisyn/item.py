"""Items and whole files. Only available with the `full` feature."""

from __future__ import annotations
from typing import Optional

from visitgen.runtime import Box, Ident, Span, ast_enum_of_structs, ast_struct, variant

from .attr import Attribute
from .expr import Expr
from .path import Path
from .tokens import Eq, Semi


@ast_struct
class File:
    shebang: Optional[str]
    attrs: list[Attribute]
    items: list[Item]


@ast_enum_of_structs(do_not_generate_to_tokens=True)
class Item:
    @variant("Const")
    class ItemConst:
        """`const NAME = expr;`"""
        attrs: list[Attribute]
        const_token: Span
        ident: Ident
        eq_token: Eq
        expr: Box[Expr]
        semi_token: Semi

    @variant("Use")
    class ItemUse:
        """`use a::b;`"""
        attrs: list[Attribute]
        use_token: Span
        path: Path
        semi_token: Semi
