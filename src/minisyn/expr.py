"""Expressions."""

from __future__ import annotations

from visitgen.runtime import Box, Delimited, ast_enum_of_structs, ast_struct, variant

from .attr import Attribute
from .lit import Lit
from .op import BinOp, UnOp
from .path import Path
from .tokens import Bracket, Comma, Eq, Paren


@ast_struct
class ExprLit:
    """A literal expression: `1`, `"a"`, `true`."""
    attrs: list[Attribute]
    lit: Lit


@ast_enum_of_structs
class Expr:
    """An expression.

    Array and assignment expressions only exist with the `full` feature.
    """
    Lit = variant(ExprLit)

    @variant("Path")
    class ExprPath:
        attrs: list[Attribute]
        path: Path

    @variant("Binary")
    class ExprBinary:
        attrs: list[Attribute]
        left: Box[Expr]
        op: BinOp
        right: Box[Expr]

    @variant("Unary")
    class ExprUnary:
        attrs: list[Attribute]
        op: UnOp
        expr: Box[Expr]

    @variant("Paren")
    class ExprParen:
        attrs: list[Attribute]
        paren_token: Paren
        expr: Box[Expr]

    @variant("Tuple")
    class ExprTuple:
        """`()`, `(a,)`, `(a, b)`."""
        attrs: list[Attribute]
        paren_token: Paren
        elems: Delimited[Expr, Comma]

    @variant("Array", full=True)
    class ExprArray:
        attrs: list[Attribute]
        bracket_token: Bracket
        elems: Delimited[Expr, Comma]

    @variant("Assign", full=True)
    class ExprAssign:
        attrs: list[Attribute]
        left: Box[Expr]
        eq_token: Eq
        right: Box[Expr]
