"""Operators. Each variant records the span of its token."""

from visitgen.runtime import Span, ast_enum, variant


@ast_enum
class BinOp:
    Add = variant(Span)
    Sub = variant(Span)
    Mul = variant(Span)
    Div = variant(Span)


@ast_enum
class UnOp:
    Neg = variant(Span)
    Not = variant(Span)


# Binding power and variant for each binary operator token.
BINARY_OPERATORS = {
    "+": (1, BinOp.Add),
    "-": (1, BinOp.Sub),
    "*": (2, BinOp.Mul),
    "/": (2, BinOp.Div),
}

UNARY_OPERATORS = {
    "-": UnOp.Neg,
    "!": UnOp.Not,
}
