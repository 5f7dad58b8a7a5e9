# THIS FILE IS AUTOMATICALLY GENERATED; DO NOT EDIT
"""Source span of any minisyn syntax tree node."""

from copy import copy
from functools import singledispatch

from visitgen.runtime import Ident, Span, cfg

from minisyn import *
from .visit import Visitor


class SpanVisitor(Visitor):
    """Joins every Span reached by a read-only traversal."""

    def __init__(self):
        self.span = None

    def visit_span(self, i):
        if self.span is None:
            self.span = copy(i)
        else:
            self.span = self.span.join(i)


@singledispatch
def span(node):
    """Span covering every position inside `node`, or None when it has none."""
    raise TypeError(f"no span for {type(node).__name__}")


@span.register(Attribute)
def _span_attribute(node):
    visitor = SpanVisitor()
    visitor.visit_attribute(node)
    return visitor.span


@span.register(BinOp)
def _span_bin_op(node):
    visitor = SpanVisitor()
    visitor.visit_bin_op(node)
    return visitor.span


@span.register(Bracket)
def _span_bracket(node):
    visitor = SpanVisitor()
    visitor.visit_bracket(node)
    return visitor.span


@span.register(Colon2)
def _span_colon2(node):
    visitor = SpanVisitor()
    visitor.visit_colon2(node)
    return visitor.span


@span.register(Comma)
def _span_comma(node):
    visitor = SpanVisitor()
    visitor.visit_comma(node)
    return visitor.span


@span.register(Eq)
def _span_eq(node):
    visitor = SpanVisitor()
    visitor.visit_eq(node)
    return visitor.span


@span.register(Expr)
def _span_expr(node):
    visitor = SpanVisitor()
    visitor.visit_expr(node)
    return visitor.span


if cfg("full"):
    @span.register(ExprArray)
    def _span_expr_array(node):
        visitor = SpanVisitor()
        visitor.visit_expr_array(node)
        return visitor.span


if cfg("full"):
    @span.register(ExprAssign)
    def _span_expr_assign(node):
        visitor = SpanVisitor()
        visitor.visit_expr_assign(node)
        return visitor.span


@span.register(ExprBinary)
def _span_expr_binary(node):
    visitor = SpanVisitor()
    visitor.visit_expr_binary(node)
    return visitor.span


@span.register(ExprLit)
def _span_expr_lit(node):
    visitor = SpanVisitor()
    visitor.visit_expr_lit(node)
    return visitor.span


@span.register(ExprParen)
def _span_expr_paren(node):
    visitor = SpanVisitor()
    visitor.visit_expr_paren(node)
    return visitor.span


@span.register(ExprPath)
def _span_expr_path(node):
    visitor = SpanVisitor()
    visitor.visit_expr_path(node)
    return visitor.span


@span.register(ExprTuple)
def _span_expr_tuple(node):
    visitor = SpanVisitor()
    visitor.visit_expr_tuple(node)
    return visitor.span


@span.register(ExprUnary)
def _span_expr_unary(node):
    visitor = SpanVisitor()
    visitor.visit_expr_unary(node)
    return visitor.span


if cfg("full"):
    @span.register(File)
    def _span_file(node):
        visitor = SpanVisitor()
        visitor.visit_file(node)
        return visitor.span


@span.register(Ident)
def _span_ident(node):
    visitor = SpanVisitor()
    visitor.visit_ident(node)
    return visitor.span


if cfg("full"):
    @span.register(Item)
    def _span_item(node):
        visitor = SpanVisitor()
        visitor.visit_item(node)
        return visitor.span


if cfg("full"):
    @span.register(ItemConst)
    def _span_item_const(node):
        visitor = SpanVisitor()
        visitor.visit_item_const(node)
        return visitor.span


if cfg("full"):
    @span.register(ItemUse)
    def _span_item_use(node):
        visitor = SpanVisitor()
        visitor.visit_item_use(node)
        return visitor.span


@span.register(Lit)
def _span_lit(node):
    visitor = SpanVisitor()
    visitor.visit_lit(node)
    return visitor.span


@span.register(LitKind)
def _span_lit_kind(node):
    visitor = SpanVisitor()
    visitor.visit_lit_kind(node)
    return visitor.span


@span.register(Paren)
def _span_paren(node):
    visitor = SpanVisitor()
    visitor.visit_paren(node)
    return visitor.span


@span.register(Path)
def _span_path(node):
    visitor = SpanVisitor()
    visitor.visit_path(node)
    return visitor.span


@span.register(PathSegment)
def _span_path_segment(node):
    visitor = SpanVisitor()
    visitor.visit_path_segment(node)
    return visitor.span


@span.register(Pound)
def _span_pound(node):
    visitor = SpanVisitor()
    visitor.visit_pound(node)
    return visitor.span


@span.register(Semi)
def _span_semi(node):
    visitor = SpanVisitor()
    visitor.visit_semi(node)
    return visitor.span


@span.register(UnOp)
def _span_un_op(node):
    visitor = SpanVisitor()
    visitor.visit_un_op(node)
    return visitor.span
