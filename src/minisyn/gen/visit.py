# THIS FILE IS AUTOMATICALLY GENERATED; DO NOT EDIT
"""Read-only traversal of the minisyn syntax tree."""

from contextlib import contextmanager

from visitgen.runtime import Ident, Span, cfg

from minisyn import *


@contextmanager
def full():
    if not cfg("full"):
        raise AssertionError("unreachable without the 'full' feature")
    yield


class Visitor:
    """Walks a syntax tree by shared reference."""

    def visit_attribute(self, i):
        visit_attribute(self, i)

    def visit_bin_op(self, i):
        visit_bin_op(self, i)

    def visit_bracket(self, i):
        visit_bracket(self, i)

    def visit_colon2(self, i):
        visit_colon2(self, i)

    def visit_comma(self, i):
        visit_comma(self, i)

    def visit_eq(self, i):
        visit_eq(self, i)

    def visit_expr(self, i):
        visit_expr(self, i)

    if cfg("full"):
        def visit_expr_array(self, i):
            visit_expr_array(self, i)

    if cfg("full"):
        def visit_expr_assign(self, i):
            visit_expr_assign(self, i)

    def visit_expr_binary(self, i):
        visit_expr_binary(self, i)

    def visit_expr_lit(self, i):
        visit_expr_lit(self, i)

    def visit_expr_paren(self, i):
        visit_expr_paren(self, i)

    def visit_expr_path(self, i):
        visit_expr_path(self, i)

    def visit_expr_tuple(self, i):
        visit_expr_tuple(self, i)

    def visit_expr_unary(self, i):
        visit_expr_unary(self, i)

    if cfg("full"):
        def visit_file(self, i):
            visit_file(self, i)

    def visit_ident(self, i):
        visit_ident(self, i)

    if cfg("full"):
        def visit_item(self, i):
            visit_item(self, i)

    if cfg("full"):
        def visit_item_const(self, i):
            visit_item_const(self, i)

    if cfg("full"):
        def visit_item_use(self, i):
            visit_item_use(self, i)

    def visit_lit(self, i):
        visit_lit(self, i)

    def visit_lit_kind(self, i):
        visit_lit_kind(self, i)

    def visit_paren(self, i):
        visit_paren(self, i)

    def visit_path(self, i):
        visit_path(self, i)

    def visit_path_segment(self, i):
        visit_path_segment(self, i)

    def visit_pound(self, i):
        visit_pound(self, i)

    def visit_semi(self, i):
        visit_semi(self, i)

    def visit_span(self, i):
        visit_span(self, i)

    def visit_un_op(self, i):
        visit_un_op(self, i)


def visit_attribute(_visitor, _i):
    _visitor.visit_pound(_i.pound_token)
    _visitor.visit_bracket(_i.bracket_token)
    _visitor.visit_path(_i.path)
    pass  # Skipped field _i.tts


def visit_bin_op(_visitor, _i):
    if isinstance(_i, BinOp.Add):
        (_binding_0,) = _i
        _visitor.visit_span(_binding_0)
    elif isinstance(_i, BinOp.Sub):
        (_binding_0,) = _i
        _visitor.visit_span(_binding_0)
    elif isinstance(_i, BinOp.Mul):
        (_binding_0,) = _i
        _visitor.visit_span(_binding_0)
    elif isinstance(_i, BinOp.Div):
        (_binding_0,) = _i
        _visitor.visit_span(_binding_0)
    else:
        raise TypeError(f"not a BinOp variant: {_i!r}")


def visit_bracket(_visitor, _i):
    _visitor.visit_span(_i[0])


def visit_colon2(_visitor, _i):
    _visitor.visit_span(_i[0])


def visit_comma(_visitor, _i):
    _visitor.visit_span(_i[0])


def visit_eq(_visitor, _i):
    _visitor.visit_span(_i[0])


def visit_expr(_visitor, _i):
    if isinstance(_i, Expr.Lit):
        (_binding_0,) = _i
        _visitor.visit_expr_lit(_binding_0)
    elif isinstance(_i, Expr.Path):
        (_binding_0,) = _i
        _visitor.visit_expr_path(_binding_0)
    elif isinstance(_i, Expr.Binary):
        (_binding_0,) = _i
        _visitor.visit_expr_binary(_binding_0)
    elif isinstance(_i, Expr.Unary):
        (_binding_0,) = _i
        _visitor.visit_expr_unary(_binding_0)
    elif isinstance(_i, Expr.Paren):
        (_binding_0,) = _i
        _visitor.visit_expr_paren(_binding_0)
    elif isinstance(_i, Expr.Tuple):
        (_binding_0,) = _i
        _visitor.visit_expr_tuple(_binding_0)
    elif isinstance(_i, Expr.Array):
        (_binding_0,) = _i
        with full():
            _visitor.visit_expr_array(_binding_0)
    elif isinstance(_i, Expr.Assign):
        (_binding_0,) = _i
        with full():
            _visitor.visit_expr_assign(_binding_0)
    else:
        raise TypeError(f"not a Expr variant: {_i!r}")


if cfg("full"):
    def visit_expr_array(_visitor, _i):
        for it in _i.attrs:
            _visitor.visit_attribute(it)
        _visitor.visit_bracket(_i.bracket_token)
        for el in _i.elems:
            _visitor.visit_expr(el.item)


if cfg("full"):
    def visit_expr_assign(_visitor, _i):
        for it in _i.attrs:
            _visitor.visit_attribute(it)
        _visitor.visit_expr(_i.left.value)
        _visitor.visit_eq(_i.eq_token)
        _visitor.visit_expr(_i.right.value)


def visit_expr_binary(_visitor, _i):
    for it in _i.attrs:
        _visitor.visit_attribute(it)
    _visitor.visit_expr(_i.left.value)
    _visitor.visit_bin_op(_i.op)
    _visitor.visit_expr(_i.right.value)


def visit_expr_lit(_visitor, _i):
    for it in _i.attrs:
        _visitor.visit_attribute(it)
    _visitor.visit_lit(_i.lit)


def visit_expr_paren(_visitor, _i):
    for it in _i.attrs:
        _visitor.visit_attribute(it)
    _visitor.visit_paren(_i.paren_token)
    _visitor.visit_expr(_i.expr.value)


def visit_expr_path(_visitor, _i):
    for it in _i.attrs:
        _visitor.visit_attribute(it)
    _visitor.visit_path(_i.path)


def visit_expr_tuple(_visitor, _i):
    for it in _i.attrs:
        _visitor.visit_attribute(it)
    _visitor.visit_paren(_i.paren_token)
    for el in _i.elems:
        _visitor.visit_expr(el.item)


def visit_expr_unary(_visitor, _i):
    for it in _i.attrs:
        _visitor.visit_attribute(it)
    _visitor.visit_un_op(_i.op)
    _visitor.visit_expr(_i.expr.value)


if cfg("full"):
    def visit_file(_visitor, _i):
        pass  # Skipped field _i.shebang
        for it in _i.attrs:
            _visitor.visit_attribute(it)
        for it in _i.items:
            _visitor.visit_item(it)


def visit_ident(_visitor, _i):
    pass


if cfg("full"):
    def visit_item(_visitor, _i):
        if isinstance(_i, Item.Const):
            (_binding_0,) = _i
            _visitor.visit_item_const(_binding_0)
        elif isinstance(_i, Item.Use):
            (_binding_0,) = _i
            _visitor.visit_item_use(_binding_0)
        else:
            raise TypeError(f"not a Item variant: {_i!r}")


if cfg("full"):
    def visit_item_const(_visitor, _i):
        for it in _i.attrs:
            _visitor.visit_attribute(it)
        _visitor.visit_span(_i.const_token)
        _visitor.visit_ident(_i.ident)
        _visitor.visit_eq(_i.eq_token)
        _visitor.visit_expr(_i.expr.value)
        _visitor.visit_semi(_i.semi_token)


if cfg("full"):
    def visit_item_use(_visitor, _i):
        for it in _i.attrs:
            _visitor.visit_attribute(it)
        _visitor.visit_span(_i.use_token)
        _visitor.visit_path(_i.path)
        _visitor.visit_semi(_i.semi_token)


def visit_lit(_visitor, _i):
    _visitor.visit_lit_kind(_i.kind)
    _visitor.visit_span(_i.span)


def visit_lit_kind(_visitor, _i):
    if isinstance(_i, LitKind.Str):
        (_binding_0,) = _i
        pass  # Skipped field _binding_0
    elif isinstance(_i, LitKind.Int):
        (_binding_0,) = _i
        pass  # Skipped field _binding_0
    elif isinstance(_i, LitKind.Float):
        (_binding_0,) = _i
        pass  # Skipped field _binding_0
    elif isinstance(_i, LitKind.Bool):
        (_binding_0,) = _i
        pass  # Skipped field _binding_0
    else:
        raise TypeError(f"not a LitKind variant: {_i!r}")


def visit_paren(_visitor, _i):
    _visitor.visit_span(_i[0])


def visit_path(_visitor, _i):
    if _i.leading_colon is not None:
        _visitor.visit_colon2(_i.leading_colon)
    for el in _i.segments:
        _visitor.visit_path_segment(el.item)


def visit_path_segment(_visitor, _i):
    _visitor.visit_ident(_i.ident)


def visit_pound(_visitor, _i):
    _visitor.visit_span(_i[0])


def visit_semi(_visitor, _i):
    _visitor.visit_span(_i[0])


def visit_span(_visitor, _i):
    pass


def visit_un_op(_visitor, _i):
    if isinstance(_i, UnOp.Neg):
        (_binding_0,) = _i
        _visitor.visit_span(_binding_0)
    elif isinstance(_i, UnOp.Not):
        (_binding_0,) = _i
        _visitor.visit_span(_binding_0)
    else:
        raise TypeError(f"not a UnOp variant: {_i!r}")
