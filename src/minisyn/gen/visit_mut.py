# THIS FILE IS AUTOMATICALLY GENERATED; DO NOT EDIT
"""In-place traversal of the minisyn syntax tree."""

from contextlib import contextmanager

from visitgen.runtime import Ident, Span, cfg

from minisyn import *


@contextmanager
def full():
    if not cfg("full"):
        raise AssertionError("unreachable without the 'full' feature")
    yield


class VisitorMut:
    """Walks a syntax tree, allowing nodes to be changed in place."""

    def visit_attribute_mut(self, i):
        visit_attribute_mut(self, i)

    def visit_bin_op_mut(self, i):
        visit_bin_op_mut(self, i)

    def visit_bracket_mut(self, i):
        visit_bracket_mut(self, i)

    def visit_colon2_mut(self, i):
        visit_colon2_mut(self, i)

    def visit_comma_mut(self, i):
        visit_comma_mut(self, i)

    def visit_eq_mut(self, i):
        visit_eq_mut(self, i)

    def visit_expr_mut(self, i):
        visit_expr_mut(self, i)

    if cfg("full"):
        def visit_expr_array_mut(self, i):
            visit_expr_array_mut(self, i)

    if cfg("full"):
        def visit_expr_assign_mut(self, i):
            visit_expr_assign_mut(self, i)

    def visit_expr_binary_mut(self, i):
        visit_expr_binary_mut(self, i)

    def visit_expr_lit_mut(self, i):
        visit_expr_lit_mut(self, i)

    def visit_expr_paren_mut(self, i):
        visit_expr_paren_mut(self, i)

    def visit_expr_path_mut(self, i):
        visit_expr_path_mut(self, i)

    def visit_expr_tuple_mut(self, i):
        visit_expr_tuple_mut(self, i)

    def visit_expr_unary_mut(self, i):
        visit_expr_unary_mut(self, i)

    if cfg("full"):
        def visit_file_mut(self, i):
            visit_file_mut(self, i)

    def visit_ident_mut(self, i):
        visit_ident_mut(self, i)

    if cfg("full"):
        def visit_item_mut(self, i):
            visit_item_mut(self, i)

    if cfg("full"):
        def visit_item_const_mut(self, i):
            visit_item_const_mut(self, i)

    if cfg("full"):
        def visit_item_use_mut(self, i):
            visit_item_use_mut(self, i)

    def visit_lit_mut(self, i):
        visit_lit_mut(self, i)

    def visit_lit_kind_mut(self, i):
        visit_lit_kind_mut(self, i)

    def visit_paren_mut(self, i):
        visit_paren_mut(self, i)

    def visit_path_mut(self, i):
        visit_path_mut(self, i)

    def visit_path_segment_mut(self, i):
        visit_path_segment_mut(self, i)

    def visit_pound_mut(self, i):
        visit_pound_mut(self, i)

    def visit_semi_mut(self, i):
        visit_semi_mut(self, i)

    def visit_span_mut(self, i):
        visit_span_mut(self, i)

    def visit_un_op_mut(self, i):
        visit_un_op_mut(self, i)


def visit_attribute_mut(_visitor, _i):
    _visitor.visit_pound_mut(_i.pound_token)
    _visitor.visit_bracket_mut(_i.bracket_token)
    _visitor.visit_path_mut(_i.path)
    pass  # Skipped field _i.tts


def visit_bin_op_mut(_visitor, _i):
    if isinstance(_i, BinOp.Add):
        (_binding_0,) = _i
        _visitor.visit_span_mut(_binding_0)
    elif isinstance(_i, BinOp.Sub):
        (_binding_0,) = _i
        _visitor.visit_span_mut(_binding_0)
    elif isinstance(_i, BinOp.Mul):
        (_binding_0,) = _i
        _visitor.visit_span_mut(_binding_0)
    elif isinstance(_i, BinOp.Div):
        (_binding_0,) = _i
        _visitor.visit_span_mut(_binding_0)
    else:
        raise TypeError(f"not a BinOp variant: {_i!r}")


def visit_bracket_mut(_visitor, _i):
    _visitor.visit_span_mut(_i[0])


def visit_colon2_mut(_visitor, _i):
    _visitor.visit_span_mut(_i[0])


def visit_comma_mut(_visitor, _i):
    _visitor.visit_span_mut(_i[0])


def visit_eq_mut(_visitor, _i):
    _visitor.visit_span_mut(_i[0])


def visit_expr_mut(_visitor, _i):
    if isinstance(_i, Expr.Lit):
        (_binding_0,) = _i
        _visitor.visit_expr_lit_mut(_binding_0)
    elif isinstance(_i, Expr.Path):
        (_binding_0,) = _i
        _visitor.visit_expr_path_mut(_binding_0)
    elif isinstance(_i, Expr.Binary):
        (_binding_0,) = _i
        _visitor.visit_expr_binary_mut(_binding_0)
    elif isinstance(_i, Expr.Unary):
        (_binding_0,) = _i
        _visitor.visit_expr_unary_mut(_binding_0)
    elif isinstance(_i, Expr.Paren):
        (_binding_0,) = _i
        _visitor.visit_expr_paren_mut(_binding_0)
    elif isinstance(_i, Expr.Tuple):
        (_binding_0,) = _i
        _visitor.visit_expr_tuple_mut(_binding_0)
    elif isinstance(_i, Expr.Array):
        (_binding_0,) = _i
        with full():
            _visitor.visit_expr_array_mut(_binding_0)
    elif isinstance(_i, Expr.Assign):
        (_binding_0,) = _i
        with full():
            _visitor.visit_expr_assign_mut(_binding_0)
    else:
        raise TypeError(f"not a Expr variant: {_i!r}")


if cfg("full"):
    def visit_expr_array_mut(_visitor, _i):
        for it in _i.attrs:
            _visitor.visit_attribute_mut(it)
        _visitor.visit_bracket_mut(_i.bracket_token)
        for el in _i.elems:
            _visitor.visit_expr_mut(el.item)


if cfg("full"):
    def visit_expr_assign_mut(_visitor, _i):
        for it in _i.attrs:
            _visitor.visit_attribute_mut(it)
        _visitor.visit_expr_mut(_i.left.value)
        _visitor.visit_eq_mut(_i.eq_token)
        _visitor.visit_expr_mut(_i.right.value)


def visit_expr_binary_mut(_visitor, _i):
    for it in _i.attrs:
        _visitor.visit_attribute_mut(it)
    _visitor.visit_expr_mut(_i.left.value)
    _visitor.visit_bin_op_mut(_i.op)
    _visitor.visit_expr_mut(_i.right.value)


def visit_expr_lit_mut(_visitor, _i):
    for it in _i.attrs:
        _visitor.visit_attribute_mut(it)
    _visitor.visit_lit_mut(_i.lit)


def visit_expr_paren_mut(_visitor, _i):
    for it in _i.attrs:
        _visitor.visit_attribute_mut(it)
    _visitor.visit_paren_mut(_i.paren_token)
    _visitor.visit_expr_mut(_i.expr.value)


def visit_expr_path_mut(_visitor, _i):
    for it in _i.attrs:
        _visitor.visit_attribute_mut(it)
    _visitor.visit_path_mut(_i.path)


def visit_expr_tuple_mut(_visitor, _i):
    for it in _i.attrs:
        _visitor.visit_attribute_mut(it)
    _visitor.visit_paren_mut(_i.paren_token)
    for el in _i.elems:
        _visitor.visit_expr_mut(el.item)


def visit_expr_unary_mut(_visitor, _i):
    for it in _i.attrs:
        _visitor.visit_attribute_mut(it)
    _visitor.visit_un_op_mut(_i.op)
    _visitor.visit_expr_mut(_i.expr.value)


if cfg("full"):
    def visit_file_mut(_visitor, _i):
        pass  # Skipped field _i.shebang
        for it in _i.attrs:
            _visitor.visit_attribute_mut(it)
        for it in _i.items:
            _visitor.visit_item_mut(it)


def visit_ident_mut(_visitor, _i):
    pass


if cfg("full"):
    def visit_item_mut(_visitor, _i):
        if isinstance(_i, Item.Const):
            (_binding_0,) = _i
            _visitor.visit_item_const_mut(_binding_0)
        elif isinstance(_i, Item.Use):
            (_binding_0,) = _i
            _visitor.visit_item_use_mut(_binding_0)
        else:
            raise TypeError(f"not a Item variant: {_i!r}")


if cfg("full"):
    def visit_item_const_mut(_visitor, _i):
        for it in _i.attrs:
            _visitor.visit_attribute_mut(it)
        _visitor.visit_span_mut(_i.const_token)
        _visitor.visit_ident_mut(_i.ident)
        _visitor.visit_eq_mut(_i.eq_token)
        _visitor.visit_expr_mut(_i.expr.value)
        _visitor.visit_semi_mut(_i.semi_token)


if cfg("full"):
    def visit_item_use_mut(_visitor, _i):
        for it in _i.attrs:
            _visitor.visit_attribute_mut(it)
        _visitor.visit_span_mut(_i.use_token)
        _visitor.visit_path_mut(_i.path)
        _visitor.visit_semi_mut(_i.semi_token)


def visit_lit_mut(_visitor, _i):
    _visitor.visit_lit_kind_mut(_i.kind)
    _visitor.visit_span_mut(_i.span)


def visit_lit_kind_mut(_visitor, _i):
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


def visit_paren_mut(_visitor, _i):
    _visitor.visit_span_mut(_i[0])


def visit_path_mut(_visitor, _i):
    if _i.leading_colon is not None:
        _visitor.visit_colon2_mut(_i.leading_colon)
    for el in _i.segments:
        _visitor.visit_path_segment_mut(el.item)


def visit_path_segment_mut(_visitor, _i):
    _visitor.visit_ident_mut(_i.ident)


def visit_pound_mut(_visitor, _i):
    _visitor.visit_span_mut(_i[0])


def visit_semi_mut(_visitor, _i):
    _visitor.visit_span_mut(_i[0])


def visit_span_mut(_visitor, _i):
    pass


def visit_un_op_mut(_visitor, _i):
    if isinstance(_i, UnOp.Neg):
        (_binding_0,) = _i
        _visitor.visit_span_mut(_binding_0)
    elif isinstance(_i, UnOp.Not):
        (_binding_0,) = _i
        _visitor.visit_span_mut(_binding_0)
    else:
        raise TypeError(f"not a UnOp variant: {_i!r}")
