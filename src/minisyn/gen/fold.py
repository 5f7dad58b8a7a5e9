# THIS FILE IS AUTOMATICALLY GENERATED; DO NOT EDIT
"""Owned transformation of the minisyn syntax tree."""

from functools import singledispatch

from visitgen.runtime import Box, Delimited, Ident, Span, cfg

from minisyn import *


def full(thunk):
    if not cfg("full"):
        raise AssertionError("unreachable without the 'full' feature")
    return thunk()


@singledispatch
def lift(seq, fn):
    """Map `fn` over the elements of `seq`, keeping the container's shape."""
    raise TypeError(f"cannot lift over {type(seq).__name__}")


@lift.register(list)
def _lift_list(seq, fn):
    return [fn(it) for it in seq]


@lift.register(Delimited)
def _lift_delimited(seq, fn):
    return Delimited((fn(item), punct) for item, punct in seq.pairs())


class Folder:
    """Rebuilds a syntax tree, node by node."""

    def fold_attribute(self, i):
        return fold_attribute(self, i)

    def fold_bin_op(self, i):
        return fold_bin_op(self, i)

    def fold_bracket(self, i):
        return fold_bracket(self, i)

    def fold_colon2(self, i):
        return fold_colon2(self, i)

    def fold_comma(self, i):
        return fold_comma(self, i)

    def fold_eq(self, i):
        return fold_eq(self, i)

    def fold_expr(self, i):
        return fold_expr(self, i)

    if cfg("full"):
        def fold_expr_array(self, i):
            return fold_expr_array(self, i)

    if cfg("full"):
        def fold_expr_assign(self, i):
            return fold_expr_assign(self, i)

    def fold_expr_binary(self, i):
        return fold_expr_binary(self, i)

    def fold_expr_lit(self, i):
        return fold_expr_lit(self, i)

    def fold_expr_paren(self, i):
        return fold_expr_paren(self, i)

    def fold_expr_path(self, i):
        return fold_expr_path(self, i)

    def fold_expr_tuple(self, i):
        return fold_expr_tuple(self, i)

    def fold_expr_unary(self, i):
        return fold_expr_unary(self, i)

    if cfg("full"):
        def fold_file(self, i):
            return fold_file(self, i)

    def fold_ident(self, i):
        return fold_ident(self, i)

    if cfg("full"):
        def fold_item(self, i):
            return fold_item(self, i)

    if cfg("full"):
        def fold_item_const(self, i):
            return fold_item_const(self, i)

    if cfg("full"):
        def fold_item_use(self, i):
            return fold_item_use(self, i)

    def fold_lit(self, i):
        return fold_lit(self, i)

    def fold_lit_kind(self, i):
        return fold_lit_kind(self, i)

    def fold_paren(self, i):
        return fold_paren(self, i)

    def fold_path(self, i):
        return fold_path(self, i)

    def fold_path_segment(self, i):
        return fold_path_segment(self, i)

    def fold_pound(self, i):
        return fold_pound(self, i)

    def fold_semi(self, i):
        return fold_semi(self, i)

    def fold_span(self, i):
        return fold_span(self, i)

    def fold_un_op(self, i):
        return fold_un_op(self, i)


def fold_attribute(_visitor, _i):
    return Attribute(
        pound_token=_visitor.fold_pound(_i.pound_token),
        bracket_token=_visitor.fold_bracket(_i.bracket_token),
        path=_visitor.fold_path(_i.path),
        tts=_i.tts,
    )


def fold_bin_op(_visitor, _i):
    if isinstance(_i, BinOp.Add):
        (_binding_0,) = _i
        return BinOp.Add(
            _visitor.fold_span(_binding_0),
        )
    elif isinstance(_i, BinOp.Sub):
        (_binding_0,) = _i
        return BinOp.Sub(
            _visitor.fold_span(_binding_0),
        )
    elif isinstance(_i, BinOp.Mul):
        (_binding_0,) = _i
        return BinOp.Mul(
            _visitor.fold_span(_binding_0),
        )
    elif isinstance(_i, BinOp.Div):
        (_binding_0,) = _i
        return BinOp.Div(
            _visitor.fold_span(_binding_0),
        )
    else:
        raise TypeError(f"not a BinOp variant: {_i!r}")


def fold_bracket(_visitor, _i):
    return Bracket(
        _visitor.fold_span(_i[0]),
    )


def fold_colon2(_visitor, _i):
    return Colon2(
        _visitor.fold_span(_i[0]),
    )


def fold_comma(_visitor, _i):
    return Comma(
        _visitor.fold_span(_i[0]),
    )


def fold_eq(_visitor, _i):
    return Eq(
        _visitor.fold_span(_i[0]),
    )


def fold_expr(_visitor, _i):
    if isinstance(_i, Expr.Lit):
        (_binding_0,) = _i
        return Expr.Lit(
            _visitor.fold_expr_lit(_binding_0),
        )
    elif isinstance(_i, Expr.Path):
        (_binding_0,) = _i
        return Expr.Path(
            _visitor.fold_expr_path(_binding_0),
        )
    elif isinstance(_i, Expr.Binary):
        (_binding_0,) = _i
        return Expr.Binary(
            _visitor.fold_expr_binary(_binding_0),
        )
    elif isinstance(_i, Expr.Unary):
        (_binding_0,) = _i
        return Expr.Unary(
            _visitor.fold_expr_unary(_binding_0),
        )
    elif isinstance(_i, Expr.Paren):
        (_binding_0,) = _i
        return Expr.Paren(
            _visitor.fold_expr_paren(_binding_0),
        )
    elif isinstance(_i, Expr.Tuple):
        (_binding_0,) = _i
        return Expr.Tuple(
            _visitor.fold_expr_tuple(_binding_0),
        )
    elif isinstance(_i, Expr.Array):
        (_binding_0,) = _i
        return Expr.Array(
            full(lambda: _visitor.fold_expr_array(_binding_0)),
        )
    elif isinstance(_i, Expr.Assign):
        (_binding_0,) = _i
        return Expr.Assign(
            full(lambda: _visitor.fold_expr_assign(_binding_0)),
        )
    else:
        raise TypeError(f"not a Expr variant: {_i!r}")


if cfg("full"):
    def fold_expr_array(_visitor, _i):
        return ExprArray(
            attrs=lift(_i.attrs, lambda it: _visitor.fold_attribute(it)),
            bracket_token=_visitor.fold_bracket(_i.bracket_token),
            elems=lift(_i.elems, lambda it: _visitor.fold_expr(it)),
        )


if cfg("full"):
    def fold_expr_assign(_visitor, _i):
        return ExprAssign(
            attrs=lift(_i.attrs, lambda it: _visitor.fold_attribute(it)),
            left=Box(_visitor.fold_expr(_i.left.value)),
            eq_token=_visitor.fold_eq(_i.eq_token),
            right=Box(_visitor.fold_expr(_i.right.value)),
        )


def fold_expr_binary(_visitor, _i):
    return ExprBinary(
        attrs=lift(_i.attrs, lambda it: _visitor.fold_attribute(it)),
        left=Box(_visitor.fold_expr(_i.left.value)),
        op=_visitor.fold_bin_op(_i.op),
        right=Box(_visitor.fold_expr(_i.right.value)),
    )


def fold_expr_lit(_visitor, _i):
    return ExprLit(
        attrs=lift(_i.attrs, lambda it: _visitor.fold_attribute(it)),
        lit=_visitor.fold_lit(_i.lit),
    )


def fold_expr_paren(_visitor, _i):
    return ExprParen(
        attrs=lift(_i.attrs, lambda it: _visitor.fold_attribute(it)),
        paren_token=_visitor.fold_paren(_i.paren_token),
        expr=Box(_visitor.fold_expr(_i.expr.value)),
    )


def fold_expr_path(_visitor, _i):
    return ExprPath(
        attrs=lift(_i.attrs, lambda it: _visitor.fold_attribute(it)),
        path=_visitor.fold_path(_i.path),
    )


def fold_expr_tuple(_visitor, _i):
    return ExprTuple(
        attrs=lift(_i.attrs, lambda it: _visitor.fold_attribute(it)),
        paren_token=_visitor.fold_paren(_i.paren_token),
        elems=lift(_i.elems, lambda it: _visitor.fold_expr(it)),
    )


def fold_expr_unary(_visitor, _i):
    return ExprUnary(
        attrs=lift(_i.attrs, lambda it: _visitor.fold_attribute(it)),
        op=_visitor.fold_un_op(_i.op),
        expr=Box(_visitor.fold_expr(_i.expr.value)),
    )


if cfg("full"):
    def fold_file(_visitor, _i):
        return File(
            shebang=_i.shebang,
            attrs=lift(_i.attrs, lambda it: _visitor.fold_attribute(it)),
            items=lift(_i.items, lambda it: _visitor.fold_item(it)),
        )


def fold_ident(_visitor, _i):
    return _i


if cfg("full"):
    def fold_item(_visitor, _i):
        if isinstance(_i, Item.Const):
            (_binding_0,) = _i
            return Item.Const(
                _visitor.fold_item_const(_binding_0),
            )
        elif isinstance(_i, Item.Use):
            (_binding_0,) = _i
            return Item.Use(
                _visitor.fold_item_use(_binding_0),
            )
        else:
            raise TypeError(f"not a Item variant: {_i!r}")


if cfg("full"):
    def fold_item_const(_visitor, _i):
        return ItemConst(
            attrs=lift(_i.attrs, lambda it: _visitor.fold_attribute(it)),
            const_token=_visitor.fold_span(_i.const_token),
            ident=_visitor.fold_ident(_i.ident),
            eq_token=_visitor.fold_eq(_i.eq_token),
            expr=Box(_visitor.fold_expr(_i.expr.value)),
            semi_token=_visitor.fold_semi(_i.semi_token),
        )


if cfg("full"):
    def fold_item_use(_visitor, _i):
        return ItemUse(
            attrs=lift(_i.attrs, lambda it: _visitor.fold_attribute(it)),
            use_token=_visitor.fold_span(_i.use_token),
            path=_visitor.fold_path(_i.path),
            semi_token=_visitor.fold_semi(_i.semi_token),
        )


def fold_lit(_visitor, _i):
    return Lit(
        kind=_visitor.fold_lit_kind(_i.kind),
        span=_visitor.fold_span(_i.span),
    )


def fold_lit_kind(_visitor, _i):
    if isinstance(_i, LitKind.Str):
        (_binding_0,) = _i
        return LitKind.Str(
            _binding_0,
        )
    elif isinstance(_i, LitKind.Int):
        (_binding_0,) = _i
        return LitKind.Int(
            _binding_0,
        )
    elif isinstance(_i, LitKind.Float):
        (_binding_0,) = _i
        return LitKind.Float(
            _binding_0,
        )
    elif isinstance(_i, LitKind.Bool):
        (_binding_0,) = _i
        return LitKind.Bool(
            _binding_0,
        )
    else:
        raise TypeError(f"not a LitKind variant: {_i!r}")


def fold_paren(_visitor, _i):
    return Paren(
        _visitor.fold_span(_i[0]),
    )


def fold_path(_visitor, _i):
    return Path(
        leading_colon=None if _i.leading_colon is None else _visitor.fold_colon2(_i.leading_colon),
        segments=lift(_i.segments, lambda it: _visitor.fold_path_segment(it)),
    )


def fold_path_segment(_visitor, _i):
    return PathSegment(
        ident=_visitor.fold_ident(_i.ident),
    )


def fold_pound(_visitor, _i):
    return Pound(
        _visitor.fold_span(_i[0]),
    )


def fold_semi(_visitor, _i):
    return Semi(
        _visitor.fold_span(_i[0]),
    )


def fold_span(_visitor, _i):
    return _i


def fold_un_op(_visitor, _i):
    if isinstance(_i, UnOp.Neg):
        (_binding_0,) = _i
        return UnOp.Neg(
            _visitor.fold_span(_binding_0),
        )
    elif isinstance(_i, UnOp.Not):
        (_binding_0,) = _i
        return UnOp.Not(
            _visitor.fold_span(_binding_0),
        )
    else:
        raise TypeError(f"not a UnOp variant: {_i!r}")
