"""Example entry point: check a tuple assignment for matching arity.

    (a, b) = (1, 2)       ok
    (a, b) = (1, 2, 3)    error: expected 2 element(s), got 3
"""

from __future__ import annotations
import sys

from lsprotocol import types as lsp

from .error import ParseError, make_diagnostic
from .expr import Expr, ExprTuple
from .gen.spanned import span
from .parse import parse


class DemoError(Exception):
    """The input was rejected; `diagnostic` says where and why."""

    def __init__(self, diagnostic: lsp.Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)


def _tuple(expr: Expr, anchor) -> ExprTuple:
    if not isinstance(expr, Expr.Tuple):
        raise DemoError(make_diagnostic(anchor, "expected a tuple"))
    return expr[0]


def eval_demo(source: str) -> str:
    """Return the code to run for `source`, or raise DemoError."""
    try:
        expr = parse(Expr, source)
    except ParseError as e:
        raise DemoError(e.to_diagnostic()) from e
    if not isinstance(expr, Expr.Assign):
        raise DemoError(ParseError("expected `(...) = (...)`").to_diagnostic())

    assign = expr[0]
    anchor = assign.eq_token[0]
    a = _tuple(assign.left.value, anchor)
    b = _tuple(assign.right.value, anchor)
    if len(a.elems) != len(b.elems):
        raise DemoError(make_diagnostic(
            span(b),
            f"expected {len(a.elems)} element(s), got {len(b.elems)}",
            note=(span(a), "because of this"),
        ))
    return 'print("All good!")'


def _format(diagnostic: lsp.Diagnostic) -> list[str]:
    start = diagnostic.range.start
    lines = [f"error: {diagnostic.message} at {start.line + 1}:{start.character}"]
    for info in diagnostic.related_information or []:
        pos = info.location.range.start
        lines.append(f"note: {info.message} at {pos.line + 1}:{pos.character}")
    return lines


def demo(source: str) -> str:
    """Like eval_demo(), but reports a rejection on stderr and returns ""."""
    try:
        return eval_demo(source)
    except DemoError as e:
        for line in _format(e.diagnostic):
            print(line, file=sys.stderr)
        return ""
