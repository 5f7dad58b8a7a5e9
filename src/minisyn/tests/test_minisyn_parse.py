"""Tests for the minisyn tokenizer and parser."""

import pytest
from lsprotocol import types as lsp

from minisyn import (
    Attribute, BinOp, Expr, ExprTuple, File, Item, Lit, LitKind, ParseError, Path,
    UnOp, parse, tokenize,
)
from minisyn.error import make_diagnostic, to_range
from visitgen.runtime import LineColumn, Span


def sp(line: int, start: int, end: int) -> Span:
    return Span(LineColumn(line, start), LineColumn(line, end))


# --- Tokenizer ---

class TestTokenize:
    def test_kinds(self):
        tokens = tokenize('const x = 1.5 + "s" // note\n')
        assert [(t.kind, t.value) for t in tokens] == [
            ("keyword", "const"),
            ("ident", "x"),
            ("punct", "="),
            ("float", "1.5"),
            ("punct", "+"),
            ("str", '"s"'),
            ("eof", ""),
        ]

    def test_spans(self):
        tokens = tokenize("a\n  ::b")
        assert tokens[0].span == sp(1, 0, 1)
        assert tokens[1].span == sp(2, 2, 4)
        assert tokens[2].span == sp(2, 4, 5)
        assert tokens[-1].span == sp(2, 5, 5)

    def test_shebang(self):
        tokens = tokenize("#!/bin/mini\nuse a;")
        assert tokens[0].kind == "shebang"
        assert tokens[0].value == "#!/bin/mini"
        assert tokens[1].span == sp(2, 0, 3)

    def test_inner_attribute_is_not_a_shebang(self):
        assert tokenize("#![x]")[0].value == "#"

    def test_unexpected_character(self):
        with pytest.raises(ParseError) as excinfo:
            tokenize("a $")
        assert excinfo.value.message == "unexpected character '$'"
        assert excinfo.value.span == sp(1, 2, 3)


# --- Expressions ---

class TestExpressions:
    def test_literals(self):
        assert parse(Lit, "42").kind == LitKind.Int(42)
        assert parse(Lit, "2.5").kind == LitKind.Float(2.5)
        assert parse(Lit, '"a\\"b"').kind == LitKind.Str('a"b')
        assert parse(Lit, "false").kind == LitKind.Bool(False)

    def test_precedence(self):
        expr = parse(Expr, "1 + 2 * 3")
        (binary,) = expr
        assert isinstance(binary.op, BinOp.Add)
        assert binary.left.value[0].lit.kind == LitKind.Int(1)
        (right,) = binary.right.value
        assert isinstance(right.op, BinOp.Mul)

    def test_left_associative(self):
        (outer,) = parse(Expr, "1 - 2 - 3")
        assert isinstance(outer.left.value, Expr.Binary)
        assert outer.right.value[0].lit.kind == LitKind.Int(3)

    def test_unary(self):
        (unary,) = parse(Expr, "-!x")
        assert unary.op == UnOp.Neg(sp(1, 0, 1))
        (inner,) = unary.expr.value
        assert isinstance(inner.op, UnOp.Not)

    def test_paren_and_tuple(self):
        assert isinstance(parse(Expr, "(a)"), Expr.Paren)
        (single,) = parse(Expr, "(a,)")
        assert len(single.elems) == 1 and single.elems.trailing_punct()
        (empty,) = parse(Expr, "()")
        assert len(empty.elems) == 0
        (pair,) = parse(Expr, "(a, b)")
        assert pair.paren_token == parse(ExprTuple, "(a, b)").paren_token
        assert pair.paren_token[0] == sp(1, 0, 6)

    def test_array_and_assign(self):
        (assign,) = parse(Expr, "x = [1, 2,] = y")
        assert isinstance(assign.left.value, Expr.Path)
        (rest,) = assign.right.value
        (array,) = rest.left.value
        assert array.elems.items()[1][0].lit.kind == LitKind.Int(2)
        assert array.bracket_token[0] == sp(1, 4, 11)

    def test_attributes_on_expressions(self):
        (lit,) = parse(Expr, "#[a] #[b(c)] 1")
        assert [attr.path.segments[0].ident.name for attr in lit.attrs] == ["a", "b"]
        assert lit.attrs[1].tts == ["(", "c", ")"]

    def test_trailing_tokens(self):
        with pytest.raises(ParseError, match="unexpected `2`"):
            parse(Expr, "1 2")

    def test_missing_operand(self):
        with pytest.raises(ParseError) as excinfo:
            parse(Expr, "1 +")
        assert str(excinfo.value) == "expected an expression, got end of input"
        assert excinfo.value.span == sp(1, 3, 3)


# --- Paths and attributes ---

class TestPaths:
    def test_segments(self):
        path = parse(Path, "::a::b")
        assert path.leading_colon is not None
        assert [seg.ident.name for seg in path.segments.items()] == ["a", "b"]
        assert not path.is_ident()
        assert parse(Path, "a").is_ident()

    def test_missing_segment(self):
        with pytest.raises(ParseError, match="expected an identifier, got `;`"):
            parse(Path, "a::;")

    def test_attribute(self):
        attr = parse(Attribute, "#[doc = [1]]")
        assert attr.tts == ["=", "[", "1", "]"]
        assert attr.bracket_token[0] == sp(1, 1, 12)

    def test_unterminated_attribute(self):
        with pytest.raises(ParseError, match="unterminated attribute"):
            parse(Attribute, "#[doc (")


# --- Items and files ---

SOURCE = """#!/usr/bin/env mini
#![doc = "x"]
#[inline]
const A = (1, -2);
use ::std::io;
"""


class TestItems:
    def test_file(self):
        file = parse(File, SOURCE)
        assert file.shebang == "#!/usr/bin/env mini"
        assert [attr.path.segments[0].ident.name for attr in file.attrs] == ["doc"]
        const, use = file.items
        assert isinstance(const, Item.Const) and isinstance(use, Item.Use)
        assert const[0].ident.name == "A"
        assert const[0].attrs[0].path.is_ident()
        assert const[0].semi_token[0] == sp(4, 17, 18)
        assert use[0].path.leading_colon is not None

    def test_item(self):
        (use,) = parse(Item, "use a::b;")
        assert str(use.path.segments[1].ident) == "b"

    def test_bad_item(self):
        with pytest.raises(ParseError, match="expected an item, got `1`"):
            parse(File, "1;")

    def test_missing_semicolon(self):
        with pytest.raises(ParseError, match="expected `;`, got end of input"):
            parse(Item, "const A = 1")


class TestEntryPoints:
    def test_token_list(self):
        tokens = tokenize("(1, 2)")
        assert len(parse(ExprTuple, tokens).elems) == 2

    def test_tuple_rejects_paren(self):
        with pytest.raises(ParseError, match="parenthesized expression") as excinfo:
            parse(ExprTuple, "(1)")
        assert excinfo.value.span == sp(1, 0, 3)

    def test_unknown_node_type(self):
        with pytest.raises(TypeError, match="cannot parse a Span"):
            parse(Span, "x")


# --- Diagnostics ---

class TestDiagnostics:
    def test_range_is_zero_based(self):
        rng = to_range(sp(3, 4, 7))
        assert rng.start == lsp.Position(line=2, character=4)
        assert rng.end == lsp.Position(line=2, character=7)

    def test_no_span(self):
        error = ParseError()
        assert str(error) == "failed to parse"
        diag = error.to_diagnostic()
        assert diag.range.start == lsp.Position(line=0, character=0)
        assert diag.source == "minisyn"
        assert diag.severity == lsp.DiagnosticSeverity.Error

    def test_note(self):
        diag = make_diagnostic(sp(1, 9, 18), "main", note=(sp(1, 0, 6), "because of this"),
                               uri="file:///a.mini")
        (info,) = diag.related_information
        assert info.message == "because of this"
        assert info.location.uri == "file:///a.mini"
        assert info.location.range.end.character == 6
