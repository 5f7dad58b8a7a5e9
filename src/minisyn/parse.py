"""Tokenizer and recursive-descent parser for minisyn source text.

Grammar:
    file       = [shebang] { "#" "!" attr_body } { item }
    item       = { attribute } ( "const" IDENT "=" expr ";" | "use" path ";" )
    attribute  = "#" attr_body
    attr_body  = "[" path { token } "]"
    expr       = binary [ "=" expr ]
    binary     = unary { binop unary }          (* and / bind tighter than + and -)
    unary      = ( "-" | "!" ) unary | primary
    primary    = { attribute } ( literal | path | "(" elems ")" | "[" elems "]" )
    elems      = [ expr { "," expr } [ "," ] ]
    path       = [ "::" ] IDENT { "::" IDENT }

Items and files need the `full` feature.
"""

from __future__ import annotations
import ast
import re
from dataclasses import dataclass
from typing import Optional

from visitgen.runtime import Box, Delimited, Ident, LineColumn, Span, cfg

from .attr import Attribute
from .error import ParseError
from .expr import (
    Expr, ExprArray, ExprAssign, ExprBinary, ExprLit, ExprParen, ExprPath,
    ExprTuple, ExprUnary,
)
from .lit import Lit, LitKind
from .op import BINARY_OPERATORS, UNARY_OPERATORS
from .path import Path, PathSegment
from .tokens import Bracket, Colon2, Comma, Eq, Paren, Pound, Semi

KEYWORDS = {"const", "use", "true", "false"}


# --- Tokenizer ---

@dataclass
class Token:
    kind: str   # "ident", "keyword", "int", "float", "str", "punct", "shebang", "eof"
    value: str
    span: Span

    def describe(self) -> str:
        return "end of input" if self.kind == "eof" else f"`{self.value}`"


_TOKEN_RE = re.compile(r"""
    (//[^\n]*)                  |  # line comment
    ("(?:[^"\\\n]|\\.)*")       |  # string
    (\d+\.\d+)                  |  # float
    (\d+)                       |  # int
    ([A-Za-z_][A-Za-z0-9_]*)    |  # identifier or keyword
    (::|[\#\[\](),;=+\-*/!])    |  # punctuation
    (\s+)                          # whitespace
""", re.VERBOSE)


def _span(line: int, column: int, width: int) -> Span:
    return Span(LineColumn(line, column), LineColumn(line, column + width))


def tokenize(source: str) -> list[Token]:
    """Split `source` into tokens, ending with an "eof" token."""
    tokens = []
    pos = 0
    line = 1
    line_start = 0

    if source.startswith("#!") and not source.startswith("#!["):
        end = source.find("\n")
        if end < 0:
            end = len(source)
        tokens.append(Token("shebang", source[:end], _span(1, 0, end)))
        pos = end

    while pos < len(source):
        col = pos - line_start
        m = _TOKEN_RE.match(source, pos)
        if m is None:
            raise ParseError(f"unexpected character {source[pos]!r}", _span(line, col, 1))
        comment, string, float_, int_, ident, punct, ws = m.groups()
        text = m.group(0)
        if ws:
            newlines = text.count("\n")
            if newlines:
                line += newlines
                line_start = pos + text.rindex("\n") + 1
        elif not comment:
            if string:
                kind = "str"
            elif float_:
                kind = "float"
            elif int_:
                kind = "int"
            elif ident:
                kind = "keyword" if ident in KEYWORDS else "ident"
            else:
                kind = "punct"
            tokens.append(Token(kind, text, _span(line, col, len(text))))
        pos = m.end()

    tokens.append(Token("eof", "", _span(line, pos - line_start, 0)))
    return tokens


# --- Parser ---

class Parser:
    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0

    # ---- Token helpers ----

    def _peek(self, offset: int = 0) -> Token:
        pos = self.pos + offset
        if pos < len(self.tokens):
            return self.tokens[pos]
        return self.tokens[-1]  # EOF

    def _advance(self) -> Token:
        tok = self._peek()
        if tok.kind != "eof":
            self.pos += 1
        return tok

    def _check(self, value: str, offset: int = 0) -> bool:
        tok = self._peek(offset)
        return tok.kind in ("punct", "keyword") and tok.value == value

    def _expect(self, value: str) -> Token:
        tok = self._peek()
        if self._check(value):
            return self._advance()
        raise ParseError(f"expected `{value}`, got {tok.describe()}", tok.span)

    def _error(self, msg: str) -> ParseError:
        return ParseError(msg, self._peek().span)

    def at_end(self) -> bool:
        return self._peek().kind == "eof"

    def expect_end(self) -> None:
        if not self.at_end():
            raise self._error(f"unexpected {self._peek().describe()}")

    def _ident(self) -> Ident:
        tok = self._peek()
        if tok.kind != "ident":
            raise self._error(f"expected an identifier, got {tok.describe()}")
        self._advance()
        return Ident(tok.value, tok.span)

    # ---- Paths and attributes ----

    def parse_path(self) -> Path:
        leading_colon = None
        if self._check("::"):
            leading_colon = Colon2(self._advance().span)
        segments = Delimited()
        segments.push(PathSegment(self._ident()))
        while self._check("::"):
            segments.push_punct(Colon2(self._advance().span))
            segments.push(PathSegment(self._ident()))
        return Path(leading_colon, segments)

    def parse_attribute(self, inner: bool = False) -> Attribute:
        pound = self._expect("#")
        if inner:
            self._expect("!")
        open_ = self._expect("[")
        path = self.parse_path()
        tts = []
        depth = 0
        while depth > 0 or not self._check("]"):
            tok = self._peek()
            if tok.kind == "eof":
                raise self._error("unterminated attribute")
            if tok.kind == "punct" and tok.value in ("(", "["):
                depth += 1
            elif tok.kind == "punct" and tok.value in (")", "]"):
                depth -= 1
            tts.append(self._advance().value)
        close = self._expect("]")
        return Attribute(Pound(pound.span), Bracket(open_.span.join(close.span)), path, tts)

    def parse_attrs(self) -> list[Attribute]:
        attrs = []
        while self._check("#") and not self._check("!", 1):
            attrs.append(self.parse_attribute())
        return attrs

    # ---- Literals ----

    def parse_lit(self) -> Lit:
        tok = self._peek()
        if tok.kind == "int":
            kind = LitKind.Int(int(tok.value))
        elif tok.kind == "float":
            kind = LitKind.Float(float(tok.value))
        elif tok.kind == "str":
            kind = LitKind.Str(ast.literal_eval(tok.value))
        elif tok.kind == "keyword" and tok.value in ("true", "false"):
            kind = LitKind.Bool(tok.value == "true")
        else:
            raise self._error(f"expected a literal, got {tok.describe()}")
        self._advance()
        return Lit(kind, tok.span)

    # ---- Expressions ----

    def parse_expr(self) -> Expr:
        left = self._parse_binary(0)
        if self._check("="):
            eq = self._advance()
            right = self.parse_expr()
            return Expr.Assign(ExprAssign([], Box(left), Eq(eq.span), Box(right)))
        return left

    def _parse_binary(self, min_power: int) -> Expr:
        left = self._parse_unary()
        while True:
            tok = self._peek()
            entry = BINARY_OPERATORS.get(tok.value) if tok.kind == "punct" else None
            if entry is None or entry[0] <= min_power:
                return left
            power, op = entry
            self._advance()
            right = self._parse_binary(power)
            left = Expr.Binary(ExprBinary([], Box(left), op(tok.span), Box(right)))

    def _parse_unary(self) -> Expr:
        tok = self._peek()
        if tok.kind == "punct" and tok.value in UNARY_OPERATORS:
            self._advance()
            expr = self._parse_unary()
            return Expr.Unary(ExprUnary([], UNARY_OPERATORS[tok.value](tok.span), Box(expr)))
        return self._parse_primary()

    def _parse_primary(self) -> Expr:
        attrs = self.parse_attrs()
        tok = self._peek()
        if tok.kind in ("int", "float", "str") or tok.value in ("true", "false"):
            return Expr.Lit(ExprLit(attrs, self.parse_lit()))
        if tok.kind == "ident" or self._check("::"):
            return Expr.Path(ExprPath(attrs, self.parse_path()))
        if self._check("("):
            return self._parse_group(attrs)
        if self._check("["):
            open_ = self._advance()
            elems, close = self._parse_elems("]")
            return Expr.Array(ExprArray(attrs, Bracket(open_.span.join(close.span)), elems))
        raise self._error(f"expected an expression, got {tok.describe()}")

    def _parse_elems(self, close: str) -> tuple[Delimited, Token]:
        elems = Delimited()
        while not self._check(close):
            elems.push(self.parse_expr())
            if not self._check(","):
                break
            elems.push_punct(Comma(self._advance().span))
        return elems, self._expect(close)

    def _parse_group(self, attrs: list[Attribute]) -> Expr:
        open_ = self._expect("(")
        elems, close = self._parse_elems(")")
        paren = Paren(open_.span.join(close.span))
        if len(elems) == 1 and not elems.trailing_punct():
            return Expr.Paren(ExprParen(attrs, paren, Box(elems[0])))
        return Expr.Tuple(ExprTuple(attrs, paren, elems))

    def parse_tuple(self) -> ExprTuple:
        attrs = self.parse_attrs()
        if not self._check("("):
            raise self._error(f"expected a tuple, got {self._peek().describe()}")
        expr = self._parse_group(attrs)
        if not isinstance(expr, Expr.Tuple):
            raise ParseError("expected a tuple, got a parenthesized expression",
                             expr[0].paren_token[0])
        return expr[0]

    # ---- Items ----

    def parse_item(self):
        from .item import Item, ItemConst, ItemUse
        attrs = self.parse_attrs()
        if self._check("const"):
            const = self._advance()
            ident = self._ident()
            eq = self._expect("=")
            expr = self.parse_expr()
            semi = self._expect(";")
            return Item.Const(ItemConst(
                attrs, const.span, ident, Eq(eq.span), Box(expr), Semi(semi.span)))
        if self._check("use"):
            use = self._advance()
            path = self.parse_path()
            semi = self._expect(";")
            return Item.Use(ItemUse(attrs, use.span, path, Semi(semi.span)))
        raise self._error(f"expected an item, got {self._peek().describe()}")

    def parse_file(self):
        from .item import File
        shebang: Optional[str] = None
        if self._peek().kind == "shebang":
            shebang = self._advance().value
        attrs = []
        while self._check("#") and self._check("!", 1):
            attrs.append(self.parse_attribute(inner=True))
        items = []
        while not self.at_end():
            items.append(self.parse_item())
        return File(shebang, attrs, items)


def _entry_points() -> dict[type, object]:
    entries = {
        Attribute: Parser.parse_attribute,
        Expr: Parser.parse_expr,
        ExprTuple: Parser.parse_tuple,
        Lit: Parser.parse_lit,
        Path: Parser.parse_path,
    }
    if cfg("full"):
        from .item import File, Item
        entries[File] = Parser.parse_file
        entries[Item] = Parser.parse_item
    return entries


def parse(node_type: type, source):
    """Parse all of `source` (text or a token list) as one `node_type` node.

    Raises ParseError on malformed input or trailing tokens.
    """
    entry = _entry_points().get(node_type)
    if entry is None:
        raise TypeError(f"cannot parse a {node_type.__name__}")
    tokens = tokenize(source) if isinstance(source, str) else source
    parser = Parser(tokens)
    node = entry(parser)
    parser.expect_end()
    return node
