"""Parsers for the declaration forms recognized in schema files.

Works on Python `ast` nodes. Each `parse_*` function returns the AstItems a
declaration introduces, or raises DeclarationSyntaxError; the extractor
turns that into a fatal ExtractionError with the file name attached.

Forms (see visitgen.runtime.decl):
    ast_struct           @ast_struct[(full=, manual_extra_traits=)] class Name: <fields>
                         Name = ast_struct("Name", T1, T2, ...)
    ast_enum             @ast_enum class Name: V = variant(T, ...) ...
    ast_enum_of_structs  @ast_enum_of_structs class Name:
                             @variant("V"[, full=True]) class Rec: <fields>
                             V = variant(Rec)
"""

from __future__ import annotations
import ast
from typing import Optional

from .config import EXTENDED_FEATURE
from .schema import AstItem, Field, Record, TaggedUnion, TypeExpr, TypeOther, TypePath, Variant

FORMS = ("ast_struct", "ast_enum", "ast_enum_of_structs")


class DeclarationSyntaxError(Exception):
    def __init__(self, message: str, node: ast.AST):
        self.message = message
        self.line = getattr(node, "lineno", None)
        super().__init__(message)


# --- Small AST helpers ---

def _path_segments(node: ast.expr) -> Optional[tuple[str, ...]]:
    if isinstance(node, ast.Name):
        return (node.id,)
    if isinstance(node, ast.Attribute):
        base = _path_segments(node.value)
        if base is not None:
            return base + (node.attr,)
    return None


def _last_name(node: ast.expr) -> Optional[str]:
    segments = _path_segments(node)
    return segments[-1] if segments else None


def _is_none(node: ast.expr) -> bool:
    return isinstance(node, ast.Constant) and node.value is None


def _is_docstring(stmt: ast.stmt) -> bool:
    return (isinstance(stmt, ast.Expr) and isinstance(stmt.value, ast.Constant)
            and isinstance(stmt.value.value, str))


def _flag(keyword: ast.keyword) -> bool:
    if not (isinstance(keyword.value, ast.Constant)
            and isinstance(keyword.value.value, bool)):
        raise DeclarationSyntaxError(
            f"'{keyword.arg}' must be True or False", keyword.value)
    return keyword.value.value


def _markers(keywords: list[ast.keyword], allowed: tuple[str, ...]) -> dict[str, bool]:
    flags = {}
    for keyword in keywords:
        if keyword.arg not in allowed:
            raise DeclarationSyntaxError(f"unknown marker '{keyword.arg}'", keyword)
        flags[keyword.arg] = _flag(keyword)
    return flags


def _decorator_markers(call: Optional[ast.Call],
                       allowed: tuple[str, ...]) -> dict[str, bool]:
    if call is None:
        return {}
    if call.args:
        raise DeclarationSyntaxError("unexpected positional argument", call.args[0])
    return _markers(call.keywords, allowed)


# --- Type expressions ---

def parse_type(node: ast.expr) -> TypeExpr:
    """Read an annotation into a type expression."""
    if isinstance(node, ast.Constant) and isinstance(node.value, str):
        # Quoted forward reference
        try:
            inner = ast.parse(node.value, mode="eval").body
        except SyntaxError:
            return TypeOther(repr(node.value))
        return parse_type(inner)
    if isinstance(node, ast.BinOp) and isinstance(node.op, ast.BitOr):
        if _is_none(node.right):
            return TypePath(("Optional",), (parse_type(node.left),))
        if _is_none(node.left):
            return TypePath(("Optional",), (parse_type(node.right),))
        return TypeOther(ast.unparse(node))
    if isinstance(node, ast.Subscript):
        base = _path_segments(node.value)
        if base is None:
            return TypeOther(ast.unparse(node))
        elts = node.slice.elts if isinstance(node.slice, ast.Tuple) else [node.slice]
        return TypePath(base, tuple(parse_type(e) for e in elts))
    segments = _path_segments(node)
    if segments is not None:
        return TypePath(segments)
    return TypeOther(ast.unparse(node))


# --- Feature predicates ---

def cfg_features(test: ast.expr) -> Optional[tuple[str, ...]]:
    """Features named by `cfg("a", ...) [and cfg(...)]`, or None for any other test."""
    if isinstance(test, ast.BoolOp) and isinstance(test.op, ast.And):
        names: list[str] = []
        for value in test.values:
            part = cfg_features(value)
            if part is None:
                return None
            names.extend(n for n in part if n not in names)
        return tuple(names)
    if (isinstance(test, ast.Call) and _last_name(test.func) == "cfg"
            and not test.keywords
            and all(isinstance(a, ast.Constant) and isinstance(a.value, str)
                    for a in test.args)):
        return tuple(a.value for a in test.args)
    return None


# --- Form recognition ---

def decorator_form(cls: ast.ClassDef) -> Optional[tuple[str, Optional[ast.Call]]]:
    """(form name, decorator call or None) for the first recognized decorator."""
    for dec in cls.decorator_list:
        call = dec if isinstance(dec, ast.Call) else None
        name = _last_name(call.func if call else dec)
        if name in FORMS:
            return name, call
    return None


def functional_form(stmt: ast.Assign) -> Optional[ast.Call]:
    """The `ast_struct("Name", ...)` call of a positional record assignment."""
    value = stmt.value
    if (isinstance(value, ast.Call) and _last_name(value.func) == "ast_struct"
            and value.args and isinstance(value.args[0], ast.Constant)
            and isinstance(value.args[0].value, str)):
        return value
    return None


# --- Records ---

def _record_fields(cls: ast.ClassDef) -> list[Field]:
    if cls.bases or cls.keywords:
        raise DeclarationSyntaxError(
            f"record '{cls.name}' cannot have base classes", cls)
    fields = []
    for stmt in cls.body:
        if (_is_docstring(stmt) or isinstance(stmt, ast.Pass)
                or isinstance(stmt, (ast.FunctionDef, ast.AsyncFunctionDef))):
            continue
        if isinstance(stmt, ast.AnnAssign) and isinstance(stmt.target, ast.Name):
            if stmt.value is not None:
                raise DeclarationSyntaxError(
                    f"field '{stmt.target.id}' cannot have a default", stmt)
            ty = parse_type(stmt.annotation)
            if isinstance(ty, TypePath) and ty.name == "ClassVar":
                continue
            fields.append(Field(ty, stmt.target.id))
        else:
            raise DeclarationSyntaxError(
                f"unexpected statement in record '{cls.name}'", stmt)
    return fields


def parse_ast_struct(cls: ast.ClassDef, call: Optional[ast.Call]) -> list[AstItem]:
    flags = _decorator_markers(call, ("full", "manual_extra_traits"))
    full = flags.get("full", False)
    return [AstItem(
        name=cls.name,
        shape=Record(_record_fields(cls)),
        features=(EXTENDED_FEATURE,) if full else (),
        extended_only=full,
    )]


def parse_tuple_struct(stmt: ast.Assign, call: ast.Call) -> list[AstItem]:
    if len(stmt.targets) != 1 or not isinstance(stmt.targets[0], ast.Name):
        raise DeclarationSyntaxError("positional record must be assigned to one name", stmt)
    name = call.args[0].value
    if stmt.targets[0].id != name:
        raise DeclarationSyntaxError(
            f"record '{name}' is assigned to '{stmt.targets[0].id}'", stmt)
    flags = _markers(call.keywords, ("full", "manual_extra_traits"))
    full = flags.get("full", False)
    fields = [Field(parse_type(arg)) for arg in call.args[1:]]
    return [AstItem(
        name=name,
        shape=Record(fields),
        features=(EXTENDED_FEATURE,) if full else (),
        extended_only=full,
    )]


# --- Unions ---

def _variant_call(stmt: ast.stmt) -> Optional[tuple[str, ast.Call]]:
    if (isinstance(stmt, ast.Assign) and len(stmt.targets) == 1
            and isinstance(stmt.targets[0], ast.Name)
            and isinstance(stmt.value, ast.Call)
            and _last_name(stmt.value.func) == "variant"):
        return stmt.targets[0].id, stmt.value
    return None


def _variant_decorator(cls: ast.ClassDef) -> Optional[ast.Call]:
    for dec in cls.decorator_list:
        if isinstance(dec, ast.Call) and _last_name(dec.func) == "variant":
            return dec
    return None


def _skippable(stmt: ast.stmt) -> bool:
    return _is_docstring(stmt) or isinstance(stmt, ast.Pass)


def parse_ast_enum(cls: ast.ClassDef, call: Optional[ast.Call]) -> list[AstItem]:
    _decorator_markers(call, ())
    variants = []
    for stmt in cls.body:
        if _skippable(stmt):
            continue
        found = _variant_call(stmt)
        if found is None:
            if isinstance(stmt, ast.ClassDef) and _variant_decorator(stmt):
                raise DeclarationSyntaxError(
                    "inline records need ast_enum_of_structs", stmt)
            raise DeclarationSyntaxError(
                f"unexpected statement in union '{cls.name}'", stmt)
        name, vcall = found
        if vcall.args and vcall.keywords:
            raise DeclarationSyntaxError(
                f"variant '{name}' mixes positional and named payload", vcall)
        if vcall.keywords:
            fields = [Field(parse_type(k.value), k.arg) for k in vcall.keywords]
            variants.append(Variant(name, fields, named=True))
        else:
            variants.append(Variant(name, [Field(parse_type(a)) for a in vcall.args]))
    return [AstItem(name=cls.name, shape=TaggedUnion(variants))]


def _inline_record(stmt: ast.stmt) -> Optional[tuple[Variant, AstItem]]:
    if not isinstance(stmt, ast.ClassDef):
        return None
    dec = _variant_decorator(stmt)
    if dec is None:
        return None
    if (len(dec.args) != 1 or not isinstance(dec.args[0], ast.Constant)
            or not isinstance(dec.args[0].value, str)):
        raise DeclarationSyntaxError("@variant(...) takes the variant name", dec)
    flags = _markers(dec.keywords, ("full",))
    full = flags.get("full", False)
    record = AstItem(
        name=stmt.name,
        shape=Record(_record_fields(stmt)),
        features=(EXTENDED_FEATURE,) if full else (),
        extended_only=full,
    )
    return Variant(dec.args[0].value, [Field(TypePath((stmt.name,)))]), record


def _referenced_record(stmt: ast.stmt) -> Optional[Variant]:
    found = _variant_call(stmt)
    if found is None:
        return None
    name, vcall = found
    if len(vcall.args) != 1 or vcall.keywords:
        raise DeclarationSyntaxError(
            f"variant '{name}' must wrap exactly one record", vcall)
    ty = parse_type(vcall.args[0])
    if not isinstance(ty, TypePath):
        raise DeclarationSyntaxError(f"variant '{name}' must name a record type", vcall)
    return Variant(name, [Field(ty)])


def parse_ast_enum_of_structs(cls: ast.ClassDef,
                              call: Optional[ast.Call]) -> list[AstItem]:
    _decorator_markers(call, ("do_not_generate_to_tokens",))
    variants = []
    records = []
    for stmt in cls.body:
        if _skippable(stmt):
            continue
        inline = _inline_record(stmt)
        if inline is not None:
            variant, record = inline
            variants.append(variant)
            records.append(record)
            continue
        variant = _referenced_record(stmt)
        if variant is None:
            raise DeclarationSyntaxError(
                f"unexpected statement in union '{cls.name}'", stmt)
        variants.append(variant)
    return [AstItem(name=cls.name, shape=TaggedUnion(variants))] + records


PARSERS = {
    "ast_struct": parse_ast_struct,
    "ast_enum": parse_ast_enum,
    "ast_enum_of_structs": parse_ast_enum_of_structs,
}
