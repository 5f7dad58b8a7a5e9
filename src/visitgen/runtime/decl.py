"""Declaration forms for AST models.

The three forms below are what the schema extractor looks for:

    @ast_struct                      named record (becomes a dataclass)
    Comma = ast_struct("Comma", Span)  positional record (a TupleNode)
    @ast_enum                        tagged union of `variant(...)` members
    @ast_enum_of_structs             tagged union whose variants are records,
                                     declared inline or by reference

At runtime they only build the classes; traversal code is generated from
the source text by `visitgen`.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, ClassVar


class TupleNode:
    """Base for nodes whose fields are positional (`node[0]`, `node[1]`, ...)."""

    _arity: ClassVar[int] = 0

    def __init__(self, *fields: Any):
        if len(fields) != self._arity:
            raise TypeError(
                f"{type(self).__qualname__} takes {self._arity} field(s), "
                f"got {len(fields)}")
        self._fields = list(fields)

    def __getitem__(self, index: int) -> Any:
        return self._fields[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._fields[index] = value

    def __iter__(self):
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields == other._fields

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        args = ", ".join(repr(f) for f in self._fields)
        return f"{type(self).__qualname__}({args})"


# --- Records ---

def _record(cls: type, manual_extra_traits: bool) -> type:
    return dataclass(cls, eq=not manual_extra_traits)


def _tuple_record(name: str, arity: int, module: str) -> type:
    return type(name, (TupleNode,), {
        "_arity": arity,
        "__module__": module,
        "__qualname__": name,
    })


def ast_struct(*args: Any, full: bool = False, manual_extra_traits: bool = False):
    """Declare a record.

    `@ast_struct` / `@ast_struct(full=True)` on a class declares named fields
    through annotations. `ast_struct("Name", T1, T2)` declares a positional
    record with one field per type argument.
    """
    if args and isinstance(args[0], str):
        # Functional form, resolved against the caller's module like namedtuple.
        module = sys._getframe(1).f_globals.get("__name__", "__main__")
        return _tuple_record(args[0], len(args) - 1, module)
    if len(args) == 1 and isinstance(args[0], type):
        return _record(args[0], manual_extra_traits)
    if args:
        raise TypeError("ast_struct() takes a class or a record name")

    def wrap(cls: type) -> type:
        return _record(cls, manual_extra_traits)
    return wrap


# --- Unions ---

class variant:
    """One alternative of a tagged union.

    `variant()` is a unit variant, `variant(T1, T2)` carries positional
    payload. Used as a decorator inside `ast_enum_of_structs`,
    `@variant("Name")` turns the nested class into an inline record.
    """

    def __init__(self, *payload: Any, full: bool = False, **named: Any):
        self.payload = payload
        self.named = named
        self.full = full
        self.record: type | None = None

    def __call__(self, cls: type) -> variant:
        if len(self.payload) != 1 or not isinstance(self.payload[0], str):
            raise TypeError("@variant(...) on a class takes the variant name")
        self.record = _record(cls, manual_extra_traits=False)
        return self


def _union_init(self, *args, **kwargs):
    raise TypeError(
        f"{type(self).__qualname__} is a tagged union; "
        f"construct one of its variants instead")


def _make_variant(union: type, name: str, arity: int) -> type:
    cls = type(name, (TupleNode, union), {
        "_arity": arity,
        "__init__": TupleNode.__init__,
        "__module__": union.__module__,
        "__qualname__": f"{union.__qualname__}.{name}",
    })
    cls.variant_name = name
    return cls


def _members(union: type) -> list[tuple[str, variant]]:
    return [(name, value) for name, value in vars(union).items()
            if isinstance(value, variant)]


def ast_enum(union: type) -> type:
    """Declare a tagged union of unit and positional variants."""
    variants = {}
    for name, member in _members(union):
        if member.named:
            raise TypeError(
                f"{union.__name__}.{name}: variants with named payload "
                f"fields are not supported")
        if member.record is not None:
            raise TypeError(
                f"{union.__name__}.{name}: inline records need ast_enum_of_structs")
        variants[name] = _make_variant(union, name, len(member.payload))
    for name, cls in variants.items():
        setattr(union, name, cls)
    union.variants = variants
    union.__init__ = _union_init
    return union


def ast_enum_of_structs(union: type | None = None, *,
                        do_not_generate_to_tokens: bool = False):
    """Declare a tagged union whose variants each wrap one record.

    Inline records are hoisted into the declaring module so they can be
    used by name like any other record.
    """
    def wrap(union: type) -> type:
        module = sys.modules.get(union.__module__)
        variants = {}
        renamed = []
        for attr, member in _members(union):
            if member.record is not None:
                name = member.payload[0]
                record = member.record
                record.__qualname__ = record.__name__
                if module is not None:
                    setattr(module, record.__name__, record)
                renamed.append(attr)
            elif len(member.payload) == 1 and not member.named:
                name = attr
            else:
                raise TypeError(
                    f"{union.__name__}.{attr}: a variant wraps exactly one record")
            variants[name] = _make_variant(union, name, 1)
        for attr in renamed:
            delattr(union, attr)
        for name, cls in variants.items():
            setattr(union, name, cls)
        union.variants = variants
        union.__init__ = _union_init
        return union

    if union is None:
        return wrap
    return wrap(union)
