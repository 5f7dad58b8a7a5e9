"""Field classifier.

`classify()` decides how a field of a given declared type is traversed.
Resolution is layered; each layer first tries the layers below it:

    direct       the type is a node in the lookup table
    indirection  Box[T]                 T resolved directly
    sequence     list[T] / Delimited[T] T resolved by direct or indirection
    optional     Optional[T]            T resolved by any layer above
    unresolved   nothing matched: read/mutate skip the field, fold passes it through

Strategies render themselves: `statements()` gives the read / mutate code
as lines relative to the enclosing block, `expression()` gives the fold
expression.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .errors import UnsupportedShapeError
from .schema import AstItem, TypeExpr, TypePath, under_name

INDENT = "    "

BOX_TYPES = ("Box",)
SEQUENCE_TYPES = ("list", "List")
DELIMITED_TYPES = ("Delimited",)
OPTIONAL_TYPES = ("Optional",)


class Kind(Enum):
    VISIT = "visit"
    VISIT_MUT = "visit_mut"
    FOLD = "fold"


def method_name(kind: Kind, item_name: str) -> str:
    """Name of the visitor method / free function for a node and traversal kind."""
    under = under_name(item_name)
    if kind is Kind.VISIT:
        return f"visit_{under}"
    if kind is Kind.VISIT_MUT:
        return f"visit_{under}_mut"
    return f"fold_{under}"


def indent(lines: list[str], levels: int = 1) -> list[str]:
    return [INDENT * levels + line for line in lines]


# --- Strategies ---

@dataclass(frozen=True)
class Direct:
    """Invoke the traversal of a node from the lookup table."""
    item: AstItem

    @property
    def target(self) -> AstItem:
        return self.item

    def call(self, kind: Kind, operand: str) -> str:
        return f"_visitor.{method_name(kind, self.item.name)}({operand})"

    def statements(self, kind: Kind, operand: str) -> list[str]:
        return [self.call(kind, operand)]

    def expression(self, operand: str) -> str:
        return self.call(Kind.FOLD, operand)


@dataclass(frozen=True)
class Indirect:
    """Box[T]: traverse the boxed value; fold re-boxes the result."""
    inner: Direct

    @property
    def target(self) -> AstItem:
        return self.inner.target

    def statements(self, kind: Kind, operand: str) -> list[str]:
        return self.inner.statements(kind, f"{operand}.value")

    def expression(self, operand: str) -> str:
        return f"Box({self.inner.expression(f'{operand}.value')})"


@dataclass(frozen=True)
class Sequence:
    """list[T] or Delimited[T, P]: traverse each element in order."""
    element: Union[Direct, Indirect]
    delimited: bool = False

    @property
    def target(self) -> AstItem:
        return self.element.target

    def statements(self, kind: Kind, operand: str) -> list[str]:
        if self.delimited:
            head = f"for el in {operand}:"
            body = self.element.statements(kind, "el.item")
        else:
            head = f"for it in {operand}:"
            body = self.element.statements(kind, "it")
        return [head] + indent(body)

    def expression(self, operand: str) -> str:
        # lift() keeps Delimited punctuation in place.
        return f"lift({operand}, lambda it: {self.element.expression('it')})"


@dataclass(frozen=True)
class Optional_:
    """Optional[T]: traverse a present value, leave None alone."""
    inner: Union[Direct, Indirect, Sequence]

    @property
    def target(self) -> AstItem:
        return self.inner.target

    def statements(self, kind: Kind, operand: str) -> list[str]:
        return [f"if {operand} is not None:"] + indent(self.inner.statements(kind, operand))

    def expression(self, operand: str) -> str:
        return f"None if {operand} is None else {self.inner.expression(operand)}"


@dataclass(frozen=True)
class Unresolved:
    """No known node below this type: skipped by read/mutate, passed through by fold."""

    @property
    def target(self) -> None:
        return None

    def statements(self, kind: Kind, operand: str) -> list[str]:
        return [f"pass  # Skipped field {operand}"]

    def expression(self, operand: str) -> str:
        return operand


Strategy = Union[Direct, Indirect, Sequence, Optional_, Unresolved]


# --- Resolution ---

def _first_arg(ty: TypePath) -> TypeExpr:
    if not ty.args:
        raise UnsupportedShapeError(f"expected a type argument in '{ty}'")
    return ty.args[0]


def _direct(ty: TypeExpr, lookup: dict[str, AstItem]) -> Optional[Direct]:
    if isinstance(ty, TypePath) and ty.name in lookup:
        return Direct(lookup[ty.name])
    return None


def _boxed(ty: TypeExpr, lookup: dict[str, AstItem]) -> Optional[Union[Direct, Indirect]]:
    found = _direct(ty, lookup)
    if found is not None:
        return found
    if isinstance(ty, TypePath) and ty.name in BOX_TYPES:
        inner = _direct(_first_arg(ty), lookup)
        if inner is not None:
            return Indirect(inner)
    return None


def _sequence(ty: TypeExpr, lookup: dict[str, AstItem]) -> Optional[Strategy]:
    found = _boxed(ty, lookup)
    if found is not None:
        return found
    if isinstance(ty, TypePath) and ty.name in SEQUENCE_TYPES + DELIMITED_TYPES:
        element = _boxed(_first_arg(ty), lookup)
        if element is not None:
            return Sequence(element, delimited=ty.name in DELIMITED_TYPES)
    return None


def _optional(ty: TypeExpr, lookup: dict[str, AstItem]) -> Optional[Strategy]:
    found = _sequence(ty, lookup)
    if found is not None:
        return found
    if isinstance(ty, TypePath) and ty.name in OPTIONAL_TYPES:
        inner = _sequence(_first_arg(ty), lookup)
        if inner is not None:
            return Optional_(inner)
    return None


def classify(ty: TypeExpr, lookup: dict[str, AstItem]) -> Strategy:
    """Traversal strategy for a field declared with type `ty`."""
    found = _optional(ty, lookup)
    if found is not None:
        return found
    return Unresolved()
