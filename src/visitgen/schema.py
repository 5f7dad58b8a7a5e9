"""Schema model: one entry per AST node declaration.

Declarations are pure data. The extractor builds them, the emitter reads
them, and nothing is kept once a run has written its artifacts.
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Union


# --- Type expressions ---

@dataclass(frozen=True)
class TypePath:
    """A (possibly dotted, possibly subscripted) type name: `pkg.Box[Expr]`."""
    segments: tuple[str, ...]
    args: tuple[TypeExpr, ...] = ()

    @property
    def name(self) -> str:
        """Last path segment; this is what lookups and classification use."""
        return self.segments[-1]

    def __str__(self) -> str:
        text = ".".join(self.segments)
        if self.args:
            text += "[" + ", ".join(str(a) for a in self.args) + "]"
        return text


@dataclass(frozen=True)
class TypeOther:
    """Any annotation that is not a type path (callables, literals, ...)."""
    source: str

    def __str__(self) -> str:
        return self.source


TypeExpr = Union[TypePath, TypeOther]


# --- Shapes ---

@dataclass
class Field:
    """A record field or a variant payload slot. `name` is None when positional."""
    ty: TypeExpr
    name: str | None = None


@dataclass
class Record:
    fields: list[Field] = field(default_factory=list)

    @property
    def positional(self) -> bool:
        return bool(self.fields) and self.fields[0].name is None


@dataclass
class Variant:
    """A union alternative. Payload is positional unless `named` is set."""
    name: str
    fields: list[Field] = field(default_factory=list)
    named: bool = False


@dataclass
class TaggedUnion:
    variants: list[Variant] = field(default_factory=list)


Shape = Union[Record, TaggedUnion]


@dataclass
class AstItem:
    """One node declaration.

    features: cfg names that must all be enabled for the node to exist,
        outermost scope first.
    extended_only: declared with the `full=True` marker.
    """
    name: str
    shape: Shape
    features: tuple[str, ...] = ()
    extended_only: bool = False


def merge_features(outer: tuple[str, ...], inner: tuple[str, ...]) -> tuple[str, ...]:
    """Conjunction of two predicates, keeping first-seen order."""
    merged = list(outer)
    for name in inner:
        if name not in merged:
            merged.append(name)
    return tuple(merged)


_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def under_name(name: str) -> str:
    """Snake-case form of a node name: ExprBinary -> expr_binary."""
    return _CAMEL_RE.sub("_", name).lower()
