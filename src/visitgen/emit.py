"""Code emitter.

Renders, for every node of the lookup table, the fragments that make up the
generated modules:

    visit_trait / visit_mut_trait / fold_trait   `Visitor` / `VisitorMut` /
                                                 `Folder` methods forwarding
                                                 to the free functions
    visit_impl / visit_mut_impl / fold_impl      the free functions with the
                                                 per-field / per-variant logic
    spanned_impls                                one `span()` registration

Every fragment is a list of lines at column zero; the writer indents method
fragments into their class. Fragments are appended in lookup order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .classify import Kind, Strategy, classify, indent, method_name
from .config import SPAN_TYPE
from .errors import UnsupportedShapeError
from .schema import AstItem, Field, Record, TaggedUnion, Variant, under_name

logger = logging.getLogger(__name__)

Fragment = list[str]


@dataclass
class State:
    visit_trait: list[Fragment] = field(default_factory=list)
    visit_impl: list[Fragment] = field(default_factory=list)
    visit_mut_trait: list[Fragment] = field(default_factory=list)
    visit_mut_impl: list[Fragment] = field(default_factory=list)
    fold_trait: list[Fragment] = field(default_factory=list)
    fold_impl: list[Fragment] = field(default_factory=list)
    spanned_impls: list[Fragment] = field(default_factory=list)

    def traits(self, kind: Kind) -> list[Fragment]:
        return {
            Kind.VISIT: self.visit_trait,
            Kind.VISIT_MUT: self.visit_mut_trait,
            Kind.FOLD: self.fold_trait,
        }[kind]

    def impls(self, kind: Kind) -> list[Fragment]:
        return {
            Kind.VISIT: self.visit_impl,
            Kind.VISIT_MUT: self.visit_mut_impl,
            Kind.FOLD: self.fold_impl,
        }[kind]


def render_cfg(features: tuple[str, ...]) -> str:
    return "cfg(" + ", ".join(f'"{name}"' for name in features) + ")"


def guard(features: tuple[str, ...], lines: Fragment) -> Fragment:
    """Wrap `lines` in the node's feature guard, if it has one."""
    if not features:
        return lines
    return [f"if {render_cfg(features)}:"] + indent(lines)


# --- Fields ---

def _reaches_full(strategy: Strategy) -> bool:
    target = strategy.target
    return target is not None and target.extended_only


def _field_statements(kind: Kind, strategy: Strategy, operand: str) -> Fragment:
    lines = strategy.statements(kind, operand)
    if _reaches_full(strategy):
        return ["with full():"] + indent(lines)
    return lines


def _field_expression(strategy: Strategy, operand: str) -> str:
    expr = strategy.expression(operand)
    if _reaches_full(strategy):
        return f"full(lambda: {expr})"
    return expr


def _operand(f: Field, index: int) -> str:
    if f.name is None:
        return f"_i[{index}]"
    return f"_i.{f.name}"


# --- Bodies ---

def _record_body(kind: Kind, item: AstItem, record: Record,
                 lookup: dict[str, AstItem]) -> Fragment:
    if kind is Kind.FOLD:
        if not record.fields:
            return ["return _i"]
        args = []
        for index, f in enumerate(record.fields):
            expr = _field_expression(classify(f.ty, lookup), _operand(f, index))
            args.append(f"{expr}," if f.name is None else f"{f.name}={expr},")
        return [f"return {item.name}("] + indent(args) + [")"]

    lines: Fragment = []
    for index, f in enumerate(record.fields):
        lines.extend(_field_statements(kind, classify(f.ty, lookup), _operand(f, index)))
    return lines or ["pass"]


def _bindings(variant: Variant) -> list[str]:
    return [f"_binding_{n}" for n in range(len(variant.fields))]


def _variant_body(kind: Kind, item: AstItem, variant: Variant,
                  lookup: dict[str, AstItem]) -> Fragment:
    bindings = _bindings(variant)
    lines: Fragment = []
    if bindings:
        trailing = "," if len(bindings) == 1 else ""
        lines.append(f"({', '.join(bindings)}{trailing}) = _i")

    if kind is Kind.FOLD:
        ctor = f"{item.name}.{variant.name}"
        if not bindings:
            return lines + [f"return {ctor}()"]
        args = [
            _field_expression(classify(f.ty, lookup), binding) + ","
            for f, binding in zip(variant.fields, bindings)
        ]
        return lines + [f"return {ctor}("] + indent(args) + [")"]

    for f, binding in zip(variant.fields, bindings):
        lines.extend(_field_statements(kind, classify(f.ty, lookup), binding))
    if len(lines) == (1 if bindings else 0):
        lines.append("pass")
    return lines


def _union_body(kind: Kind, item: AstItem, union: TaggedUnion,
                lookup: dict[str, AstItem]) -> Fragment:
    fallback = f'raise TypeError(f"not a {item.name} variant: {{_i!r}}")'
    lines: Fragment = []
    for n, variant in enumerate(union.variants):
        keyword = "if" if n == 0 else "elif"
        lines.append(f"{keyword} isinstance(_i, {item.name}.{variant.name}):")
        lines.extend(indent(_variant_body(kind, item, variant, lookup)))
    if not lines:
        return [fallback]
    return lines + ["else:"] + indent([fallback])


def _check_supported(item: AstItem) -> None:
    if isinstance(item.shape, TaggedUnion):
        for variant in item.shape.variants:
            if variant.named:
                raise UnsupportedShapeError(
                    f"{item.name}.{variant.name}: variants with named payload "
                    f"fields are not supported")


def _body(kind: Kind, item: AstItem, lookup: dict[str, AstItem]) -> Fragment:
    if isinstance(item.shape, TaggedUnion):
        return _union_body(kind, item, item.shape, lookup)
    return _record_body(kind, item, item.shape, lookup)


# --- Fragments ---

def _trait_method(kind: Kind, item: AstItem) -> Fragment:
    name = method_name(kind, item.name)
    forward = f"{name}(self, i)"
    if kind is Kind.FOLD:
        forward = "return " + forward
    return [f"def {name}(self, i):", "    " + forward]


def _impl_function(kind: Kind, item: AstItem, lookup: dict[str, AstItem]) -> Fragment:
    name = method_name(kind, item.name)
    return [f"def {name}(_visitor, _i):"] + indent(_body(kind, item, lookup))


def _spanned_impl(item: AstItem) -> Fragment:
    return [
        f"@span.register({item.name})",
        f"def _span_{under_name(item.name)}(node):",
        "    visitor = SpanVisitor()",
        f"    visitor.{method_name(Kind.VISIT, item.name)}(node)",
        "    return visitor.span",
    ]


def emit_item(state: State, lookup: dict[str, AstItem], item: AstItem) -> None:
    """Append every fragment for `item` to `state`."""
    _check_supported(item)
    for kind in Kind:
        state.traits(kind).append(guard(item.features, _trait_method(kind, item)))
        state.impls(kind).append(guard(item.features, _impl_function(kind, item, lookup)))
    if item.name != SPAN_TYPE:
        state.spanned_impls.append(guard(item.features, _spanned_impl(item)))
    logger.debug("emitted %s", item.name)


def emit_all(lookup: dict[str, AstItem]) -> State:
    """Render the fragments of every node, in lookup order."""
    state = State()
    for item in lookup.values():
        emit_item(state, lookup, item)
    return state
