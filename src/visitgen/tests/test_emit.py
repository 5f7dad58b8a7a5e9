"""Tests for the code emitter."""

import pytest

from visitgen.emit import State, emit_all, emit_item, guard, render_cfg
from visitgen.errors import UnsupportedShapeError
from visitgen.schema import AstItem, Field, Record, TaggedUnion, TypePath, Variant


def t(name: str, *args) -> TypePath:
    return TypePath((name,), tuple(args))


SPAN = AstItem("Span", Record())
LEAF = AstItem("Leaf", Record([Field(t("str"), "name"), Field(t("Span"), "span")]))
COMMA = AstItem("Comma", Record([Field(t("Span"))]))
BIG = AstItem("Big", Record([Field(t("Leaf"), "leaf")]), features=("full",), extended_only=True)
NODE = AstItem("Node", TaggedUnion([
    Variant("Leaf", [Field(t("Leaf"))]),
    Variant("Pair", [Field(t("Box", t("Node"))), Field(t("Box", t("Node")))]),
    Variant("Empty"),
    Variant("Big", [Field(t("Big"))]),
]))
GROUP = AstItem("Group", Record([
    Field(t("Delimited", t("Node"), t("Comma")), "items"),
    Field(t("Optional", t("Leaf")), "label"),
]), features=("a", "b"))


def make_lookup(*items: AstItem) -> dict:
    return {item.name: item for item in sorted(items, key=lambda i: i.name)}


LOOKUP = make_lookup(SPAN, LEAF, COMMA, BIG, NODE, GROUP)


def emitted(item: AstItem, lookup=LOOKUP) -> State:
    state = State()
    emit_item(state, lookup, item)
    return state


# --- Guards ---

class TestGuards:
    def test_render_cfg(self):
        assert render_cfg(("full",)) == 'cfg("full")'
        assert render_cfg(("a", "b")) == 'cfg("a", "b")'

    def test_no_features_no_guard(self):
        assert guard((), ["x"]) == ["x"]

    def test_guard_indents_body(self):
        assert guard(("a",), ["def f():", "    pass"]) == [
            'if cfg("a"):',
            "    def f():",
            "        pass",
        ]

    def test_every_fragment_is_guarded(self):
        state = emitted(GROUP)
        fragments = (state.visit_trait + state.visit_impl + state.visit_mut_trait
                     + state.visit_mut_impl + state.fold_trait + state.fold_impl
                     + state.spanned_impls)
        assert len(fragments) == 7
        for fragment in fragments:
            assert fragment[0] == 'if cfg("a", "b"):'


# --- Records ---

class TestRecords:
    def test_trait_methods(self):
        state = emitted(LEAF)
        assert state.visit_trait == [["def visit_leaf(self, i):", "    visit_leaf(self, i)"]]
        assert state.visit_mut_trait == [["def visit_leaf_mut(self, i):",
                                          "    visit_leaf_mut(self, i)"]]
        assert state.fold_trait == [["def fold_leaf(self, i):", "    return fold_leaf(self, i)"]]

    def test_named_fields(self):
        state = emitted(LEAF)
        assert state.visit_impl == [[
            "def visit_leaf(_visitor, _i):",
            "    pass  # Skipped field _i.name",
            "    _visitor.visit_span(_i.span)",
        ]]
        assert state.fold_impl == [[
            "def fold_leaf(_visitor, _i):",
            "    return Leaf(",
            "        name=_i.name,",
            "        span=_visitor.fold_span(_i.span),",
            "    )",
        ]]

    def test_positional_fields(self):
        state = emitted(COMMA)
        assert state.visit_mut_impl == [[
            "def visit_comma_mut(_visitor, _i):",
            "    _visitor.visit_span_mut(_i[0])",
        ]]
        assert state.fold_impl == [[
            "def fold_comma(_visitor, _i):",
            "    return Comma(",
            "        _visitor.fold_span(_i[0]),",
            "    )",
        ]]

    def test_unit_record(self):
        state = emitted(SPAN)
        assert state.visit_impl == [["def visit_span(_visitor, _i):", "    pass"]]
        assert state.fold_impl == [["def fold_span(_visitor, _i):", "    return _i"]]

    def test_containers(self):
        state = emitted(GROUP)
        assert state.visit_impl[0][1:] == [
            "    def visit_group(_visitor, _i):",
            "        for el in _i.items:",
            "            _visitor.visit_node(el.item)",
            "        if _i.label is not None:",
            "            _visitor.visit_leaf(_i.label)",
        ]
        assert state.fold_impl[0][3:5] == [
            "            items=lift(_i.items, lambda it: _visitor.fold_node(it)),",
            "            label=None if _i.label is None else _visitor.fold_leaf(_i.label),",
        ]


# --- Unions ---

class TestUnions:
    def test_visit(self):
        state = emitted(NODE)
        assert state.visit_impl == [[
            "def visit_node(_visitor, _i):",
            "    if isinstance(_i, Node.Leaf):",
            "        (_binding_0,) = _i",
            "        _visitor.visit_leaf(_binding_0)",
            "    elif isinstance(_i, Node.Pair):",
            "        (_binding_0, _binding_1) = _i",
            "        _visitor.visit_node(_binding_0.value)",
            "        _visitor.visit_node(_binding_1.value)",
            "    elif isinstance(_i, Node.Empty):",
            "        pass",
            "    elif isinstance(_i, Node.Big):",
            "        (_binding_0,) = _i",
            "        with full():",
            "            _visitor.visit_big(_binding_0)",
            "    else:",
            '        raise TypeError(f"not a Node variant: {_i!r}")',
        ]]

    def test_fold(self):
        state = emitted(NODE)
        assert state.fold_impl == [[
            "def fold_node(_visitor, _i):",
            "    if isinstance(_i, Node.Leaf):",
            "        (_binding_0,) = _i",
            "        return Node.Leaf(",
            "            _visitor.fold_leaf(_binding_0),",
            "        )",
            "    elif isinstance(_i, Node.Pair):",
            "        (_binding_0, _binding_1) = _i",
            "        return Node.Pair(",
            "            Box(_visitor.fold_node(_binding_0.value)),",
            "            Box(_visitor.fold_node(_binding_1.value)),",
            "        )",
            "    elif isinstance(_i, Node.Empty):",
            "        return Node.Empty()",
            "    elif isinstance(_i, Node.Big):",
            "        (_binding_0,) = _i",
            "        return Node.Big(",
            "            full(lambda: _visitor.fold_big(_binding_0)),",
            "        )",
            "    else:",
            '        raise TypeError(f"not a Node variant: {_i!r}")',
        ]]

    def test_empty_union(self):
        state = emitted(AstItem("Never", TaggedUnion()))
        assert state.visit_impl == [[
            "def visit_never(_visitor, _i):",
            '    raise TypeError(f"not a Never variant: {_i!r}")',
        ]]

    def test_named_payload_is_unsupported(self):
        item = AstItem("Bad", TaggedUnion([
            Variant("Ok", [Field(t("Span"))]),
            Variant("Named", [Field(t("Span"), "span")], named=True),
        ]))
        state = State()
        with pytest.raises(UnsupportedShapeError, match="Bad.Named"):
            emit_item(state, make_lookup(SPAN, item), item)
        assert state == State()


# --- Spanned ---

class TestSpanned:
    def test_registration(self):
        assert emitted(LEAF).spanned_impls == [[
            "@span.register(Leaf)",
            "def _span_leaf(node):",
            "    visitor = SpanVisitor()",
            "    visitor.visit_leaf(node)",
            "    return visitor.span",
        ]]

    def test_span_itself_has_none(self):
        assert emitted(SPAN).spanned_impls == []


class TestEmitAll:
    def test_lookup_order(self):
        state = emit_all(LOOKUP)
        names = [fragment[0] if not fragment[0].startswith("if") else fragment[1].strip()
                 for fragment in state.visit_trait]
        assert names == [
            "def visit_big(self, i):",
            "def visit_comma(self, i):",
            "def visit_group(self, i):",
            "def visit_leaf(self, i):",
            "def visit_node(self, i):",
            "def visit_span(self, i):",
        ]
        assert len(state.fold_impl) == len(LOOKUP)
        assert len(state.spanned_impls) == len(LOOKUP) - 1

    def test_big_is_guarded_by_its_marker(self):
        state = emit_all(LOOKUP)
        assert state.visit_impl[0][:2] == ['if cfg("full"):', "    def visit_big(_visitor, _i):"]
