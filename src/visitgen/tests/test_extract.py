"""Tests for schema extraction."""

import os
import textwrap

import pytest

import minisyn
from visitgen.errors import ExtractionError
from visitgen.extract import load_file, load_schema
from visitgen.schema import Field, Record, TaggedUnion, TypeOther, TypePath, Variant


def write_schema(tmp_path, files: dict[str, str]) -> str:
    """Write schema files under tmp_path; returns the root (__init__.py) path."""
    for name, source in files.items():
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source))
    return str(tmp_path / "__init__.py")


def extract(tmp_path, source: str, **extra: str) -> dict:
    files = {"__init__.py": source}
    files.update({f"{name}.py": text for name, text in extra.items()})
    return load_schema(write_schema(tmp_path, files))


def path(*segments, args=()) -> TypePath:
    return TypePath(tuple(segments), tuple(args))


# --- Records ---

class TestRecords:
    def test_named_record(self, tmp_path):
        lookup = extract(tmp_path, '''
            @ast_struct
            class Binary:
                """docstring is fine"""
                left: Box[Expr]
                op: BinOp
                attrs: list[Attribute]
        ''')
        item = lookup["Binary"]
        assert isinstance(item.shape, Record)
        assert item.shape.fields == [
            Field(path("Box", args=[path("Expr")]), "left"),
            Field(path("BinOp"), "op"),
            Field(path("list", args=[path("Attribute")]), "attrs"),
        ]
        assert not item.shape.positional
        assert item.features == ()
        assert not item.extended_only

    def test_methods_and_classvars_are_not_fields(self, tmp_path):
        lookup = extract(tmp_path, '''
            @ast_struct
            class Lit:
                kind: LitKind
                cache: ClassVar[dict]

                def __eq__(self, other):
                    return True
        ''')
        assert [f.name for f in lookup["Lit"].shape.fields] == ["kind"]

    def test_optional_spellings(self, tmp_path):
        lookup = extract(tmp_path, '''
            @ast_struct
            class Path:
                a: Optional[Colon2]
                b: Colon2 | None
                c: "Colon2"
                d: typing.Callable[[int], int]
        ''')
        fields = lookup["Path"].shape.fields
        assert fields[0].ty == path("Optional", args=[path("Colon2")])
        assert fields[1].ty == path("Optional", args=[path("Colon2")])
        assert fields[2].ty == path("Colon2")
        assert fields[3].ty.name == "Callable"
        assert isinstance(fields[3].ty.args[0], TypeOther)

    def test_full_marker(self, tmp_path):
        lookup = extract(tmp_path, '''
            @ast_struct(full=True, manual_extra_traits=True)
            class Block:
                stmts: list[Stmt]
        ''')
        assert lookup["Block"].features == ("full",)
        assert lookup["Block"].extended_only

    def test_positional_record(self, tmp_path):
        lookup = extract(tmp_path, '''
            Comma = ast_struct("Comma", Span)
            Pair = runtime.ast_struct("Pair", Span, list[Span], full=True)
        ''')
        assert lookup["Comma"].shape.fields == [Field(path("Span"))]
        assert lookup["Comma"].shape.positional
        assert lookup["Pair"].shape.fields[1] == Field(path("list", args=[path("Span")]))
        assert lookup["Pair"].extended_only

    def test_unit_record(self, tmp_path):
        lookup = extract(tmp_path, '''
            @ast_struct
            class Nothing:
                pass
        ''')
        assert lookup["Nothing"].shape.fields == []


# --- Unions ---

class TestUnions:
    def test_ast_enum(self, tmp_path):
        lookup = extract(tmp_path, '''
            @ast_enum
            class BinOp:
                """Binary operators."""
                Add = variant(Span)
                Range = variant(Span, Span)
                Unit = variant()
                Named = variant(span=Span)
        ''')
        union = lookup["BinOp"].shape
        assert isinstance(union, TaggedUnion)
        assert union.variants == [
            Variant("Add", [Field(path("Span"))]),
            Variant("Range", [Field(path("Span")), Field(path("Span"))]),
            Variant("Unit", []),
            Variant("Named", [Field(path("Span"), "span")], named=True),
        ]

    def test_enum_of_structs(self, tmp_path):
        lookup = extract(tmp_path, '''
            @ast_struct
            class ExprLit:
                lit: Lit

            @ast_enum_of_structs
            class Expr:
                Lit = variant(ExprLit)

                @variant("Binary")
                class ExprBinary:
                    left: Box[Expr]
                    right: Box[Expr]

                @variant("Array", full=True)
                class ExprArray:
                    elems: list[Expr]
        ''')
        assert lookup["Expr"].shape.variants == [
            Variant("Lit", [Field(path("ExprLit"))]),
            Variant("Binary", [Field(path("ExprBinary"))]),
            Variant("Array", [Field(path("ExprArray"))]),
        ]
        assert [f.name for f in lookup["ExprBinary"].shape.fields] == ["left", "right"]
        assert lookup["ExprArray"].extended_only
        assert lookup["ExprArray"].features == ("full",)
        # The union itself does not pick up its members' markers.
        assert lookup["Expr"].features == ()

    def test_enum_of_structs_marker(self, tmp_path):
        lookup = extract(tmp_path, '''
            @ast_enum_of_structs(do_not_generate_to_tokens=True)
            class Item:
                Use = variant(ItemUse)
        ''')
        assert [v.name for v in lookup["Item"].shape.variants] == ["Use"]


# --- Feature predicates ---

class TestFeatures:
    def test_module_guard_applies_to_imported_module(self, tmp_path):
        lookup = extract(tmp_path, '''
            if cfg("derive"):
                from .data import *
        ''', data='''
            @ast_struct
            class Field:
                ty: Type
        ''')
        assert lookup["Field"].features == ("derive",)

    def test_nested_guards_and_marker_combine(self, tmp_path):
        lookup = extract(tmp_path, '''
            if cfg("p"):
                from . import outer
        ''', outer='''
            if cfg("q") and cfg("r", "p"):
                @ast_struct(full=True)
                class Deep:
                    x: Span
        ''')
        assert lookup["Deep"].features == ("p", "q", "r", "full")

    def test_else_and_other_tests_are_not_followed(self, tmp_path):
        lookup = extract(tmp_path, '''
            if cfg("a"):
                pass
            else:
                @ast_struct
                class Hidden:
                    pass

            if TYPE_CHECKING:
                @ast_struct
                class AlsoHidden:
                    pass

            if not cfg("a"):
                @ast_struct
                class Negated:
                    pass
        ''')
        assert "Hidden" not in lookup
        assert "AlsoHidden" not in lookup
        assert "Negated" not in lookup


# --- Module graph ---

class TestModuleGraph:
    def test_generated_modules_are_skipped(self, tmp_path):
        lookup = extract(tmp_path, '''
            from .visit import Visitor
            from . import fold, visit_mut
            from .spanned import span
        ''')
        assert sorted(lookup) == ["Ident", "Span"]

    def test_subpackage_is_not_traversed(self, tmp_path):
        root = write_schema(tmp_path, {
            "__init__.py": "from .inner import *\n",
            "inner/__init__.py": "@ast_struct\nclass Inside:\n    pass\n",
        })
        assert "Inside" not in load_schema(root)

    def test_missing_submodule_is_fatal(self, tmp_path):
        with pytest.raises(ExtractionError) as excinfo:
            extract(tmp_path, "import os\n\nfrom .nowhere import thing\n")
        assert excinfo.value.line == 3
        assert excinfo.value.path.endswith("__init__.py")
        assert "nowhere" in str(excinfo.value)

    def test_absolute_and_parent_imports_are_ignored(self, tmp_path):
        lookup = extract(tmp_path, '''
            from visitgen.runtime import ast_struct
            from ..elsewhere import thing
            import json
        ''')
        assert sorted(lookup) == ["Ident", "Span"]

    def test_dotted_relative_import_loads_first_segment(self, tmp_path):
        lookup = extract(tmp_path, "from .nodes.extra import Thing\n", nodes='''
            @ast_struct
            class Thing:
                pass
        ''')
        assert "Thing" in lookup

    def test_import_cycle(self, tmp_path):
        lookup = extract(tmp_path, "from .a import *\n", a='''
            from .b import *

            @ast_struct
            class A:
                b: B
        ''', b='''
            from .a import *

            @ast_struct
            class B:
                a: Optional[A]
        ''')
        assert "A" in lookup and "B" in lookup

    def test_file_loaded_once(self, tmp_path):
        root = write_schema(tmp_path, {"__init__.py": "@ast_struct\nclass X:\n    pass\n"})
        lookup: dict = {}
        loaded: set = set()
        load_file(root, (), lookup, loaded)
        lookup.clear()
        load_file(root, ("late",), lookup, loaded)
        assert lookup == {}


# --- Lookup table ---

class TestLookup:
    def test_terminals_are_seeded(self, tmp_path):
        lookup = extract(tmp_path, '''
            @ast_struct
            class Ident:
                name: str
        ''')
        assert lookup["Ident"].shape == Record()
        assert lookup["Span"].shape == Record()

    def test_sorted_by_name(self, tmp_path):
        lookup = extract(tmp_path, '''
            @ast_struct
            class Zeta:
                pass

            @ast_struct
            class Alpha:
                pass
        ''')
        assert list(lookup) == ["Alpha", "Ident", "Span", "Zeta"]

    def test_duplicate_name_last_wins(self, tmp_path):
        lookup = extract(tmp_path, '''
            from .first import *

            @ast_struct
            class Dup:
                second: Span
        ''', first='''
            @ast_struct
            class Dup:
                first: Span
        ''')
        assert [f.name for f in lookup["Dup"].shape.fields] == ["second"]

    def test_undecorated_classes_are_ignored(self, tmp_path):
        lookup = extract(tmp_path, '''
            @dataclass
            class Helper:
                x: int

            VALUE = make("Thing", 1)
        ''')
        assert "Helper" not in lookup
        assert "Thing" not in lookup

    def test_minisyn_schema(self):
        root = os.path.join(os.path.dirname(minisyn.__file__), "__init__.py")
        lookup = load_schema(root)
        assert list(lookup) == [
            "Attribute", "BinOp", "Bracket", "Colon2", "Comma", "Eq", "Expr",
            "ExprArray", "ExprAssign", "ExprBinary", "ExprLit", "ExprParen",
            "ExprPath", "ExprTuple", "ExprUnary", "File", "Ident", "Item",
            "ItemConst", "ItemUse", "Lit", "LitKind", "Paren", "Path",
            "PathSegment", "Pound", "Semi", "Span", "UnOp",
        ]
        assert lookup["File"].features == ("full",)
        assert not lookup["File"].extended_only
        assert lookup["ExprArray"].extended_only


# --- Malformed declarations ---

class TestMalformed:
    @pytest.mark.parametrize("source, fragment", [
        ("@ast_struct\nclass A(Base):\n    x: int\n", "base classes"),
        ("@ast_struct\nclass A:\n    x: int = 0\n", "default"),
        ("@ast_struct\nclass A:\n    x = 1\n", "unexpected statement"),
        ("@ast_struct(bogus=True)\nclass A:\n    pass\n", "unknown marker"),
        ("@ast_struct(full=1)\nclass A:\n    pass\n", "True or False"),
        ('Comma = ast_struct("Other", Span)\n', "assigned to 'Comma'"),
        ("@ast_enum\nclass E:\n    x: int\n", "unexpected statement"),
        ("@ast_enum\nclass E:\n    A = variant(Span, span=Span)\n", "mixes"),
        ('@ast_enum\nclass E:\n    @variant("A")\n    class EA:\n        pass\n',
         "ast_enum_of_structs"),
        ("@ast_enum_of_structs\nclass E:\n    A = variant()\n", "exactly one record"),
        ("@ast_enum_of_structs\nclass E:\n    A = variant(X, Y)\n", "exactly one record"),
        ("@ast_enum_of_structs\nclass E:\n    @variant(1)\n    class EA:\n        pass\n",
         "variant name"),
    ])
    def test_parse_failure_is_fatal(self, tmp_path, source, fragment):
        with pytest.raises(ExtractionError) as excinfo:
            extract(tmp_path, source)
        assert "failed to parse" in str(excinfo.value)
        assert fragment in str(excinfo.value)

    def test_python_syntax_error(self, tmp_path):
        with pytest.raises(ExtractionError) as excinfo:
            extract(tmp_path, "@ast_struct\nclass A:\n    x: (\n")
        assert excinfo.value.path.endswith("__init__.py")

    def test_missing_root(self, tmp_path):
        with pytest.raises(OSError):
            load_schema(str(tmp_path / "absent.py"))
