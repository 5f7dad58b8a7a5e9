"""Artifact writer: turns the emitter's fragments into the four generated modules."""

from __future__ import annotations

import logging
import os

from .classify import indent
from .config import EXTENDED_FEATURE, GENERATED_BANNER, OUTPUT_FILES, TERMINAL_TYPES
from .emit import Fragment, State

logger = logging.getLogger(__name__)


def _runtime_import(*names: str) -> str:
    """Runtime helpers plus the terminal types, which every lookup contains
    whether or not the model package re-exports them."""
    return "from visitgen.runtime import " + ", ".join(sorted({*names, *TERMINAL_TYPES}))


def _header(doc: str, imports: list[str], model_package: str) -> list[str]:
    lines = [GENERATED_BANNER, f'"""{doc}"""', ""]
    lines.extend(imports)
    lines.append("")
    lines.append(f"from {model_package} import *")
    return lines


def _class(name: str, doc: str, methods: list[Fragment], base: str = "") -> list[str]:
    lines = [f"class {name}{f'({base})' if base else ''}:", f'    """{doc}"""']
    for method in methods:
        lines.append("")
        lines.extend(indent(method))
    return lines


def _functions(fragments: list[Fragment]) -> list[str]:
    lines: list[str] = []
    for fragment in fragments:
        lines.extend(["", ""])
        lines.extend(fragment)
    return lines


def _full_context() -> list[str]:
    return [
        "",
        "",
        "@contextmanager",
        "def full():",
        f'    if not cfg("{EXTENDED_FEATURE}"):',
        f'        raise AssertionError("unreachable without the \'{EXTENDED_FEATURE}\' feature")',
        "    yield",
    ]


def _full_thunk() -> list[str]:
    return [
        "",
        "",
        "def full(thunk):",
        f'    if not cfg("{EXTENDED_FEATURE}"):',
        f'        raise AssertionError("unreachable without the \'{EXTENDED_FEATURE}\' feature")',
        "    return thunk()",
    ]


def _lift() -> list[str]:
    return [
        "",
        "",
        "@singledispatch",
        "def lift(seq, fn):",
        "    \"\"\"Map `fn` over the elements of `seq`, keeping the container's shape.\"\"\"",
        '    raise TypeError(f"cannot lift over {type(seq).__name__}")',
        "",
        "",
        "@lift.register(list)",
        "def _lift_list(seq, fn):",
        "    return [fn(it) for it in seq]",
        "",
        "",
        "@lift.register(Delimited)",
        "def _lift_delimited(seq, fn):",
        "    return Delimited((fn(item), punct) for item, punct in seq.pairs())",
    ]


def _visit_document(state: State, model_package: str) -> list[str]:
    lines = _header(
        f"Read-only traversal of the {model_package} syntax tree.",
        ["from contextlib import contextmanager", "", _runtime_import("cfg")],
        model_package)
    lines.extend(_full_context())
    lines.extend(["", ""])
    lines.extend(_class("Visitor", "Walks a syntax tree by shared reference.", state.visit_trait))
    lines.extend(_functions(state.visit_impl))
    return lines


def _visit_mut_document(state: State, model_package: str) -> list[str]:
    lines = _header(
        f"In-place traversal of the {model_package} syntax tree.",
        ["from contextlib import contextmanager", "", _runtime_import("cfg")],
        model_package)
    lines.extend(_full_context())
    lines.extend(["", ""])
    lines.extend(_class("VisitorMut", "Walks a syntax tree, allowing nodes to be changed in place.",
                        state.visit_mut_trait))
    lines.extend(_functions(state.visit_mut_impl))
    return lines


def _fold_document(state: State, model_package: str) -> list[str]:
    lines = _header(
        f"Owned transformation of the {model_package} syntax tree.",
        ["from functools import singledispatch", "",
         _runtime_import("Box", "Delimited", "cfg")],
        model_package)
    lines.extend(_full_thunk())
    lines.extend(_lift())
    lines.extend(["", ""])
    lines.extend(_class("Folder", "Rebuilds a syntax tree, node by node.", state.fold_trait))
    lines.extend(_functions(state.fold_impl))
    return lines


def _spanned_document(state: State, model_package: str) -> list[str]:
    lines = _header(
        f"Source span of any {model_package} syntax tree node.",
        ["from copy import copy", "from functools import singledispatch", "",
         _runtime_import("cfg")],
        model_package)
    lines.append("from .visit import Visitor")
    lines.extend([
        "",
        "",
        "class SpanVisitor(Visitor):",
        '    """Joins every Span reached by a read-only traversal."""',
        "",
        "    def __init__(self):",
        "        self.span = None",
        "",
        "    def visit_span(self, i):",
        "        if self.span is None:",
        "            self.span = copy(i)",
        "        else:",
        "            self.span = self.span.join(i)",
        "",
        "",
        "@singledispatch",
        "def span(node):",
        "    \"\"\"Span covering every position inside `node`, or None when it has none.\"\"\"",
        '    raise TypeError(f"no span for {type(node).__name__}")',
    ])
    lines.extend(_functions(state.spanned_impls))
    return lines


_DOCUMENTS = {
    "fold.py": _fold_document,
    "visit.py": _visit_document,
    "visit_mut.py": _visit_mut_document,
    "spanned.py": _spanned_document,
}


def render_documents(state: State, model_package: str) -> dict[str, str]:
    """Complete text of every generated module, keyed by file name in write order."""
    return {
        name: "\n".join(_DOCUMENTS[name](state, model_package)) + "\n"
        for name in OUTPUT_FILES
    }


def write_documents(out_dir: str, documents: dict[str, str]) -> list[str]:
    """Overwrite each generated module in `out_dir`. Returns the paths written.

    A failed write aborts the run; modules already written stay on disk.
    """
    os.makedirs(out_dir, exist_ok=True)
    init_path = os.path.join(out_dir, "__init__.py")
    if not os.path.exists(init_path):
        with open(init_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(f"{GENERATED_BANNER}\n")

    written = []
    for name, text in documents.items():
        path = os.path.join(out_dir, name)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        logger.info("wrote %s", path)
        written.append(path)
    return written


def stale_documents(out_dir: str, documents: dict[str, str]) -> list[str]:
    """Paths in `out_dir` whose content differs from the rendered documents."""
    stale = []
    for name, text in documents.items():
        path = os.path.join(out_dir, name)
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                current = f.read()
        except FileNotFoundError:
            stale.append(path)
            continue
        if current != text:
            stale.append(path)
    return stale
