"""Schema extractor.

Reads a schema root file, follows its same-directory sub-modules, and
collects every declaration made with one of the recognized forms into a
lookup table keyed by node name.

It makes a few assumptions about the model package:
1. Every declared node is importable from the package root (the generated
   modules do `from <package> import *`).
2. Only sub-modules in the root's own directory are discovered; nested
   packages are not inspected.
"""

from __future__ import annotations

import ast
import logging
import os
from typing import Optional

from .config import IGNORED_MODULES, TERMINAL_TYPES
from .errors import ExtractionError
from .parsing import (
    PARSERS, DeclarationSyntaxError, cfg_features, decorator_form,
    functional_form, parse_tuple_struct,
)
from .schema import AstItem, Record, merge_features

logger = logging.getLogger(__name__)

Lookup = dict[str, AstItem]


def load_file(path: str, features: tuple[str, ...], lookup: Lookup,
              loaded: Optional[set[str]] = None) -> None:
    """Add the declarations of `path` and its sub-modules to `lookup`.

    `features` is the predicate inherited from the importing scope. A file
    is read at most once per run; the first import decides its predicate.
    """
    if loaded is None:
        loaded = set()
    abs_path = os.path.abspath(path)
    if abs_path in loaded:
        return  # Circular / repeated import guard
    loaded.add(abs_path)

    with open(path, "r", encoding="utf-8") as f:
        source = f.read()
    try:
        tree = ast.parse(source, filename=path)
    except SyntaxError as e:
        raise ExtractionError(f"failed to parse {path}: {e.msg}", path, e.lineno) from e

    logger.debug("loading %s", path)
    _load_body(tree.body, path, features, lookup, loaded)


def _load_body(body: list[ast.stmt], path: str, features: tuple[str, ...],
               lookup: Lookup, loaded: set[str]) -> None:
    for stmt in body:
        if isinstance(stmt, ast.ImportFrom):
            for name in _sibling_modules(stmt):
                _load_submodule(name, stmt, path, features, lookup, loaded)
        elif isinstance(stmt, ast.If):
            # Only `if cfg(...)` scopes are followed; their else branch is not.
            guard = cfg_features(stmt.test)
            if guard is not None:
                _load_body(stmt.body, path, merge_features(features, guard),
                           lookup, loaded)
        elif isinstance(stmt, ast.ClassDef):
            form = decorator_form(stmt)
            if form is not None:
                name, call = form
                items = _parse(name, path, PARSERS[name], stmt, call)
                _register(items, features, lookup, path)
        elif isinstance(stmt, ast.Assign):
            call = functional_form(stmt)
            if call is not None:
                items = _parse("ast_struct", path, parse_tuple_struct, stmt, call)
                _register(items, features, lookup, path)


def _sibling_modules(stmt: ast.ImportFrom) -> list[str]:
    """Names of same-directory modules referenced by a relative import."""
    if stmt.level != 1:
        return []
    if stmt.module:
        return [stmt.module.split(".")[0]]
    return [alias.name for alias in stmt.names]


def _load_submodule(name: str, stmt: ast.ImportFrom, path: str,
                    features: tuple[str, ...], lookup: Lookup,
                    loaded: set[str]) -> None:
    # We don't want to read generated modules back in as schema.
    if name in IGNORED_MODULES:
        logger.debug("skipping generated module %s", name)
        return

    parent = os.path.dirname(os.path.abspath(path))
    module_path = os.path.join(parent, f"{name}.py")
    if os.path.isfile(module_path):
        load_file(module_path, features, lookup, loaded)
    elif os.path.isdir(os.path.join(parent, name)):
        logger.debug("not descending into package %s", name)
    else:
        raise ExtractionError(
            f"sub-module '{name}' not found (expected {module_path})",
            path, stmt.lineno)


def _parse(form: str, path: str, parser, *args) -> list[AstItem]:
    try:
        return parser(*args)
    except DeclarationSyntaxError as e:
        raise ExtractionError(f"failed to parse {form}: {e.message}", path, e.line) from e


def _register(items: list[AstItem], features: tuple[str, ...],
              lookup: Lookup, path: str) -> None:
    for item in items:
        item.features = merge_features(features, item.features)
        if item.name in lookup:
            # Later declarations win; extraction order follows import order.
            logger.debug("%s redeclared in %s", item.name, path)
        lookup[item.name] = item


def load_schema(root: str) -> Lookup:
    """Extract the full lookup table for the schema rooted at `root`.

    Terminal types are added last and replace any declaration of the same
    name. The returned mapping iterates in name order.
    """
    lookup: Lookup = {}
    load_file(root, (), lookup)

    for name in TERMINAL_TYPES:
        lookup[name] = AstItem(name=name, shape=Record())

    logger.debug("extracted %d node types from %s", len(lookup), root)
    return dict(sorted(lookup.items()))
