"""Fixed names and default locations used by a generation run."""

from __future__ import annotations

import os

# Sibling modules that hold previously generated output, never schema.
IGNORED_MODULES = ("fold", "spanned", "visit", "visit_mut")

# Opaque leaf types, seeded as field-less records after extraction.
TERMINAL_TYPES = ("Ident", "Span")

# The terminal whose visits are folded into a span aggregate.
SPAN_TYPE = "Span"

# Feature that `full=True` declarations depend on.
EXTENDED_FEATURE = "full"

# Written in this order.
OUTPUT_FILES = ("fold.py", "visit.py", "visit_mut.py", "spanned.py")

GENERATED_BANNER = "# THIS FILE IS AUTOMATICALLY GENERATED; DO NOT EDIT"

DEFAULT_ROOT = os.path.join("src", "minisyn", "__init__.py")


def derive_model_package(root: str) -> str:
    """Import name of the model whose schema starts at `root`.

    src/minisyn/__init__.py -> minisyn, models/tree.py -> tree
    """
    root = os.path.abspath(root)
    stem = os.path.splitext(os.path.basename(root))[0]
    if stem == "__init__":
        return os.path.basename(os.path.dirname(root))
    return stem


def default_out_dir(root: str) -> str:
    """Generated modules go into a `gen` package next to the schema root."""
    return os.path.join(os.path.dirname(os.path.abspath(root)), "gen")
