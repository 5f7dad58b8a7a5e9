"""visitgen: generate traversal modules for a declared AST model.

Usage: visitgen [schema_root.py] [-o OUT_DIR] [--package NAME] [--check] [-v]
"""

import argparse
import logging
import os
import sys
from typing import Optional

from .config import DEFAULT_ROOT, default_out_dir, derive_model_package
from .emit import emit_all
from .errors import ExtractionError, GeneratorError
from .extract import load_schema
from .writer import render_documents, stale_documents, write_documents

logger = logging.getLogger("visitgen")


def _format_error(e: GeneratorError) -> str:
    """Format an error, with the offending schema line when one is known."""
    if not isinstance(e, ExtractionError) or e.path is None or e.line is None:
        return f"error: {e}"
    try:
        with open(e.path, "r", encoding="utf-8") as f:
            lines = f.read().split("\n")
    except OSError:
        return f"error: {e}"
    if e.line < 1 or e.line > len(lines):
        return f"error: {e.message}\n --> {e.path}:{e.line}"
    pad = " " * len(str(e.line))
    return (
        f"error: {e.message}\n"
        f" {pad}--> {e.path}:{e.line}\n"
        f" {pad} |\n"
        f" {e.line} | {lines[e.line - 1]}"
    )


def run(root: str, out_dir: Optional[str] = None,
        model_package: Optional[str] = None, check: bool = False) -> list[str]:
    """Generate (or, with `check`, compare) the traversal modules for `root`.

    Returns the paths written, or with `check` the paths that are stale.
    Nothing is written unless extraction and emission both succeed.
    """
    out_dir = out_dir or default_out_dir(root)
    model_package = model_package or derive_model_package(root)

    lookup = load_schema(root)
    state = emit_all(lookup)
    documents = render_documents(state, model_package)

    if check:
        return stale_documents(out_dir, documents)
    return write_documents(out_dir, documents)


def main(argv: Optional[list[str]] = None):
    argparser = argparse.ArgumentParser(description="AST traversal code generator")
    argparser.add_argument("root", nargs="?", default=DEFAULT_ROOT,
                           help=f"Schema root file (default: {DEFAULT_ROOT})")
    argparser.add_argument("-o", "--out-dir",
                           help="Output package directory (default: <root dir>/gen)")
    argparser.add_argument("--package",
                           help="Import name of the model package (default: derived from root)")
    argparser.add_argument("--check", action="store_true",
                           help="Don't write; exit 1 if the generated modules are out of date")
    argparser.add_argument("-v", "--verbose", action="store_true",
                           help="Log every file and declaration")

    args = argparser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        stream=sys.stderr)

    if not os.path.exists(args.root):
        print(f"Error: File '{args.root}' not found", file=sys.stderr)
        sys.exit(1)

    try:
        paths = run(args.root, args.out_dir, args.package, check=args.check)
    except GeneratorError as e:
        print(_format_error(e), file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.check:
        for path in paths:
            logger.info("out of date: %s", path)
        if paths:
            sys.exit(1)
        logger.info("generated modules are up to date")


if __name__ == "__main__":
    main()
