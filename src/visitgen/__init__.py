"""Generate visit, visit_mut, fold and spanned modules for a declared AST model."""

from .errors import ExtractionError, GeneratorError, UnsupportedShapeError
from .extract import load_schema
from .emit import emit_all
from .writer import render_documents, write_documents
from .main import run

__all__ = [
    "ExtractionError",
    "GeneratorError",
    "UnsupportedShapeError",
    "emit_all",
    "load_schema",
    "render_documents",
    "run",
    "write_documents",
]
