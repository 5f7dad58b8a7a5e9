"""Exceptions raised while generating traversal code. All of them are fatal."""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for errors that abort a generation run."""


class ExtractionError(GeneratorError):
    """A schema file could not be read into declarations."""

    def __init__(self, message: str, path: str | None = None, line: int | None = None):
        self.message = message
        self.path = path
        self.line = line
        if path is None:
            super().__init__(message)
        elif line is None:
            super().__init__(f"{message} at {path}")
        else:
            super().__init__(f"{message} at {path}:{line}")


class UnsupportedShapeError(GeneratorError):
    """A declaration uses a shape the generator deliberately does not handle."""
