"""Parse errors and their conversion into LSP diagnostics."""

from __future__ import annotations
from typing import Optional

from lsprotocol import types as lsp

from visitgen.runtime import Span

SOURCE = "minisyn"


class ParseError(Exception):
    """A parse failure, with an optional message and source span."""

    def __init__(self, message: Optional[str] = None, span: Optional[Span] = None):
        self.message = message
        self.span = span
        super().__init__(self.__str__())

    def __str__(self) -> str:
        return self.message or "failed to parse"

    def to_diagnostic(self, uri: str = "") -> lsp.Diagnostic:
        return make_diagnostic(self.span, str(self), uri=uri)


def to_range(span: Optional[Span]) -> lsp.Range:
    """LSP range of `span`. Lines are 1-based in spans and 0-based in LSP."""
    if span is None:
        origin = lsp.Position(line=0, character=0)
        return lsp.Range(start=origin, end=origin)
    return lsp.Range(
        start=lsp.Position(line=max(0, span.start.line - 1), character=span.start.column),
        end=lsp.Position(line=max(0, span.end.line - 1), character=span.end.column),
    )


def make_diagnostic(
    span: Optional[Span],
    message: str,
    note: Optional[tuple[Optional[Span], str]] = None,
    uri: str = "",
    severity: lsp.DiagnosticSeverity = lsp.DiagnosticSeverity.Error,
) -> lsp.Diagnostic:
    """Create an LSP Diagnostic, with `note` as a (span, text) secondary location."""
    related = None
    if note is not None:
        note_span, note_text = note
        related = [lsp.DiagnosticRelatedInformation(
            location=lsp.Location(uri=uri, range=to_range(note_span)),
            message=note_text,
        )]
    return lsp.Diagnostic(
        range=to_range(span),
        message=message,
        severity=severity,
        source=SOURCE,
        related_information=related,
    )
