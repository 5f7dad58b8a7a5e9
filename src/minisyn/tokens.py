"""Punctuation and delimiter tokens. Each one records where it was read."""

from visitgen.runtime import Span, ast_struct

# Delimiter pairs carry the span from the opening to the closing character.
Bracket = ast_struct("Bracket", Span)
Paren = ast_struct("Paren", Span)

Colon2 = ast_struct("Colon2", Span)
Comma = ast_struct("Comma", Span)
Eq = ast_struct("Eq", Span)
Pound = ast_struct("Pound", Span)
Semi = ast_struct("Semi", Span)
