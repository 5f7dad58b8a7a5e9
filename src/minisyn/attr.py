"""Outer attributes: `#[path tokens...]`."""

from __future__ import annotations

from visitgen.runtime import ast_struct

from .path import Path
from .tokens import Bracket, Pound


@ast_struct
class Attribute:
    pound_token: Pound
    bracket_token: Bracket
    path: Path
    # Token text after the path, kept verbatim.
    tts: list[str]
