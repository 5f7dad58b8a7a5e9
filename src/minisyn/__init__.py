"""minisyn: syntax tree and parser for a small expression language.

Traversal modules for the tree live in `minisyn.gen` and are generated by
`visitgen` from the declarations in this package.
"""

from visitgen.runtime import Box, Delimited, Ident, LineColumn, Pair, Span, cfg

from .tokens import *
from .path import *
from .attr import *
from .lit import *
from .op import *
from .expr import *

if cfg("full"):
    from .item import *

from .error import ParseError
from .parse import Parser, parse, tokenize
