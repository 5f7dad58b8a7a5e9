"""Runtime support shared by AST models and the traversal code generated for them."""

from .features import cfg as cfg, enable as enable, disable as disable
from .features import enabled_features as enabled_features
from .span import Ident as Ident, LineColumn as LineColumn, Span as Span
from .containers import Box as Box, Delimited as Delimited, Pair as Pair
from .decl import (
    TupleNode as TupleNode,
    ast_enum as ast_enum,
    ast_enum_of_structs as ast_enum_of_structs,
    ast_struct as ast_struct,
    variant as variant,
)
