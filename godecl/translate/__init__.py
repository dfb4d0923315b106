"""
Declaration Translation

Turns a Go syntax model into tagged-variant values and encodes them as JSON.
"""

from godecl.translate.declarations import (
    translate_declarations,
    translate_file,
    translate_func_decl,
)
from godecl.translate.encoding import encode_declarations, encode_value, to_json_data
from godecl.translate.models import (
    Array,
    Const,
    Declaration,
    Field,
    Func,
    Function,
    Identifier,
    Import,
    Interface,
    Map,
    Pointer,
    Selector,
    Struct,
    Type,
    TypeExpr,
    UnnamedResult,
    Var,
)
from godecl.translate.types import translate_signature, translate_type

__all__ = [
    # Translators
    "translate_declarations",
    "translate_file",
    "translate_func_decl",
    "translate_signature",
    "translate_type",
    # Encoding
    "encode_declarations",
    "encode_value",
    "to_json_data",
    # Type expressions
    "TypeExpr",
    "Identifier",
    "Selector",
    "Pointer",
    "Function",
    "Map",
    "Array",
    "Struct",
    "Interface",
    "Field",
    "UnnamedResult",
    # Declarations
    "Declaration",
    "Import",
    "Type",
    "Const",
    "Var",
    "Func",
]
