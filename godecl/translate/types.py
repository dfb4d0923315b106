"""
Type-Expression Translator

Maps Go type-expression nodes onto TypeExpr values, recursing through
pointers, maps, arrays, function types and struct/interface bodies until it
bottoms out at identifiers and qualified names.
"""

from godecl.ast import nodes
from godecl.configs import get_logger
from godecl.exceptions import ErrorKind, TranslationError
from godecl.translate.models import (
    Array,
    Field,
    Function,
    Identifier,
    Interface,
    Map,
    Pointer,
    Selector,
    Struct,
    TypeExpr,
    UnnamedResult,
)

logger = get_logger("translate")


def translate_type(expr: nodes.Expr) -> TypeExpr:
    """
    Translate one type expression.

    Args:
        expr: Type-expression node from the Go syntax model

    Returns:
        The matching TypeExpr value

    Raises:
        TranslationError: If the expression (or anything nested in it) has
            no tagged-variant form
    """
    if isinstance(expr, nodes.Ident):
        return Identifier(expr.name)

    if isinstance(expr, nodes.SelectorExpr):
        return Selector(translate_type(expr.x), expr.sel.name)

    if isinstance(expr, nodes.StarExpr):
        return Pointer(translate_type(expr.x))

    if isinstance(expr, nodes.FuncType):
        return translate_signature(expr)

    if isinstance(expr, nodes.MapType):
        return Map(translate_type(expr.key), translate_type(expr.value))

    if isinstance(expr, nodes.ArrayType):
        return Array(_array_length(expr.len), translate_type(expr.elt))

    if isinstance(expr, nodes.StructType):
        fields = []
        for group in expr.fields.items:
            if not group.names:
                raise TranslationError(
                    ErrorKind.NAMELESS_FIELD_NOT_SUPPORTED,
                    "Structures with nameless field are not supported",
                    {"type": _describe(group.type)},
                )
            fields.extend(_expand(group))
        return Struct(expr.incomplete, tuple(fields))

    if isinstance(expr, nodes.InterfaceType):
        methods = []
        for group in expr.methods.items:
            if not group.names:
                raise TranslationError(
                    ErrorKind.NAMELESS_METHOD_NOT_SUPPORTED,
                    "Interfaces with nameless method are not supported",
                    {"type": _describe(group.type)},
                )
            methods.extend(_expand(group))
        return Interface(expr.incomplete, tuple(methods))

    if isinstance(expr, nodes.UnaryExpr):
        raise TranslationError(
            ErrorKind.UNSUPPORTED_UNARY_OPERATOR,
            f"Unsupported unary operator {expr.op}",
            {"operator": expr.op},
        )

    if isinstance(expr, nodes.BinaryExpr):
        raise TranslationError(
            ErrorKind.UNSUPPORTED_BINARY_OPERATOR,
            f"Unsupported binary operator {expr.op}",
            {"operator": expr.op},
        )

    raise TranslationError(
        ErrorKind.UNKNOWN_TYPE_EXPRESSION,
        f"Unknown type {_describe(expr)}",
    )


def translate_signature(func_type: nodes.FuncType) -> Function:
    """
    Translate a function signature (shared by function types and declarations).

    Every parameter group must be named; result groups may be named (one
    Field per name) or nameless (one UnnamedResult per group).
    """
    if func_type.type_params is not None:
        logger.warning("Ignoring type parameters for function")

    params = []
    for group in func_type.params.items:
        if not group.names:
            raise TranslationError(
                ErrorKind.UNNAMED_PARAMETER_NOT_SUPPORTED,
                "Unexpected function parameter without name",
                {"type": _describe(group.type)},
            )
        params.extend(_expand(group))

    results = []
    if func_type.results is not None:
        for group in func_type.results.items:
            if group.names:
                results.extend(_expand(group))
            else:
                results.append(UnnamedResult(translate_type(group.type)))

    return Function(tuple(params), tuple(results))


def translate_field(name: str, expr: nodes.Expr) -> Field:
    return Field(name, translate_type(expr))


def _expand(group: nodes.Field) -> list[Field]:
    # Each name gets its own translation of the shared type node
    return [translate_field(ident.name, group.type) for ident in group.names]


def _array_length(length: nodes.Expr | None) -> str | None:
    if length is None:
        return None
    if isinstance(length, nodes.BasicLit):
        return length.value
    raise TranslationError(
        ErrorKind.UNSUPPORTED_ARRAY_LENGTH,
        "Array length must be a literal",
        {"length": _describe(length)},
    )


def _describe(expr: object) -> str:
    """Short human-readable label for a node, used in error details."""
    if isinstance(expr, nodes.Ident):
        return expr.name
    if isinstance(expr, nodes.OpaqueExpr):
        return f"{expr.kind} {expr.text!r}"
    if isinstance(expr, nodes.BasicLit):
        return f"{expr.kind} literal {expr.value}"
    return type(expr).__name__
