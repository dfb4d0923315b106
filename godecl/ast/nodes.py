"""
Go Syntax Model

The subset of Go's syntax tree that the declaration translator consumes.
Class and attribute names follow Go's own go/ast package so the mapping
from source constructs stays obvious.
"""

from dataclasses import dataclass, field
from typing import Optional, Union


# =============================================================================
# Expressions
# =============================================================================


@dataclass
class Ident:
    """A bare name: builtin or declared type, package name, field name."""

    name: str


@dataclass
class BasicLit:
    """A literal token (int, float, imaginary, rune, string) kept as source text."""

    kind: str  # INT, FLOAT, IMAG, CHAR, STRING
    value: str


@dataclass
class SelectorExpr:
    """Qualified name `x.sel`."""

    x: "Expr"
    sel: Ident


@dataclass
class StarExpr:
    """Pointer type `*x`."""

    x: "Expr"


@dataclass
class FuncType:
    """Function signature; type_params is only set on generic declarations."""

    params: "FieldList"
    results: Optional["FieldList"] = None
    type_params: Optional["FieldList"] = None


@dataclass
class MapType:
    key: "Expr"
    value: "Expr"


@dataclass
class ArrayType:
    """Array `[len]elt`, or slice `[]elt` when len is None."""

    len: Optional["Expr"]
    elt: "Expr"


@dataclass
class StructType:
    fields: "FieldList"
    incomplete: bool = False  # True when fields were filtered out of the source


@dataclass
class InterfaceType:
    methods: "FieldList"
    incomplete: bool = False


@dataclass
class UnaryExpr:
    """Unary operator; in type position only `~T` (underlying-type constraint)."""

    op: str
    x: "Expr"


@dataclass
class BinaryExpr:
    """Binary operator; in type position only `A | B` (constraint union)."""

    x: "Expr"
    op: str
    y: "Expr"


@dataclass
class OpaqueExpr:
    """
    Any expression the model doesn't break down further.

    Channel types, parenthesized types, generic instantiations, variadic
    `...T` and non-literal array lengths all land here with their source text.
    """

    kind: str  # parser node type, e.g. "channel_type"
    text: str


Expr = Union[
    Ident,
    BasicLit,
    SelectorExpr,
    StarExpr,
    FuncType,
    MapType,
    ArrayType,
    StructType,
    InterfaceType,
    UnaryExpr,
    BinaryExpr,
    OpaqueExpr,
]


# =============================================================================
# Fields
# =============================================================================


@dataclass
class Field:
    """
    One field, parameter, result or method group.

    A group declares zero or more names that all share one type:
    `x, y int` has two names, an embedded field or an unnamed result has none.
    """

    names: list[Ident]
    type: Expr
    tag: Optional[str] = None


@dataclass
class FieldList:
    items: list[Field] = field(default_factory=list)


# =============================================================================
# Declarations
# =============================================================================


@dataclass
class ImportSpec:
    path: str
    name: Optional[Ident] = None


@dataclass
class ValueSpec:
    """A const or var spec; types and values are not tracked."""

    names: list[Ident]


@dataclass
class TypeSpec:
    name: Ident
    type: Expr
    type_params: Optional[FieldList] = None
    assign: bool = False  # `type A = B` alias


Spec = Union[ImportSpec, ValueSpec, TypeSpec]


@dataclass
class GenDecl:
    """A grouped declaration: import, const, type or var."""

    tok: str
    specs: list[Spec] = field(default_factory=list)


@dataclass
class FuncDecl:
    """Function or method declaration; recv is None for plain functions."""

    name: Ident
    type: FuncType
    recv: Optional[FieldList] = None


@dataclass
class BadDecl:
    """A top-level node that isn't one of the supported declaration forms."""

    kind: str
    text: str = ""


Decl = Union[GenDecl, FuncDecl, BadDecl]


@dataclass
class File:
    package: str
    decls: list[Decl] = field(default_factory=list)
