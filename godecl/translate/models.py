"""
Tagged-Variant Output Models

Immutable values produced by the translators. Every value knows how to turn
itself into plain JSON data via to_json(); the textual encoding lives in
godecl.translate.encoding.

Wire shape: {"Case": <tag>, "Fields": [...]}. Function signatures are the
exception and serialize as a bare {"Params": [...], "Results": [...]} object.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union


# =============================================================================
# Type expressions
# =============================================================================


@dataclass(frozen=True)
class Identifier:
    """A bare type name, e.g. `int` or `Person`."""

    CASE: ClassVar[str] = "Ident"

    name: str

    def to_json(self) -> dict:
        return {"Case": self.CASE, "Fields": [self.name]}


@dataclass(frozen=True)
class Selector:
    """Qualified name `base.name`, e.g. `io.Reader`."""

    CASE: ClassVar[str] = "Selector"

    base: "TypeExpr"
    name: str

    def to_json(self) -> dict:
        return {"Case": self.CASE, "Fields": [self.base.to_json(), self.name]}


@dataclass(frozen=True)
class Pointer:
    CASE: ClassVar[str] = "Star"

    base: "TypeExpr"

    def to_json(self) -> dict:
        return {"Case": self.CASE, "Fields": [self.base.to_json()]}


@dataclass(frozen=True)
class Function:
    """Function signature; results may mix named Fields and UnnamedResults."""

    params: tuple["Field", ...] = ()
    results: tuple[Union["Field", "UnnamedResult"], ...] = ()

    def to_json(self) -> dict:
        return {
            "Params": [p.to_json() for p in self.params],
            "Results": [r.to_json() for r in self.results],
        }


@dataclass(frozen=True)
class Map:
    CASE: ClassVar[str] = "Map"

    key: "TypeExpr"
    value: "TypeExpr"

    def to_json(self) -> dict:
        return {"Case": self.CASE, "Fields": [self.key.to_json(), self.value.to_json()]}


@dataclass(frozen=True)
class Array:
    """
    Fixed array when length is set, slice otherwise.

    length is the literal's source text. Plain decimal literals go out as
    JSON numbers (identical text); any other spelling (0x10, 1_000, 'a')
    goes out as a JSON string so the document stays valid.
    """

    CASE: ClassVar[str] = "Array"

    length: Optional[str]
    element: "TypeExpr"

    def length_json(self) -> Union[int, str, None]:
        if self.length is None:
            return None
        if _is_decimal_literal(self.length):
            return int(self.length)
        return self.length

    def to_json(self) -> dict:
        return {"Case": self.CASE, "Fields": [self.length_json(), self.element.to_json()]}


@dataclass(frozen=True)
class Struct:
    CASE: ClassVar[str] = "Struct"

    incomplete: bool
    fields: tuple["Field", ...] = ()

    def to_json(self) -> dict:
        return {
            "Case": self.CASE,
            "Fields": [self.incomplete, [f.to_json() for f in self.fields]],
        }


@dataclass(frozen=True)
class Interface:
    CASE: ClassVar[str] = "Interface"

    incomplete: bool
    methods: tuple["Field", ...] = ()

    def to_json(self) -> dict:
        return {
            "Case": self.CASE,
            "Fields": [self.incomplete, [m.to_json() for m in self.methods]],
        }


TypeExpr = Union[Identifier, Selector, Pointer, Function, Map, Array, Struct, Interface]


# =============================================================================
# Fields
# =============================================================================


@dataclass(frozen=True)
class Field:
    """A named field, parameter, result, method or receiver."""

    name: str
    type: TypeExpr

    def to_json(self) -> dict:
        return {"Name": self.name, "Type": self.type.to_json()}


@dataclass(frozen=True)
class UnnamedResult:
    """A positional function result with no name."""

    type: TypeExpr

    def to_json(self) -> dict:
        return {"Type": self.type.to_json()}


# =============================================================================
# Declarations
# =============================================================================


@dataclass(frozen=True)
class Import:
    CASE: ClassVar[str] = "Import"

    def to_json(self) -> dict:
        return {"Case": self.CASE}


@dataclass(frozen=True)
class Type:
    CASE: ClassVar[str] = "Type"

    name: str
    type: TypeExpr

    def to_json(self) -> dict:
        return {"Case": self.CASE, "Fields": [self.name, self.type.to_json()]}


@dataclass(frozen=True)
class Const:
    CASE: ClassVar[str] = "Const"

    name: str

    def to_json(self) -> dict:
        return {"Case": self.CASE, "Fields": [self.name]}


@dataclass(frozen=True)
class Var:
    CASE: ClassVar[str] = "Var"

    name: str

    def to_json(self) -> dict:
        return {"Case": self.CASE, "Fields": [self.name]}


@dataclass(frozen=True)
class Func:
    """Function or method; receiver is None for plain functions."""

    CASE: ClassVar[str] = "Func"

    name: str
    receiver: Optional[Field]
    signature: Function

    def to_json(self) -> dict:
        receiver: Any = self.receiver.to_json() if self.receiver is not None else None
        return {"Case": self.CASE, "Fields": [self.name, receiver, self.signature.to_json()]}


Declaration = Union[Import, Type, Const, Var, Func]


def _is_decimal_literal(text: str) -> bool:
    """True for `0` or a digit run without a leading zero (Go reads `010` as octal)."""
    if text == "0":
        return True
    return text.isascii() and text.isdigit() and not text.startswith("0")
