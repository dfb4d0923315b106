"""
End-to-end tests: Go source text in, JSON document out.
"""

import json
import logging

import pytest

from godecl import render_path, render_source, translate_source
from godecl.exceptions import ErrorKind, TranslationError
from godecl.translate import Const, Import


def ident(name: str) -> dict:
    return {"Case": "Ident", "Fields": [name]}


def field(name: str, type_json: dict) -> dict:
    return {"Name": name, "Type": type_json}


EXPECTED_SAMPLE = [
    {"Case": "Import"},
    {"Case": "Func", "Fields": ["Dummy", None, {"Params": [], "Results": []}]},
    {"Case": "Func", "Fields": ["GreetPerson", None, {
        "Params": [
            field("person", {"Case": "Struct", "Fields": [False, [
                field("name", ident("string")),
                field("surname", ident("string")),
                field("age", ident("int")),
            ]]}),
            field("id", ident("int")),
        ],
        "Results": [],
    }]},
    {"Case": "Func", "Fields": ["SafeDivide", None, {
        "Params": [field("x", ident("int")), field("y", ident("int"))],
        "Results": [field("result", ident("int")), field("ok", ident("bool"))],
    }]},
    {"Case": "Func", "Fields": ["Identity", None, {
        "Params": [field("x", ident("T"))],
        "Results": [{"Type": ident("T")}],
    }]},
    {"Case": "Type", "Fields": ["KeyId", {"Case": "Struct", "Fields": [False, [
        field("Key", ident("K")),
        field("Id", ident("I")),
    ]]}]},
]


class TestSampleFile:
    """The reference sample translates to the reference document."""

    def test_document_matches(self, sample_go_source):
        assert json.loads(render_source(sample_go_source)) == EXPECTED_SAMPLE

    def test_layout_one_element_per_line(self, sample_go_source):
        lines = render_source(sample_go_source).split("\n")
        assert lines[0] == "["
        assert lines[1] == '{"Case":"Import"},'
        assert lines[2] == '{"Case":"Func","Fields":["Dummy",null,{"Params":[],"Results":[]}]},'
        assert lines[-2] == "]"
        assert lines[-1] == ""
        assert len(lines) == len(EXPECTED_SAMPLE) + 3

    def test_generics_produce_two_diagnostics(self, sample_go_source, caplog):
        with caplog.at_level(logging.WARNING, logger="godecl"):
            render_source(sample_go_source)
        messages = [r.getMessage() for r in caplog.records]
        assert messages == [
            "Ignoring type parameters for function",
            "Ignoring type parameters for type KeyId",
        ]

    def test_idempotent(self, sample_go_source):
        assert render_source(sample_go_source) == render_source(sample_go_source)

    def test_render_path(self, sample_go_file, sample_go_source):
        assert render_path(str(sample_go_file)) == render_source(sample_go_source)


class TestSourceShapes:
    """Assorted Go declarations through the whole pipeline."""

    def test_empty_file(self):
        assert render_source("package empty\n") == "[\n\n]\n"

    def test_grouped_const(self):
        assert translate_source("package p\n\nconst A, B = 1, 2\n") == [Const("A"), Const("B")]

    def test_imports(self):
        source = 'package p\n\nimport "fmt"\n\nimport (\n\t"io"\n\t"os"\n)\n'
        assert translate_source(source) == [Import(), Import()]

    def test_method_and_interface(self):
        source = (
            "package p\n\n"
            "type Shape interface {\n\tArea() float64\n}\n\n"
            "type Rect struct {\n\tW, H float64\n}\n\n"
            "func (r Rect) Area() float64 { return r.W * r.H }\n"
        )
        data = json.loads(render_source(source))
        assert data[0] == {"Case": "Type", "Fields": ["Shape", {"Case": "Interface", "Fields": [False, [
            field("Area", {"Params": [], "Results": [{"Type": ident("float64")}]}),
        ]]}]}
        assert data[1]["Fields"][1]["Fields"][1] == [
            field("W", ident("float64")),
            field("H", ident("float64")),
        ]
        assert data[2] == {"Case": "Func", "Fields": [
            "Area",
            field("r", ident("Rect")),
            {"Params": [], "Results": [{"Type": ident("float64")}]},
        ]}

    def test_composite_types(self):
        source = (
            "package p\n\n"
            "type Index map[string][]*Entry\n"
            "type Block [64]byte\n"
            "type Clock func() time.Time\n"
        )
        data = json.loads(render_source(source))
        assert data[0]["Fields"][1] == {"Case": "Map", "Fields": [
            ident("string"),
            {"Case": "Array", "Fields": [None, {"Case": "Star", "Fields": [ident("Entry")]}]},
        ]}
        assert data[1]["Fields"][1] == {"Case": "Array", "Fields": [64, ident("byte")]}
        assert data[2]["Fields"][1] == {"Params": [], "Results": [
            {"Type": {"Case": "Selector", "Fields": [ident("time"), "Time"]}},
        ]}


class TestFatalPaths:
    """Unsupported constructs abort with a stable error kind."""

    @pytest.mark.parametrize("source,kind", [
        ("type S struct {\n\tBase\n}\n", ErrorKind.NAMELESS_FIELD_NOT_SUPPORTED),
        ("type I interface {\n\tio.Reader\n}\n", ErrorKind.NAMELESS_METHOD_NOT_SUPPORTED),
        ("func F(int) {}\n", ErrorKind.UNNAMED_PARAMETER_NOT_SUPPORTED),
        ("func (T) M() {}\n", ErrorKind.UNEXPECTED_RECEIVER_ARITY),
        ("type B [N]byte\n", ErrorKind.UNSUPPORTED_ARRAY_LENGTH),
        ("type C chan int\n", ErrorKind.UNKNOWN_TYPE_EXPRESSION),
        ("func F(args ...string) {}\n", ErrorKind.UNKNOWN_TYPE_EXPRESSION),
    ])
    def test_error_kind(self, source, kind):
        with pytest.raises(TranslationError) as exc_info:
            render_source("package p\n\n" + source)
        assert exc_info.value.kind is kind

    def test_error_after_valid_declarations(self):
        source = "package p\n\nconst A = 1\n\ntype S struct {\n\tBase\n}\n"
        with pytest.raises(TranslationError):
            render_source(source)
