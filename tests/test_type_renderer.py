"""Tests for type expression rendering."""

from docbot.models import TypeNode
from docbot.parsers.deno_doc import DenoDocParser
from docbot.type_renderer import render


def keyword(name: str) -> TypeNode:
    return TypeNode(kind="keyword", repr=name, keyword=name)


def reference(name: str, *args: TypeNode) -> TypeNode:
    return TypeNode(kind="typeReference", repr=name, name=name, type_args=args)


def test_keyword_renders_verbatim():
    assert render(keyword("string")) == "string"


def test_array_of_reference_uses_element_display_text():
    node = TypeNode(kind="array", element=reference("Foo"))
    assert render(node) == "Foo[]"


def test_array_of_reference_ignores_element_type_arguments():
    node = TypeNode(kind="array", element=reference("Map", keyword("string"), keyword("number")))
    assert render(node) == "Map[]"


def test_array_of_keyword_collapses_to_array():
    node = TypeNode(kind="array", element=keyword("string"))
    assert render(node) == "Array"


def test_array_without_element_collapses_to_array():
    assert render(TypeNode(kind="array")) == "Array"


def test_union_joins_members():
    node = TypeNode(kind="union", members=(keyword("string"), keyword("number")))
    assert render(node) == "string | number"


def test_reference_without_arguments():
    assert render(reference("Client")) == "Client"


def test_reference_with_nested_arguments():
    node = reference("Map", keyword("string"), reference("Promise", keyword("void")))
    assert render(node) == "Map<string,Promise<void>>"


def test_reference_falls_back_to_name_without_repr():
    node = TypeNode(kind="typeReference", name="Client")
    assert render(node) == "Client"


def test_unknown_uses_repr():
    assert render(TypeNode(kind="unknown", repr="() => void")) == "() => void"


def test_unknown_without_repr():
    assert render(TypeNode()) == "unknown"


def test_none_renders_unknown():
    assert render(None) == "unknown"


def test_empty_union_renders_unknown():
    assert render(TypeNode(kind="union")) == "unknown"


def test_keyword_without_text_renders_unknown():
    assert render(TypeNode(kind="keyword")) == "unknown"


def test_union_of_arrays():
    node = TypeNode(
        kind="union",
        members=(
            TypeNode(kind="array", element=reference("Foo")),
            TypeNode(kind="array", element=keyword("string")),
            keyword("null"),
        ),
    )
    assert render(node) == "Foo[] | Array | null"


def test_renders_wire_shaped_types():
    """Types decoded from generator output render like hand-built ones."""
    parser = DenoDocParser()
    wire = {
        "kind": "array",
        "array": {"kind": "typeRef", "typeRef": {"typeName": "Foo", "typeParams": []}, "repr": "Foo"},
    }
    assert render(parser._parse_type(wire)) == "Foo[]"

    wire = {"kind": "array", "array": {"kind": "keyword", "keyword": "string"}}
    assert render(parser._parse_type(wire)) == "Array"

    wire = {
        "kind": "union",
        "union": [{"kind": "keyword", "keyword": "string"}, {"kind": "keyword", "keyword": "number"}],
    }
    assert render(parser._parse_type(wire)) == "string | number"
