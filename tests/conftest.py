"""Shared fixtures: a small documentation payload in the generator's wire shape."""

import json

import pytest

from docbot.store import DocStore


def keyword(name: str) -> dict:
    return {"kind": "keyword", "keyword": name, "repr": name}


def type_ref(name: str, *args: dict) -> dict:
    return {
        "kind": "typeRef",
        "typeRef": {"typeName": name, "typeParams": list(args) or None},
        "repr": name,
    }


def param(name: str, ts_type: dict, optional: bool = False) -> dict:
    return {"kind": "identifier", "name": name, "optional": optional, "tsType": ts_type}


def method(name: str, params=(), return_type=None, is_async=False, is_static=False, doc=None) -> dict:
    return {
        "name": name,
        "kind": "method",
        "isStatic": is_static,
        "jsDoc": {"doc": doc} if doc else None,
        "functionDef": {
            "params": list(params),
            "returnType": return_type or keyword("void"),
            "isAsync": is_async,
            "isGenerator": False,
            "typeParams": [],
        },
    }


def prop(name: str, ts_type: dict, optional=False, readonly=False, is_static=False, doc=None) -> dict:
    return {
        "name": name,
        "tsType": ts_type,
        "optional": optional,
        "readonly": readonly,
        "isStatic": is_static,
        "jsDoc": {"doc": doc} if doc else None,
    }


@pytest.fixture
def doc_records() -> list[dict]:
    return [
        {
            "kind": "import",
            "name": "Imported",
            "importDef": {"src": "./dep.ts", "imported": "Imported"},
        },
        {
            "kind": "class",
            "name": "Foo",
            "jsDoc": {"doc": "A foo."},
            "location": {"filename": "https://example.com/mod.ts", "line": 10, "col": 0},
            "classDef": {
                "isAbstract": False,
                "constructors": [
                    {"jsDoc": None, "name": "constructor", "params": [param("options", type_ref("FooOptions"), True)]}
                ],
                "properties": [prop("bar", keyword("string"), readonly=True, doc="The bar.")],
                "methods": [
                    method("baz", [param("x", keyword("number"))], type_ref("Promise", keyword("void")), is_async=True),
                    method("baz", [], keyword("void"), doc="Second overload."),
                ],
                "extends": "Base",
                "superTypeParams": [keyword("string")],
                "implements": ["Disposable"],
                "typeParams": [],
            },
        },
        {
            "kind": "interface",
            "name": "FooOptions",
            "jsDoc": "Options for Foo.",
            "interfaceDef": {
                "extends": [type_ref("BaseOptions")],
                "methods": [],
                "properties": [
                    prop("token", keyword("string"), optional=True),
                    prop("intents", {"kind": "array", "array": type_ref("Intent"), "repr": ""}),
                ],
                "callSignatures": [],
                "indexSignatures": [],
                "typeParams": [],
            },
        },
        {
            "kind": "enum",
            "name": "Color",
            "enumDef": {
                "members": [
                    {"name": "Red", "jsDoc": {"doc": "Warm."}},
                    {"name": "Blue", "jsDoc": None},
                ]
            },
        },
        {
            "kind": "enum",
            "name": "Nothing",
            "enumDef": {"members": []},
        },
        {
            "kind": "function",
            "name": "createFoo",
            "jsDoc": None,
            "functionDef": {
                "params": [param("name", keyword("string")), param("size", keyword("number"), True)],
                "returnType": type_ref("Foo"),
                "isAsync": True,
                "isGenerator": False,
                "typeParams": [],
            },
        },
        {
            "kind": "function",
            "name": "ping",
            "functionDef": {
                "params": [],
                "returnType": keyword("void"),
                "isAsync": False,
                "isGenerator": False,
            },
        },
        {
            "kind": "typeAlias",
            "name": "Snowflake",
            "typeAliasDef": {
                "tsType": {"kind": "union", "union": [keyword("string"), keyword("bigint")], "repr": ""},
                "typeParams": [],
            },
        },
        {
            "kind": "typeAlias",
            "name": "Handler",
            "typeAliasDef": {
                "tsType": type_ref("Promise", type_ref("T")),
                "typeParams": [{"name": "T"}],
            },
        },
        {
            "kind": "variable",
            "name": "VERSION",
            "variableDef": {"tsType": keyword("string"), "kind": "const"},
        },
        {
            # Duplicate name: the class above wins
            "kind": "interface",
            "name": "foo",
            "interfaceDef": {"extends": [], "methods": [], "properties": []},
        },
    ]


@pytest.fixture
def doc_payload(doc_records) -> str:
    return json.dumps(doc_records)


@pytest.fixture
def store(doc_payload) -> DocStore:
    return DocStore.from_raw(doc_payload)
