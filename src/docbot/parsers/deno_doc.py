"""Parser for the JSON emitted by the Deno documentation generator.

The generator's output shape has drifted between releases: ``jsDoc`` is either
a plain string or ``{"doc": ...}``, static members use ``isStatic`` or
``static``, a class ``extends`` is a bare name while an interface ``extends``
is a list of types, and ``implements`` holds names or types. Every variant is
normalized into the canonical models so nothing downstream has to care.
"""

import logging
import math
from dataclasses import replace
from typing import Any

from docbot.models import (
    ClassDefinition,
    ConstructorDefinition,
    DocEntity,
    EnumDefinition,
    EnumMember,
    FunctionSignature,
    InterfaceDefinition,
    Location,
    MethodDefinition,
    ParamDefinition,
    PropertyDefinition,
    TypeAliasDefinition,
    TypeNode,
)
from docbot.parsers.base import BaseParser
from docbot.type_renderer import render

logger = logging.getLogger(__name__)

# Wire kind -> canonical TypeNode kind
_TYPE_KINDS = {
    "keyword": "keyword",
    "typeRef": "typeReference",
    "array": "array",
    "union": "union",
}


def _list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _position(value: Any) -> int:
    """Line or column number, 0 when missing or not a finite number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return int(value)


def _named(value: Any) -> bool:
    return isinstance(value, dict) and isinstance(value.get("name"), str)


def _doc(value: Any) -> str | None:
    """Extract documentation text from either jsDoc representation."""
    if isinstance(value, dict):
        value = value.get("doc")
    if isinstance(value, str) and value.strip():
        return value
    return None


class DenoDocParser(BaseParser):
    """Normalizes ``deno doc --json`` style records into DocEntity objects."""

    def extract_entities(self, records: list[Any]) -> list[DocEntity]:
        """Extract documented entities, skipping imports and malformed records.

        Args:
            records: Decoded JSON records, in source order

        Returns:
            List of DocEntity objects, in source order
        """
        entities = []

        for record in records:
            if not isinstance(record, dict) or record.get("kind") == "import":
                continue

            try:
                entities.append(self._parse_entity(record))
            except (TypeError, ValueError, KeyError, AttributeError, OverflowError) as e:
                logger.debug(f"Skipping malformed documentation record: {e}")

        return entities

    def _parse_entity(self, record: dict) -> DocEntity:
        name = record.get("name")
        kind = record.get("kind")
        if not isinstance(name, str) or not name:
            raise ValueError("record has no name")
        if not isinstance(kind, str) or not kind:
            raise ValueError(f"record {name!r} has no kind")

        if kind == "class":
            definition = self._parse_class(_dict(record.get("classDef")))
        elif kind == "interface":
            definition = self._parse_interface(_dict(record.get("interfaceDef")))
        elif kind == "typeAlias":
            definition = self._parse_type_alias(_dict(record.get("typeAliasDef")))
        elif kind == "enum":
            definition = self._parse_enum(_dict(record.get("enumDef")))
        elif kind == "function":
            definition = self._parse_signature(record.get("functionDef"))
        else:
            # Kept for search, but there is nothing to render for it
            definition = None

        return DocEntity(
            name=name,
            kind=kind,
            definition=definition,
            description=_doc(record.get("jsDoc")),
            location=self._parse_location(record.get("location")),
        )

    def _parse_location(self, value: Any) -> Location | None:
        if not isinstance(value, dict) or not isinstance(value.get("filename"), str):
            return None
        return Location(
            filename=value["filename"],
            line=_position(value.get("line")),
            col=_position(value.get("col")),
        )

    def _parse_type(self, value: Any) -> TypeNode:
        if not isinstance(value, dict):
            return TypeNode()

        kind = _TYPE_KINDS.get(value.get("kind"), "unknown")
        repr = value.get("repr")
        repr = repr if isinstance(repr, str) else ""

        if kind == "keyword":
            keyword = value.get("keyword")
            return TypeNode(
                kind=kind,
                repr=repr,
                keyword=keyword if isinstance(keyword, str) else repr,
            )
        if kind == "typeReference":
            ref = _dict(value.get("typeRef"))
            name = ref.get("typeName")
            return TypeNode(
                kind=kind,
                repr=repr,
                name=name if isinstance(name, str) else None,
                type_args=tuple(self._parse_type(arg) for arg in _list(ref.get("typeParams"))),
            )
        if kind == "array":
            return TypeNode(kind=kind, repr=repr, element=self._parse_type(value.get("array")))
        if kind == "union":
            return TypeNode(
                kind=kind,
                repr=repr,
                members=tuple(self._parse_type(member) for member in _list(value.get("union"))),
            )
        return TypeNode(kind="unknown", repr=repr)

    def _parse_param(self, value: Any) -> ParamDefinition:
        value = _dict(value)
        kind = value.get("kind")

        # `x = 1` is an assignment pattern wrapping the real parameter
        if kind == "assign" and isinstance(value.get("left"), dict):
            return replace(self._parse_param(value["left"]), optional=True)
        if kind == "rest" and isinstance(value.get("arg"), dict):
            inner = self._parse_param(value["arg"])
            return replace(inner, name=f"...{inner.name}")

        name = value.get("name")
        if not isinstance(name, str):
            name = {"object": "{...}", "array": "[...]"}.get(kind, "")

        return ParamDefinition(
            name=name,
            type=self._parse_type(value.get("tsType")),
            optional=bool(value.get("optional")),
        )

    def _parse_signature(self, value: Any) -> FunctionSignature:
        value = _dict(value)
        return FunctionSignature(
            params=tuple(self._parse_param(p) for p in _list(value.get("params"))),
            return_type=self._parse_type(value.get("returnType")),
            is_async=bool(value.get("isAsync")),
            is_generator=bool(value.get("isGenerator")),
        )

    def _is_static(self, value: dict) -> bool:
        return bool(value.get("isStatic", value.get("static", False)))

    def _parse_property(self, value: dict) -> PropertyDefinition:
        return PropertyDefinition(
            name=value["name"],
            type=self._parse_type(value.get("tsType")),
            optional=bool(value.get("optional")),
            readonly=bool(value.get("readonly")),
            static=self._is_static(value),
            description=_doc(value.get("jsDoc")),
        )

    def _parse_method(self, value: dict) -> MethodDefinition:
        return MethodDefinition(
            name=value["name"],
            signature=self._parse_signature(value.get("functionDef")),
            static=self._is_static(value),
            description=_doc(value.get("jsDoc")),
        )

    def _parse_members(self, definition: dict) -> tuple[tuple, tuple]:
        properties = tuple(
            self._parse_property(p) for p in _list(definition.get("properties")) if _named(p)
        )
        methods = tuple(
            self._parse_method(m) for m in _list(definition.get("methods")) if _named(m)
        )
        return properties, methods

    def _parse_class(self, definition: dict) -> ClassDefinition:
        properties, methods = self._parse_members(definition)

        extends = definition.get("extends")
        if isinstance(extends, str) and extends:
            # Class supertypes arrive as a bare name plus separate type arguments
            supertypes = (TypeNode(
                kind="typeReference",
                repr=extends,
                name=extends,
                type_args=tuple(self._parse_type(t) for t in _list(definition.get("superTypeParams"))),
            ),)
        elif isinstance(extends, dict):
            supertypes = (self._parse_type(extends),)
        else:
            supertypes = tuple(self._parse_type(t) for t in _list(extends))

        implements = []
        for item in _list(definition.get("implements")):
            if isinstance(item, str):
                implements.append(item)
            elif isinstance(item, dict):
                implements.append(render(self._parse_type(item)))

        constructors = tuple(
            ConstructorDefinition(
                params=tuple(self._parse_param(p) for p in _list(c.get("params"))),
                description=_doc(c.get("jsDoc")),
            )
            for c in _list(definition.get("constructors"))
            if isinstance(c, dict)
        )

        return ClassDefinition(
            properties=properties,
            methods=methods,
            extends=supertypes,
            implements=tuple(implements),
            constructors=constructors,
            is_abstract=bool(definition.get("isAbstract")),
        )

    def _parse_interface(self, definition: dict) -> InterfaceDefinition:
        properties, methods = self._parse_members(definition)
        return InterfaceDefinition(
            properties=properties,
            methods=methods,
            extends=tuple(self._parse_type(t) for t in _list(definition.get("extends"))),
        )

    def _parse_type_param(self, value: Any) -> TypeNode:
        value = _dict(value)
        if isinstance(value.get("tsType"), dict):
            return self._parse_type(value["tsType"])
        if "kind" in value and "repr" in value:
            return self._parse_type(value)

        name = value.get("name")
        text = name if isinstance(name, str) else ""
        constraint = value.get("constraint")
        if text and isinstance(constraint, dict):
            text = f"{text} extends {render(self._parse_type(constraint))}"
        return TypeNode(kind="unknown", repr=text)

    def _parse_type_alias(self, definition: dict) -> TypeAliasDefinition:
        return TypeAliasDefinition(
            type=self._parse_type(definition.get("tsType")),
            type_params=tuple(self._parse_type_param(p) for p in _list(definition.get("typeParams"))),
        )

    def _parse_enum(self, definition: dict) -> EnumDefinition:
        return EnumDefinition(
            members=tuple(
                EnumMember(name=m["name"], description=_doc(m.get("jsDoc")))
                for m in _list(definition.get("members"))
                if _named(m)
            )
        )
