from dataclasses import FrozenInstanceError, asdict

import pytest

from docbot.models import (
    ClassDefinition,
    DocEntity,
    MemberIndexEntry,
    NotFound,
    PropertyDefinition,
    SearchHit,
    TypeNode,
)


def test_type_node_defaults_to_unknown():
    node = TypeNode()

    assert node.kind == "unknown"
    assert node.repr == ""
    assert node.type_args == ()
    assert node.members == ()


def test_type_nodes_compare_by_value():
    a = TypeNode(kind="union", members=(TypeNode(kind="keyword", keyword="string"),))
    b = TypeNode(kind="union", members=(TypeNode(kind="keyword", keyword="string"),))

    assert a == b
    assert hash(a) == hash(b)


def test_models_are_immutable():
    entity = DocEntity(name="Foo", kind="class")

    with pytest.raises(FrozenInstanceError):
        entity.name = "Bar"


def test_property_records_compare_by_every_field():
    base = PropertyDefinition(name="x", type=TypeNode(kind="keyword", keyword="number"))

    assert base == PropertyDefinition(name="x", type=TypeNode(kind="keyword", keyword="number"))
    assert base != PropertyDefinition(name="x", type=TypeNode(kind="keyword", keyword="number"), readonly=True)


def test_entity_with_definition():
    entity = DocEntity(
        name="Foo",
        kind="class",
        definition=ClassDefinition(properties=(PropertyDefinition(name="bar"),)),
    )

    assert entity.definition.properties[0].name == "bar"
    assert entity.description is None
    assert entity.location is None


def test_member_index_entry_display_name():
    entry = MemberIndexEntry(owner_name="Client", member_name="token", is_property=True)

    assert entry.display_name == "Client#token"
    assert entry.kind == "property"


def test_search_hit_to_dict():
    assert asdict(SearchHit(name="Client", kind="class")) == {"name": "Client", "kind": "class"}


def test_not_found_carries_query():
    assert NotFound("Foo#nope").query == "Foo#nope"
