"""Resolution of user queries into renderable documentation.

Queries name either a top-level entity (``ClientOptions``) or a member of a
class or interface (``Client#connect``). Whitespace anywhere in a query is
ignored, so ``Client # connect`` resolves like ``Client#connect``.
"""

from docbot.member_index import DEFAULT_LIMIT
from docbot.models import (
    ClassDefinition,
    DocEntity,
    EnumDefinition,
    Field,
    FunctionSignature,
    InterfaceDefinition,
    MethodDefinition,
    NotFound,
    ParamDefinition,
    PropertyDefinition,
    RenderResult,
    SearchHit,
    TypeAliasDefinition,
)
from docbot.store import DocStore, Snapshot
from docbot.type_renderer import render


def normalize_query(query: str) -> str:
    """Remove all whitespace from a query."""
    return "".join(query.split())


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def _code(text: str) -> str:
    return f"`{text}`"


def _param_lines(params: tuple[ParamDefinition, ...]) -> str:
    return "\n".join(
        f"• `{p.name}:{'?' if p.optional else ''} {render(p.type)}`" for p in params
    )


def _unique(items) -> list:
    """Drop records equal to an earlier record, keeping first-seen order."""
    result = []
    for item in items:
        if item not in result:
            result.append(item)
    return result


def resolve_entity_or_member(store: DocStore, query: str) -> RenderResult | NotFound:
    """Resolve a query against the store's current snapshot.

    Args:
        store: Store holding the current documentation snapshot.
        query: Raw user query, either ``Name`` or ``Owner#member``.

    Returns:
        RenderResult describing the entity or member, or NotFound when the
        name is unknown or its kind cannot be rendered.
    """
    snapshot = store.snapshot
    name = normalize_query(query)

    owner, sep, member = name.partition("#")
    if sep and member:
        return _resolve_member(snapshot, owner, member, name)
    return _resolve_entity(snapshot, name)


def _resolve_member(snapshot: Snapshot, owner: str, member: str, query: str) -> RenderResult | NotFound:
    entry = snapshot.members.find(owner, member)
    if entry is None:
        return NotFound(query)

    entity = snapshot.find_by_name(entry.owner_name)
    if entity is None or not isinstance(entity.definition, (ClassDefinition, InterfaceDefinition)):
        return NotFound(query)

    definition = entity.definition
    candidates = definition.properties if entry.is_property else definition.methods
    matches = [m for m in candidates if m.name == entry.member_name]
    if not matches:
        return NotFound(query)

    fields: list[Field] = []
    description = None
    for i, match in enumerate(matches):
        if match.description:
            description = match.description

        if isinstance(match, PropertyDefinition):
            fields.extend(_property_fields(match))
        else:
            suffix = f" #{i + 1}" if len(matches) > 1 else ""
            fields.extend(_method_fields(match, suffix))

    return RenderResult(
        title=f"Docs - {entry.display_name} ({entry.kind})",
        kind=entry.kind,
        description=description,
        location=entity.location,
        fields=tuple(fields),
    )


def _property_fields(prop: PropertyDefinition) -> list[Field]:
    return [
        Field("Type", _code(render(prop.type))),
        Field("Readonly", _yes_no(prop.readonly), inline=True),
        Field("Optional", _yes_no(prop.optional), inline=True),
        Field("Static", _yes_no(prop.static), inline=True),
    ]


def _method_fields(method: MethodDefinition, suffix: str) -> list[Field]:
    signature = method.signature
    return [
        Field("Parameters" + suffix, _param_lines(signature.params) or "None"),
        Field("Returns" + suffix, _code(render(signature.return_type)), inline=True),
        Field("Generator" + suffix, _yes_no(signature.is_generator), inline=True),
        Field("Async" + suffix, _yes_no(signature.is_async), inline=True),
        Field("Static" + suffix, _yes_no(method.static), inline=True),
    ]


def _resolve_entity(snapshot: Snapshot, name: str) -> RenderResult | NotFound:
    entity = snapshot.find_by_name(name)
    if entity is None:
        return NotFound(name)

    definition = entity.definition
    if entity.kind in ("class", "interface") and isinstance(definition, (ClassDefinition, InterfaceDefinition)):
        fields = _container_fields(definition)
    elif entity.kind == "typeAlias" and isinstance(definition, TypeAliasDefinition):
        fields = _type_alias_fields(definition)
    elif entity.kind == "function" and isinstance(definition, FunctionSignature):
        fields = _function_fields(definition)
    elif entity.kind == "enum" and isinstance(definition, EnumDefinition):
        fields = _enum_fields(definition)
    else:
        return NotFound(name)

    return _entity_result(entity, fields)


def _entity_result(entity: DocEntity, fields: list[Field]) -> RenderResult:
    return RenderResult(
        title=f"Docs - {entity.name} ({entity.kind})",
        kind=entity.kind,
        description=entity.description,
        location=entity.location,
        fields=tuple(fields),
    )


def _container_fields(definition: ClassDefinition | InterfaceDefinition) -> list[Field]:
    fields = []

    if definition.extends:
        fields.append(Field("Extends", ", ".join(render(t) for t in definition.extends)))

    if isinstance(definition, ClassDefinition):
        if definition.implements:
            fields.append(Field("Implements", ", ".join(definition.implements)))
        if definition.constructors:
            params = definition.constructors[0].params
            fields.append(Field("Constructor", _param_lines(params) or "Empty"))

    if definition.properties:
        names = ", ".join(_code(p.name) for p in _unique(definition.properties))
        fields.append(Field("Properties", names))
    if definition.methods:
        names = ", ".join(_code(m.name) for m in _unique(definition.methods))
        fields.append(Field("Methods", names))

    return fields


def _type_alias_fields(definition: TypeAliasDefinition) -> list[Field]:
    fields = [Field("Type", _code(render(definition.type)))]
    if definition.type_params:
        fields.append(Field(
            "Type Parameters",
            ", ".join(_code(render(t)) for t in definition.type_params),
        ))
    return fields


def _function_fields(signature: FunctionSignature) -> list[Field]:
    fields = [
        Field("Parameters", _param_lines(signature.params) or "None"),
        Field("Returns", _code(render(signature.return_type)), inline=True),
    ]
    if signature.is_async:
        fields.append(Field("Async", "Yes", inline=True))
    if signature.is_generator:
        fields.append(Field("Generator", "Yes", inline=True))
    return fields


def _enum_fields(definition: EnumDefinition) -> list[Field]:
    lines = "\n".join(
        f"• `{m.name}`" + (f": {m.description}" if m.description else "")
        for m in definition.members
    )
    return [Field("Members", lines or "None")]


def suggest(store: DocStore, partial: str, limit: int = DEFAULT_LIMIT) -> list[SearchHit]:
    """Suggest names matching a partially typed query.

    Entity names containing the query come first. When the query contains
    ``#``, matching ``Owner#member`` names follow.

    Args:
        store: Store holding the current documentation snapshot.
        partial: Partially typed query.
        limit: Maximum number of suggestions.

    Returns:
        Up to ``limit`` SearchHit objects.
    """
    snapshot = store.snapshot
    query = normalize_query(partial)

    hits = snapshot.search(query, limit)
    if "#" in query and len(hits) < limit:
        hits.extend(snapshot.members.search_members(query, limit - len(hits)))
    return hits
