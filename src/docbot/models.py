from dataclasses import dataclass, field

ENTITY_KINDS = ("class", "interface", "typeAlias", "enum", "function")


@dataclass(frozen=True)
class TypeNode:
    """A type expression, discriminated by ``kind``.

    Kinds are ``keyword``, ``typeReference``, ``array``, ``union`` and
    ``unknown``. Only the fields belonging to ``kind`` are meaningful.
    """
    kind: str = "unknown"
    repr: str = ""
    keyword: str | None = None  # keyword
    name: str | None = None  # typeReference
    type_args: tuple["TypeNode", ...] = ()  # typeReference
    element: "TypeNode | None" = None  # array
    members: tuple["TypeNode", ...] = ()  # union


@dataclass(frozen=True)
class Location:
    """Where a symbol was declared in the documented module."""
    filename: str
    line: int = 0
    col: int = 0


@dataclass(frozen=True)
class ParamDefinition:
    name: str
    type: TypeNode = field(default_factory=TypeNode)
    optional: bool = False


@dataclass(frozen=True)
class FunctionSignature:
    params: tuple[ParamDefinition, ...] = ()
    return_type: TypeNode = field(default_factory=TypeNode)
    is_async: bool = False
    is_generator: bool = False


@dataclass(frozen=True)
class PropertyDefinition:
    name: str
    type: TypeNode = field(default_factory=TypeNode)
    optional: bool = False
    readonly: bool = False
    static: bool = False
    description: str | None = None


@dataclass(frozen=True)
class MethodDefinition:
    name: str
    signature: FunctionSignature = field(default_factory=FunctionSignature)
    static: bool = False
    description: str | None = None


@dataclass(frozen=True)
class ConstructorDefinition:
    params: tuple[ParamDefinition, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class ClassDefinition:
    properties: tuple[PropertyDefinition, ...] = ()
    methods: tuple[MethodDefinition, ...] = ()
    extends: tuple[TypeNode, ...] = ()
    implements: tuple[str, ...] = ()
    constructors: tuple[ConstructorDefinition, ...] = ()
    is_abstract: bool = False


@dataclass(frozen=True)
class InterfaceDefinition:
    properties: tuple[PropertyDefinition, ...] = ()
    methods: tuple[MethodDefinition, ...] = ()
    extends: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class TypeAliasDefinition:
    type: TypeNode = field(default_factory=TypeNode)
    type_params: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class EnumMember:
    name: str
    description: str | None = None


@dataclass(frozen=True)
class EnumDefinition:
    members: tuple[EnumMember, ...] = ()


Definition = (
    ClassDefinition
    | InterfaceDefinition
    | TypeAliasDefinition
    | EnumDefinition
    | FunctionSignature
)


@dataclass(frozen=True)
class DocEntity:
    """One top-level documented symbol."""
    name: str
    kind: str
    definition: Definition | None = None
    description: str | None = None
    location: Location | None = None


@dataclass(frozen=True)
class MemberIndexEntry:
    """A property or method addressable as ``Owner#member``."""
    owner_name: str
    member_name: str
    is_property: bool

    @property
    def display_name(self) -> str:
        return f"{self.owner_name}#{self.member_name}"

    @property
    def kind(self) -> str:
        return "property" if self.is_property else "method"


@dataclass(frozen=True)
class SearchHit:
    """A search or autocomplete candidate."""
    name: str
    kind: str


@dataclass(frozen=True)
class Field:
    name: str
    value: str
    inline: bool = False


@dataclass(frozen=True)
class RenderResult:
    """Platform-neutral description of a documentation message."""
    title: str
    kind: str
    description: str | None = None
    location: Location | None = None
    fields: tuple[Field, ...] = ()


@dataclass(frozen=True)
class NotFound:
    """Returned when a query cannot be answered from the current snapshot."""
    query: str
