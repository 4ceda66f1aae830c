"""Rendering of type expressions into display text.

Output follows the conventions of the chat messages docbot produces:

    keyword            -> string
    typeReference      -> Map<string,number>
    array of reference -> Foo[]
    any other array    -> Array
    union              -> string | number
"""

from docbot.models import TypeNode


def render(type: TypeNode | None) -> str:
    """Render a type expression as a single line of text.

    Args:
        type: The type expression to render. ``None`` is accepted and treated
            like an unknown node.

    Returns:
        A non-empty string. ``"unknown"`` is used for nodes that carry no
        usable information.

    Examples:
        >>> render(TypeNode(kind="keyword", keyword="string"))
        'string'
        >>> render(TypeNode(kind="array", element=TypeNode(kind="keyword", keyword="string")))
        'Array'
    """
    if type is None:
        return "unknown"

    if type.kind == "keyword":
        text = type.keyword or type.repr
    elif type.kind == "array":
        element = type.element
        if element is not None and element.kind == "typeReference":
            # The element's own display text, not a recursive rendering
            text = f"{_display(element) or 'unknown'}[]"
        else:
            text = "Array"
    elif type.kind == "typeReference":
        text = _display(type)
        if text and type.type_args:
            text += "<" + ",".join(render(arg) for arg in type.type_args) + ">"
    elif type.kind == "union":
        text = " | ".join(render(member) for member in type.members)
    else:
        text = type.repr

    return text or "unknown"


def _display(type: TypeNode) -> str:
    return type.repr or type.name or ""
