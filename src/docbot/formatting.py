"""Chat-message text for resolved documentation and search results."""

from docbot.models import NotFound, RenderResult, SearchHit

FIELD_VALUE_LIMIT = 1000

NOT_FOUND_MESSAGE = "Could not find documentation for given name."
NO_MATCHES_MESSAGE = "Could not find anything matching query."

KIND_EMOJI = {
    "class": "🇨",
    "interface": "🇮",
    "typeAlias": "🇹",
    "enum": "🇪",
    "method": "🇲",
    "function": "🇫",
    "property": "🇵",
    "variable": "🇻",
    "namespace": "🇳",
}
DEFAULT_EMOJI = "🇽"


def kind_emoji(kind: str) -> str:
    return KIND_EMOJI.get(kind, DEFAULT_EMOJI)


def fold_field(content: str, limit: int = FIELD_VALUE_LIMIT) -> str:
    """Shorten a field value to fit chat platform limits.

    Bulleted lists are cut before the last bullet that still fits, so no
    bullet is shown half-truncated.

    Args:
        content: Field value, possibly a newline-separated bulleted list.
        limit: Maximum length of the returned value.

    Returns:
        ``content`` unchanged if it fits, otherwise a prefix of it.

    Examples:
        >>> fold_field("• a\\n• b", limit=5)
        '• a'
    """
    if len(content) <= limit:
        return content

    cut = content[:limit].rfind("•") - 1
    if cut <= 0:
        return content[:limit]
    return content[:cut]


def format_result(result: RenderResult | NotFound) -> str:
    """Format a resolved query as a markdown chat message."""
    if isinstance(result, NotFound):
        return NOT_FOUND_MESSAGE

    lines = [f"**{result.title}**"]
    if result.description:
        lines.append(result.description)
    if result.location is not None:
        lines.append(f"Source: {result.location.filename}:{result.location.line}")

    for field in result.fields:
        value = fold_field(field.value)
        if field.inline or "\n" not in value:
            lines.append(f"**{field.name}:** {value}")
        else:
            lines.append(f"**{field.name}:**\n{value}")

    return "\n".join(lines)


def format_search_results(hits: list[SearchHit]) -> str:
    """Format search hits as a bulleted markdown list."""
    if not hits:
        return NO_MATCHES_MESSAGE

    return "\n".join(f"• {kind_emoji(hit.kind)} **{hit.name}** ({hit.kind})" for hit in hits)
