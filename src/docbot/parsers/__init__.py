from docbot.parsers.base import BaseParser
from docbot.parsers.deno_doc import DenoDocParser

_PARSERS: dict[str, type[BaseParser]] = {
    "deno_doc": DenoDocParser,
}


def get_parser(format: str = "deno_doc") -> BaseParser | None:
    """Get a parser for the named documentation wire format.

    Args:
        format: Name of the wire format (case-insensitive)

    Returns:
        Parser instance, or None if the format is not supported
    """
    parser_class = _PARSERS.get(format.lower())
    return parser_class() if parser_class else None
