"""Exception types raised by docbot's snapshot loading and refresh paths."""


class DocbotError(Exception):
    """Base class for docbot errors."""


class ParseError(DocbotError):
    """Raised when a documentation snapshot payload cannot be parsed."""


class FetchError(DocbotError):
    """Raised when the remote documentation endpoint cannot be fetched."""
