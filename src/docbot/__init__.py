"""Docbot - documentation lookup for TypeScript module APIs."""

try:
    from importlib.metadata import version

    __version__ = version("docbot")
except Exception:
    __version__ = "0.0.0.dev0+local"  # Fallback for development
