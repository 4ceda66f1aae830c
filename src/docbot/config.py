"""Configuration management for the documentation bot."""

from dataclasses import dataclass
from pathlib import Path

import yaml

CONFIG_FILE_NAME = ".docbot"
DEFAULT_ENDPOINT_TEMPLATE = "https://docpi.deno.dev/?entrypoint={module}"


@dataclass
class DocbotConfig:
    """Configuration for fetching and serving documentation.

    Attributes:
        module: Identifier of the documented module, substituted into the
            endpoint template (typically the module's entrypoint URL).
        refresh_interval_seconds: Delay between documentation refreshes.
        doc_endpoint_template: URL of the documentation service, with a
            ``{module}`` placeholder.
        cache_path: File holding the last successfully fetched payload.
        eager_fetch: Refresh once immediately when the refresh loop starts.
        search_limit: Maximum number of search and autocomplete results.
    """
    module: str = ""
    refresh_interval_seconds: float = 1800
    doc_endpoint_template: str = DEFAULT_ENDPOINT_TEMPLATE
    cache_path: Path = Path("doc.json")
    eager_fetch: bool = False
    search_limit: int = 15

    @property
    def endpoint_url(self) -> str:
        """Documentation endpoint for the configured module."""
        return self.doc_endpoint_template.format(module=self.module)


def _check_endpoint_template(template: str) -> None:
    """Raise ValueError unless {module} is the only placeholder in template."""
    try:
        template.format(module="")
    except (KeyError, IndexError, AttributeError) as e:
        raise ValueError(f"Unsupported placeholder in endpoint template: {e}") from e


def load_config(root: Path | None = None) -> DocbotConfig:
    """Load configuration from the .docbot file in the working directory.

    Args:
        root: Directory containing the .docbot file. If None, uses current directory.

    Returns:
        DocbotConfig object with loaded or default values. A relative
        ``cache_path`` is resolved against ``root``.

    Notes:
        If .docbot file doesn't exist or can't be parsed, returns default config.
        Expected YAML structure:

        ```yaml
        docs:
          module: https://deno.land/x/harmony/mod.ts
          refresh_interval_seconds: 1800
          doc_endpoint_template: https://docpi.deno.dev/?entrypoint={module}
          cache_path: doc.json
          eager_fetch: false
          search_limit: 15
        ```
    """
    if root is None:
        root = Path.cwd()

    defaults = DocbotConfig(cache_path=root / DocbotConfig.cache_path)
    config_path = root / CONFIG_FILE_NAME

    if not config_path.exists():
        return defaults

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            return defaults

        docs_config = data.get("docs", {})
        if not isinstance(docs_config, dict):
            return defaults

        cache_path = Path(docs_config.get("cache_path", DocbotConfig.cache_path))
        if not cache_path.is_absolute():
            cache_path = root / cache_path

        template = str(docs_config.get("doc_endpoint_template", DocbotConfig.doc_endpoint_template))
        _check_endpoint_template(template)

        return DocbotConfig(
            module=str(docs_config.get("module", DocbotConfig.module)),
            refresh_interval_seconds=float(docs_config.get(
                "refresh_interval_seconds",
                DocbotConfig.refresh_interval_seconds
            )),
            doc_endpoint_template=template,
            cache_path=cache_path,
            eager_fetch=bool(docs_config.get("eager_fetch", DocbotConfig.eager_fetch)),
            search_limit=int(docs_config.get("search_limit", DocbotConfig.search_limit)),
        )
    except (yaml.YAMLError, OSError, KeyError, TypeError, ValueError):
        # Return default config on any parsing errors
        return defaults
