"""File cache for the last successfully fetched documentation payload.

The cache lets the bot answer queries immediately after a restart, before the
first refresh from the remote endpoint has completed.
"""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class SnapshotCache:
    """A single JSON file holding the raw documentation payload.

    Writes go to a temporary file in the same directory which then replaces
    the cache file, so readers never observe a partially written payload.
    """

    def __init__(self, path: Path):
        """Initialize the cache.

        Args:
            path: Location of the cache file (typically doc.json)
        """
        self.path = Path(path)

    def read(self) -> str | None:
        """Read the cached payload.

        Returns:
            The cached JSON text, or None if the file is missing or unreadable.
        """
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read documentation cache {self.path}: {e}")
            return None

    def write(self, raw: str) -> None:
        """Replace the cached payload.

        Args:
            raw: JSON text that has already been parsed successfully

        Raises:
            OSError: If the file cannot be written.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(raw)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error(f"Failed to write documentation cache {self.path}: {e}")
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise
