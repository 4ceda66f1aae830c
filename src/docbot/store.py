"""In-memory documentation snapshots and the store that serves them.

A Snapshot is built completely before it becomes visible: its entities, the
case-insensitive name map and the member index are all constructed in
``__init__``. DocStore swaps whole snapshots with a single assignment, so a
reader that takes ``store.snapshot`` once sees one consistent snapshot for the
rest of its call.
"""

import json
import logging
from collections.abc import Iterable

from docbot.cache import SnapshotCache
from docbot.errors import ParseError
from docbot.member_index import DEFAULT_LIMIT, MemberIndex
from docbot.models import DocEntity, SearchHit
from docbot.parsers import get_parser
from docbot.parsers.base import BaseParser

logger = logging.getLogger(__name__)


def load(raw: str | bytes, parser: BaseParser | None = None) -> tuple[DocEntity, ...]:
    """Parse a raw documentation payload into entities.

    Args:
        raw: JSON text, either a list of records or an object with a
            ``nodes`` list.
        parser: Wire-format parser. Defaults to the Deno doc parser.

    Returns:
        Documented entities in source order, without imports.

    Raises:
        ParseError: If the payload is not valid JSON or holds no record list.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError, RecursionError) as e:
        raise ParseError(f"Documentation payload is not valid JSON: {e}") from e

    if isinstance(data, dict) and isinstance(data.get("nodes"), list):
        data = data["nodes"]

    if not isinstance(data, list):
        raise ParseError(
            f"Documentation payload must be a list of records, got {type(data).__name__}"
        )

    if parser is None:
        parser = get_parser()

    return tuple(parser.extract_entities(data))


class Snapshot:
    """An immutable set of documented entities and their derived index."""

    def __init__(self, entities: Iterable[DocEntity] = ()):
        self.entities = tuple(entities)

        by_name: dict[str, DocEntity] = {}
        for entity in self.entities:
            # First occurrence wins for duplicate names
            by_name.setdefault(entity.name.lower(), entity)
        self._by_name = by_name

        self.members = MemberIndex(self.entities)

    def __len__(self) -> int:
        return len(self.entities)

    def find_by_name(self, name: str) -> DocEntity | None:
        """Find an entity by exact, case-insensitive name."""
        return self._by_name.get(name.lower())

    def search(self, query: str, limit: int = DEFAULT_LIMIT) -> list[SearchHit]:
        """Search entity names for a case-insensitive substring.

        Args:
            query: Text to look for in entity names.
            limit: Maximum number of hits to return.

        Returns:
            Matching (name, kind) hits in snapshot order.
        """
        if limit <= 0:
            return []

        needle = query.lower()
        hits = []
        for entity in self.entities:
            if needle in entity.name.lower():
                hits.append(SearchHit(name=entity.name, kind=entity.kind))
                if len(hits) >= limit:
                    break
        return hits


class DocStore:
    """Holds the current snapshot and replaces it wholesale on refresh."""

    def __init__(self, snapshot: Snapshot | None = None):
        self._snapshot = snapshot if snapshot is not None else Snapshot()

    @classmethod
    def from_raw(cls, raw: str | bytes) -> "DocStore":
        """Create a store from a raw payload.

        Raises:
            ParseError: If the payload cannot be parsed.
        """
        return cls(Snapshot(load(raw)))

    @classmethod
    def from_cache(cls, cache: SnapshotCache) -> "DocStore":
        """Create a store from the cached snapshot file.

        A missing or corrupt cache file yields an empty store.
        """
        raw = cache.read()
        if raw is None:
            logger.info(f"No cached documentation at {cache.path}, starting empty")
            return cls()

        try:
            store = cls.from_raw(raw)
        except ParseError as e:
            logger.warning(f"Ignoring corrupt documentation cache {cache.path}: {e}")
            return cls()

        logger.info(f"Loaded {len(store.snapshot)} documented entities from {cache.path}")
        return store

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    def replace(self, snapshot: Snapshot) -> None:
        """Make a fully built snapshot the current one."""
        self._snapshot = snapshot

    def find_by_name(self, name: str) -> DocEntity | None:
        return self._snapshot.find_by_name(name)

    def search(self, query: str, limit: int = DEFAULT_LIMIT) -> list[SearchHit]:
        return self._snapshot.search(query, limit)

    def search_members(self, query: str, limit: int = DEFAULT_LIMIT) -> list[SearchHit]:
        return self._snapshot.members.search_members(query, limit)
