"""Flattened ``Owner#member`` index over class and interface members."""

from collections.abc import Iterable

from docbot.models import (
    ClassDefinition,
    DocEntity,
    InterfaceDefinition,
    MemberIndexEntry,
    SearchHit,
)

DEFAULT_LIMIT = 15


class MemberIndex:
    """Properties and methods of every class and interface in a snapshot.

    Entries are ordered by owning entity (snapshot order), then properties
    before methods, each in declared order. The same member name appears once
    per owner that declares it. The index is built once and never modified.
    """

    def __init__(self, entities: Iterable[DocEntity]):
        entries = []
        for entity in entities:
            definition = entity.definition
            if entity.kind not in ("class", "interface"):
                continue
            if not isinstance(definition, (ClassDefinition, InterfaceDefinition)):
                continue

            for prop in definition.properties:
                entries.append(MemberIndexEntry(entity.name, prop.name, is_property=True))
            for method in definition.methods:
                entries.append(MemberIndexEntry(entity.name, method.name, is_property=False))

        self._entries = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def find(self, owner: str, member: str) -> MemberIndexEntry | None:
        """Find the first entry whose owner and member names match exactly.

        Both parts are compared case-insensitively.
        """
        owner = owner.lower()
        member = member.lower()
        for entry in self._entries:
            if entry.owner_name.lower() == owner and entry.member_name.lower() == member:
                return entry
        return None

    def search_members(self, query: str, limit: int = DEFAULT_LIMIT) -> list[SearchHit]:
        """Search member display names for a case-insensitive substring.

        Args:
            query: Text to look for in ``Owner#member`` display names.
            limit: Maximum number of hits to return.

        Returns:
            Matching members as SearchHit objects (kind ``property`` or
            ``method``), in index order.
        """
        if limit <= 0:
            return []

        needle = query.lower()
        hits = []
        for entry in self._entries:
            if needle in entry.display_name.lower():
                hits.append(SearchHit(name=entry.display_name, kind=entry.kind))
                if len(hits) >= limit:
                    break
        return hits
