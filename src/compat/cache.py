"""In-memory cache of resolved compatibility results."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from versioning.models import NodeCompatibilityResult, NodeVersionIdentifier


class CompatibilityCache:
    """Mapping of ``version + flag`` identifiers to resolved results.

    Entries never expire and are never invalidated; one instance is meant to
    live as long as the service that owns it. Concurrent writers for the same
    identifier store equivalent results, so no locking is done.
    """

    def __init__(self) -> None:
        self._entries: Dict[NodeVersionIdentifier, NodeCompatibilityResult] = {}

    def get(self, identifier: NodeVersionIdentifier) -> Optional[NodeCompatibilityResult]:
        """Get a cached result, or None if the identifier was never stored."""
        return self._entries.get(identifier)

    def set(self, identifier: NodeVersionIdentifier, result: NodeCompatibilityResult) -> None:
        """Store ``result`` under ``identifier``, replacing any previous entry."""
        self._entries[identifier] = result

    def clear(self) -> None:
        """Drop every entry; intended for tests and long-lived embedders."""
        self._entries.clear()

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[NodeVersionIdentifier]:
        return iter(self._entries)

    def __bool__(self) -> bool:
        # an empty cache is still a cache
        return True
