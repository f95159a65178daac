"""Node.js release directory backed by the nodejs.org release index."""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional

import semantic_version

from constants import Constants
from common.errors import StructuralError, UnknownRuntimeError
from common.logging_utils import extra_context, is_debug_enabled, Timer

from .models import NodeRelease
from .parser import NodeVersionInput, normalize_node_version

logger = logging.getLogger(__name__)


def _parse_entry(entry: Mapping[str, Any]) -> NodeRelease:
    """Convert one release index entry into a NodeRelease."""
    try:
        version = normalize_node_version(str(entry["version"]))
        released = date.fromisoformat(str(entry["date"]))
    except (KeyError, ValueError) as exc:
        raise StructuralError(f"Malformed Node.js release entry: {entry!r}") from exc
    lts = entry.get("lts")
    return NodeRelease(
        version=version,
        date=released,
        v8=entry.get("v8") or None,
        lts=lts if isinstance(lts, str) else None,
    )


class NodeReleaseDirectory:
    """Look up release dates of Node.js versions.

    The directory is filled once by ``preload`` (a single GET of the release
    index) or up front from in-memory entries via ``from_entries``.
    """

    def __init__(self, http_client=None, url: str = Constants.NODE_RELEASES_URL):
        """Initialize the directory.

        Args:
            http_client: Object exposing ``async get_json(url, *, context)``.
                Required unless the directory is built with ``from_entries``.
            url: Location of the release index.
        """
        self._http_client = http_client
        self._url = url
        self._releases: Optional[Dict[str, NodeRelease]] = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_entries(cls, entries: Iterable[Mapping[str, Any]]) -> "NodeReleaseDirectory":
        """Build an already loaded directory from release index entries."""
        directory = cls()
        directory._load(entries)
        return directory

    @property
    def loaded(self) -> bool:
        return self._releases is not None

    def _load(self, entries: Iterable[Mapping[str, Any]]) -> None:
        releases: Dict[str, NodeRelease] = {}
        for entry in entries:
            release = _parse_entry(entry)
            releases[release.version] = release
        self._releases = releases

    async def preload(self) -> None:
        """Fetch the release index once; later calls return immediately."""
        if self._releases is not None:
            return
        async with self._lock:
            if self._releases is not None:
                return
            if self._http_client is None:
                raise RuntimeError("NodeReleaseDirectory has no HTTP client to preload with")
            with Timer() as t:
                data = await self._http_client.get_json(self._url, context="nodejs-releases")
            if not isinstance(data, list):
                raise StructuralError(
                    f"Expected a list of releases from {self._url}", url=self._url
                )
            self._load(data)
            if is_debug_enabled(logger):
                logger.debug(
                    "Release index loaded",
                    extra=extra_context(
                        event="preload",
                        component="node_releases",
                        outcome="success",
                        count=len(data),
                        duration_ms=t.duration_ms(),
                    ),
                )

    def lookup(self, version: NodeVersionInput) -> NodeRelease:
        """Return the release record for ``version``.

        Raises:
            UnknownRuntimeError: When the version is not a known release, or
                the directory has not been loaded yet.
        """
        if self._releases is None:
            raise UnknownRuntimeError(
                "The Node.js release directory has not been loaded; call preload() first"
            )
        key = normalize_node_version(version)
        release = self._releases.get(key)
        if release is None:
            raise UnknownRuntimeError(f"Unknown Node.js version: {key}")
        return release

    def versions(self) -> List[str]:
        """All known versions, oldest first."""
        if self._releases is None:
            return []
        return sorted(self._releases, key=semantic_version.Version)
