"""Public async API: per-version results and multi-version combinations."""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence, Union

from constants import Constants, NodeFlags
from common.http_client import AsyncHttpClient
from versioning.models import ESVersionIdentifier, NodeCompatibilityResult
from versioning.node_releases import NodeReleaseDirectory
from versioning.parser import NodeVersionInput

from .cache import CompatibilityCache
from .combinators import all_compatible, exclusive_compatible, mutual_compatible
from .fetcher import CompatibilityFetcher

logger = logging.getLogger(__name__)

Flag = Union[str, NodeFlags, None]


class CompatibilityService:
    """Entry point for ECMAScript compatibility lookups.

    Collaborators can be injected for tests or sharing; anything omitted is
    created here, and an HTTP client created here is closed by ``close``.

    Example:
        async with CompatibilityService() as service:
            result = await service.fetch_one("14.0.0")
            result.es_versions_compatible
    """

    def __init__(
        self,
        cache: Optional[CompatibilityCache] = None,
        http_client=None,
        releases: Optional[NodeReleaseDirectory] = None,
        base_url: str = Constants.COMPAT_TABLE_BASE_URL,
        releases_url: str = Constants.NODE_RELEASES_URL,
        threshold: float = Constants.DEFAULT_THRESHOLD,
        timeout: int = Constants.REQUEST_TIMEOUT,
    ):
        self._owns_client = http_client is None
        self._http_client = http_client if http_client is not None else AsyncHttpClient(timeout=timeout)
        self._releases = (
            releases if releases is not None
            else NodeReleaseDirectory(self._http_client, url=releases_url)
        )
        self._cache = cache if cache is not None else CompatibilityCache()
        self._fetcher = CompatibilityFetcher(
            self._http_client, self._releases, self._cache, base_url=base_url
        )
        self.threshold = threshold

    @property
    def cache(self) -> CompatibilityCache:
        return self._cache

    @property
    def releases(self) -> NodeReleaseDirectory:
        return self._releases

    async def fetch_one(
        self,
        node_version: NodeVersionInput,
        flag: Flag = "",
        threshold: Optional[float] = None,
        fallback: Optional[ESVersionIdentifier] = None,
    ) -> NodeCompatibilityResult:
        """Fetch the compatibility result of a single Node.js version."""
        return await self._fetcher.fetch(
            node_version,
            flag,
            self.threshold if threshold is None else threshold,
            fallback,
        )

    async def fetch_many(
        self,
        versions: Sequence[NodeVersionInput],
        flag: Flag = "",
        threshold: Optional[float] = None,
        fallback: Optional[ESVersionIdentifier] = None,
    ) -> List[NodeCompatibilityResult]:
        """Fetch several versions concurrently, results in input order.

        The first failure cancels the fetches still in flight and is raised
        as is.
        """
        tasks = [
            asyncio.ensure_future(self.fetch_one(version, flag, threshold, fallback))
            for version in versions
        ]
        if not tasks:
            return []
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def mutual(
        self,
        versions: Sequence[NodeVersionInput],
        flag: Flag = "",
        threshold: Optional[float] = None,
        fallback: Optional[ESVersionIdentifier] = None,
    ) -> List[ESVersionIdentifier]:
        """Editions compatible with every one of ``versions``."""
        return mutual_compatible(await self.fetch_many(versions, flag, threshold, fallback))

    async def exclusive(
        self,
        versions: Sequence[NodeVersionInput],
        flag: Flag = "",
        threshold: Optional[float] = None,
        fallback: Optional[ESVersionIdentifier] = None,
    ) -> List[ESVersionIdentifier]:
        """The latest compatible edition of each of ``versions``."""
        return exclusive_compatible(await self.fetch_many(versions, flag, threshold, fallback))

    async def all(
        self,
        versions: Sequence[NodeVersionInput],
        flag: Flag = "",
        threshold: Optional[float] = None,
        fallback: Optional[ESVersionIdentifier] = None,
    ) -> List[ESVersionIdentifier]:
        """Editions compatible with any of ``versions``."""
        return all_compatible(await self.fetch_many(versions, flag, threshold, fallback))

    async def close(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._owns_client:
            await self._http_client.stop()

    async def __aenter__(self) -> "CompatibilityService":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
