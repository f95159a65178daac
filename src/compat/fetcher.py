"""Fetch, normalize and resolve compat-table results for one Node.js version."""

from __future__ import annotations

import logging
from typing import Optional, Union

from constants import Constants, NodeFlags
from common.errors import CompatibilityError
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer
from versioning.es_versions import get_es_version_date, get_es_versions_up_to
from versioning.models import ESVersionIdentifier, NodeCompatibilityResult
from versioning.node_releases import NodeReleaseDirectory
from versioning.parser import NodeVersionInput, normalize_node_flag, normalize_node_version

from .cache import CompatibilityCache
from .normalizer import normalize_matrix
from .resolver import apply_resolution, validate_threshold

logger = logging.getLogger(__name__)


class CompatibilityFetcher:
    """Resolve NodeCompatibilityResult objects, one Node.js version at a time.

    Results are cached by ``version + flag``. A cache hit skips the request
    and the resolution entirely, so the threshold of the first call wins.
    """

    def __init__(
        self,
        http_client,
        releases: NodeReleaseDirectory,
        cache: Optional[CompatibilityCache] = None,
        base_url: str = Constants.COMPAT_TABLE_BASE_URL,
    ):
        """Initialize the fetcher.

        Args:
            http_client: Object exposing ``async get_json(url, *, context)``.
            releases: Directory used to find each version's release date.
            cache: Cache to read from and populate; a private one if omitted.
            base_url: Location of the compat-table result documents.
        """
        self._http_client = http_client
        self._releases = releases
        self._cache = cache if cache is not None else CompatibilityCache()
        self._base_url = base_url.rstrip("/")

    @property
    def cache(self) -> CompatibilityCache:
        return self._cache

    def build_url(self, identifier: str) -> str:
        """Return the compat-table document URL for ``identifier``."""
        return f"{self._base_url}/{identifier}.json"

    async def fetch(
        self,
        node_version: NodeVersionInput,
        flag: Union[str, NodeFlags, None] = "",
        threshold: float = Constants.DEFAULT_THRESHOLD,
        fallback: Optional[ESVersionIdentifier] = None,
    ) -> NodeCompatibilityResult:
        """Return the compatibility result of ``node_version`` with ``flag``.

        Args:
            node_version: Version such as ``"14.0.0"``, ``"14"`` or ``14``.
            flag: Optional Node.js flag, e.g. ``"--harmony"``.
            threshold: Minimum feature pass rate for an edition to count.
            fallback: Edition to assume when the compat-table document cannot
                be fetched or understood.

        Raises:
            RetrievalError: Fetch or decode failed and no fallback was given.
            StructuralError: Unexpected document shape and no fallback was given.
            UnknownRuntimeError: The release directory does not know the
                version; raised regardless of ``fallback``.
        """
        version = normalize_node_version(node_version)
        node_flag = normalize_node_flag(flag)
        threshold = validate_threshold(threshold)
        if fallback is not None:
            get_es_version_date(fallback)

        identifier = version + node_flag
        cached = self._cache.get(identifier)
        if cached is not None:
            if is_debug_enabled(logger):
                logger.debug(
                    "Compatibility cache hit",
                    extra=extra_context(
                        event="cache_hit", component="fetcher", target=identifier
                    ),
                )
            return cached

        url = self.build_url(identifier)
        with Timer() as t:
            try:
                raw = await self._http_client.get_json(url, context="compat-table")
                result = normalize_matrix(raw, version, node_flag)
            except CompatibilityError as exc:
                if fallback is None:
                    raise type(exc)(
                        "Failed to fetch the compatibility information for the Node.js version from: "
                        f"{url}",
                        url=url,
                    ) from exc
                logger.warning(
                    "Compatibility for %s unavailable (%s); assuming editions up to %s",
                    identifier,
                    exc,
                    fallback,
                    extra=extra_context(
                        event="fallback",
                        component="fetcher",
                        outcome="fallback",
                        target=safe_url(url),
                    ),
                )
                result = self._fallback_result(version, node_flag, fallback)
                self._cache.set(identifier, result)
                return result

        await self._releases.preload()
        release = self._releases.lookup(version)
        apply_resolution(result, threshold, release.date)
        self._cache.set(identifier, result)

        logger.info(
            "Node.js %s is compatible with %s",
            identifier,
            result.latest_compatible or "no ECMAScript edition",
            extra=extra_context(
                event="resolved",
                component="fetcher",
                outcome="success",
                duration_ms=t.duration_ms(),
                target=safe_url(url),
            ),
        )
        return result

    @staticmethod
    def _fallback_result(
        version: str, node_flag: str, fallback: ESVersionIdentifier
    ) -> NodeCompatibilityResult:
        return NodeCompatibilityResult(
            node_version=version,
            node_flag=node_flag,
            v8="",
            es_versions_compatible=get_es_versions_up_to(fallback, inclusive=True),
            is_fallback=True,
        )
