"""Combine compatible edition lists across several Node.js versions."""

from typing import Iterable, List, Set

from versioning.es_versions import sort_es_versions
from versioning.models import ESVersionIdentifier, NodeCompatibilityResult


def mutual_compatible(results: Iterable[NodeCompatibilityResult]) -> List[ESVersionIdentifier]:
    """Editions compatible with every result (intersection)."""
    mutual: Set[ESVersionIdentifier] = set()
    for index, result in enumerate(results):
        if index == 0:
            mutual = set(result.es_versions_compatible)
        else:
            mutual &= set(result.es_versions_compatible)
    return sort_es_versions(mutual)


def exclusive_compatible(results: Iterable[NodeCompatibilityResult]) -> List[ESVersionIdentifier]:
    """The most recent compatible edition of each result, deduplicated."""
    latest: Set[ESVersionIdentifier] = set()
    for result in results:
        if result.latest_compatible is not None:
            latest.add(result.latest_compatible)
    return sort_es_versions(latest)


def all_compatible(results: Iterable[NodeCompatibilityResult]) -> List[ESVersionIdentifier]:
    """Editions compatible with any result (union)."""
    union: Set[ESVersionIdentifier] = set()
    for result in results:
        union.update(result.es_versions_compatible)
    return sort_es_versions(union)
