"""Derive tested, above-threshold and compatible edition lists.

``compatible`` is driven by chronology rather than by the threshold: every
edition ratified by the release date counts as compatible, unless an edition
on the way was tested and fell below the threshold. That failing edition is
a ceiling; it and everything ratified after it are left out, even editions
that were tested and passed.
"""
from __future__ import annotations

from datetime import date
from typing import List, Mapping, Tuple

from versioning.es_versions import get_es_versions_by_date, is_bleeding_edge, sort_es_versions
from versioning.models import ESVersionCompatibility, ESVersionIdentifier, NodeCompatibilityResult


def validate_threshold(threshold: float) -> float:
    """Return ``threshold`` as a float, rejecting values outside [0, 1]."""
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise ValueError(f"Threshold must be a number, got {threshold!r}")
    if not 0 <= threshold <= 1:
        raise ValueError(f"Threshold must be between 0 and 1, got {threshold}")
    return float(threshold)


def resolve_es_versions(
    compatibility: Mapping[ESVersionIdentifier, ESVersionCompatibility],
    threshold: float,
    release_date: date,
) -> Tuple[List[ESVersionIdentifier], List[ESVersionIdentifier], List[ESVersionIdentifier]]:
    """Return ``(tested, above_threshold, compatible)``, each oldest first."""
    tested = sort_es_versions(
        es_version for es_version in compatibility if not is_bleeding_edge(es_version)
    )
    above = sort_es_versions(
        es_version for es_version in tested if compatibility[es_version].percent >= threshold
    )

    tested_set, above_set = set(tested), set(above)
    compatible: List[ESVersionIdentifier] = []
    for es_version in get_es_versions_by_date(release_date):
        if es_version in tested_set and es_version not in above_set:
            break
        compatible.append(es_version)

    return tested, above, compatible


def apply_resolution(
    result: NodeCompatibilityResult, threshold: float, release_date: date
) -> NodeCompatibilityResult:
    """Fill the edition lists of a normalized result in place and return it."""
    tested, above, compatible = resolve_es_versions(result.compatibility, threshold, release_date)
    result.es_versions_tested = tested
    result.es_versions_threshold = above
    result.es_versions_compatible = compatible
    return result
