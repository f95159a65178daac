"""Reshape raw compat-table documents into typed results."""

from __future__ import annotations

from typing import Any, Mapping

from constants import Constants
from common.errors import StructuralError
from versioning.es_versions import get_es_version_date, is_bleeding_edge
from versioning.models import ESVersionCompatibility, NodeCompatibilityResult


def _is_reserved(key: str) -> bool:
    return key.startswith(Constants.RESERVED_PREFIX)


def normalize_matrix(
    raw: Any, node_version: str, node_flag: str = ""
) -> NodeCompatibilityResult:
    """Convert a compat-table document into a NodeCompatibilityResult.

    Only ``compatibility`` is filled in; the edition lists are left empty for
    the resolver. Feature results are copied verbatim and upstream key order
    is preserved.

    Raises:
        StructuralError: If the document is not an object, or a non-metadata
            key does not name a known ECMAScript edition.
    """
    if not isinstance(raw, Mapping):
        raise StructuralError(
            f"Expected a JSON object of ECMAScript editions, got {type(raw).__name__}"
        )

    v8 = raw.get("_engine") or ""
    result = NodeCompatibilityResult(node_version=node_version, node_flag=node_flag, v8=str(v8))

    for es_version, entry in raw.items():
        # metadata such as _version and _engine
        if _is_reserved(es_version):
            continue
        if not es_version.startswith(Constants.ES_PREFIX):
            raise StructuralError(
                f"The object key [{es_version}] was meant to represent an ECMAScript version identifier."
            )
        if not is_bleeding_edge(es_version):
            try:
                get_es_version_date(es_version)
            except ValueError as exc:
                raise StructuralError(f"Unrecognized ECMAScript edition [{es_version}].") from exc
        if not isinstance(entry, Mapping):
            raise StructuralError(f"The results for [{es_version}] are not a JSON object.")

        compatibility = ESVersionCompatibility(
            es_version=es_version,
            node_version=node_version,
            node_flag=node_flag,
            v8=result.v8,
            successful=entry.get("_successful", 0),
            total=entry.get("_count", 0),
            percent=entry.get("_percent", 0),
        )
        for feature, outcome in entry.items():
            if _is_reserved(feature):
                continue
            compatibility.features[feature] = outcome

        result.compatibility[es_version] = compatibility

    return result
