"""ECMAScript compatibility of Node.js releases.

This package fetches node-compat-table results, reduces them to ordered
lists of compatible ECMAScript editions, and combines those lists across
several Node.js versions.
"""

from .cache import CompatibilityCache
from .combinators import all_compatible, exclusive_compatible, mutual_compatible
from .fetcher import CompatibilityFetcher
from .normalizer import normalize_matrix
from .resolver import apply_resolution, resolve_es_versions
from .service import CompatibilityService

__all__ = [
    "CompatibilityCache",
    "CompatibilityFetcher",
    "CompatibilityService",
    "all_compatible",
    "apply_resolution",
    "exclusive_compatible",
    "mutual_compatible",
    "normalize_matrix",
    "resolve_es_versions",
]
