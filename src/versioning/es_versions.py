"""ECMAScript edition table and chronological ordering helpers.

Editions are ordered by ratification date. The bleeding-edge pseudo edition
(``ESNext``) has no ratification date and is rejected by every ordering
helper; callers filter it out with ``is_bleeding_edge`` first.
"""
from __future__ import annotations

import re
from datetime import date
from typing import Dict, Iterable, List, Tuple

from constants import Constants

from .models import ESEdition, ESVersionIdentifier

ES_EDITIONS: Tuple[ESEdition, ...] = (
    ESEdition("ES1", date(1997, 6, 1)),
    ESEdition("ES2", date(1998, 6, 1)),
    ESEdition("ES3", date(1999, 12, 1)),
    ESEdition("ES5", date(2009, 12, 1)),
    ESEdition("ES2015", date(2015, 6, 17)),
    ESEdition("ES2016", date(2016, 6, 14)),
    ESEdition("ES2017", date(2017, 6, 27)),
    ESEdition("ES2018", date(2018, 6, 26)),
    ESEdition("ES2019", date(2019, 6, 25)),
    ESEdition("ES2020", date(2020, 6, 16)),
    ESEdition("ES2021", date(2021, 6, 22)),
    ESEdition("ES2022", date(2022, 6, 22)),
    ESEdition("ES2023", date(2023, 6, 27)),
    ESEdition("ES2024", date(2024, 6, 26)),
    ESEdition("ES2025", date(2025, 6, 25)),
)

_BY_NAME: Dict[str, ESEdition] = {edition.name.upper(): edition for edition in ES_EDITIONS}
_YEAR_NAMED = re.compile(r"^ES(\d{4})$", re.IGNORECASE)


def is_bleeding_edge(es_version: ESVersionIdentifier) -> bool:
    """Return True for the unratified ``ESNext`` pseudo edition, in any case."""
    return es_version.strip().lower() == Constants.BLEEDING_EDGE.lower()


def get_es_version_date(es_version: ESVersionIdentifier) -> date:
    """Return the ratification date of ``es_version``.

    Year-named editions newer than the table are assumed ratified mid-year.

    Raises:
        ValueError: For ``ESNext`` or an unrecognized edition.
    """
    key = es_version.strip().upper()
    edition = _BY_NAME.get(key)
    if edition is not None:
        return edition.ratified
    match = _YEAR_NAMED.match(key)
    if match and not is_bleeding_edge(es_version):
        return date(int(match.group(1)), 6, 30)
    raise ValueError(f"Unknown ECMAScript edition: {es_version!r}")


def _sort_key(es_version: ESVersionIdentifier) -> Tuple[date, str]:
    return get_es_version_date(es_version), es_version.upper()


def compare_es_versions(a: ESVersionIdentifier, b: ESVersionIdentifier) -> int:
    """Return -1, 0 or 1 as ``a`` was ratified before, with, or after ``b``."""
    key_a, key_b = _sort_key(a), _sort_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def sort_es_versions(es_versions: Iterable[ESVersionIdentifier]) -> List[ESVersionIdentifier]:
    """Deduplicate and sort editions oldest first."""
    return sorted(set(es_versions), key=_sort_key)


def get_es_versions_up_to(
    es_version: ESVersionIdentifier, inclusive: bool = True
) -> List[ESVersionIdentifier]:
    """List the known editions ratified up to ``es_version``."""
    until = get_es_version_date(es_version)
    if inclusive:
        return [e.name for e in ES_EDITIONS if e.ratified <= until]
    return [e.name for e in ES_EDITIONS if e.ratified < until]


def get_es_versions_by_date(when: date) -> List[ESVersionIdentifier]:
    """List the known editions ratified on or before ``when``, oldest first."""
    return [e.name for e in ES_EDITIONS if e.ratified <= when]
