"""Data models for Node.js releases and ECMAScript compatibility results."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Union

# Only ``True`` means supported; strings carry the error a test produced.
FeatureResult = Union[bool, str]

# "4.9.1" or "4.9.1--harmony"
NodeVersionIdentifier = str

# "ES5", "ES2015", "ESNext"
ESVersionIdentifier = str


@dataclass(frozen=True)
class ESEdition:
    """One ratified edition of ECMAScript."""
    name: ESVersionIdentifier
    ratified: date


@dataclass(frozen=True)
class NodeRelease:
    """A released build of Node.js as listed in the release index."""
    version: str
    date: date
    v8: Optional[str] = None
    lts: Optional[str] = None


@dataclass
class ESVersionCompatibility:
    """Feature results of one ECMAScript edition against one Node.js version."""
    es_version: ESVersionIdentifier
    node_version: str
    node_flag: str
    v8: str
    successful: int
    total: int
    percent: float
    # Upstream order is kept; nothing is sorted here.
    features: Dict[str, FeatureResult] = field(default_factory=dict)

    @property
    def supported_features(self) -> List[str]:
        """Features whose result is exactly ``True``."""
        return [name for name, result in self.features.items() if result is True]

    @property
    def unsupported_features(self) -> List[str]:
        """Features that are anything other than ``True``."""
        return [name for name, result in self.features.items() if result is not True]

    @property
    def errored_features(self) -> Dict[str, str]:
        """Features whose test produced an error message."""
        return {name: result for name, result in self.features.items() if isinstance(result, str)}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "successful": self.successful,
            "total": self.total,
            "percent": self.percent,
            "features": dict(self.features),
        }


@dataclass
class NodeCompatibilityResult:
    """Compatibility of every tested ECMAScript edition against one Node.js version."""
    node_version: str
    node_flag: str
    v8: str
    compatibility: Dict[ESVersionIdentifier, ESVersionCompatibility] = field(default_factory=dict)
    es_versions_tested: List[ESVersionIdentifier] = field(default_factory=list)
    es_versions_threshold: List[ESVersionIdentifier] = field(default_factory=list)
    es_versions_compatible: List[ESVersionIdentifier] = field(default_factory=list)
    is_fallback: bool = False

    @property
    def identifier(self) -> NodeVersionIdentifier:
        return self.node_version + self.node_flag

    @property
    def latest_compatible(self) -> Optional[ESVersionIdentifier]:
        """Most recent compatible edition, or None when nothing is compatible."""
        if not self.es_versions_compatible:
            return None
        return self.es_versions_compatible[-1]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "version": self.identifier,
            "v8": self.v8,
            "fallback": self.is_fallback,
            "esVersionsTested": list(self.es_versions_tested),
            "esVersionsThreshold": list(self.es_versions_threshold),
            "esVersionsCompatible": list(self.es_versions_compatible),
            "compatibility": {
                name: entry.to_dict() for name, entry in self.compatibility.items()
            },
        }
