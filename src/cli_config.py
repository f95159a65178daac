"""Configuration loading for the nodecompat CLI.

Precedence, highest first: CLI arguments, the config file (YAML or JSON),
then the defaults on ``Constants``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)

CONFIG_SECTION = "nodecompat"


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load the nodecompat configuration from a file.

    Args:
        config_path: Path to a YAML/YML or JSON config file.

    Returns:
        The ``nodecompat`` section if present, else the whole mapping. An
        empty dict when no path is given, the file is missing, or it cannot
        be parsed.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            if config_path.lower().endswith(".json"):
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Failed to load config: %s", e)
        return {}

    if not isinstance(data, dict):
        return {}
    section = data.get(CONFIG_SECTION, data)
    return section if isinstance(section, dict) else {}


@dataclass
class CompatConfig:
    """Effective settings for one CLI run."""

    versions: List[str] = field(default_factory=list)
    mode: str = "one"
    flag: str = ""
    threshold: float = Constants.DEFAULT_THRESHOLD
    fallback: Optional[str] = None
    base_url: str = Constants.COMPAT_TABLE_BASE_URL
    releases_url: str = Constants.NODE_RELEASES_URL
    timeout: int = Constants.REQUEST_TIMEOUT

    @classmethod
    def from_args(cls, args: Any, file_config: Optional[Dict[str, Any]] = None) -> "CompatConfig":
        """Create config from CLI arguments layered over a file config.

        Args:
            args: Parsed CLI arguments namespace.
            file_config: Mapping returned by ``load_config``.

        Returns:
            CompatConfig instance.
        """
        file_config = file_config or {}
        config = cls()

        for key in ("flag", "fallback", "base_url", "releases_url"):
            if file_config.get(key) is not None:
                setattr(config, key, str(file_config[key]))
        if file_config.get("threshold") is not None:
            config.threshold = float(file_config["threshold"])
        if file_config.get("timeout") is not None:
            config.timeout = int(file_config["timeout"])
        if isinstance(file_config.get("versions"), list):
            config.versions = [str(v) for v in file_config["versions"]]

        if getattr(args, "VERSIONS", None):
            config.versions = list(args.VERSIONS)
        if getattr(args, "MODE", None):
            config.mode = args.MODE
        if getattr(args, "FLAG", None) is not None:
            config.flag = args.FLAG
        if getattr(args, "THRESHOLD", None) is not None:
            config.threshold = args.THRESHOLD
        if getattr(args, "FALLBACK", None):
            config.fallback = args.FALLBACK
        if getattr(args, "BASE_URL", None):
            config.base_url = args.BASE_URL
        if getattr(args, "RELEASES_URL", None):
            config.releases_url = args.RELEASES_URL
        if getattr(args, "TIMEOUT", None) is not None:
            config.timeout = args.TIMEOUT

        return config
