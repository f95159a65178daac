"""Parsing utilities for Node.js version inputs and flags."""

from typing import Union

import semantic_version

from constants import NodeFlags
from common.errors import InvalidRuntimeVersionError

# Inputs may come from the CLI, config files or code, e.g. 12, "12", "v12.1"
NodeVersionInput = Union[str, int]


def normalize_node_version(value: NodeVersionInput) -> str:
    """Return ``value`` as a complete ``major.minor.patch`` version.

    A leading ``v`` is stripped and missing components are padded with
    ``.0``, so ``12`` becomes ``12.0.0``.

    Raises:
        InvalidRuntimeVersionError: If the result is not a valid version, or
            carries a prerelease or flag suffix such as ``--harmony``.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise InvalidRuntimeVersionError(f"Unsupported Node.js version input: {value!r}")
    text = str(value).strip()
    if text[:1] in ("v", "V"):
        text = text[1:]
    parts = text.split(".") if text else []
    while 0 < len(parts) < 3:
        parts.append("0")
    candidate = ".".join(parts)
    try:
        parsed = semantic_version.Version(candidate)
    except ValueError as exc:
        raise InvalidRuntimeVersionError(f"Invalid Node.js version: {value!r}") from exc
    # "14.0.0--harmony" would otherwise parse as a prerelease
    if parsed.prerelease or parsed.build:
        raise InvalidRuntimeVersionError(
            f"Invalid Node.js version: {value!r}; pass runtime flags separately"
        )
    return candidate


def normalize_node_flag(flag: Union[str, NodeFlags, None]) -> str:
    """Return the flag token, validating it against the supported flags."""
    if flag is None:
        return NodeFlags.NONE.value
    if isinstance(flag, NodeFlags):
        return flag.value
    token = flag.strip()
    # "harmony" is accepted for "--harmony"
    if token and not token.startswith("--"):
        token = "--" + token
    try:
        return NodeFlags(token).value
    except ValueError as exc:
        supported = ", ".join(repr(f.value) for f in NodeFlags)
        raise ValueError(f"Unsupported Node.js flag {flag!r}; expected one of {supported}") from exc

