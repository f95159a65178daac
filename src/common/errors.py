"""Exception hierarchy for compatibility lookups."""

from __future__ import annotations

from typing import Optional


class CompatibilityError(Exception):
    """Base error for everything that can go wrong resolving compatibility."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class RetrievalError(CompatibilityError):
    """A remote resource could not be reached, or its body could not be decoded."""


class StructuralError(CompatibilityError):
    """A compat-table document does not have the expected shape."""


class UnknownRuntimeError(CompatibilityError, LookupError):
    """The Node.js release directory does not know the requested version."""


class InvalidRuntimeVersionError(ValueError):
    """A Node.js version input cannot be turned into major.minor.patch."""
