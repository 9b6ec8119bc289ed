"""Error taxonomy for malformed package URLs."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Identifies which purl rule a malformed input violated."""

    EMPTY = "empty"
    SCHEME = "scheme"
    AUTHORITY = "authority"
    MISSING_NAME = "missing_name"
    TYPE = "type"
    NAMESPACE = "namespace"
    NAME = "name"
    VERSION = "version"
    QUALIFIERS = "qualifiers"
    QUALIFIER_KEY = "qualifier_key"
    DUPLICATE_QUALIFIER = "duplicate_qualifier"
    SUBPATH = "subpath"


class MalformedPackageURLError(ValueError):
    """Raised when a purl string or set of purl fields is not valid.

    Attributes:
        kind: The `ErrorKind` naming the violated rule.
        message: A human-readable description of the failure.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"MalformedPackageURLError(kind={self.kind.value!r}, message={self.message!r})"
