"""Validators for the individual purl components.

Each validator either returns the (possibly lowercased or cleaned) value or
raises `MalformedPackageURLError` naming the rule that was broken.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from purlkit.errors import ErrorKind, MalformedPackageURLError

TYPE_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9.-]+$")
QUALIFIER_KEY_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9._-]*$")


def _require_str(value: Any, kind: ErrorKind, field: str) -> None:
    if not isinstance(value, str):
        raise MalformedPackageURLError(
            kind, f"The purl {field} must be a string, got {type(value).__name__}."
        )


def validate_type(purl_type: Any) -> str:
    """Validates a package type and returns it lowercased.

    Raises:
        MalformedPackageURLError: If the type is missing, shorter than two
            characters, does not start with a letter, or contains characters
            other than letters, digits, '.' or '-'.
    """
    if purl_type is None:
        raise MalformedPackageURLError(ErrorKind.TYPE, "The purl type is required.")
    _require_str(purl_type, ErrorKind.TYPE, "type")
    # fullmatch so a trailing newline cannot slip past '$'
    if not TYPE_PATTERN.fullmatch(purl_type):
        raise MalformedPackageURLError(
            ErrorKind.TYPE,
            f"The purl type {purl_type!r} is invalid. Must be at least two characters, "
            "start with a letter, and contain only letters, digits, '.', or '-'.",
        )
    return purl_type.lower()


def validate_namespace(namespace: Any) -> Optional[str]:
    """Checks that every '/'-separated namespace segment is non-empty."""
    if namespace is None:
        return None
    _require_str(namespace, ErrorKind.NAMESPACE, "namespace")
    if any(segment == "" for segment in namespace.split("/")):
        raise MalformedPackageURLError(
            ErrorKind.NAMESPACE,
            f"The purl namespace {namespace!r} has an empty segment between '/' separators.",
        )
    return namespace


def validate_name(name: Any) -> str:
    if name is None:
        raise MalformedPackageURLError(ErrorKind.NAME, "The purl name is required.")
    _require_str(name, ErrorKind.NAME, "name")
    if not name:
        raise MalformedPackageURLError(ErrorKind.NAME, "The purl name must not be empty.")
    return name


def validate_qualifier_key(key: str) -> str:
    if not QUALIFIER_KEY_PATTERN.fullmatch(key):
        raise MalformedPackageURLError(
            ErrorKind.QUALIFIER_KEY,
            f"Invalid purl qualifier key: {key!r}. Keys must start with a letter and "
            "contain only letters, digits, '.', '_', or '-'.",
        )
    return key


def validate_subpath(subpath: Any) -> Optional[str]:
    """Normalizes a subpath and rejects relative segments.

    Empty segments (from leading, trailing or doubled slashes) are dropped,
    unlike namespace segments, where they are an error.

    Args:
        subpath: The decoded subpath, or None.

    Returns:
        The '/'-joined non-empty segments, or None if nothing remains.

    Raises:
        MalformedPackageURLError: If a segment is '.' or '..'.
    """
    if subpath is None:
        return None
    _require_str(subpath, ErrorKind.SUBPATH, "subpath")
    segments = []
    for segment in subpath.split("/"):
        if not segment:
            continue
        if segment in (".", ".."):
            raise MalformedPackageURLError(
                ErrorKind.SUBPATH,
                f"The purl subpath must not contain '.' or '..' segments, but found: {segment!r}.",
            )
        segments.append(segment)
    return "/".join(segments) if segments else None
