"""Splits a raw purl string into its still-encoded components."""

from __future__ import annotations

from typing import NamedTuple, Optional, Tuple

from purlkit.errors import ErrorKind, MalformedPackageURLError

SCHEME = "pkg"
_SCHEME_PREFIX = SCHEME + ":"


class PurlSegments(NamedTuple):
    """The raw components of a purl, before decoding and validation.

    Attributes:
        type: The package type, exactly as written.
        namespace: The '/'-joined middle path segments, or None.
        name: The last path segment.
        version: Text after the rightmost '@', or None.
        qualifiers: Text after the rightmost '?', or None.
        subpath: Text after the rightmost '#', or None.
    """
    type: str
    namespace: Optional[str]
    name: str
    version: Optional[str]
    qualifiers: Optional[str]
    subpath: Optional[str]


def _check_authority(remainder: str) -> None:
    """Rejects a URL authority carrying a user, password or port."""
    if not remainder.startswith("//"):
        return
    end = remainder.find("/", 2)
    authority = remainder[2:] if end == -1 else remainder[2:end]

    if "@" in authority:
        raise MalformedPackageURLError(
            ErrorKind.AUTHORITY, "A purl must not contain a user, password, or port."
        )
    _, colon, port = authority.rpartition(":")
    if colon and port and port.isascii() and port.isdigit():
        raise MalformedPackageURLError(
            ErrorKind.AUTHORITY, "A purl must not contain a user, password, or port."
        )


def _peel(remainder: str, delimiter: str) -> Tuple[str, Optional[str]]:
    """Splits off the text after the rightmost `delimiter`, if any."""
    head, found, tail = remainder.rpartition(delimiter)
    if not found:
        return remainder, None
    return head, tail


def split_purl(raw: str) -> PurlSegments:
    """Splits a purl string into type, namespace, name, version, qualifiers and subpath.

    Trailing segments are peeled at the rightmost delimiter, outermost first:
    '#' (subpath), then '?' (qualifiers), then '@' (version).

    Args:
        raw: The purl string, e.g. 'pkg:npm/%40angular/core@16.0.0'.

    Returns:
        A `PurlSegments` with every component still percent-encoded.

    Raises:
        MalformedPackageURLError: If the input is empty, lacks the 'pkg:'
            scheme, carries an authority, or has no type and name.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise MalformedPackageURLError(ErrorKind.EMPTY, "The purl string is null or empty.")

    if raw[:len(_SCHEME_PREFIX)].lower() != _SCHEME_PREFIX:
        raise MalformedPackageURLError(ErrorKind.SCHEME, "The purl scheme must be 'pkg'.")

    remainder = raw[len(_SCHEME_PREFIX):]
    _check_authority(remainder)

    remainder, subpath = _peel(remainder, "#")
    remainder, qualifiers = _peel(remainder, "?")
    remainder, version = _peel(remainder, "@")

    parts = remainder.strip("/").split("/")
    if len(parts) < 2:
        raise MalformedPackageURLError(
            ErrorKind.MISSING_NAME,
            "The purl must contain at least a type and a name (e.g., pkg:type/name).",
        )

    namespace = "/".join(parts[1:-1]) if len(parts) > 2 else None
    return PurlSegments(
        type=parts[0],
        namespace=namespace,
        name=parts[-1],
        version=version,
        qualifiers=qualifiers,
        subpath=subpath,
    )
