"""Percent decoding and per-component percent encoding for purls."""

from urllib.parse import quote, unquote


def decode(value: str) -> str:
    """Percent-decodes a purl component.

    A literal '+' is kept as-is; purls do not use form encoding.
    """
    return unquote(value)


def encode(value: str, safe: str = "") -> str:
    """Percent-encodes every character outside the unreserved set.

    Args:
        value: The decoded component value.
        safe: Characters to leave literal in addition to `A-Za-z0-9-._~`.

    Returns:
        The encoded value, using uppercase hex escapes.
    """
    return quote(value, safe=safe)


def encode_namespace(namespace: str) -> str:
    return encode(namespace, safe="/")


def encode_name(name: str) -> str:
    return encode(name, safe=":")


def encode_version(version: str) -> str:
    return encode(version, safe=":")


def encode_qualifier_value(value: str) -> str:
    return encode(value, safe="/")


def encode_subpath(subpath: str) -> str:
    return encode(subpath, safe="/:")
