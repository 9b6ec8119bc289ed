"""Immutable, key-sorted container for purl qualifiers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from purlkit import codec
from purlkit.errors import ErrorKind, MalformedPackageURLError
from purlkit.grammar import validate_qualifier_key


class QualifierMap(Mapping):
    """A read-only mapping of qualifier keys to values.

    Keys are lowercased, validated and unique; entries with an empty value
    are never stored. Iteration is always in ascending key order so that
    each logical purl has exactly one canonical string.
    """

    __slots__ = ("_items",)

    def __init__(self, mapping: Optional[Mapping] = None):
        """Builds a map from already-decoded key/value pairs.

        Keys are lowercased and validated and empty values are dropped.
        The mapping is copied, so later changes to it are not seen here.

        Raises:
            MalformedPackageURLError: On a non-string key or value, an
                invalid key, or a key repeated after lowercasing.
        """
        items: Dict[str, str] = {}
        for key, value in (mapping or {}).items():
            if not isinstance(key, str) or not isinstance(value, (str, type(None))):
                raise MalformedPackageURLError(
                    ErrorKind.QUALIFIERS, f"Qualifier {key!r} must map a string to a string."
                )
            self._add(items, key, value or "")
        self._items: Dict[str, str] = dict(sorted(items.items()))

    @staticmethod
    def _add(items: Dict[str, str], key: str, value: str) -> None:
        key = validate_qualifier_key(key.lower())
        if not value:
            return
        if key in items:
            raise MalformedPackageURLError(
                ErrorKind.DUPLICATE_QUALIFIER, f"Duplicate purl qualifier key: {key!r}."
            )
        items[key] = value

    @classmethod
    def from_string(cls, raw: Optional[str]) -> QualifierMap:
        """Builds a map from an encoded 'key=value&key=value' string.

        Pairs without '=' are skipped. Values are percent-decoded; pairs
        whose decoded value is empty are dropped.

        Raises:
            MalformedPackageURLError: On an invalid key or a key repeated
                after lowercasing.
        """
        items: Dict[str, str] = {}
        if raw:
            for pair in raw.split("&"):
                key, sep, value = pair.partition("=")
                if not sep:
                    continue
                cls._add(items, key, codec.decode(value))
        return cls(items)

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> QualifierMap:
        """Builds a map from already-decoded key/value pairs, as the constructor does."""
        return cls(mapping)

    @classmethod
    def coerce(cls, value: Union[None, str, Mapping, QualifierMap]) -> QualifierMap:
        if value is None:
            return cls()
        if isinstance(value, QualifierMap):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        raise MalformedPackageURLError(
            ErrorKind.QUALIFIERS,
            f"Qualifiers must be a mapping or a string, got {type(value).__name__}.",
        )

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.is_instance_schema(cls)

    def to_string(self) -> str:
        """Returns the encoded, key-sorted 'key=value&...' form."""
        return "&".join(
            f"{key}={codec.encode_qualifier_value(value)}" for key, value in self._items.items()
        )

    def to_dict(self) -> Dict[str, str]:
        return dict(self._items)

    def __getitem__(self, key: str) -> str:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, QualifierMap):
            return self._items == other._items
        if isinstance(other, Mapping):
            return self._items == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._items.items()))

    def __repr__(self) -> str:
        return f"QualifierMap({self._items!r})"
