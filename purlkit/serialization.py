"""Plain dict and JSON adapters for PackageURL."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from purlkit.purl import PackageURL, build

FIELDS = ("type", "namespace", "name", "version", "qualifiers", "subpath")


def to_dict(purl: PackageURL) -> Dict[str, Any]:
    """Maps a PackageURL to a plain dict.

    Field names are kept verbatim; absent optional fields are None and
    empty qualifiers are None rather than {}.
    """
    return purl.model_dump(include=set(FIELDS))


def from_dict(data: Dict[str, Any]) -> PackageURL:
    """Builds a PackageURL from a plain dict, validating every field.

    `scheme` and unknown keys are ignored.

    Raises:
        MalformedPackageURLError: If the fields do not form a valid purl.
    """
    return build(**{field: data.get(field) for field in FIELDS})


def to_json(purl: PackageURL, indent: Optional[int] = None) -> str:
    return json.dumps(to_dict(purl), indent=indent)


def from_json(text: str) -> PackageURL:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}.")
    return from_dict(data)
