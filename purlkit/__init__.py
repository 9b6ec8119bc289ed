"""purlkit: parse, validate, normalize and serialize package URLs."""

from .errors import ErrorKind, MalformedPackageURLError
from .purl import PackageURL, build, canonical_string, parse
from .qualifiers import QualifierMap
from .serialization import from_dict, from_json, to_dict, to_json

__all__ = [
    "build",
    "canonical_string",
    "ErrorKind",
    "from_dict",
    "from_json",
    "MalformedPackageURLError",
    "PackageURL",
    "parse",
    "QualifierMap",
    "to_dict",
    "to_json",
]
