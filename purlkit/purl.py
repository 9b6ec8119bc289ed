"""PURL model and helpers."""

from __future__ import annotations

import logging
from typing import Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from purlkit import codec
from purlkit.errors import ErrorKind, MalformedPackageURLError
from purlkit.grammar import validate_name, validate_namespace, validate_subpath, validate_type
from purlkit.normalization import normalize_name, normalize_namespace
from purlkit.qualifiers import QualifierMap
from purlkit.splitter import SCHEME, split_purl

logger = logging.getLogger(__name__)

QualifiersInput = Union[None, str, Mapping[str, str], QualifierMap]


class PackageURL(BaseModel):
    """Represents a Package URL (purl).

    A purl is a URI that represents a software package in a mostly
    unambiguous way:
    ``pkg:type/namespace/name@version?qualifiers#subpath``.
    See: https://github.com/package-url/purl-spec

    Instances are immutable. Every construction path validates and
    normalizes the fields, so two purls naming the same package compare
    equal and render the same canonical string.

    Attributes:
        scheme: Always "pkg".
        type: The package "type" or package management system, lowercased.
        namespace: Some name prefix such as a Maven groupid, a Docker image owner, etc.
        name: The name of the package.
        version: The version of the package.
        qualifiers: Extra qualifying data for a package such as an OS, architecture, etc.
        subpath: Extra subpath within a package, relative to the package root.
    """

    model_config = ConfigDict(frozen=True)

    scheme: Literal["pkg"] = SCHEME
    type: str
    namespace: Optional[str] = None
    name: str
    version: Optional[str] = None
    qualifiers: QualifierMap = Field(default_factory=QualifierMap)
    subpath: Optional[str] = None

    def __init__(
        self,
        type: Optional[str] = None,
        namespace: Optional[str] = None,
        name: Optional[str] = None,
        version: Optional[str] = None,
        qualifiers: QualifiersInput = None,
        subpath: Optional[str] = None,
    ):
        """Validates and normalizes the fields of a new PackageURL.

        Args:
            type: Type of package (e.g. npm, pypi, maven).
            namespace: Namespace of the package (group, owner, organization).
            name: Name of the package.
            version: Version of the package.
            qualifiers: Qualifier key/value pairs, or an encoded qualifier string.
                Mappings are copied, never aliased.
            subpath: Subpath within the package.

        Raises:
            MalformedPackageURLError: If any field breaks its grammar.
        """
        purl_type = validate_type(type)
        namespace = normalize_namespace(purl_type, validate_namespace(namespace))
        name = normalize_name(purl_type, validate_name(name))
        if version is not None and not isinstance(version, str):
            raise MalformedPackageURLError(
                ErrorKind.VERSION,
                f"The purl version must be a string, got {version.__class__.__name__}.",
            )
        super().__init__(
            type=purl_type,
            namespace=namespace,
            name=name,
            version=version or None,
            qualifiers=QualifierMap.coerce(qualifiers),
            subpath=validate_subpath(subpath),
        )

    @classmethod
    def from_string(cls, purl: str) -> PackageURL:
        """Parses a purl string.

        Args:
            purl: A package URL string, e.g. 'pkg:pypi/Django_Rest@1.0'.

        Returns:
            The validated and normalized PackageURL.

        Raises:
            MalformedPackageURLError: If the string is not a valid purl.
        """
        segments = split_purl(purl)
        return cls(
            type=segments.type,
            namespace=codec.decode(segments.namespace) if segments.namespace is not None else None,
            name=codec.decode(segments.name),
            version=codec.decode(segments.version) if segments.version is not None else None,
            qualifiers=QualifierMap.from_string(segments.qualifiers),
            subpath=codec.decode(segments.subpath) if segments.subpath is not None else None,
        )

    @field_serializer("qualifiers")
    def serialize_qualifiers(self, qualifiers: QualifierMap) -> Optional[Dict[str, str]]:
        return qualifiers.to_dict() or None

    def to_string(self) -> str:
        """Returns the canonical string form of this PackageURL.

        Namespace, name, version, qualifier values and subpath are
        percent-encoded; qualifiers are ordered by key.
        """
        purl = f"{self.scheme}:{self.type}/"
        if self.namespace is not None:
            purl += f"{codec.encode_namespace(self.namespace)}/"
        purl += codec.encode_name(self.name)

        if self.version is not None:
            purl += f"@{codec.encode_version(self.version)}"

        if self.qualifiers:
            purl += f"?{self.qualifiers.to_string()}"

        if self.subpath is not None:
            purl += f"#{codec.encode_subpath(self.subpath)}"

        return purl

    def __str__(self) -> str:
        return self.to_string()


def parse(raw: str) -> PackageURL:
    """Parses `raw` into a PackageURL, raising MalformedPackageURLError on failure."""
    try:
        return PackageURL.from_string(raw)
    except MalformedPackageURLError as e:
        logger.debug(f"Rejected purl {raw!r} ({e.kind.value}): {e}")
        raise


def build(
    type: str,
    name: str,
    version: Optional[str] = None,
    namespace: Optional[str] = None,
    qualifiers: QualifiersInput = None,
    subpath: Optional[str] = None,
) -> PackageURL:
    """Builds a PackageURL from individual, already-decoded fields."""
    try:
        return PackageURL(
            type=type,
            namespace=namespace,
            name=name,
            version=version,
            qualifiers=qualifiers,
            subpath=subpath,
        )
    except MalformedPackageURLError as e:
        logger.debug(f"Rejected purl fields type={type!r} name={name!r} ({e.kind.value}): {e}")
        raise


def canonical_string(purl: PackageURL) -> str:
    return purl.to_string()
