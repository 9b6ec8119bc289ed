"""Tests for component validators and type normalization."""
import pytest

from purlkit.errors import ErrorKind, MalformedPackageURLError
from purlkit.grammar import (
    validate_name,
    validate_namespace,
    validate_qualifier_key,
    validate_subpath,
    validate_type,
)
from purlkit.normalization import TYPE_RULES, normalize_name, normalize_namespace


def test_validate_type_lowercases() -> None:
    assert validate_type("NuGet") == "nuget"


def test_validate_type_rejects_trailing_newline() -> None:
    with pytest.raises(MalformedPackageURLError):
        validate_type("npm\n")


def test_validate_namespace_passes_none_through() -> None:
    assert validate_namespace(None) is None
    assert validate_namespace("a/b") == "a/b"


def test_validate_name_rejects_non_strings() -> None:
    with pytest.raises(MalformedPackageURLError) as exc:
        validate_name(42)
    assert exc.value.kind is ErrorKind.NAME


@pytest.mark.parametrize("key", ["arch", "repository_url", "a.b-c_d", "A1"])
def test_valid_qualifier_keys(key) -> None:
    assert validate_qualifier_key(key) == key


@pytest.mark.parametrize("key", ["", "1arch", "in production", "a!b", "-a"])
def test_invalid_qualifier_keys(key) -> None:
    with pytest.raises(MalformedPackageURLError) as exc:
        validate_qualifier_key(key)
    assert exc.value.kind is ErrorKind.QUALIFIER_KEY


def test_validate_subpath_allows_dots_inside_segments() -> None:
    assert validate_subpath("a/.hidden/..x/file.txt") == "a/.hidden/..x/file.txt"


def test_pypi_rules() -> None:
    assert normalize_name("pypi", "Django_Rest_Framework") == "django-rest-framework"
    assert normalize_namespace("pypi", "SomeOrg") == "someorg"


@pytest.mark.parametrize("purl_type", ["github", "gitlab", "bitbucket"])
def test_vcs_host_rules(purl_type) -> None:
    assert normalize_name(purl_type, "My_Repo") == "my_repo"
    assert normalize_namespace(purl_type, "ACME/Team") == "acme/team"


def test_unknown_types_are_unchanged() -> None:
    assert normalize_name("maven", "Log4J_Core") == "Log4J_Core"
    assert normalize_namespace("maven", "Org.Apache") == "Org.Apache"
    assert normalize_namespace("maven", None) is None


@pytest.mark.parametrize("purl_type", sorted(TYPE_RULES) + ["npm"])
def test_normalization_is_idempotent(purl_type) -> None:
    once = normalize_name(purl_type, "Mixed_Case-Name")
    assert normalize_name(purl_type, once) == once
    ns_once = normalize_namespace(purl_type, "Some_Org/Sub_Group")
    assert normalize_namespace(purl_type, ns_once) == ns_once


def test_type_rules_are_read_only() -> None:
    with pytest.raises(TypeError):
        TYPE_RULES["npm"] = TYPE_RULES["github"]
