"""Tests for the dict/JSON adapters."""
import json

import pytest

from purlkit import MalformedPackageURLError, PackageURL, from_dict, from_json, parse, to_dict, to_json


def test_to_dict_uses_null_for_absent_fields() -> None:
    assert to_dict(parse("pkg:npm/foo")) == {
        "type": "npm",
        "namespace": None,
        "name": "foo",
        "version": None,
        "qualifiers": None,
        "subpath": None,
    }


def test_to_dict_with_all_fields() -> None:
    purl = parse("pkg:maven/org.apache/commons-io@2.0?type=jar&classifier=sources#src")
    data = to_dict(purl)
    assert data["namespace"] == "org.apache"
    assert data["qualifiers"] == {"classifier": "sources", "type": "jar"}
    assert data["subpath"] == "src"


def test_json_round_trip() -> None:
    purl = parse("pkg:github/ACME/Repo@main?vcs_url=git%2Bhttps://x#docs")
    text = to_json(purl)
    assert json.loads(text)["name"] == "repo"
    assert from_json(text) == purl


def test_from_dict_validates_and_normalizes() -> None:
    purl = from_dict({"scheme": "pkg", "type": "PyPI", "name": "Foo_Bar", "extra": 1})
    assert isinstance(purl, PackageURL)
    assert purl.to_string() == "pkg:pypi/foo-bar"


def test_from_dict_rejects_malformed_fields() -> None:
    with pytest.raises(MalformedPackageURLError):
        from_dict({"type": "npm", "name": "foo", "subpath": "../etc"})


def test_from_json_requires_an_object() -> None:
    with pytest.raises(ValueError):
        from_json("[1, 2]")
    with pytest.raises(ValueError):
        from_json("{not json")
