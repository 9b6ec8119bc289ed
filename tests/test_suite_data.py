"""Data-driven tests against purl-spec style test-suite entries."""
import json
from pathlib import Path

import pytest

from purlkit import MalformedPackageURLError, PackageURL

DATA_FILE = Path(__file__).parent / "data" / "purl-test-suite.json"
TEST_CASES = json.loads(DATA_FILE.read_text(encoding="utf-8"))


def _ids(case):
    return case["description"]


@pytest.mark.parametrize("case", TEST_CASES, ids=_ids)
def test_parse(case) -> None:
    """Parsing yields the expected fields and canonical string, or fails."""
    if case["is_invalid"]:
        with pytest.raises(MalformedPackageURLError):
            PackageURL.from_string(case["purl"])
        return

    purl = PackageURL.from_string(case["purl"])
    assert purl.to_string() == case["canonical_purl"]
    assert purl.scheme == "pkg"
    assert purl.type == case["type"]
    assert purl.namespace == case["namespace"]
    assert purl.name == case["name"]
    assert purl.version == case["version"]
    assert dict(purl.qualifiers) == (case["qualifiers"] or {})
    assert purl.subpath == case["subpath"]


@pytest.mark.parametrize("case", [c for c in TEST_CASES if not c["is_invalid"]], ids=_ids)
def test_build_from_fields(case) -> None:
    """Building from the decoded fields renders the same canonical string."""
    purl = PackageURL(
        case["type"],
        case["namespace"],
        case["name"],
        case["version"],
        case["qualifiers"],
        case["subpath"],
    )
    assert purl.to_string() == case["canonical_purl"]
    assert purl == PackageURL.from_string(case["purl"])


@pytest.mark.parametrize("case", [c for c in TEST_CASES if not c["is_invalid"]], ids=_ids)
def test_canonical_form_is_a_fixed_point(case) -> None:
    canonical = PackageURL.from_string(case["purl"]).to_string()
    assert PackageURL.from_string(canonical).to_string() == canonical
