"""Shared fixtures for the address format test suite."""

import json
from pathlib import Path

import pytest

from locale_store import DictLocaleStore


US_FMT = "%N%n%1%n%C, %S %Z%n%R"


@pytest.fixture
def jane_doe() -> dict[str, str]:
    """Attributes for the Springfield sample address."""
    return {
        "RECIPIENT": "Jane Doe",
        "ADDRESS_LINE_1": "123 Main St",
        "LOCALITY": "Springfield",
        "ADMIN_AREA": "IL",
        "POSTAL_CODE": "62704",
        "COUNTRY": "USA",
    }


@pytest.fixture
def memory_store() -> DictLocaleStore:
    """In-memory dataset with one good, one malformed and one fmt-less record."""
    return DictLocaleStore(
        {
            "US": {"key": "US", "fmt": US_FMT},
            "DE": '{"key": "DE", "fmt": "%N%n%O%n%1%n%Z %C"}',
            "BROKEN": "{not json",
            "LIST": "[1, 2, 3]",
            "NOFMT": {"key": "NOFMT", "require": "AC"},
        }
    )


@pytest.fixture
def i18n_dir(tmp_path: Path) -> Path:
    """Temporary i18n directory with a couple of JSON locale records."""
    d = tmp_path / "i18n"
    d.mkdir()
    (d / "US.json").write_text(json.dumps({"key": "US", "fmt": US_FMT}), encoding="utf-8")
    (d / "CH.json").write_text(json.dumps({"key": "CH", "fmt": "%O%n%N%n%A%nCH-%Z %C"}), encoding="utf-8")
    (d / "XX.json").write_text("<<<", encoding="utf-8")
    (d / "notes.txt").write_text("not a locale", encoding="utf-8")
    return d
