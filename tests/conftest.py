"""Shared test fixtures for settings, election directory trees, and a mock MongoDB client."""

import copy
import json
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from election_db.core.config import Settings

SAMPLE_AREA = {
    "area_type": "constituency",
    "description": "Dublin Bay South",
    "election_type": "general",
    "name": "Dublin Bay South",
    "year": 2016,
    "counts_held": 9,
    "electorate": 74583,
    "quota": 8807,
    "spoilt": 342,
    "turnout": 44376,
    "valid": 44034,
    "candidates": [
        {
            "full_name": "Eoghan Murphy",
            "party": "Fine Gael",
            "elected": True,
            "counts": [8161, 8285, 9125],
            "first_pref_pc": 18.53,
        },
        {
            "full_name": "Kevin Humphreys",
            "party": "Labour",
            "elected": False,
            "counts": [4210, 4302],
            "transfers": 92,
            "transfers_pc": 2.1,
        },
    ],
}


@pytest.fixture
def settings() -> Settings:
    """Test application settings with the default local layout."""
    return Settings(_env_file=None)


@pytest.fixture
def make_election_dir(tmp_path: Path) -> Callable[..., Path]:
    """Return a builder for ``<tmp>/<election>/constituencies/<subdir>/<file>`` trees.

    ``files`` maps subdirectory names to ``{filename: content}`` dicts; dict
    content is written as JSON, strings are written verbatim.
    """

    def _make(election: str = "dail", files: dict[str, dict[str, dict | str]] | None = None) -> Path:
        election_dir = tmp_path / election
        root = election_dir / "constituencies"
        root.mkdir(parents=True)
        for subdir, entries in (files or {}).items():
            (root / subdir).mkdir()
            for filename, content in entries.items():
                text = content if isinstance(content, str) else json.dumps(content)
                (root / subdir / filename).write_text(text, encoding="utf-8")
        return election_dir

    return _make


@pytest.fixture
def mock_client() -> MagicMock:
    """A MagicMock standing in for pymongo.MongoClient.

    ``client[db][collection]`` always returns the same collection mock, whose
    ``insert_many`` reports one inserted id per document.
    """
    client = MagicMock(name="MongoClient")
    collection = client.__getitem__.return_value.__getitem__.return_value
    collection.insert_many.side_effect = lambda docs: MagicMock(inserted_ids=[f"id-{i}" for i in range(len(docs))])
    return client


@pytest.fixture
def mock_collection(mock_client: MagicMock) -> MagicMock:
    """The collection mock returned for any ``mock_client[db][collection]``."""
    return mock_client.__getitem__.return_value.__getitem__.return_value


@pytest.fixture
def sample_area() -> dict:
    """A complete area JSON object, as found in a constituency file."""
    return copy.deepcopy(SAMPLE_AREA)
