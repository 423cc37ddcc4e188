"""
Pytest configuration and shared fixtures for Grave Finder tests.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict

import pytest

from gravefinder.core.config import ConfigManager
from gravefinder.models import GraveRegistry


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def config_dir(temp_dir):
    """Create a temporary config directory."""
    config_dir = temp_dir / ".config" / "gravefinder"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def config_file(config_dir):
    """Create a temporary config file path."""
    return config_dir / "config.toml"


@pytest.fixture
def config_manager(config_file, monkeypatch):
    """ConfigManager on a temporary file with no GRAVEFINDER_* overrides leaking in."""
    for name in list(os.environ):
        if name.upper().startswith("GRAVEFINDER_"):
            monkeypatch.delenv(name)
    return ConfigManager(config_file)


@pytest.fixture
def sample_document() -> Dict[str, Any]:
    """One cemetery with two unassigned graves, an open plot and a plot with a columbarium.

    The columbarium has a single face with two rows: the top row holds Ann Lee
    (niche 1), an empty niche and Bob Lee (niche 3); the bottom row is empty.
    """
    return {
        "referenceLocation": {"lat": 42.5, "lng": -71.25},
        "cemeteries": [
            {
                "location": {"lat": 42.5, "lng": -71.25},
                "name": "Pine Hill",
                "town": "Hollis",
                "description": "Town cemetery",
                "boundary": [{"lat": 42.5, "lng": -71.25}, {"lat": 42.51, "lng": -71.24}],
                "zoom": 18,
                "angle": 12.5,
                "graves": [
                    {"name": "Mary Jones", "dates": "1900-1980", "state": 0},
                    {"name": "John Smith Jr", "dates": "1910-1990", "state": 1},
                ],
                "plots": [
                    {"id": 1, "location": {"lat": 1.5, "lng": 2.5}, "angle": 90, "capacity": 6},
                    {
                        "id": 2,
                        "location": {"lat": 3.5, "lng": 4.5},
                        "angle": 0,
                        "capacity": 6,
                        "columbarium": {
                            "numFaces": 1,
                            "faces": [
                                {
                                    "columbariumName": "Columbarium A",
                                    "faceName": "East Face",
                                    "shortName": "EF",
                                    "numRows": 2,
                                    "rows": [
                                        {
                                            "name": "Top",
                                            "numNiches": 3,
                                            "graves": [
                                                {"name": "Ann Lee", "dates": "1920-2000", "state": 0},
                                                {},
                                                {"name": "Bob Lee", "dates": "", "state": 1},
                                            ],
                                            "urns": [2, 1, 1],
                                        },
                                        {"name": "Bottom", "numNiches": 2, "graves": [{}, {}], "urns": [1, 1]},
                                    ],
                                }
                            ],
                        },
                    },
                ],
            }
        ],
    }


@pytest.fixture
def sample_registry(sample_document) -> GraveRegistry:
    return GraveRegistry.from_dict(sample_document)


@pytest.fixture
def registry_file(temp_dir, sample_document) -> Path:
    """The sample document written to disk as plain JSON."""
    path = temp_dir / "cemeteries.txt"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path
