"""
Pytest configuration and fixtures.

Markers and shared pytest fixtures.
For shared fruit records, see tests/fixtures/fruit_fixtures.py
"""

import json
import pytest

from tests.fixtures.fruit_fixtures import RAW_FRUITS


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "fuzz: marks randomized property tests (deselect with '-m \"not fuzz\"')"
    )


@pytest.fixture
def fruits_file(tmp_path):
    """JSON fruit file in the seed-data format."""
    path = tmp_path / "fruits.json"
    path.write_text(json.dumps(RAW_FRUITS), encoding="utf-8")
    return path
