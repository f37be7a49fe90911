"""Shared test fixtures and utilities for placedetector tests."""

import json
from pathlib import Path

import pytest

from placedetector import PlaceDetector, clear_cache
from placedetector.capitals.capitaldetector import COUNTRIES_ENV_VAR, US_STATES_ENV_VAR


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Make every test start from the bundled datasets and an empty cache.

    Dataset override variables from the developer's shell would otherwise
    leak into the tests.
    """
    monkeypatch.delenv(COUNTRIES_ENV_VAR, raising=False)
    monkeypatch.delenv(US_STATES_ENV_VAR, raising=False)
    clear_cache()
    yield
    clear_cache()


@pytest.fixture(scope="session")
def detector():
    """PlaceDetector built once from the bundled datasets."""
    return PlaceDetector()


@pytest.fixture
def write_dataset(tmp_path):
    """Factory writing a dataset file under tmp_path.

    Dicts and lists are written as JSON; strings are written verbatim.

    Example:
        def test_custom(write_dataset):
            path = write_dataset("countries.json", {"France": "Paris"})
    """
    def _write(filename: str, content) -> Path:
        path = tmp_path / filename
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def small_datasets(write_dataset):
    """A pair of tiny valid datasets: (countries_path, us_states_path)."""
    countries = write_dataset("countries.json", {
        "France": "Paris",
        "Georgia": "Tbilisi",
        "Kiribati": "tarawa atoll",
    })
    us_states = write_dataset("us_states.json", {
        "Georgia": "Atlanta",
        "Texas": "Austin",
        "New Mexico": "santa Fe",
    })
    return countries, us_states


@pytest.fixture
def sample_places():
    """Known places and their expected capitals in the bundled data."""
    return {
        "India": "New Delhi",
        "Kiribati": "Tarawa Atoll",
        "France": "Paris",
        "Texas": "Austin",
        "Utah": "Salt Lake City",
        "New York": "Albany",
    }
