"""Tests for the cached module-level capitals API."""

import pandas as pd
import pytest

from placedetector import (
    PlaceType,
    capital_of,
    capitals_of,
    clear_cache,
    list_capitals,
    load_place_detector,
    place_type,
)


class TestLoadPlaceDetector:
    """Test load_place_detector caching"""

    def test_cached_instance(self):
        assert load_place_detector() is load_place_detector()

    def test_clear_cache(self):
        first = load_place_detector()
        clear_cache()
        assert load_place_detector() is not first

    def test_env_override_after_clear(self, small_datasets, monkeypatch):
        countries, us_states = small_datasets
        assert place_type("India") == PlaceType.COUNTRY

        monkeypatch.setenv("PLACEDETECTOR_COUNTRIES_PATH", str(countries))
        monkeypatch.setenv("PLACEDETECTOR_US_STATES_PATH", str(us_states))
        clear_cache()

        assert place_type("India") == PlaceType.OTHER
        assert capital_of("Kiribati") == "Tarawa Atoll"


class TestLookups:
    """Test place_type / capital_of / capitals_of"""

    def test_place_type(self):
        assert place_type("India") == PlaceType.COUNTRY
        assert place_type("texas") == PlaceType.USA_STATE
        assert place_type("Las Vegas") == PlaceType.OTHER

    def test_capital_of(self, sample_places):
        for name, capital in sample_places.items():
            assert capital_of(name) == capital
        assert capital_of("Mumbai") is None

    def test_capitals_of(self):
        assert capitals_of(["Utah", "France", "Atlantis"]) == ["Salt Lake City", "Paris", None]

    def test_capitals_of_generator(self):
        assert capitals_of(n for n in ["Ohio"]) == ["Columbus"]

    def test_capitals_of_series_with_missing_values(self):
        names = pd.Series(["Utah", pd.NA, "Atlantis", "france"], dtype="string")
        assert capitals_of(names) == ["Salt Lake City", None, None, "Paris"]

    def test_capitals_of_dataframe_column(self):
        df = pd.DataFrame({"name": ["India", None, float("nan")]})
        assert capitals_of(df["name"]) == ["New Delhi", None, None]

    def test_capitals_of_empty(self):
        assert capitals_of([]) == []


class TestListCapitals:
    """Test list_capitals DataFrame"""

    def test_all(self):
        df = list_capitals()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["name", "capital", "place_type"]
        assert len(df) == 244

    def test_filter_states(self):
        df = list_capitals("usa_state")
        assert len(df) == 50
        assert set(df["place_type"]) == {"usa_state"}

    def test_filter_by_enum(self):
        df = list_capitals(PlaceType.COUNTRY)
        assert len(df) == 194
        row = df[df["name"] == "kiribati"].iloc[0]
        assert row["capital"] == "Tarawa Atoll"

    def test_georgia_listed_twice(self):
        df = list_capitals()
        georgia = df[df["name"] == "georgia"].set_index("place_type")["capital"]
        assert georgia["country"] == "Tbilisi"
        assert georgia["usa_state"] == "Atlanta"

    def test_sorted(self):
        df = list_capitals("usa_state")
        assert list(df["name"]) == sorted(df["name"])
        assert list(df.index) == list(range(len(df)))

    def test_other_is_empty(self):
        assert list_capitals("other").empty

    def test_invalid_kind(self):
        with pytest.raises(ValueError):
            list_capitals("city")
