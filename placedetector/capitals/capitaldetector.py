"""
Country / U.S. State Detection
------------------------------

Classifies a place name as a country, a U.S. state or neither, and returns
its capital when known. Backed by two flat name -> capital datasets loaded
once at construction:

  data/countries.json   country name -> capital
  data/us_states.json   U.S. state name -> capital

Lookup order is countries first, then states, so a name present in both
(e.g. "Georgia") is a country.

API:
  PlaceDetector(countries_path=None, us_states_path=None, log=None)
  PlaceDetector.get_place_type(name) -> PlaceType
  PlaceDetector.get_capital(name) -> str | None

Examples:
  >>> detector = PlaceDetector()
  >>> detector.get_place_type("India")      # PlaceType.COUNTRY
  >>> detector.get_capital("Utah")          # 'Salt Lake City'
  >>> detector.get_place_type("Las Vegas")  # PlaceType.OTHER
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from placedetector.capitals.capitalnormalize import format_capital, normalize_place_key
from placedetector.utils.dataloader import (
    DataLoadError,
    find_data_file,
    format_not_found_error,
    load_capital_mapping,
)

logger = logging.getLogger(__name__)

COUNTRIES_ENV_VAR = "PLACEDETECTOR_COUNTRIES_PATH"
US_STATES_ENV_VAR = "PLACEDETECTOR_US_STATES_PATH"


class PlaceType(str, Enum):
    """Three-way classification of a place name."""

    COUNTRY = "country"
    USA_STATE = "usa_state"
    OTHER = "other"


def _resolve_dataset(
    dataset: str,
    filename: str,
    path: Optional[Union[str, Path]],
    env_var: str,
) -> Path:
    found_path = find_data_file(__file__, filename, path=path, env_var=env_var)
    if found_path is None:
        error_msg = format_not_found_error(
            dataset=dataset,
            searched_locations=[
                ("Explicit path", "Not provided"),
                ("Environment variable", f"{env_var} not set"),
                ("Package data", Path(__file__).parent / "data" / filename),
            ],
            fix_instructions=[
                f"Set {env_var} to point to a JSON or CSV {dataset} file",
                f"Or reinstall placedetector so that data/{filename} is present",
            ],
        )
        raise DataLoadError(error_msg)
    return found_path


class PlaceDetector:
    """Detects countries and U.S. states and looks up their capitals.

    Both mappings are read-only once the constructor returns, so a single
    instance can be shared between threads.
    """

    def __init__(
        self,
        countries_path: Optional[Union[str, Path]] = None,
        us_states_path: Optional[Union[str, Path]] = None,
        log: Optional[logging.Logger] = None,
    ):
        """
        Load the countries and U.S. states datasets.

        Args:
            countries_path: Path to a countries dataset. Defaults to
                $PLACEDETECTOR_COUNTRIES_PATH, then the bundled data.
            us_states_path: Path to a U.S. states dataset. Defaults to
                $PLACEDETECTOR_US_STATES_PATH, then the bundled data.
            log: Logger for the ready / failure messages. Defaults to
                this module's logger.

        Raises:
            DataLoadError: If either dataset is missing, unreadable or malformed
        """
        log = log or logger

        try:
            countries_file = _resolve_dataset("countries", "countries.json", countries_path, COUNTRIES_ENV_VAR)
            us_states_file = _resolve_dataset("us_states", "us_states.json", us_states_path, US_STATES_ENV_VAR)
            countries = load_capital_mapping(countries_file)
            us_states = load_capital_mapping(us_states_file)
        except DataLoadError as e:
            log.error(f"Error while loading countries and USA states data: {e!r}")
            raise

        self._countries: Mapping[str, str] = MappingProxyType(countries)
        self._us_states: Mapping[str, str] = MappingProxyType(us_states)

        log.info(
            f"Place detector is ready with {len(countries)} countries "
            f"and {len(us_states)} USA states."
        )

    @property
    def countries(self) -> Mapping[str, str]:
        """Read-only view of normalized country name -> capital."""
        return self._countries

    @property
    def us_states(self) -> Mapping[str, str]:
        """Read-only view of normalized U.S. state name -> capital."""
        return self._us_states

    def get_place_type(self, place_name: str) -> PlaceType:
        """
        Classify a place name.

        Args:
            place_name: Place name in any case, e.g. "India", "TEXAS"

        Returns:
            PlaceType.COUNTRY, PlaceType.USA_STATE or PlaceType.OTHER
        """
        key = normalize_place_key(place_name)
        if key in self._countries:
            return PlaceType.COUNTRY
        elif key in self._us_states:
            return PlaceType.USA_STATE
        else:
            return PlaceType.OTHER

    def get_capital(self, place_name: str) -> Optional[str]:
        """
        Look up the capital of a country or U.S. state.

        Args:
            place_name: Place name in any case, e.g. "Kiribati", "utah"

        Returns:
            Capital with each word capitalized (e.g. 'Tarawa Atoll'),
            or None if the name is neither a country nor a U.S. state
        """
        key = normalize_place_key(place_name)
        capital = self._countries.get(key)
        if capital is None:
            capital = self._us_states.get(key)
        if capital is None:
            return None
        return format_capital(capital)

    def __contains__(self, place_name: object) -> bool:
        return self.get_place_type(place_name) is not PlaceType.OTHER

    def __len__(self) -> int:
        return len(self._countries) + len(self._us_states)

    def __repr__(self) -> str:
        return f"PlaceDetector(countries={len(self._countries)}, us_states={len(self._us_states)})"


__all__ = [
    "PlaceType",
    "PlaceDetector",
    "DataLoadError",
]


# ---- Tiny smoke test ----
if __name__ == "__main__":
    from placedetector.logconfig import setup_logging

    setup_logging()
    detector = PlaceDetector()
    tests = ["India", "Texas", "Las Vegas", "Kiribati", "utah", "Georgia"]
    print({t: (detector.get_place_type(t).value, detector.get_capital(t)) for t in tests})
