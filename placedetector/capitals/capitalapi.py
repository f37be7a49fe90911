"""Capitals lookup API.

Public module-level functions over a process-wide PlaceDetector built
from the default datasets. Use PlaceDetector directly for custom datasets.
"""

import logging
from functools import lru_cache
from typing import Iterable, List, Optional, Union

import pandas as pd

from placedetector.capitals.capitaldetector import PlaceDetector, PlaceType
from placedetector.capitals.capitalnormalize import format_capital

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def load_place_detector() -> PlaceDetector:
    """Build the default PlaceDetector once and reuse it.

    The datasets are resolved the same way as PlaceDetector() with no
    arguments: environment variables first, then the bundled data.

    Raises:
        DataLoadError: If a dataset is missing or malformed. Failures are
            not cached, so a later call retries.

    Examples:
        >>> detector = load_place_detector()
        >>> detector.get_capital("Texas")
        'Austin'
    """
    return PlaceDetector()


def place_type(name: str) -> PlaceType:
    """Classify a place name as country, U.S. state or other.

    Examples:
        >>> place_type("India")
        <PlaceType.COUNTRY: 'country'>

        >>> place_type("Las Vegas")
        <PlaceType.OTHER: 'other'>
    """
    return load_place_detector().get_place_type(name)


def capital_of(name: str) -> Optional[str]:
    """Capital of a country or U.S. state, or None.

    Examples:
        >>> capital_of("kiribati")
        'Tarawa Atoll'

        >>> capital_of("Mumbai") is None
        True
    """
    return load_place_detector().get_capital(name)


def capitals_of(names: Iterable[str]) -> List[Optional[str]]:
    """Batch lookup of capitals.

    Examples:
        >>> capitals_of(["Utah", "France", "Atlantis"])
        ['Salt Lake City', 'Paris', None]
    """
    detector = load_place_detector()
    return [detector.get_capital(n) for n in names]


def list_capitals(kind: Optional[Union[PlaceType, str]] = None) -> pd.DataFrame:
    """List known places and their capitals.

    Args:
        kind: Optional filter, PlaceType.COUNTRY / PlaceType.USA_STATE
              or their string values ("country", "usa_state").
              If None, returns both.

    Returns:
        DataFrame with columns:
          - name: Normalized (lowercase) place name, as used for lookups
          - capital: Capital, capitalized the same way as capital_of()
          - place_type: "country" or "usa_state"
        Sorted by place_type then name.

    Raises:
        ValueError: If kind is not a known PlaceType value

    Examples:
        >>> states = list_capitals("usa_state")
        >>> len(states)
        50
    """
    detector = load_place_detector()

    rows = []
    for row_kind, mapping in (
        (PlaceType.COUNTRY, detector.countries),
        (PlaceType.USA_STATE, detector.us_states),
    ):
        for name, capital in mapping.items():
            rows.append({
                "name": name,
                "capital": format_capital(capital),
                "place_type": row_kind.value,
            })

    df = pd.DataFrame(rows, columns=["name", "capital", "place_type"])

    # Apply kind filter
    if kind is not None:
        df = df[df["place_type"] == PlaceType(kind).value]

    return df.sort_values(["place_type", "name"]).reset_index(drop=True)


def clear_cache():
    """Clear the cached default PlaceDetector.

    Useful for testing or after changing the dataset environment variables.
    """
    load_place_detector.cache_clear()
    logger.info("Cleared place detector cache")


__all__ = [
    "load_place_detector",
    "place_type",
    "capital_of",
    "capitals_of",
    "list_capitals",
    "clear_cache",
]
