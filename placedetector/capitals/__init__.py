"""Country / U.S. state detection and capital lookup."""

# Core component plus the cached module-level API
from placedetector.capitals.capitaldetector import (
    PlaceType,
    PlaceDetector,
    DataLoadError,
)
from placedetector.capitals.capitalapi import (
    load_place_detector,
    place_type,
    capital_of,
    capitals_of,
    list_capitals,
    clear_cache,
)

__all__ = [
    "PlaceType",
    "PlaceDetector",
    "DataLoadError",
    "load_place_detector",
    "place_type",
    "capital_of",
    "capitals_of",
    "list_capitals",
    "clear_cache",
]
