"""Shared utilities for PlaceDetector package."""

from placedetector.utils.dataloader import (
    DataLoadError,
    find_data_file,
    format_not_found_error,
    load_capital_mapping,
)
from placedetector.utils.normalize import (
    normalize_name,
    capitalize_words,
)

__all__ = [
    # Data loading
    "DataLoadError",
    "find_data_file",
    "format_not_found_error",
    "load_capital_mapping",
    # Normalization
    "normalize_name",
    "capitalize_words",
]
