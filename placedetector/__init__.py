"""PlaceDetector - country / U.S. state detection and capital lookup

Public API for classifying place names and looking up their capitals.

Usage:
    from placedetector import PlaceDetector, PlaceType
    from placedetector import place_type, capital_of

    # Build a detector from the bundled datasets
    detector = PlaceDetector()
    detector.get_place_type("India")   # Returns: PlaceType.COUNTRY
    detector.get_place_type("Texas")   # Returns: PlaceType.USA_STATE
    detector.get_capital("Kiribati")   # Returns: 'Tarawa Atoll'

    # Or use the cached module-level helpers
    capital_of("utah")                 # Returns: 'Salt Lake City'

    # Configure logging once at process start-up
    from placedetector import setup_logging
    setup_logging()
"""

__version__ = "0.0.1"

# ============================================================================
# Capitals API
# ============================================================================

from .capitals.capitaldetector import (
    PlaceType,       # COUNTRY / USA_STATE / OTHER
    PlaceDetector,   # Core detector over the two capital mappings
    DataLoadError,   # Raised when a dataset is missing or malformed
)

from .capitals.capitalapi import (
    load_place_detector,  # Cached default PlaceDetector
    place_type,           # Classify a place name
    capital_of,           # Capital of a country or U.S. state
    capitals_of,          # Batch capital lookup
    list_capitals,        # DataFrame of all known places and capitals
    clear_cache,          # Drop the cached default PlaceDetector
)

# ============================================================================
# Logging
# ============================================================================

from .logconfig import (
    setup_logging,   # Idempotent process-wide logging set-up
)

__all__ = [
    # Version
    "__version__",

    # Core
    "PlaceType",
    "PlaceDetector",
    "DataLoadError",

    # Module-level helpers
    "load_place_detector",
    "place_type",
    "capital_of",
    "capitals_of",
    "list_capitals",
    "clear_cache",

    # Logging
    "setup_logging",
]
