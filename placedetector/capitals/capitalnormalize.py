"""
Capital Lookup Normalization Functions
--------------------------------------

Two functions, one per side of a lookup:
  1. normalize_place_key: query/key normalization for exact matching
  2. format_capital: presentation casing for returned capitals

Examples:
  >>> normalize_place_key("  New   York ")
  'new york'

  >>> format_capital("salt lake city")
  'Salt Lake City'

  >>> format_capital("N'Djamena")
  "N'Djamena"
"""

from placedetector.utils.normalize import (
    normalize_name as _normalize_name,
    capitalize_words as _capitalize_words,
)


def normalize_place_key(s: str) -> str:
    """
    Normalize a place name into a lookup key.

    Transformations:
      - Strip whitespace and collapse inner runs to one space
      - Lowercase

    Applied to dataset keys at load time and to every query, so
    "INDIA", "india" and " India " all resolve to the same entry.
    Aliases and spelling variants are not handled.

    Args:
        s: Raw place name

    Returns:
        Lookup key, or "" for empty / non-string input
    """
    return _normalize_name(s)


def format_capital(capital: str) -> str:
    """Title-case a stored capital for display, keeping the rest of each word as stored."""
    return _capitalize_words(capital)


__all__ = [
    "normalize_place_key",
    "format_capital",
]
