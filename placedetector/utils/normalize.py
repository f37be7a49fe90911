"""Shared text normalization utilities.

This module provides the generic string helpers used by the capitals
lookup: key normalization for matching and word capitalization for display.
"""

import re


def normalize_name(s: str) -> str:
    """Normalization for exact-key matching.

    Transformations:
      1. Collapse whitespace and trim
      2. Lowercase

    No punctuation is removed and no transliteration is done: two names only
    match when they are the same string up to case and spacing.

    Args:
        s: Raw text to normalize

    Returns:
        Normalized string for matching, or "" for empty / non-string input

    Examples:
        >>> normalize_name("New  Mexico ")
        'new mexico'

        >>> normalize_name("INDIA")
        'india'
    """
    if not isinstance(s, str) or not s:
        return ""

    # Collapse whitespace
    s = re.sub(r"\s+", " ", s).strip()

    return s.lower()


def capitalize_words(s: str) -> str:
    """Upper-case the first letter of every whitespace-separated word.

    The remaining letters of each word keep their original case, so the
    transform is idempotent. Runs of whitespace collapse to a single space.

    Examples:
        >>> capitalize_words("salt lake city")
        'Salt Lake City'

        >>> capitalize_words("port-of-Spain")
        'Port-of-Spain'
    """
    if not s:
        return ""

    return " ".join(word[:1].upper() + word[1:] for word in s.split())


__all__ = [
    "normalize_name",
    "capitalize_words",
]
