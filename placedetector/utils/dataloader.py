"""Shared data loading utilities for the capitals datasets.

This module locates the reference datasets (explicit path, environment
variable, then package data) and parses them into flat name -> capital
dictionaries, raising DataLoadError for anything unreadable or malformed.
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import pandas as pd

from placedetector.utils.normalize import normalize_name


class DataLoadError(Exception):
    """A capitals dataset could not be read or is not a flat string mapping.

    The underlying exception, when there is one, is chained as __cause__.
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class _Pairs(list):
    """Key/value pairs of one JSON object, in document order."""


def find_data_file(
    module_file: str,
    filename: str,
    path: Optional[Union[str, Path]] = None,
    env_var: Optional[str] = None,
) -> Optional[Path]:
    """Find a data file by searching standard locations.

    Search priority:
    1. Explicit path (returned as-is, even if it does not exist)
    2. Environment variable (returned as-is, even if it does not exist)
    3. Module-local data: {module_dir}/data/{filename}

    An explicit or environment-provided location is never silently replaced
    by the bundled data; if it is wrong, loading it fails.

    Args:
        module_file: __file__ from the calling module
        filename: Bundled file name (e.g., 'countries.json')
        path: Optional explicit path
        env_var: Optional environment variable holding an override path

    Returns:
        Path to the file, or None if nothing was configured and no bundled
        file exists

    Examples:
        >>> find_data_file(__file__, 'countries.json',
        ...                env_var='PLACEDETECTOR_COUNTRIES_PATH')
        PosixPath('.../placedetector/capitals/data/countries.json')
    """
    if path is not None:
        return Path(path)

    if env_var:
        env_path = os.environ.get(env_var)
        if env_path:
            return Path(env_path)

    p = Path(module_file).parent / "data" / filename
    if p.exists():
        return p

    return None


def format_not_found_error(
    dataset: str,
    searched_locations: List[Tuple[str, object]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful message for a dataset that could not be located.

    Args:
        dataset: Dataset name (e.g., 'countries', 'us_states')
        searched_locations: List of (description, location) tuples searched
        fix_instructions: List of instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {dataset} data found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, location) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {location}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


def _read_json_pairs(file_path: Path) -> List[Tuple[object, object]]:
    with open(file_path, "r", encoding="utf-8") as fh:
        data = json.load(fh, object_pairs_hook=_Pairs)

    if not isinstance(data, _Pairs):
        raise DataLoadError(
            f"{file_path} must contain a JSON object, got {type(data).__name__}",
            path=file_path,
        )
    return list(data)


def _read_csv_pairs(file_path: Path) -> List[Tuple[object, object]]:
    df = pd.read_csv(file_path, dtype=str, keep_default_na=False)

    missing = [col for col in ("name", "capital") if col not in df.columns]
    if missing:
        raise DataLoadError(
            f"{file_path} is missing required column(s): {', '.join(missing)}",
            path=file_path,
        )
    return list(zip(df["name"], df["capital"]))


def load_capital_mapping(file_path: Union[str, Path]) -> Dict[str, str]:
    """Load a flat name -> capital dataset.

    Supported formats:
      - .json: a single object whose keys and values are all strings
      - .csv: columns 'name' and 'capital'

    Keys are normalized with normalize_name() so lookups are case
    insensitive. Capitals are stored as written in the source, trimmed.

    Args:
        file_path: Path to the dataset

    Returns:
        Dict mapping normalized place name to capital

    Raises:
        DataLoadError: If the file is unreadable, has an unsupported format,
            is not a flat string mapping, is empty, or has two entries whose
            names normalize to the same key
    """
    file_path = Path(file_path)

    try:
        if file_path.suffix == ".json":
            pairs = _read_json_pairs(file_path)
        elif file_path.suffix == ".csv":
            pairs = _read_csv_pairs(file_path)
        else:
            raise DataLoadError(
                f"Unsupported file format: {file_path.suffix}. Use .json or .csv",
                path=file_path,
            )
    except (OSError, ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and pandas parser errors;
        # RecursionError comes from json on deeply nested documents
        raise DataLoadError(f"Could not read {file_path}: {e}", path=file_path) from e

    if not pairs:
        raise DataLoadError(f"{file_path} contains no entries", path=file_path)

    mapping: Dict[str, str] = {}
    for name, capital in pairs:
        if not isinstance(name, str) or not isinstance(capital, str):
            raise DataLoadError(
                f"{file_path}: entry {name!r} must map a string to a string, "
                f"got {type(capital).__name__}",
                path=file_path,
            )

        key = normalize_name(name)
        value = capital.strip()
        if not key or not value:
            raise DataLoadError(f"{file_path}: empty name or capital in entry {name!r}", path=file_path)
        if key in mapping:
            raise DataLoadError(f"{file_path}: duplicate entry for {name!r}", path=file_path)

        mapping[key] = value

    return mapping


__all__ = [
    "DataLoadError",
    "find_data_file",
    "format_not_found_error",
    "load_capital_mapping",
]
