"""Extension classification for datebucket."""

from pathlib import Path
from typing import Union

from datebucket.utils.constants import EXTENSION_TOKENS


def matches_extension(path: Union[str, Path]) -> bool:
    """
    Check whether a path should be sorted into a date folder.

    The test is a case-insensitive substring search over the whole path,
    not a suffix check: "a.JS.txt", "data.json" and "scans.pdf/x.txt" all match.

    Args:
        path: File path (string or Path)

    Returns:
        True if any extension token occurs in the path
    """
    upper_path = str(path).upper()
    return any(token in upper_path for token in EXTENSION_TOKENS)
