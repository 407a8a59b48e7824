"""
Name keys, sorting and duration formatting for FreakFest media.
"""

import unicodedata
from typing import Any, Callable, List, Optional


def normalize_name_key(name: str) -> str:
    """Comparison key for a filename: NFC, then casefold.

    Archives zipped on macOS carry NFD names; "Café" in NFD and NFC must
    compare equal.
    """
    return unicodedata.normalize("NFC", name).casefold()


def name_sort_key(name: str) -> tuple:
    """Sort key for case-insensitive name sorting.

    Names equal after casefolding fall back to the raw string, so the order
    never depends on the order the names arrived in.
    """
    return (normalize_name_key(name), name)


def sort_by_name(items: List[Any], key: Optional[Callable[[Any], str]] = None) -> List[Any]:
    """
    Sort items by name, case-insensitive.

    Args:
        items: List of items to sort
        key: Optional function to extract name from item (default: item itself)
    """
    if key is None:
        return sorted(items, key=name_sort_key)
    return sorted(items, key=lambda x: name_sort_key(key(x)))


def format_duration(seconds: float) -> str:
    """Format a build time: "250ms", "42s", "2m 5s", "1h 2m"."""
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"
    minutes, secs = divmod(int(seconds), 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}h {minutes}m"
    if minutes:
        return f"{minutes}m {secs}s"
    return f"{secs}s"
