from __future__ import annotations

from .errors import ArgumentAbsentError


DIRECTORY_SEPARATOR = "\\"
ALT_DIRECTORY_SEPARATOR = "/"
VOLUME_SEPARATOR = ":"

_SEPARATORS = DIRECTORY_SEPARATOR + ALT_DIRECTORY_SEPARATOR


def is_directory_separator(ch: str) -> bool:
    return ch == DIRECTORY_SEPARATOR or ch == ALT_DIRECTORY_SEPARATOR


def begins_with_separator(path: str | None) -> bool:
    if not path:
        return False
    return is_directory_separator(path[0])


def ends_with_separator(path: str | None) -> bool:
    if not path:
        return False
    return is_directory_separator(path[-1])


def find_separator(path: str, start: int = 0) -> int:
    """
    Index of the next separator at or after `start`, or -1.
    Both separator characters count.
    """
    for i in range(start, len(path)):
        if path[i] in _SEPARATORS:
            return i
    return -1


def add_trailing_separator(path: str) -> str:
    """Ensure `path` ends in a directory separator."""
    if path is None:
        raise ArgumentAbsentError("path is required")
    if ends_with_separator(path):
        return path
    return path + DIRECTORY_SEPARATOR


def remove_trailing_separators(path: str) -> str:
    """Strip every trailing separator from `path`."""
    if path is None:
        raise ArgumentAbsentError("path is required")
    return path.rstrip(_SEPARATORS)
