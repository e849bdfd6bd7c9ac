from __future__ import annotations

from .errors import ArgumentAbsentError
from .separators import DIRECTORY_SEPARATOR, begins_with_separator, ends_with_separator


def combine(path1: str, path2: str) -> str:
    """
    Join two path fragments, adding a separator between them only if neither
    side already has one. Does not validate path characters.
    """
    if path1 is None:
        raise ArgumentAbsentError("path1 is required")
    if path2 is None:
        raise ArgumentAbsentError("path2 is required")

    parts = [path1]
    if not ends_with_separator(path1) and not begins_with_separator(path2):
        parts.append(DIRECTORY_SEPARATOR)
    parts.append(path2)
    return "".join(parts)
