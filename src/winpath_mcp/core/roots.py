from __future__ import annotations

import logging
from typing import Iterable

from .classification import classify_path
from .separators import add_trailing_separator, is_directory_separator


logger = logging.getLogger(__name__)


def _ordinal_ignore_case(s: str) -> str:
    # Per-character upper casing keeps offsets stable ("ß".upper() is two chars).
    out: list[str] = []
    for ch in s:
        upper = ch.upper()
        out.append(upper if len(upper) == 1 else ch)
    return "".join(out)


def get_directory_path_or_root(path: str | None) -> str | None:
    """
    Directory for the given path, or the root if already at the root
    (e.g. "C:\\", "\\\\Server\\Share\\"). Always separator-terminated.

    Returns None if the path format is unknown.
    """
    c = classify_path(path)
    if not c.is_known:
        return None

    # Last separator past the root (past the \\ of a UNC)
    length = len(path)
    while length > c.root_length:
        length -= 1
        if is_directory_separator(path[length]):
            break

    return add_trailing_separator(path[:length])


def find_common_path_roots(paths: Iterable[str | None] | None) -> set[str]:
    """
    Topmost directories that together contain every given path.

    No member of the result is a prefix of another (ordinal, case-insensitive).
    Blank and unclassifiable entries are skipped.
    """
    # upper-cased key -> first spelling seen
    roots: dict[str, str] = {}
    if paths is None:
        return set()

    for path in paths:
        if path is None or not path.strip():
            continue

        directory = get_directory_path_or_root(path)
        if directory is None:
            logger.debug("Skipping unclassifiable path: %r", path)
            continue

        key = _ordinal_ignore_case(directory)
        if key in roots:
            continue

        absorbed = [existing for existing in roots if existing.startswith(key)]
        if absorbed:
            # Shorter than what it replaces. If a shorter root than this one
            # existed, the deeper ones could never have been added.
            for existing in absorbed:
                logger.debug("Root %r absorbs %r", directory, roots.pop(existing))
            roots[key] = directory
        elif not any(key.startswith(existing) for existing in roots):
            roots[key] = directory

    return set(roots.values())
