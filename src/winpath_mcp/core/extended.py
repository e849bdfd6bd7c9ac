from __future__ import annotations

from .errors import ArgumentAbsentError
from .limits import EXTENDED_PATH_PREFIX, MAX_PATH, UNC_PREFIX


# \\server\share becomes \\?\UNC\server\share
_INSERT_EXTENDED_UNC = "?\\UNC\\"


def is_extended(path: str | None) -> bool:
    return path is not None and path.startswith(EXTENDED_PATH_PREFIX)


def add_extended_prefix(path: str, add_if_under_legacy_max_path: bool = False) -> str:
    """
    Add the \\\\?\\ prefix if not already present.

    Unless `add_if_under_legacy_max_path` is set, paths that fit in MAX_PATH
    are returned unchanged. UNC paths are rewritten to \\\\?\\UNC\\.
    """
    if path is None:
        raise ArgumentAbsentError("path is required")
    if is_extended(path):
        return path

    if not add_if_under_legacy_max_path and len(path) <= MAX_PATH:
        return path

    if path.startswith(UNC_PREFIX):
        return path[:2] + _INSERT_EXTENDED_UNC + path[2:]

    return EXTENDED_PATH_PREFIX + path
