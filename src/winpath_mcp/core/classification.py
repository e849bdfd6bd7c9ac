from __future__ import annotations

import string

from .errors import ArgumentAbsentError
from .models import UNKNOWN_CLASSIFICATION, PathClassification, PathFormat
from .separators import VOLUME_SEPARATOR, find_separator, is_directory_separator as _is_sep


_DRIVE_LETTERS = frozenset(string.ascii_letters)

# Offset where the server name starts for \\Server and \\?\UNC\Server, plus one.
_UNC_ROOT = 3
_EXTENDED_UNC_ROOT = 9


def classify_path(path: str | None) -> PathClassification:
    """
    Determine the format and root length of a Windows path string.

    Forward slashes and backslashes are treated as equivalent. No I/O and no
    validation of characters beyond what makes a path indeterminate.

    Examples:
      C:\\foo               -> DRIVE_ABSOLUTE, 3
      \\\\Server\\Share\\x      -> UNIFORM_NAMING_CONVENTION, 15
      \\\\?\\C:\\x             -> VOLUME_ABSOLUTE_EXTENDED, 7
    """
    if not path or path[0] == VOLUME_SEPARATOR:
        return UNKNOWN_CLASSIFICATION

    length = len(path)

    if not _is_sep(path[0]):
        if length < 2 or path[1] != VOLUME_SEPARATOR:
            return PathClassification(PathFormat.CURRENT_DIRECTORY_RELATIVE, 0)

        if path[0] not in _DRIVE_LETTERS:
            return UNKNOWN_CLASSIFICATION

        if length > 2 and _is_sep(path[2]):
            return PathClassification(PathFormat.DRIVE_ABSOLUTE, 3)

        return PathClassification(PathFormat.DRIVE_RELATIVE, 2)

    # A single leading separator is relative to the current volume
    if length == 1 or not _is_sep(path[1]):
        return PathClassification(PathFormat.CURRENT_VOLUME_RELATIVE, 1)

    # Minimum is \\a\b or \\?\a, and never three leading separators
    if length < 5 or _is_sep(path[2]):
        return UNKNOWN_CLASSIFICATION

    unc_root = _UNC_ROOT
    fmt = PathFormat.UNIFORM_NAMING_CONVENTION

    if _is_sep(path[3]):
        marker = path[2]
        if marker == ".":
            fmt = PathFormat.DEVICE
        elif marker == "?":
            if path[4:7] == "UNC" and (length == 7 or _is_sep(path[7])):
                fmt = PathFormat.UNIFORM_NAMING_CONVENTION_EXTENDED
                unc_root = _EXTENDED_UNC_ROOT
            else:
                fmt = PathFormat.VOLUME_ABSOLUTE_EXTENDED

        if fmt in (PathFormat.DEVICE, PathFormat.VOLUME_ABSOLUTE_EXTENDED):
            # \\?\\ and \\.\\ are not valid
            if _is_sep(path[4]):
                return UNKNOWN_CLASSIFICATION

            next_sep = find_separator(path, 4)
            return PathClassification(fmt, next_sep + 1 if next_sep > -1 else length)

    if length >= unc_root + 2 and not _is_sep(path[unc_root - 1]):
        share_sep = find_separator(path, unc_root)
        if (
            share_sep > -1
            and share_sep != length - 1
            and not _is_sep(path[share_sep + 1])
        ):
            next_sep = find_separator(path, share_sep + 1)
            return PathClassification(fmt, next_sep + 1 if next_sep > -1 else length)

    # Malformed UNC or extended UNC
    return UNKNOWN_CLASSIFICATION


def get_path_format(path: str | None) -> PathFormat:
    return classify_path(path).format


def get_path_root_length(path: str | None) -> int:
    """Root length, or -1 when the format can't be determined."""
    return classify_path(path).root_length


def get_path_root(path: str | None) -> str | None:
    """Root substring (e.g. "C:\\", "\\\\Server\\Share\\"), or None when unknown."""
    if path is None:
        return None
    return classify_path(path).root_of(path)


def is_path_relative(path: str) -> bool:
    """
    True if the path is relative to the current drive or working directory.

    Rooted is not the same as fixed: "\\foo" and "C:foo" are both relative.
    No validation is done, so URIs come back as relative.
    """
    if path is None:
        raise ArgumentAbsentError("path is required")
    if len(path) < 2:
        return True

    if _is_sep(path[0]):
        # Two leading separators is never relative
        return not _is_sep(path[1])

    # C:\ is the only fixed form that doesn't start with two separators
    return not (len(path) >= 3 and path[1] == VOLUME_SEPARATOR and _is_sep(path[2]))
