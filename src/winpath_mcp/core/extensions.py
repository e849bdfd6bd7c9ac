from __future__ import annotations

from .separators import VOLUME_SEPARATOR, is_directory_separator


def _find_extension_offset(path_or_file_name: str | None) -> int:
    """
    Index of the extension's period, or -1.
    Extensions can't contain spaces, so a space before the period means no extension.
    """
    if not path_or_file_name:
        return -1

    length = len(path_or_file_name)
    if length == 1 or path_or_file_name[-1] == ".":
        return -1

    for index in range(length - 1, -1, -1):
        ch = path_or_file_name[index]
        if ch == ".":
            return index
        if ch == " " or ch == VOLUME_SEPARATOR or is_directory_separator(ch):
            return -1

    return -1


def get_extension(path_or_file_name: str | None) -> str:
    """File extension including the period, or "" if there is none. Never raises."""
    index = _find_extension_offset(path_or_file_name)
    if index == -1:
        return ""
    return path_or_file_name[index:]


def has_extension(path: str | None, *extensions: str) -> bool:
    ext = get_extension(path).upper()
    return any(ext == (candidate or "").upper() for candidate in extensions)
