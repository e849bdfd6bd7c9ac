from .path_tools import (
    classify,
    path_root,
    directory_or_root,
    extension,
    extended_path,
    combine_paths,
    common_roots,
)

__all__ = [
    "classify",
    "path_root",
    "directory_or_root",
    "extension",
    "extended_path",
    "combine_paths",
    "common_roots",
]
