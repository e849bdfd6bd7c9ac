from __future__ import annotations

import logging
from typing import Any

from .common import require_path, require_paths
from ..core.classification import classify_path, is_path_relative
from ..core.combine import combine
from ..core.extended import add_extended_prefix, is_extended
from ..core.extensions import get_extension, has_extension
from ..core.limits import MAX_PATH
from ..core.roots import find_common_path_roots, get_directory_path_or_root


logger = logging.getLogger(__name__)


def classify(path: str) -> dict[str, Any]:
    """
    Format, root length and root of a Windows path string.
    Unknown formats come back with root_length -1 and root None.
    """
    path = require_path(path)
    c = classify_path(path)
    logger.debug("classify %r -> %s", path, c.format.value)
    out = c.to_dict(path)
    out["path"] = path
    out["is_known"] = c.is_known
    out["is_relative"] = is_path_relative(path)
    out["is_extended"] = is_extended(path)
    return out


def path_root(path: str) -> dict[str, Any]:
    path = require_path(path)
    c = classify_path(path)
    return {"path": path, "root": c.root_of(path), "root_length": c.root_length}


def directory_or_root(path: str) -> dict[str, Any]:
    """
    Parent directory (separator-terminated), or the root itself when the path
    is already at its root. directory is None for unknown formats.
    """
    path = require_path(path)
    return {"path": path, "directory": get_directory_path_or_root(path)}


def extension(path: str, candidates: list[str] | None = None) -> dict[str, Any]:
    path = require_path(path)
    out: dict[str, Any] = {"path": path, "extension": get_extension(path)}
    if candidates:
        out["matches"] = has_extension(path, *candidates)
    return out


def extended_path(path: str, force: bool = False) -> dict[str, Any]:
    """
    Path in \\\\?\\ form for native calls. Short paths are left alone unless force=True.
    """
    path = require_path(path)
    result = add_extended_prefix(path, add_if_under_legacy_max_path=force)
    return {
        "path": path,
        "extended": result,
        "changed": result != path,
        "exceeds_max_path": len(path) > MAX_PATH,
    }


def combine_paths(path1: str, path2: str) -> dict[str, Any]:
    path1 = require_path(path1, name="path1")
    path2 = require_path(path2, name="path2")
    return {"path1": path1, "path2": path2, "combined": combine(path1, path2)}


def common_roots(paths: list[str], max_paths: int | None = None) -> dict[str, Any]:
    """
    Minimal set of top-level directories covering every given path.
    Sorted for stable output.
    """
    cleaned = require_paths(paths, max_paths=max_paths)
    roots = sorted(find_common_path_roots(cleaned), key=str.upper)
    logger.debug("common_roots: %d paths -> %d roots", len(cleaned), len(roots))
    return {"roots": roots, "count": len(roots), "input_count": len(cleaned)}
