from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from ..core.errors import ArgumentAbsentError, PathPolicyError
from ..core.limits import MAX_PATH_CHARS, MAX_PATHS_PER_REQUEST


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathToolsConfig:
    """
    Input ceilings for the tool layer. The core functions have none.
    """
    max_paths: int = MAX_PATHS_PER_REQUEST
    max_path_chars: int = MAX_PATH_CHARS


_DEFAULT_CFG = PathToolsConfig()


def require_path(path: str | None, *, name: str = "path", config: PathToolsConfig | None = None) -> str:
    cfg = config or _DEFAULT_CFG
    if path is None:
        raise ArgumentAbsentError(f"{name} is required")
    if len(path) > cfg.max_path_chars:
        logger.warning("Rejected %s: %d chars exceeds %d", name, len(path), cfg.max_path_chars)
        raise PathPolicyError(f"{name} is longer than {cfg.max_path_chars} characters.")
    return path


def require_paths(
    paths: Iterable[str | None] | None,
    *,
    max_paths: int | None = None,
    config: PathToolsConfig | None = None,
) -> list[str | None]:
    cfg = config or _DEFAULT_CFG
    limit = max(1, int(max_paths if max_paths is not None else cfg.max_paths))
    out = list(paths or [])
    if len(out) > limit:
        logger.warning("Rejected path list: %d entries exceeds %d", len(out), limit)
        raise PathPolicyError(f"Too many paths: {len(out)} (limit {limit}).")
    for p in out:
        if p is not None:
            require_path(p, config=cfg)
    return out
