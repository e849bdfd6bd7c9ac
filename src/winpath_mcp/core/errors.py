from __future__ import annotations


class WinPathError(Exception):
    """Base error for the project."""


class ArgumentAbsentError(WinPathError, ValueError):
    pass


class PathPolicyError(WinPathError):
    pass
