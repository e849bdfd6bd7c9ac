from __future__ import annotations

import pytest


@pytest.fixture()
def mixed_paths() -> list[str]:
    """
    A spread of every path format, including a few that can't be classified.
    """
    return [
        "C:\\Users\\x",
        "C:/Users/x/docs/readme.txt",
        "C:foo",
        "C:",
        "relative\\path",
        "a",
        "\\rooted",
        "/rooted/alt",
        "\\\\Server\\Share\\x",
        "//Server/Share/x/y.txt",
        "\\\\Server\\Share",
        "\\\\?\\C:\\x",
        "\\\\?\\Volume{b75e2c83-0000-0000-0000-602f00000000}\\dir\\f",
        "\\\\?\\UNC\\Server\\Share\\x",
        "\\\\.\\PhysicalDrive0",
        "\\\\.\\C:\\foo",
        "",
        ":x",
        "1:\\foo",
        "\\\\\\triple",
        "\\\\Server",
        "\\\\?\\UNC\\\\Server",
        "\\\\?\\\\x",
    ]


@pytest.fixture()
def long_path():
    """
    Helper: build a drive-absolute path of an exact length.
    """
    def _maker(length: int, prefix: str = "C:\\") -> str:
        return prefix + "a" * (length - len(prefix))
    return _maker
