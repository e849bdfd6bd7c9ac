from __future__ import annotations

import pytest


def test_classify_tool_output():
    from winpath_mcp.tools.path_tools import classify

    out = classify("\\\\?\\C:\\x")
    assert out["format"] == "volume_absolute_extended"
    assert out["root_length"] == 7
    assert out["root"] == "\\\\?\\C:\\"
    assert out["is_known"] is True
    assert out["is_relative"] is False
    assert out["is_extended"] is True


def test_path_root_and_directory_tools():
    from winpath_mcp.tools.path_tools import directory_or_root, path_root

    assert path_root("\\\\Server\\Share\\x")["root"] == "\\\\Server\\Share\\"
    assert directory_or_root("C:\\Foo\\f2.txt")["directory"] == "C:\\Foo\\"


def test_extension_tool_matches_only_when_candidates_given():
    from winpath_mcp.tools.path_tools import extension

    out = extension("archive.tar.gz")
    assert out == {"path": "archive.tar.gz", "extension": ".gz"}
    assert extension("archive.tar.gz", [".GZ"])["matches"] is True


def test_extended_path_tool(long_path):
    from winpath_mcp.tools.path_tools import extended_path

    short = extended_path("C:\\x")
    assert short["extended"] == "C:\\x"
    assert short["changed"] is False

    p = long_path(300)
    out = extended_path(p)
    assert out["extended"] == "\\\\?\\" + p
    assert out["changed"] is True
    assert out["exceeds_max_path"] is True


def test_combine_paths_tool():
    from winpath_mcp.tools.path_tools import combine_paths

    assert combine_paths("C:\\dir", "file.txt")["combined"] == "C:\\dir\\file.txt"


def test_common_roots_tool_respects_max_paths():
    from winpath_mcp.core.errors import PathPolicyError
    from winpath_mcp.tools.path_tools import common_roots

    with pytest.raises(PathPolicyError):
        common_roots(["C:\\a", "C:\\b"], max_paths=1)


def test_server_tools_delegate():
    from winpath_mcp.server import (
        classify_tool,
        combine_paths_tool,
        common_roots_tool,
        directory_or_root_tool,
        extended_path_tool,
        extension_tool,
        path_root_tool,
    )

    assert classify_tool("C:\\Users\\x")["format"] == "drive_absolute"
    assert path_root_tool("C:\\Users\\x")["root"] == "C:\\"
    assert directory_or_root_tool("C:\\Users\\x")["directory"] == "C:\\Users\\"
    assert extension_tool("a b.txt")["extension"] == ".txt"
    assert extended_path_tool("\\\\Server\\Share\\x", True)["extended"] == "\\\\?\\UNC\\Server\\Share\\x"
    assert combine_paths_tool("a", "b")["combined"] == "a\\b"
    assert common_roots_tool(["C:\\Foo\\Bar\\f1.txt", "C:\\Foo\\f2.txt"])["roots"] == ["C:\\Foo\\"]
