from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from winpath_mcp.tools import (
    classify,
    combine_paths,
    common_roots,
    directory_or_root,
    extended_path,
    extension,
    path_root,
)

mcp = FastMCP("winpath-mcp")


@mcp.tool()
def classify_tool(path: str) -> dict:
    return classify(path=path)


@mcp.tool()
def path_root_tool(path: str) -> dict:
    return path_root(path=path)


@mcp.tool()
def directory_or_root_tool(path: str) -> dict:
    return directory_or_root(path=path)


@mcp.tool()
def extension_tool(path: str, candidates: list[str] | None = None) -> dict:
    return extension(path=path, candidates=candidates)


@mcp.tool()
def extended_path_tool(path: str, force: bool = False) -> dict:
    return extended_path(path=path, force=force)


@mcp.tool()
def combine_paths_tool(path1: str, path2: str) -> dict:
    return combine_paths(path1=path1, path2=path2)


@mcp.tool()
def common_roots_tool(paths: list[str], max_paths: int | None = None) -> dict:
    return common_roots(paths=paths, max_paths=max_paths)


def main() -> None:
    # stdout belongs to the stdio transport
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    mcp.run()


if __name__ == "__main__":
    main()
