"""
Git Search - MCP Server

FastMCP server with STDIO and SSE transport support.
"""

import argparse
import logging
import sys
from typing import Optional

from fastmcp import FastMCP

from gitsearch import tools
from gitsearch.backends import get_backend
from gitsearch.config import get_settings
from gitsearch.errors import StartupError
from gitsearch.services import QueryDispatcher, ensure_backend_available, resolve_repository


logger = logging.getLogger(__name__)


def create_app(repo_path: Optional[str] = None, settings=None) -> FastMCP:
    """
    Create and configure the MCP application.

    Raises:
        StartupError: repository root is not usable
    """
    settings = settings or get_settings()
    repo_path = resolve_repository(repo_path or settings.git.repo_path)

    backend = get_backend(repo_path, settings)
    ensure_backend_available(backend)
    dispatcher = QueryDispatcher(backend, settings)

    mcp = FastMCP(
        name="git-search",
        instructions=f"Search commit messages and tracked files in {repo_path}",
    )

    @mcp.tool()
    def search_repository(query: str) -> dict:
        """
        Search commit messages and tracked file contents.

        Returns the most recent matching commit, up to the configured
        number of matching commits, and up to the configured number of
        matching file lines (path:line:content). Each stage has a status
        and a truncated flag set when its cap was reached.
        """
        return tools.search_repository(dispatcher, query)

    @mcp.tool()
    def get_last_commit() -> dict:
        """Get hash, author, email, date, subject and body of the latest commit."""
        return tools.get_last_commit(dispatcher)

    return mcp


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Git Search MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=None,
        help="Transport protocol (default: from env)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for SSE transport (default: from env)"
    )
    parser.add_argument(
        "--path",
        default=None,
        help="Path to git repository (default: from env)"
    )
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log.level),
        stream=sys.stderr,
    )
    transport = args.transport or settings.mcp.transport
    port = args.port or settings.mcp.port

    try:
        mcp = create_app(args.path, settings)
    except StartupError as e:
        logger.error(str(e))
        sys.exit(1)

    if transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport="sse", host=settings.mcp.host, port=port)


if __name__ == "__main__":
    main()
