"""
Tools Module - MCP Tool Implementations

Tools exposing the search core over MCP.
"""

from gitsearch.tools.search_repository import search_repository
from gitsearch.tools.get_last_commit import get_last_commit

__all__ = [
    "search_repository",
    "get_last_commit",
]
