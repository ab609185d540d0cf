"""
MCP Tool - get_last_commit

Details of the most recent commit.
"""

from gitsearch.errors import GitSearchError
from gitsearch.services import QueryDispatcher


def get_last_commit(dispatcher: QueryDispatcher) -> dict:
    """Return hash, short hash, author, email, date, subject and body."""
    try:
        commit = dispatcher.last_commit()
    except GitSearchError as e:
        return {"error": str(e)}

    result = commit.model_dump()
    result["short_hash"] = commit.short_hash
    return result
