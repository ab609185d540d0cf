"""
MCP Tool - search_repository

Search commit messages and tracked file contents.
"""

from gitsearch.services import QueryDispatcher


def search_repository(dispatcher: QueryDispatcher, query: str) -> dict:
    """
    Search a git repository for a query.

    Runs the latest-commit, commit-history and file-content stages.
    A failing stage is reported with status "error" and its message;
    the other stages are still returned.

    Args:
        dispatcher: Dispatcher bound to the repository
        query: Text to search for

    Returns:
        Report with one entry per stage
    """
    if not query.strip():
        return {"error": "query must not be empty"}

    report = dispatcher.dispatch(query.strip())
    return report.model_dump()
