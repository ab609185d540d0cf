"""
Services - Query Dispatcher

Runs the fixed three-stage pipeline for one query:
latest matching commit → commit history → file contents.
"""

import logging
from typing import List, Optional

from gitsearch.backends import BaseSearchBackend
from gitsearch.config import get_settings
from gitsearch.errors import GitSearchError
from gitsearch.schemas import (
    CommitRecord,
    CommitStage,
    FileMatch,
    FileStage,
    SearchReport,
    SHORT_HASH_LENGTH,
)
from gitsearch.services.normalizer import ResultNormalizer


logger = logging.getLogger(__name__)


class QueryDispatcher:
    """Fans a query out to every stage and aggregates the outcomes."""

    def __init__(
        self,
        backend: BaseSearchBackend,
        settings=None,
        normalizer: Optional[ResultNormalizer] = None,
    ):
        self.settings = settings or get_settings()
        self.backend = backend
        self.normalizer = normalizer or ResultNormalizer()

    def dispatch(self, query: str) -> SearchReport:
        """
        Run all three stages for a query.

        A failing stage is recorded in its result and never stops the
        following stages.

        Args:
            query: Non-empty search text

        Returns:
            SearchReport with one result per stage
        """
        if not query or not query.strip():
            raise ValueError("query must not be empty")

        search = self.settings.search

        latest = CommitStage(
            name="latest", title="Latest Matching Commit", limit=search.latest_limit
        )
        try:
            latest.commits = self.search_latest(query)
        except GitSearchError as e:
            logger.error(f"Error searching commits: {e}")
            latest.error = str(e)

        history = CommitStage(
            name="history", title="Commit Messages", limit=search.history_limit
        )
        try:
            history.commits = self.search_history(query)
        except GitSearchError as e:
            logger.error(f"Error searching commits: {e}")
            history.error = str(e)

        files = FileStage(
            name="files", title="File Contents", limit=search.file_limit
        )
        try:
            files.matches = self.search_files(query)
        except GitSearchError as e:
            logger.error(f"Error searching files: {e}")
            files.error = str(e)

        return SearchReport(query=query, latest=latest, history=history, files=files)

    def search_latest(self, query: str) -> List[CommitRecord]:
        """Most recent matching commit, optionally pinned to a hash prefix."""
        lines = self.backend.search_commit_history(
            query, self.settings.search.latest_limit
        )
        commits = self.normalizer.parse_commit_lines(lines)

        pinned = self.settings.search.highlight_hash
        if pinned:
            prefix = pinned[:SHORT_HASH_LENGTH]
            commits = [c for c in commits if c.short_hash == prefix]
        return commits

    def search_history(self, query: str) -> List[CommitRecord]:
        lines = self.backend.search_commit_history(
            query, self.settings.search.history_limit
        )
        return self.normalizer.parse_commit_lines(lines)

    def search_files(self, query: str) -> List[FileMatch]:
        lines = self.backend.search_file_contents(
            query, self.settings.search.file_limit
        )
        return self.normalizer.parse_file_lines(lines)

    def last_commit(self) -> CommitRecord:
        """Fetch and parse the most recent commit; errors propagate."""
        raw = self.backend.fetch_last_commit_details()
        return self.normalizer.parse_commit_details(raw)
