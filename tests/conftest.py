"""
Shared fixtures: an in-memory backend and default settings.
"""

from typing import List, Optional

import pytest

from gitsearch.backends import BaseSearchBackend
from gitsearch.config import Settings, GitSettings, SearchSettings


class FakeBackend(BaseSearchBackend):
    """In-memory backend; set an *_error attribute to make a call fail."""

    def __init__(
        self,
        history: Optional[List[str]] = None,
        files: Optional[List[str]] = None,
        details: str = "",
    ):
        self.history = history or []
        self.files = files or []
        self.details = details
        self.history_error = None
        self.files_error = None
        self.details_error = None
        self.available = True
        self.calls = []

    def fetch_last_commit_details(self) -> str:
        self.calls.append(("details",))
        if self.details_error:
            raise self.details_error
        return self.details

    def search_commit_history(self, query: str, limit: int) -> List[str]:
        self.calls.append(("history", query, limit))
        if self.history_error:
            raise self.history_error
        return self.history[:limit]

    def search_file_contents(self, query: str, limit: int) -> List[str]:
        self.calls.append(("files", query, limit))
        if self.files_error:
            raise self.files_error
        return self.files[:limit]

    def is_available(self) -> bool:
        return self.available


@pytest.fixture
def settings():
    return Settings(
        git=GitSettings(binary="git", repo_path=".", timeout_ms=5000),
        search=SearchSettings(
            latest_limit=1,
            history_limit=10,
            file_limit=20,
            highlight_hash=None,
        ),
    )


@pytest.fixture
def backend():
    return FakeBackend(
        history=[
            "abc12345def67890|Alice|2024-03-01|fix bug",
            "0123456789abcdef|Bob|2024-02-14|fix typo in README",
        ],
        files=[
            "src/app.py:12:# TODO fix this",
            "README.md:3:Fix instructions",
        ],
        details="abc12345def67890|Alice|alice@example.com|2024-03-01|fix bug|Closes #4",
    )
