"""
Backends - Base Backend

Abstract capability interface for the three search primitives.
"""

from abc import ABC, abstractmethod
from typing import List


class BaseSearchBackend(ABC):
    """Base class for search backend implementations."""

    @abstractmethod
    def fetch_last_commit_details(self) -> str:
        """
        Fetch the most recent commit.

        Returns:
            Raw `hash|author|email|date|subject|body` text

        Raises:
            BackendError: invocation failed or produced no output
        """
        pass

    @abstractmethod
    def search_commit_history(self, query: str, limit: int) -> List[str]:
        """
        Search commit messages case-insensitively.

        Args:
            query: Text matched against subject and body
            limit: Maximum commits to return

        Returns:
            Raw `hash|author|date|subject` lines, newest first.
            No matches is an empty list, not an error.
        """
        pass

    @abstractmethod
    def search_file_contents(self, query: str, limit: int) -> List[str]:
        """
        Search tracked files case-insensitively for a literal string.

        Args:
            query: Literal text to look for
            limit: Maximum matching lines to return

        Returns:
            Raw `path:line:content` lines. No matches is an empty list.
        """
        pass

    def is_available(self) -> bool:
        """Check if the backend tool can be invoked."""
        return True
