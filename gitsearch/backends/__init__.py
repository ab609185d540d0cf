"""
Backends Module - Search Backend Abstraction Layer

Supports the git command-line tool.
"""

from gitsearch.backends.base_backend import BaseSearchBackend
from gitsearch.backends.git_backend import GitBackend

__all__ = [
    "BaseSearchBackend",
    "GitBackend",
]


def get_backend(repo_path: str, settings=None):
    """Factory function to get configured search backend."""
    from gitsearch.config import get_settings
    settings = settings or get_settings()

    if settings.search.backend == "git":
        return GitBackend(repo_path, settings)
    else:
        raise ValueError(f"Unknown search backend: {settings.search.backend}")
