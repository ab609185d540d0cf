"""
Services - Repository Validation

Startup checks run before any search.
"""

import os
from pathlib import Path

from gitsearch.backends import BaseSearchBackend
from gitsearch.errors import StartupError


GIT_METADATA_DIR = ".git"


def resolve_repository(path: str) -> str:
    """
    Resolve a repository root and check it holds git metadata.

    Args:
        path: Repository root, relative or absolute

    Returns:
        Absolute path of the repository

    Raises:
        StartupError: path missing, not a directory, or not a repository
    """
    abs_path = Path(os.path.abspath(os.path.expanduser(path)))

    if not abs_path.exists():
        raise StartupError(f"Directory does not exist: {abs_path}")
    if not abs_path.is_dir():
        raise StartupError(f"Not a directory: {abs_path}")
    # .git is a file in worktrees and submodules
    if not (abs_path / GIT_METADATA_DIR).exists():
        raise StartupError(f"Not a git repository: {abs_path}")

    return str(abs_path)


def ensure_backend_available(backend: BaseSearchBackend) -> None:
    """Raise StartupError when the backend tool cannot be run."""
    if not backend.is_available():
        raise StartupError(
            f"Search backend is not available: {type(backend).__name__}"
        )
