"""
Git Search - Errors

Exception hierarchy shared by the backend, normalizer and entry points.
"""

from typing import Optional


class GitSearchError(Exception):
    """Base class for all git search errors."""


class StartupError(GitSearchError):
    """Repository root is unusable; fatal before any search runs."""


class BackendError(GitSearchError):
    """An external lookup could not be executed."""

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class ParseError(GitSearchError):
    """Backend output did not have the expected number of fields."""

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line
