"""
Backends - Git Backend

Runs git as a subprocess scoped to the repository root.
"""

import logging
import shutil
import subprocess
from typing import List, Optional

from gitsearch.backends.base_backend import BaseSearchBackend
from gitsearch.config import get_settings
from gitsearch.errors import BackendError


logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"
DETAIL_FORMAT = FIELD_SEPARATOR.join(["%H", "%an", "%ae", "%ad", "%s", "%b"])
HISTORY_FORMAT = FIELD_SEPARATOR.join(["%H", "%an", "%ad", "%s"])

# git grep exits with 1 when nothing matched
NO_MATCH_STATUS = 1


def split_output(output: str) -> List[str]:
    """Split raw output into non-empty lines; blank output yields []."""
    output = output.strip()
    if not output:
        return []
    return [line for line in output.split("\n") if line.strip()]


class GitBackend(BaseSearchBackend):
    """Search backend backed by the git command-line tool."""

    def __init__(self, repo_path: str, settings=None):
        self.settings = settings or get_settings()
        self.repo_path = repo_path
        self.binary = self.settings.git.binary
        self.timeout = self.settings.git.timeout_ms / 1000

    def fetch_last_commit_details(self) -> str:
        output = self._run(
            ["log", "-1", f"--pretty=format:{DETAIL_FORMAT}", "--date=short"]
        )
        if not output.strip():
            raise BackendError("git log returned no commit")
        return output

    def search_commit_history(self, query: str, limit: int) -> List[str]:
        output = self._run([
            "log",
            f"--grep={query}",
            "-i",
            f"--max-count={limit}",
            f"--pretty=format:{HISTORY_FORMAT}",
            "--date=short",
        ])
        return split_output(output)[:limit]

    def search_file_contents(self, query: str, limit: int) -> List[str]:
        output = self._run(
            ["grep", "-n", "-i", "-F", "--no-color", "-e", query],
            no_match_status=NO_MATCH_STATUS,
        )
        return split_output(output)[:limit]

    def is_available(self) -> bool:
        """Check if the git binary is on PATH."""
        return shutil.which(self.binary) is not None

    def _run(self, args: List[str], no_match_status: Optional[int] = None) -> str:
        """
        Run one git command and return its stdout.

        Args:
            args: Arguments after the git binary, passed without a shell
            no_match_status: Exit status meaning "ran fine, found nothing"

        Returns:
            Captured stdout ("" for the no-match status)

        Raises:
            BackendError: git could not run, timed out, or failed
        """
        command = [self.binary, *args]
        logger.debug("Running %s in %s", command, self.repo_path)

        try:
            completed = subprocess.run(
                command,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise BackendError(
                f"git {args[0]} timed out after {self.timeout:g}s"
            ) from e
        except OSError as e:
            raise BackendError(f"failed to run {self.binary}: {e}") from e

        logger.debug("git %s exited with status %d", args[0], completed.returncode)

        if completed.returncode == 0:
            return completed.stdout

        if (
            no_match_status is not None
            and completed.returncode == no_match_status
            and not completed.stdout.strip()
        ):
            return ""

        stderr = (completed.stderr or "").strip()
        raise BackendError(
            f"git {args[0]} exited with status {completed.returncode}: {stderr}",
            returncode=completed.returncode,
            stderr=stderr,
        )
