"""
Unit Tests for GitBackend (subprocess is mocked)
"""

import subprocess
from unittest.mock import patch

import pytest

from gitsearch.backends import GitBackend, get_backend
from gitsearch.errors import BackendError


def completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(
        args=["git"], returncode=returncode, stdout=stdout, stderr=stderr
    )


class TestFileSearch:
    """Tests for git grep exit status handling."""

    def test_status_one_empty_is_no_matches(self, settings):
        """Test that exit status 1 with no output is an empty result."""
        backend = GitBackend("/repo", settings)

        with patch("gitsearch.backends.git_backend.subprocess.run") as mock_run:
            mock_run.return_value = completed(returncode=1)
            result = backend.search_file_contents("TODO", 20)

        assert result == []

    def test_status_two_is_error(self, settings):
        """Test that exit status 2 is a BackendError."""
        backend = GitBackend("/repo", settings)

        with patch("gitsearch.backends.git_backend.subprocess.run") as mock_run:
            mock_run.return_value = completed(returncode=2, stderr="fatal: bad")
            with pytest.raises(BackendError) as exc_info:
                backend.search_file_contents("TODO", 20)

        assert exc_info.value.returncode == 2
        assert exc_info.value.stderr == "fatal: bad"

    def test_results_truncated_to_limit(self, settings):
        """Test that only the first `limit` lines are returned."""
        backend = GitBackend("/repo", settings)
        output = "\n".join(f"f.py:{i}:TODO {i}" for i in range(1, 31)) + "\n"

        with patch("gitsearch.backends.git_backend.subprocess.run") as mock_run:
            mock_run.return_value = completed(stdout=output)
            result = backend.search_file_contents("todo", 20)

        assert len(result) == 20
        assert result[0] == "f.py:1:TODO 1"
        assert result[-1] == "f.py:20:TODO 20"

    def test_query_is_literal_argument(self, settings):
        """Test that the query is passed as one argument without a shell."""
        backend = GitBackend("/repo", settings)
        query = "$(rm -rf /); echo"

        with patch("gitsearch.backends.git_backend.subprocess.run") as mock_run:
            mock_run.return_value = completed(returncode=1)
            backend.search_file_contents(query, 20)

        command = mock_run.call_args.args[0]
        kwargs = mock_run.call_args.kwargs
        assert command[:2] == ["git", "grep"]
        assert command[-2:] == ["-e", query]
        assert "-i" in command and "-n" in command
        assert kwargs["cwd"] == "/repo"
        assert kwargs.get("shell", False) is False


class TestCommitHistory:
    """Tests for git log history search."""

    def test_command_and_lines(self, settings):
        """Test the log arguments and line splitting."""
        backend = GitBackend("/repo", settings)
        output = "aaa|Alice|2024-03-01|fix bug\nbbb|Bob|2024-02-01|fix typo"

        with patch("gitsearch.backends.git_backend.subprocess.run") as mock_run:
            mock_run.return_value = completed(stdout=output)
            result = backend.search_commit_history("Fix", 10)

        command = mock_run.call_args.args[0]
        assert command[:2] == ["git", "log"]
        assert "--grep=Fix" in command
        assert "-i" in command
        assert "--max-count=10" in command
        assert result == ["aaa|Alice|2024-03-01|fix bug", "bbb|Bob|2024-02-01|fix typo"]

    def test_no_matches_is_empty(self, settings):
        """Test that empty log output is not an error."""
        backend = GitBackend("/repo", settings)

        with patch("gitsearch.backends.git_backend.subprocess.run") as mock_run:
            mock_run.return_value = completed(stdout="  \n")
            assert backend.search_commit_history("nothing", 10) == []

    def test_failure_is_error(self, settings):
        """Test that a non-zero log status is a BackendError."""
        backend = GitBackend("/repo", settings)

        with patch("gitsearch.backends.git_backend.subprocess.run") as mock_run:
            mock_run.return_value = completed(returncode=128, stderr="fatal: not a git repository")
            with pytest.raises(BackendError, match="status 128"):
                backend.search_commit_history("x", 10)

    def test_status_one_is_error_for_log(self, settings):
        """Test that the no-match convention only applies to grep."""
        backend = GitBackend("/repo", settings)

        with patch("gitsearch.backends.git_backend.subprocess.run") as mock_run:
            mock_run.return_value = completed(returncode=1)
            with pytest.raises(BackendError):
                backend.search_commit_history("x", 10)


class TestLastCommit:
    """Tests for the detail fetch."""

    def test_returns_raw_output(self, settings):
        """Test that raw detail text is returned."""
        backend = GitBackend("/repo", settings)
        raw = "abc|Alice|a@x.org|2024-03-01|subject|body"

        with patch("gitsearch.backends.git_backend.subprocess.run") as mock_run:
            mock_run.return_value = completed(stdout=raw)
            assert backend.fetch_last_commit_details() == raw

        command = mock_run.call_args.args[0]
        assert "-1" in command
        assert "--pretty=format:%H|%an|%ae|%ad|%s|%b" in command

    def test_empty_output_is_error(self, settings):
        """Test that empty detail output is a BackendError."""
        backend = GitBackend("/repo", settings)

        with patch("gitsearch.backends.git_backend.subprocess.run") as mock_run:
            mock_run.return_value = completed(stdout="")
            with pytest.raises(BackendError):
                backend.fetch_last_commit_details()


class TestInvocationFailures:
    """Tests for process-level failures."""

    def test_timeout(self, settings):
        """Test that a timeout becomes a BackendError."""
        backend = GitBackend("/repo", settings)

        with patch("gitsearch.backends.git_backend.subprocess.run") as mock_run:
            mock_run.side_effect = subprocess.TimeoutExpired(cmd="git", timeout=5)
            with pytest.raises(BackendError, match="timed out"):
                backend.search_file_contents("x", 20)

        assert mock_run.call_args.kwargs["timeout"] == 5.0

    def test_missing_binary(self, settings):
        """Test that a missing git binary becomes a BackendError."""
        backend = GitBackend("/repo", settings)

        with patch("gitsearch.backends.git_backend.subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError("git")
            with pytest.raises(BackendError, match="failed to run"):
                backend.search_commit_history("x", 10)

    def test_is_available(self, settings):
        """Test availability is based on PATH lookup."""
        backend = GitBackend("/repo", settings)

        with patch("gitsearch.backends.git_backend.shutil.which", return_value=None):
            assert backend.is_available() is False
        with patch("gitsearch.backends.git_backend.shutil.which", return_value="/usr/bin/git"):
            assert backend.is_available() is True


class TestFactory:
    """Tests for get_backend."""

    def test_git_backend(self, settings):
        """Test that the default backend is git."""
        backend = get_backend("/repo", settings)

        assert isinstance(backend, GitBackend)
        assert backend.repo_path == "/repo"
