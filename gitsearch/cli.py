"""
Git Search - Command Line

Interactive and single-query search over a git repository.
"""

import argparse
import logging
import sys
from typing import List, Optional

from gitsearch.backends import get_backend
from gitsearch.config import get_settings
from gitsearch.errors import StartupError
from gitsearch.services import (
    QueryDispatcher,
    SearchSession,
    ensure_backend_available,
    resolve_repository,
)


logger = logging.getLogger(__name__)

EXAMPLES = """\
Examples:
  git-search                          # Interactive mode in current directory
  git-search --query "bug fix"        # Search for 'bug fix'
  git-search --path /path/to/repo     # Use different repository
"""


def build_parser(default_path: str = ".") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-search",
        description="Git Commit Search Tool",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-p", "--path",
        default=default_path,
        help="Path to git repository (default: current directory)",
    )
    parser.add_argument(
        "-q", "--query",
        default="",
        help="Search query (if empty, enters interactive mode)",
    )
    return parser


def run(argv: Optional[List[str]] = None, settings=None, stdin=None, stdout=None) -> int:
    """
    Run the tool and return a process exit status.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])
        settings: Settings override
        stdin: Input stream for interactive mode
        stdout: Output stream for results

    Returns:
        0 on success, 1 on a startup failure
    """
    settings = settings or get_settings()
    stdout = stdout or sys.stdout

    args = build_parser(settings.git.repo_path).parse_args(argv)

    try:
        repo_path = resolve_repository(args.path)
        backend = get_backend(repo_path, settings)
        ensure_backend_available(backend)
    except StartupError as e:
        logger.error(str(e))
        return 1

    dispatcher = QueryDispatcher(backend, settings)
    session = SearchSession(dispatcher, stdin=stdin, stdout=stdout)

    stdout.write(f"Git repository: {repo_path}\n")
    session.show_last_commit()

    if args.query:
        session.run_once(args.query)
    else:
        stdout.write("=== Interactive Search Mode ===\n")
        stdout.write("You can search for text in commit messages and file contents.\n")
        session.run_interactive()

    stdout.write("Goodbye!\n")
    return 0


def main():
    """CLI entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log.level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    sys.exit(run(settings=settings))


if __name__ == "__main__":
    main()
