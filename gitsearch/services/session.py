"""
Services - Search Session

Interactive prompt loop and one-shot mode driving dispatcher and renderer.
"""

import logging
import sys
from enum import Enum
from typing import Optional, TextIO

from gitsearch.errors import GitSearchError
from gitsearch.services.dispatcher import QueryDispatcher
from gitsearch.services.renderer import ReportRenderer


logger = logging.getLogger(__name__)

EXIT_TOKENS = frozenset({"quit", "exit", "q"})
PROMPT = "Enter search query (or 'quit' to exit): "


class SessionState(str, Enum):
    AWAITING_INPUT = "awaiting_input"
    DISPATCHING = "dispatching"
    TERMINATED = "terminated"


class SearchSession:
    """
    Accepts queries and prints a report for each.

    States: AWAITING_INPUT → DISPATCHING → AWAITING_INPUT ... → TERMINATED.
    Exit tokens ("quit", "exit", "q", case-sensitive) and end of input
    terminate the loop; blank lines are ignored.
    """

    def __init__(
        self,
        dispatcher: QueryDispatcher,
        renderer: Optional[ReportRenderer] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.dispatcher = dispatcher
        self.renderer = renderer or ReportRenderer()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.state = SessionState.AWAITING_INPUT
        self.dispatch_count = 0

    def handle(self, line: str) -> SessionState:
        """Process one line of input and return the resulting state."""
        query = line.strip()

        if query in EXIT_TOKENS:
            self.state = SessionState.TERMINATED
            return self.state

        if not query:
            return self.state

        self.state = SessionState.DISPATCHING
        report = self.dispatcher.dispatch(query)
        self.dispatch_count += 1
        self.stdout.write(self.renderer.render_report(report))
        self.stdout.flush()
        self.state = SessionState.AWAITING_INPUT
        return self.state

    def run_interactive(self) -> None:
        """Prompt until an exit token or end of input."""
        while self.state != SessionState.TERMINATED:
            self.stdout.write(PROMPT)
            self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                # readline returns "" only at end of input
                self.stdout.write("\n")
                self.state = SessionState.TERMINATED
                break

            self.handle(line)

    def run_once(self, query: str) -> None:
        """Dispatch a single query and terminate."""
        if query.strip():
            self.handle(query)
        self.state = SessionState.TERMINATED

    def show_last_commit(self) -> bool:
        """Print the latest commit block; failures are logged, not raised."""
        try:
            commit = self.dispatcher.last_commit()
        except GitSearchError as e:
            logger.error(f"Error getting commit details: {e}")
            return False

        self.stdout.write(self.renderer.render_last_commit(commit))
        self.stdout.flush()
        return True
