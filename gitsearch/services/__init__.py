"""
Services Module - Search Core

Provides normalization, dispatch, rendering and the session loop.
"""

from gitsearch.services.normalizer import ResultNormalizer
from gitsearch.services.dispatcher import QueryDispatcher
from gitsearch.services.renderer import ReportRenderer
from gitsearch.services.session import SearchSession, SessionState
from gitsearch.services.repository import resolve_repository, ensure_backend_available

__all__ = [
    "ResultNormalizer",
    "QueryDispatcher",
    "ReportRenderer",
    "SearchSession",
    "SessionState",
    "resolve_repository",
    "ensure_backend_available",
]
