"""
Schemas Module - Pydantic Models

Data models for commits, file matches and search reports.
"""

from gitsearch.schemas.commit import CommitRecord, FileMatch, SHORT_HASH_LENGTH
from gitsearch.schemas.report import StageResult, CommitStage, FileStage, SearchReport

__all__ = [
    "CommitRecord",
    "FileMatch",
    "SHORT_HASH_LENGTH",
    "StageResult",
    "CommitStage",
    "FileStage",
    "SearchReport",
]
