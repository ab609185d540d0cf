"""
Schemas - Report Models

Per-stage outcomes and the combined report for one query.
"""

from pydantic import BaseModel, Field, computed_field
from typing import List, Literal, Optional

from gitsearch.schemas.commit import CommitRecord, FileMatch


class StageResult(BaseModel):
    """Outcome of one stage: records, or an error message."""
    name: str
    title: str
    limit: int = Field(ge=1)
    error: Optional[str] = None

    @computed_field
    @property
    def status(self) -> Literal["ok", "empty", "error"]:
        if self.error is not None:
            return "error"
        return "ok" if self.records else "empty"

    @computed_field
    @property
    def truncated(self) -> bool:
        """True when the cap was reached and more results may exist."""
        return self.error is None and len(self.records) >= self.limit

    @property
    def records(self) -> list:
        raise NotImplementedError


class CommitStage(StageResult):
    """Stage producing commit records."""
    commits: List[CommitRecord] = []

    @property
    def records(self) -> List[CommitRecord]:
        return self.commits


class FileStage(StageResult):
    """Stage producing file matches."""
    matches: List[FileMatch] = []

    @property
    def records(self) -> List[FileMatch]:
        return self.matches


class SearchReport(BaseModel):
    """Combined result of the three stages for one query."""
    query: str
    latest: CommitStage
    history: CommitStage
    files: FileStage

    @property
    def stages(self) -> List[StageResult]:
        return [self.latest, self.history, self.files]
