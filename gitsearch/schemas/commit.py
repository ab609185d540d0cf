"""
Schemas - Commit Models

Pydantic models for parsed backend records.
"""

from pydantic import BaseModel, Field
from typing import Optional


SHORT_HASH_LENGTH = 8


class CommitRecord(BaseModel):
    """Single commit parsed from delimited log output."""
    hash: str = Field(min_length=1)
    author: str
    date: str
    subject: str
    body: str = ""
    email: Optional[str] = None

    @property
    def short_hash(self) -> str:
        # Slicing never fails, a shorter hash is returned whole
        return self.hash[:SHORT_HASH_LENGTH]


class FileMatch(BaseModel):
    """One `path:line:content` line from a file content search."""
    line: str

    def __str__(self) -> str:
        return self.line
