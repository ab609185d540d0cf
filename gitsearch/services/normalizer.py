"""
Services - Result Normalizer

Parses delimited backend output into CommitRecord and FileMatch models.
"""

import logging
from typing import List

from gitsearch.errors import ParseError
from gitsearch.schemas import CommitRecord, FileMatch


logger = logging.getLogger(__name__)

SEPARATOR = "|"
HISTORY_FIELDS = 4  # hash, author, date, subject
DETAIL_FIELDS = 5   # hash, author, email, date, subject (+ optional body)


class ResultNormalizer:
    """Turns raw backend lines into typed records."""

    def parse_commit_line(self, line: str) -> CommitRecord:
        """
        Parse one `hash|author|date|subject` history line.

        The subject is the remainder of the line, so it may itself
        contain the separator.

        Raises:
            ParseError: fewer than four fields
        """
        parts = line.split(SEPARATOR, HISTORY_FIELDS - 1)
        if len(parts) < HISTORY_FIELDS or not parts[0]:
            raise ParseError(
                f"expected {HISTORY_FIELDS} fields, got {len(parts)}", line=line
            )

        return CommitRecord(
            hash=parts[0],
            author=parts[1],
            date=parts[2],
            subject=parts[3],
        )

    def parse_commit_lines(self, lines: List[str]) -> List[CommitRecord]:
        """Parse history lines, skipping malformed ones."""
        records = []
        for line in lines:
            line = line.strip()
            if not line:
                continue
            try:
                records.append(self.parse_commit_line(line))
            except ParseError as e:
                logger.warning(f"Skipping malformed commit line {line!r}: {e}")
        return records

    def parse_commit_details(self, raw: str) -> CommitRecord:
        """
        Parse `hash|author|email|date|subject|body` detail output.

        Raises:
            ParseError: fewer than five fields; the whole fetch fails
        """
        raw = raw.strip()
        parts = raw.split(SEPARATOR, DETAIL_FIELDS)
        if len(parts) < DETAIL_FIELDS or not parts[0]:
            raise ParseError("unexpected git log output format", line=raw)

        body = parts[DETAIL_FIELDS].strip() if len(parts) > DETAIL_FIELDS else ""

        return CommitRecord(
            hash=parts[0],
            author=parts[1],
            email=parts[2],
            date=parts[3],
            subject=parts[4],
            body=body,
        )

    def parse_file_lines(self, lines: List[str]) -> List[FileMatch]:
        """File matches are passed through unchanged."""
        return [FileMatch(line=line) for line in lines if line.strip()]
