"""
Services - Report Renderer

Formats reports and commit details as console text.
"""

from typing import List

from gitsearch.schemas import CommitRecord, CommitStage, FileStage, SearchReport


class ReportRenderer:
    """Pure text formatting; callers decide where the text goes."""

    def render_report(self, report: SearchReport) -> str:
        lines = ["", f'=== Search Results for: "{report.query}" ===']

        lines += self.render_commit_stage(report.latest, show_truncation=False)
        lines += self.render_commit_stage(report.history)
        lines += self.render_file_stage(report.files)

        lines.append("")
        return "\n".join(lines) + "\n"

    def render_commit_stage(
        self,
        stage: CommitStage,
        show_truncation: bool = True,
    ) -> List[str]:
        lines = ["", f"--- {stage.title} ---"]

        if stage.error is not None:
            lines.append(f"Error: {stage.error}")
        elif not stage.commits:
            lines.append("No matches found in commit messages.")
        else:
            for i, commit in enumerate(stage.commits, start=1):
                lines.append(self.format_commit(i, commit))
            if show_truncation and stage.truncated:
                lines.append(f"... (showing first {stage.limit} commits)")

        return lines

    def render_file_stage(self, stage: FileStage) -> List[str]:
        lines = ["", f"--- {stage.title} ---"]

        if stage.error is not None:
            lines.append(f"Error: {stage.error}")
        elif not stage.matches:
            lines.append("No matches found in tracked files.")
        else:
            for i, match in enumerate(stage.matches, start=1):
                lines.append(f"{i}. {match.line}")
            if stage.truncated:
                lines.append(f"... (showing first {stage.limit} matches)")

        return lines

    @staticmethod
    def format_commit(ordinal: int, commit: CommitRecord) -> str:
        return (
            f"{ordinal}. [{commit.short_hash}] {commit.subject}"
            f" - {commit.author} ({commit.date})"
        )

    def render_last_commit(self, commit: CommitRecord) -> str:
        lines = [
            "=== Last Commit Information ===",
            f"Hash:    {commit.short_hash}",
            f"Author:  {commit.author} <{commit.email or ''}>",
            f"Date:    {commit.date}",
            f"Subject: {commit.subject}",
        ]
        if commit.body:
            lines.append(f"Body:    {commit.body}")
        lines.append("")
        return "\n".join(lines) + "\n"
