"""
CSV report assembly.

Rows are written one at a time in repository order and flushed as they
go, so an interrupted run leaves a file of complete rows.
"""

import csv
import io
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from branch_protection_report.logging import get_logger
from branch_protection_report.types.protection import ProtectionRecord
from branch_protection_report.types.report import ReportRow, ScalarCell
from branch_protection_report.types.repos import Repository

REPORT_HEADER = (
    "repo",
    "branch",
    "enabled",
    "required_pull_request_reviews_count",
    "required_pull_request_reviews_code_owners",
    "restrictions",
    "required_signatures",
    "enforce_admins",
    "required_linear_history",
    "allow_force_pushes",
    "allow_deletions",
    "block_creations",
    "admins",
)

_logger = get_logger()


def build_row(repo: Repository, protection: ProtectionRecord, admins: list[str]) -> ReportRow:
    """Join a repository with its protection record and admin exceptions."""
    return ReportRow(
        repo=repo.name,
        branch=repo.default_branch,
        protection=protection,
        admins=list(admins),
    )


def report_filename(org: str, when: datetime) -> str:
    """
    Name of the report file for a run started at ``when``.

    Example: ``acme-2024-3-7_9:05:02-branch-protection-report.csv``
    """
    date_part = f"{when.year}-{when.month}-{when.day}"
    time_part = f"{when.hour}:{when.minute:02d}:{when.second:02d}"
    return f"{org}-{date_part}_{time_part}-branch-protection-report.csv"


def format_cell(value: ScalarCell) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_row(values: Iterable[ScalarCell]) -> str:
    """
    Serialize one row of cells as a CSV line without a line terminator.

    Quote characters are removed after serialization, so cells are never
    quoted in the output.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="")
    writer.writerow([format_cell(value) for value in values])
    return buffer.getvalue().replace('"', "")


class ReportWriter:
    """Append-only writer for the report file."""

    def __init__(self, path: str | Path) -> None:
        """
        Create the report file and write its header.

        Args:
            path: Destination file; an existing file is overwritten
        """
        self.path = Path(path)
        self.rows_written = 0
        self._file: TextIO = self.path.open("w", encoding="utf-8", newline="")
        self._write_line(format_row(REPORT_HEADER))

    def write(self, row: ReportRow) -> None:
        """Append one row and flush it to disk."""
        self._write_line(format_row(row.values()))
        self.rows_written += 1

    def _write_line(self, line: str) -> None:
        self._file.write(line + "\n")
        self._file.flush()

    def close(self) -> None:
        """Close the report file."""
        self._file.close()
        _logger.debug("Closed %s after %d rows", self.path, self.rows_written)

    def __enter__(self) -> "ReportWriter":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
