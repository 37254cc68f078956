"""Report row data model."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from branch_protection_report.types.protection import ProtectionRecord

ScalarCell = str | int | bool | None


@dataclass(frozen=True)
class ReportRow:
    """One line of the report: a repository joined with its audit results."""

    repo: str
    branch: str
    protection: ProtectionRecord
    admins: list[str] = field(default_factory=list)

    def values(self) -> Iterator[ScalarCell]:
        """Yield the cells in report header order."""
        p = self.protection
        yield self.repo
        yield self.branch
        yield p.enabled
        yield p.required_pull_request_reviews_count
        yield p.required_pull_request_reviews_code_owners
        yield p.restrictions
        yield p.required_signatures
        yield p.enforce_admins
        yield p.required_linear_history
        yield p.allow_force_pushes
        yield p.allow_deletions
        yield p.block_creations
        yield ";".join(self.admins)
