"""
Branch protection audit pipeline.

Repositories are processed strictly one after another: the whole run
shares one rate-limit budget, so parallel requests would only exhaust it
sooner.
"""

from collections.abc import Callable, Iterator

from branch_protection_report.client import GitHubClient
from branch_protection_report.logging import get_logger
from branch_protection_report.report import ReportWriter, build_row
from branch_protection_report.types.orgs import Organization, OwnerSet
from branch_protection_report.types.report import ReportRow
from branch_protection_report.types.repos import Repository

_logger = get_logger()


class BranchProtectionAudit:
    """
    Audits every repository of one organization.

    Example:
        ```python
        config = AuditConfig.resolve(org="acme", token="...")
        with GitHubClient(config) as client:
            audit = BranchProtectionAudit(client)
            audit.validate()
            for row in audit.iter_rows():
                print(row.repo, row.protection.enabled, row.admins)
        ```
    """

    def __init__(self, client: GitHubClient) -> None:
        """
        Initialize the audit.

        Args:
            client: GitHub client configured for the organization
        """
        self.client = client
        self.org = client.config.org
        self.organization: Organization | None = None
        self._owners: OwnerSet | None = None

    def validate(self) -> Organization:
        """
        Check the token and the organization before any report is created.

        Raises:
            AuthenticationError: If the token is invalid
            OrgNotFoundError: If the organization does not exist
        """
        self.organization = self.client.orgs.validate(self.org)
        return self.organization

    def owners(self) -> OwnerSet:
        """Organization owners, fetched once per audit."""
        if self._owners is None:
            self._owners = self.client.orgs.owners(self.org)
        return self._owners

    def list_repositories(self) -> list[Repository]:
        """All repositories of the organization, in listing order."""
        repos = self.client.repos.list(self.org)
        _logger.info("Total Repos: %d", len(repos))
        return repos

    def audit_repository(self, repo: Repository, owners: OwnerSet) -> ReportRow:
        """Fetch protection and admin exceptions for one repository."""
        protection = self.client.protection.fetch(self.org, repo)
        admins = self.client.collaborators.resolve(self.org, repo, owners)
        _logger.info("Branch Protection Rules for %s", repo.name)
        return build_row(repo, protection, admins)

    def iter_rows(self) -> Iterator[ReportRow]:
        """
        Yield one row per repository, in listing order.

        Call validate() first; this method does not repeat the pre-flight check.
        """
        owners = self.owners()
        repos = self.list_repositories()

        for repo in repos:
            yield self.audit_repository(repo, owners)

    def run(self) -> list[ReportRow]:
        """Validate, then audit every repository."""
        self.validate()
        return list(self.iter_rows())

    def write_report(
        self,
        open_writer: Callable[[], ReportWriter],
    ) -> int:
        """
        Validate, then stream every row into a report writer.

        The writer is only opened once validation succeeded, so a bad token
        or unknown organization never leaves a file behind.

        Args:
            open_writer: Factory creating the report writer

        Returns:
            Number of rows written
        """
        self.validate()
        owners = self.owners()
        repos = self.list_repositories()

        with open_writer() as writer:
            for repo in repos:
                writer.write(self.audit_repository(repo, owners))
            return writer.rows_written
