"""Repositories resource client."""

from typing import TYPE_CHECKING, Any

from branch_protection_report.pagination import Paginator
from branch_protection_report.types.repos import Repository

if TYPE_CHECKING:
    from branch_protection_report.transport import HTTPTransport


def _parse_repository(data: dict[str, Any]) -> Repository:
    """Parse one item of the repository listing."""
    return Repository(
        name=data["name"],
        default_branch=data["default_branch"],
        full_name=data.get("full_name"),
        archived=bool(data.get("archived", False)),
    )


class ReposClient:
    """Client for repository listing."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport
        self.paginator = Paginator(transport)

    def list(self, org: str) -> list[Repository]:
        """
        List every repository of an organization.

        Args:
            org: Organization login

        Returns:
            Repositories in API order, across all pages
        """
        items = self.paginator.walk(f"/orgs/{org}/repos")
        return [_parse_repository(item) for item in items]
