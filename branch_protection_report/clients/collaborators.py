"""Collaborators resource client."""

from typing import TYPE_CHECKING, Any

from branch_protection_report.pagination import Paginator
from branch_protection_report.types.orgs import OwnerSet
from branch_protection_report.types.repos import Collaborator, Repository

if TYPE_CHECKING:
    from branch_protection_report.transport import HTTPTransport


def _parse_collaborator(data: dict[str, Any]) -> Collaborator:
    permissions = data.get("permissions") or {}
    return Collaborator(
        login=data["login"],
        admin=permissions.get("admin") is True,
    )


class CollaboratorsClient:
    """Client for repository collaborator lookups."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the collaborators client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport
        self.paginator = Paginator(transport)

    def list_admins(self, org: str, repo: Repository) -> list[Collaborator]:
        """
        List collaborators the API reports as having admin permission.

        Args:
            org: Organization login
            repo: Repository to inspect

        Returns:
            Collaborators in API order
        """
        items = self.paginator.walk(
            f"/repos/{org}/{repo.name}/collaborators",
            params={"permission": "admin"},
        )
        return [_parse_collaborator(item) for item in items]

    def resolve(self, org: str, repo: Repository, owners: OwnerSet) -> list[str]:
        """
        Find admins of a repository who are not organization owners.

        The server-side permission filter is re-checked against each
        collaborator's ``permissions.admin`` flag. Owners are admins
        everywhere and are not reported.

        Args:
            org: Organization login
            repo: Repository to inspect
            owners: Lower-cased owner logins

        Returns:
            Lower-cased logins in API order
        """
        owner_logins = {owner.lower() for owner in owners}
        logins = [c.login.lower() for c in self.list_admins(org, repo) if c.admin]
        return [login for login in logins if login not in owner_logins]
