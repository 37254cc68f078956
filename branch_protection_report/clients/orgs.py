"""Organizations resource client."""

from typing import TYPE_CHECKING

from branch_protection_report.exceptions import NotFoundError, OrgNotFoundError
from branch_protection_report.logging import get_logger
from branch_protection_report.pagination import Paginator
from branch_protection_report.types.orgs import Organization, OwnerSet

if TYPE_CHECKING:
    from branch_protection_report.transport import HTTPTransport

_logger = get_logger()


class OrgsClient:
    """Client for organization-level lookups."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the orgs client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport
        self.paginator = Paginator(transport)

    def validate(self, org: str) -> Organization:
        """
        Confirm the token works and the organization exists.

        A 403 is retried by the transport like any other call.

        Args:
            org: Organization login

        Returns:
            Organization object

        Raises:
            AuthenticationError: If the token is invalid
            OrgNotFoundError: If the organization does not exist
        """
        try:
            response = self.transport.get(f"/orgs/{org}")
        except NotFoundError as e:
            raise OrgNotFoundError(org, request_id=e.request_id) from e

        data = response.json()
        return Organization(
            login=data.get("login", org),
            id=data.get("id"),
            name=data.get("name"),
        )

    def owners(self, org: str) -> OwnerSet:
        """
        Fetch the organization's owners.

        Args:
            org: Organization login

        Returns:
            Lower-cased owner logins
        """
        members = self.paginator.walk(f"/orgs/{org}/members", params={"role": "admin"})
        owners = frozenset(member["login"].lower() for member in members)
        _logger.info("Org Owners: %s", ",".join(sorted(owners)))
        return owners
