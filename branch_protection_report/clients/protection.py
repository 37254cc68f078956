"""Branch protection resource client."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from branch_protection_report.exceptions import NotFoundError
from branch_protection_report.logging import get_logger
from branch_protection_report.normalize import enabled_flag, strip_urls
from branch_protection_report.types.protection import ProtectionRecord
from branch_protection_report.types.repos import Repository

if TYPE_CHECKING:
    from branch_protection_report.transport import HTTPTransport

_logger = get_logger()

# Settings GitHub wraps as {"enabled": bool, "url": ...}
WRAPPED_FIELDS = (
    "required_signatures",
    "enforce_admins",
    "required_linear_history",
    "allow_force_pushes",
    "allow_deletions",
    "block_creations",
    "required_conversation_resolution",
    "lock_branch",
    "allow_fork_syncing",
)


def _parse_protection(branch: str, data: dict[str, Any]) -> ProtectionRecord:
    """Flatten a protection payload into a ProtectionRecord."""
    data = strip_urls(data)

    reviews = data.get("required_pull_request_reviews")
    if isinstance(reviews, dict):
        review_count = reviews.get("required_approving_review_count", 0)
        code_owners = bool(reviews.get("require_code_owner_reviews", False))
    else:
        review_count = 0
        code_owners = False

    flags = {field: enabled_flag(data.get(field)) for field in WRAPPED_FIELDS}

    return ProtectionRecord(
        branch_name=data.get("name") or branch,
        enabled=True,
        required_pull_request_reviews=reviews is not None,
        required_pull_request_reviews_count=review_count,
        required_pull_request_reviews_code_owners=code_owners,
        restrictions=data.get("restrictions") is not None,
        **flags,
    )


class ProtectionClient:
    """Client for branch protection lookups."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the protection client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def fetch(self, org: str, repo: Repository) -> ProtectionRecord:
        """
        Get the protection state of a repository's default branch.

        A 404 means the branch has no protection rule and yields an
        unprotected record rather than an error.

        Args:
            org: Organization login
            repo: Repository to inspect

        Returns:
            ProtectionRecord for the default branch
        """
        branch = repo.default_branch
        path = f"/repos/{org}/{repo.name}/branches/{quote(branch, safe='')}/protection"
        try:
            response = self.transport.get(path)
        except NotFoundError:
            _logger.debug("No protection rule on %s:%s", repo.name, branch)
            return ProtectionRecord.unprotected(branch)

        return _parse_protection(branch, response.json())
