"""
GitHub API client for the branch protection report.

Provides the single entry point the audit uses to reach the GitHub API.
"""

from typing import Any

import httpx

from branch_protection_report.clients import (
    CollaboratorsClient,
    OrgsClient,
    ProtectionClient,
    ReposClient,
)
from branch_protection_report.config import AuditConfig
from branch_protection_report.transport import HTTPTransport


class GitHubClient:
    """
    Client for the read-only GitHub endpoints the audit needs.

    Aggregates all resource clients over one shared transport, so every
    call draws from the same rate-limit budget.

    Example:
        ```python
        from branch_protection_report import AuditConfig, GitHubClient

        config = AuditConfig.resolve(org="acme")
        with GitHubClient(config) as client:
            client.orgs.validate(config.org)
            repos = client.repos.list(config.org)
        ```
    """

    def __init__(
        self,
        config: AuditConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            config: Resolved run configuration
            transport: Optional httpx transport (used by the testing package)
        """
        self.config = config

        self._transport = HTTPTransport(
            token=config.token,
            base_url=config.base_url,
            timeout=config.timeout,
            retry_config=config.retry,
            transport=transport,
        )

        self.orgs = OrgsClient(self._transport)
        self.repos = ReposClient(self._transport)
        self.protection = ProtectionClient(self._transport)
        self.collaborators = CollaboratorsClient(self._transport)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
