"""
Run configuration.

The organization and token are resolved once, then passed explicitly to
every component that needs them.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from branch_protection_report.exceptions import ConfigurationError
from branch_protection_report.transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, RetryConfig

ORG_ENV_VAR = "ORG_NAME"
TOKEN_ENV_VARS = ("GITHUB_TOKEN", "GH_TOKEN")
BASE_URL_ENV_VAR = "GITHUB_API_URL"


@dataclass(frozen=True)
class AuditConfig:
    """Everything a run needs to talk to GitHub."""

    org: str
    token: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    retry: RetryConfig = field(default_factory=RetryConfig)

    @classmethod
    def resolve(
        cls,
        org: str | None = None,
        token: str | None = None,
        base_url: str | None = None,
        retry: RetryConfig | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "AuditConfig":
        """
        Build a configuration from explicit values, falling back to the environment.

        Environment variables:
            ORG_NAME: Organization to audit
            GITHUB_TOKEN or GH_TOKEN: Token with read access to the organization
            GITHUB_API_URL: API base URL (optional, default: https://api.github.com)

        Args:
            org: Organization login (overrides ORG_NAME)
            token: GitHub token (overrides GITHUB_TOKEN / GH_TOKEN)
            base_url: API base URL (overrides GITHUB_API_URL)
            retry: 403 retry policy (optional)
            environ: Environment mapping (default: os.environ)

        Returns:
            Configured AuditConfig instance

        Raises:
            ConfigurationError: If the organization or token is missing
        """
        env = os.environ if environ is None else environ

        org = org or env.get(ORG_ENV_VAR)
        token = token or next((env[name] for name in TOKEN_ENV_VARS if env.get(name)), None)
        base_url = base_url or env.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL

        if not org:
            raise ConfigurationError(
                f"Organization name missing: pass --org or set {ORG_ENV_VAR}"
            )
        if not token:
            raise ConfigurationError(
                "GitHub token missing: pass --token or set GITHUB_TOKEN"
            )

        return cls(
            org=org,
            token=token,
            base_url=base_url,
            retry=retry or RetryConfig(),
        )
