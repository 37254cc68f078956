"""
Pytest fixtures for testing code built on the branch protection report.

Example:
    ```python
    def test_my_feature(fake_github, github_client):
        fake_github.add_repository("api")
        assert [r.name for r in github_client.repos.list("acme")] == ["api"]
    ```
"""

from collections.abc import Generator

import pytest

from branch_protection_report.client import GitHubClient
from branch_protection_report.config import AuditConfig
from branch_protection_report.testing.mock import FakeGitHub
from branch_protection_report.transport import RetryConfig


@pytest.fixture
def fake_github() -> Generator[FakeGitHub, None, None]:
    """Provide a FakeGitHub for the "acme" organization."""
    fake = FakeGitHub(org="acme")
    yield fake
    fake.reset()


@pytest.fixture
def audit_config(fake_github: FakeGitHub) -> AuditConfig:
    """Provide a configuration accepted by ``fake_github``."""
    return AuditConfig(
        org=fake_github.org,
        token=fake_github.token,
        retry=RetryConfig(forbidden_backoff=0.0),
    )


@pytest.fixture
def github_client(
    fake_github: FakeGitHub, audit_config: AuditConfig
) -> Generator[GitHubClient, None, None]:
    """Provide a GitHubClient wired to ``fake_github``."""
    client = GitHubClient(audit_config, transport=fake_github.transport)
    yield client
    client.close()
