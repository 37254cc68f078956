"""
Pytest plugin exposing the branch protection report fixtures.

To use these fixtures in your tests, add this to your root conftest.py:

    pytest_plugins = ["branch_protection_report.testing.conftest"]

Or import the fixtures directly:

    from branch_protection_report.testing.fixtures import fake_github, github_client
"""

from branch_protection_report.testing.fixtures import (
    audit_config,
    fake_github,
    github_client,
)

__all__ = [
    "fake_github",
    "audit_config",
    "github_client",
]
