"""Testing utilities for the branch protection report.

Provides a fake GitHub API and payload factories for tests that should
exercise the real transport without touching the network.
"""

from branch_protection_report.testing.mock import FakeGitHub, MockCall, MockFailure
from branch_protection_report.testing.payloads import (
    create_collaborator_payload,
    create_member_payload,
    create_protection_payload,
    create_repository_payload,
)

__all__ = [
    # Fake API
    "FakeGitHub",
    "MockCall",
    "MockFailure",
    # Payload factories
    "create_repository_payload",
    "create_member_payload",
    "create_collaborator_payload",
    "create_protection_payload",
]
