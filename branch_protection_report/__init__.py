"""gh-branch-protection-report - Audit branch protection across a GitHub organization."""

from branch_protection_report.audit import BranchProtectionAudit
from branch_protection_report.client import GitHubClient
from branch_protection_report.config import AuditConfig
from branch_protection_report.exceptions import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    NetworkError,
    NotFoundError,
    OrgNotFoundError,
    RateLimitedError,
    ReportError,
    ServerError,
)
from branch_protection_report.logging import configure_logging, get_logger
from branch_protection_report.normalize import strip_urls
from branch_protection_report.pagination import Paginator, parse_link_header
from branch_protection_report.report import REPORT_HEADER, ReportWriter, report_filename
from branch_protection_report.transport import HTTPTransport, RetryConfig
from branch_protection_report.types import (
    Collaborator,
    Organization,
    ProtectionRecord,
    ReportRow,
    Repository,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main entry points
    "GitHubClient",
    "BranchProtectionAudit",
    "AuditConfig",
    # Exceptions
    "ReportError",
    "ConfigurationError",
    "ApiError",
    "AuthenticationError",
    "NotFoundError",
    "OrgNotFoundError",
    "RateLimitedError",
    "ServerError",
    "NetworkError",
    # Types
    "Organization",
    "Repository",
    "Collaborator",
    "ProtectionRecord",
    "ReportRow",
    # Transport
    "HTTPTransport",
    "RetryConfig",
    # Pagination
    "Paginator",
    "parse_link_header",
    # Normalization
    "strip_urls",
    # Report
    "REPORT_HEADER",
    "ReportWriter",
    "report_filename",
    # Logging
    "configure_logging",
    "get_logger",
]
