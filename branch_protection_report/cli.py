"""Command line entry point for the branch protection report."""

import argparse
import logging
import sys
from collections.abc import Mapping, Sequence
from datetime import datetime
from pathlib import Path

import httpx

from branch_protection_report.audit import BranchProtectionAudit
from branch_protection_report.client import GitHubClient
from branch_protection_report.config import AuditConfig
from branch_protection_report.exceptions import (
    AuthenticationError,
    ConfigurationError,
    OrgNotFoundError,
    ReportError,
)
from branch_protection_report.logging import configure_logging, get_logger
from branch_protection_report.report import ReportWriter, report_filename
from branch_protection_report.transport import RetryConfig

_logger = get_logger()

USAGE_HINT = (
    "Usage: gh-branch-protection-report --token <githubToken> --orgName <orgName>\n"
    "Or set the GITHUB_TOKEN and ORG_NAME environment variables."
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gh-branch-protection-report",
        description=(
            "Report branch protection settings and non-owner admins "
            "for every repository of a GitHub organization."
        ),
    )
    parser.add_argument("-o", "--org", "--orgName", dest="org", help="Name of the organization")
    parser.add_argument("-t", "--token", help="GitHub token")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory the CSV report is written to (default: current directory)",
    )
    parser.add_argument("--base-url", help="API base URL, for GitHub Enterprise Server")
    parser.add_argument(
        "--max-forbidden-retries",
        type=int,
        default=None,
        help="Give up after this many 403 retries (default: retry until the quota recovers)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every HTTP request")
    return parser


def main(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
    now: datetime | None = None,
) -> int:
    """
    Run the audit and write the report.

    Args:
        argv: Command line arguments (default: sys.argv[1:])
        environ: Environment mapping (default: os.environ)
        transport: Optional httpx transport (used by tests)
        now: Run start time used in the report file name (default: now)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    configure_logging(
        level=logging.INFO,
        http_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        config = AuditConfig.resolve(
            org=args.org,
            token=args.token,
            base_url=args.base_url,
            retry=RetryConfig(max_forbidden_retries=args.max_forbidden_retries),
            environ=environ,
        )
    except ConfigurationError as e:
        _logger.error("Error: %s", e.message)
        print(USAGE_HINT, file=sys.stderr)
        return 1

    path = args.output_dir / report_filename(config.org, now or datetime.now())

    try:
        with GitHubClient(config, transport=transport) as client:
            audit = BranchProtectionAudit(client)
            rows = audit.write_report(lambda: ReportWriter(path))
    except AuthenticationError:
        _logger.error("Error: Invalid GitHub token.")
        return 1
    except OrgNotFoundError as e:
        _logger.error("Error: %s", e.message)
        return 1
    except ReportError as e:
        _logger.error("Error: An unknown error occurred: %s", e)
        return 1
    except OSError as e:
        _logger.error("Error: Cannot write report: %s", e)
        return 1

    _logger.info("Wrote %d rows to %s", rows, path)
    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
