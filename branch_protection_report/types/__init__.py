"""Branch protection report type definitions.

This module exports all data model types used by the package.
"""

from branch_protection_report.types.orgs import Organization, OwnerSet
from branch_protection_report.types.protection import ProtectionRecord
from branch_protection_report.types.report import ReportRow
from branch_protection_report.types.repos import Collaborator, Repository

__all__ = [
    # Organization types
    "Organization",
    "OwnerSet",
    # Repository types
    "Repository",
    "Collaborator",
    # Protection types
    "ProtectionRecord",
    # Report types
    "ReportRow",
]
