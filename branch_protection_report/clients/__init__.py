"""Branch protection report resource clients."""

from branch_protection_report.clients.collaborators import CollaboratorsClient
from branch_protection_report.clients.orgs import OrgsClient
from branch_protection_report.clients.protection import ProtectionClient
from branch_protection_report.clients.repos import ReposClient

__all__ = [
    "OrgsClient",
    "ReposClient",
    "ProtectionClient",
    "CollaboratorsClient",
]
