"""Repository-related data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Repository:
    """Repository information from the organization listing."""

    name: str
    default_branch: str
    full_name: str | None = None
    archived: bool = False


@dataclass(frozen=True)
class Collaborator:
    """Repository collaborator information."""

    login: str
    admin: bool  # permissions.admin as reported by the API
