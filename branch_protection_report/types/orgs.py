"""Organization-related data models."""

from dataclasses import dataclass

# Lower-cased logins of the organization's owners.
OwnerSet = frozenset[str]


@dataclass(frozen=True)
class Organization:
    """Organization information returned by the pre-flight lookup."""

    login: str
    id: int | None = None
    name: str | None = None
