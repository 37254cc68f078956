"""Branch protection data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProtectionRecord:
    """
    Normalized branch protection state of a repository's default branch.

    ``enabled`` is False when the branch has no protection rule; every
    optional field is then None. For protected branches a None field means
    the API omitted that setting, which is distinct from False.
    """

    branch_name: str
    enabled: bool
    required_pull_request_reviews: bool | None = None
    required_pull_request_reviews_count: int | None = None
    required_pull_request_reviews_code_owners: bool | None = None
    restrictions: bool | None = None
    required_signatures: bool | None = None
    enforce_admins: bool | None = None
    required_linear_history: bool | None = None
    allow_force_pushes: bool | None = None
    allow_deletions: bool | None = None
    block_creations: bool | None = None
    required_conversation_resolution: bool | None = None
    lock_branch: bool | None = None
    allow_fork_syncing: bool | None = None

    @classmethod
    def unprotected(cls, branch_name: str) -> "ProtectionRecord":
        """Record for a branch without any protection rule."""
        return cls(branch_name=branch_name, enabled=False)
