"""Worktree data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WorktreeRecord:
    """Outcome of provisioning one repository."""

    source_repo_path: str
    worktree_path: str
    branch: str
    created: bool  # False = existing directory was found and left untouched

    def __str__(self) -> str:
        """String representation of worktree."""
        status = "created" if self.created else "skipped"
        return f"{self.branch} @ {self.worktree_path} [{status}]"
