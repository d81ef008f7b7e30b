"""Repository input models."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class RepositorySpec:
    """One repository requested on the command line."""

    path: str
    requested_branch: Optional[str] = None  # None = no ":branch" suffix given

    @property
    def name(self) -> str:
        """Directory name of the repository, used as the worktree name."""
        return Path(self.path).expanduser().resolve().name

    def __str__(self) -> str:
        if self.requested_branch:
            return f"{self.path}:{self.requested_branch}"
        return self.path


@dataclass(frozen=True)
class ResolvedAssignment:
    """A repository paired with the branch that will be checked out for it."""

    repo: RepositorySpec
    branch: str
