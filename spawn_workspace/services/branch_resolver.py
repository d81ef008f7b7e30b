"""Branch resolution service"""
from typing import Iterator, Optional, Sequence

from spawn_workspace.logging_config import get_logger
from spawn_workspace.models.repository import RepositorySpec, ResolvedAssignment
from spawn_workspace.services.git import GitOperations

logger = get_logger(__name__)


class BranchResolver:
    """Decides which branch each repository's worktree checks out.

    Precedence: the branch given as ``path:branch``, then the global branch,
    then the branch currently checked out in the repository.
    """

    def __init__(
        self,
        repositories: Sequence[RepositorySpec],
        global_branch: Optional[str],
        git_ops: GitOperations,
    ):
        self.repositories = repositories
        self.global_branch = global_branch
        self.git_ops = git_ops

    def resolve(self, index: int) -> str:
        """Resolve the branch for the repository at ``index``.

        Raises:
            BranchResolutionError: fell back to HEAD and HEAD is detached or unreadable
        """
        repo = self.repositories[index]

        if repo.requested_branch:
            logger.debug(f"{repo.path}: using requested branch '{repo.requested_branch}'")
            return repo.requested_branch

        if self.global_branch:
            logger.debug(f"{repo.path}: using global branch '{self.global_branch}'")
            return self.global_branch

        branch = self.git_ops.current_branch(repo.path)
        logger.debug(f"{repo.path}: using current branch '{branch}'")
        return branch

    def resolve_all(self) -> Iterator[ResolvedAssignment]:
        """Yield assignments lazily, in input order."""
        for index, repo in enumerate(self.repositories):
            yield ResolvedAssignment(repo=repo, branch=self.resolve(index))
