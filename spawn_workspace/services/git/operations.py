"""Git operations service"""

import git
from pathlib import Path
from typing import Union

from spawn_workspace.exceptions import (
    BranchResolutionError,
    DetachedHeadError,
    WorktreeCreationError,
)
from spawn_workspace.logging_config import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def _format_command_error(e: git.exc.GitCommandError) -> str:
    """Extract a readable message from a GitCommandError."""
    stderr = (e.stderr if hasattr(e, "stderr") and e.stderr else str(e)).strip()
    status = e.status if hasattr(e, "status") else "unknown"
    if stderr:
        return f"exit {status}: {stderr}"
    return f"exit code {status}"


class GitOperations:
    """Git collaborator used by the workspace services.

    Every call opens a fresh ``git.Repo`` for the given path. GitPython repos
    are lightweight, they only read the existing repository.
    """

    def _get_repo(self, repo_path: PathLike) -> git.Repo:
        return git.Repo(str(repo_path))

    def is_valid_repository(self, repo_path: PathLike) -> bool:
        """Check whether the path is the top level of a git repository."""
        try:
            repo = self._get_repo(repo_path)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            logger.debug(f"Not a git repository: {repo_path} ({e.__class__.__name__})")
            return False
        repo.close()
        return True

    def current_branch(self, repo_path: PathLike) -> str:
        """Get the name of the branch checked out at HEAD.

        Raises:
            DetachedHeadError: HEAD does not point at a branch
            BranchResolutionError: HEAD cannot be read
        """
        try:
            repo = self._get_repo(repo_path)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise BranchResolutionError(str(repo_path), f"cannot open repository ({e})") from e

        try:
            return repo.active_branch.name
        except TypeError as e:
            # GitPython raises TypeError for a detached HEAD
            raise DetachedHeadError(str(repo_path)) from e
        except (ValueError, git.exc.GitCommandError) as e:
            raise BranchResolutionError(str(repo_path), f"cannot read HEAD ({e})") from e
        finally:
            repo.close()

    def branch_exists(self, repo_path: PathLike, name: str) -> bool:
        """Check whether a local branch with this name exists."""
        repo = self._get_repo(repo_path)
        try:
            exists = any(head.name == name for head in repo.heads)
            logger.debug(f"Branch '{name}' {'exists' if exists else 'not found'} in {repo_path}")
            return exists
        finally:
            repo.close()

    def add_worktree(
        self, repo_path: PathLike, target_path: PathLike, branch: str, force: bool = False
    ) -> None:
        """Create a linked worktree at target_path checked out to an existing branch."""
        args = ["add"]
        if force:
            args.append("--force")
        args.extend([str(target_path), branch])
        self._run_worktree_add(repo_path, target_path, branch, args)

    def add_worktree_with_new_branch(
        self, repo_path: PathLike, target_path: PathLike, new_branch: str, force: bool = False
    ) -> None:
        """Create a linked worktree at target_path on a new branch started from HEAD."""
        args = ["add"]
        if force:
            args.append("--force")
        args.extend(["-b", new_branch, str(target_path)])
        self._run_worktree_add(repo_path, target_path, new_branch, args)

    def _run_worktree_add(self, repo_path: PathLike, target_path: PathLike, branch: str, args: list) -> None:
        repo = self._get_repo(repo_path)
        try:
            logger.debug(f"Running git worktree {' '.join(args)} in {repo_path}")
            repo.git.worktree(*args)
        except git.exc.GitCommandError as e:
            error_msg = _format_command_error(e)
            logger.error(f"Failed to create worktree at {target_path}: {error_msg}")
            raise WorktreeCreationError(str(target_path), branch, error_msg) from e
        finally:
            repo.close()
