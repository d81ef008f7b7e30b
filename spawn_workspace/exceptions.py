"""Custom exceptions for spawn-workspace"""

from typing import Optional


class SpawnWorkspaceError(Exception):
    """Base exception for all spawn-workspace errors."""
    pass


class ConfigurationError(SpawnWorkspaceError):
    """Exception raised for missing or malformed command-line input."""
    pass


class InvalidRepositoryError(SpawnWorkspaceError):
    """Exception raised when a path does not hold a git repository."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Invalid git repository: {path}")


class GitOperationError(SpawnWorkspaceError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class BranchResolutionError(GitOperationError):
    """Exception raised when the checked-out branch of a repository cannot be determined."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__("resolve_branch", message=f"{path}: {message}" if message else path)


class DetachedHeadError(BranchResolutionError):
    """Exception raised when repository is in detached HEAD state."""

    def __init__(self, path: str):
        super().__init__(path, "Repository is in detached HEAD state")


class WorktreeCreationError(GitOperationError):
    """Exception raised when 'git worktree add' fails."""

    def __init__(self, path: str, branch: str, message: Optional[str] = None):
        self.path = path
        super().__init__("worktree_add", branch, message)
