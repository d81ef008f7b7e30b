"""Configuration handling for spawn-workspace"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Tuple

from spawn_workspace.constants import (
    DEFAULT_OUTPUT_DIR,
    REPO_BRANCH_SEPARATOR,
    WORKSPACE_NAME_PREFIX,
    WORKSPACE_NAME_TIME_FORMAT,
)
from spawn_workspace.exceptions import ConfigurationError
from spawn_workspace.models.repository import RepositorySpec


def parse_repository_spec(value: str) -> RepositorySpec:
    """Parse a ``PATH`` or ``PATH:BRANCH`` argument.

    The split happens at the last separator, since git refuses ':' in branch
    names. A trailing separator with nothing after it means no branch.
    """
    if not value or not value.strip():
        raise ConfigurationError("Repository path cannot be empty")

    path, sep, branch = value.rpartition(REPO_BRANCH_SEPARATOR)
    if not sep:
        path, branch = value, ""

    path = path.strip()
    branch = branch.strip()
    if not path:
        raise ConfigurationError(f"Malformed repository spec '{value}': missing path")

    return RepositorySpec(path=path, requested_branch=branch or None)


def default_workspace_name(now: Optional[datetime] = None) -> str:
    """Timestamp-based workspace name, e.g. workspace-20240101-120000."""
    now = now or datetime.now()
    return f"{WORKSPACE_NAME_PREFIX}-{now.strftime(WORKSPACE_NAME_TIME_FORMAT)}"


@dataclass
class Config:
    """Configuration for spawn-workspace with validation."""

    # Inputs
    repositories: Tuple[RepositorySpec, ...] = field(default_factory=tuple)
    global_branch: Optional[str] = None

    # Output location
    output_dir: str = DEFAULT_OUTPUT_DIR
    workspace_name: Optional[str] = None  # None = timestamp-based name

    # Execution modes
    assume_yes: bool = False  # Skip the "workspace exists" confirmation
    force: bool = False  # Pass --force to git worktree add
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_repositories()
        self._validate_global_branch()
        self._validate_output_dir()
        self._validate_workspace_name()

    def _validate_repositories(self):
        """Validate repositories and normalize them to a tuple."""
        if isinstance(self.repositories, str):
            raise ConfigurationError(
                f"repositories must be a list of specs, got a single string '{self.repositories}'"
            )
        repos = []
        for repo in self.repositories:
            if isinstance(repo, str):
                repo = parse_repository_spec(repo)
            if not isinstance(repo, RepositorySpec):
                raise ConfigurationError(f"Invalid repository spec: {repo!r}")
            repos.append(repo)
        self.repositories = tuple(repos)

    def _validate_global_branch(self):
        """Treat a blank global branch as unset."""
        if self.global_branch is not None:
            self.global_branch = self.global_branch.strip() or None

    def _validate_output_dir(self):
        """Validate output_dir is not empty."""
        if not self.output_dir or not str(self.output_dir).strip():
            raise ConfigurationError("output_dir cannot be empty")

    def _validate_workspace_name(self):
        """Validate workspace_name is a single path segment, generating one if unset."""
        if self.workspace_name is None or not self.workspace_name.strip():
            self.workspace_name = default_workspace_name()
            return
        self.workspace_name = self.workspace_name.strip()
        if "/" in self.workspace_name or self.workspace_name in (".", ".."):
            raise ConfigurationError(
                f"workspace_name must be a plain directory name, got '{self.workspace_name}'"
            )

    @property
    def workspace_dir(self) -> Path:
        """Directory that holds the worktrees and the descriptor."""
        return Path(self.output_dir).expanduser() / self.workspace_name

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "repositories": [str(r) for r in self.repositories],
            "global_branch": self.global_branch,
            "output_dir": self.output_dir,
            "workspace_name": self.workspace_name,
            "assume_yes": self.assume_yes,
            "force": self.force,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "repositories",
            "global_branch",
            "output_dir",
            "workspace_name",
            "assume_yes",
            "force",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)

    @classmethod
    def from_specs(cls, specs: Iterable[str], **kwargs) -> "Config":
        """Create Config from raw ``PATH[:BRANCH]`` strings."""
        return cls(repositories=tuple(parse_repository_spec(s) for s in specs), **kwargs)
