"""Core functionality for spawn-workspace"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console
from rich.markup import escape

from spawn_workspace.config import Config
from spawn_workspace.exceptions import ConfigurationError
from spawn_workspace.logging_config import get_logger
from spawn_workspace.models.worktree import WorktreeRecord
from spawn_workspace.services.branch_resolver import BranchResolver
from spawn_workspace.services.descriptor_writer import DescriptorWriter
from spawn_workspace.services.display_service import DisplayService
from spawn_workspace.services.git import GitOperations
from spawn_workspace.services.repository_validator import RepositoryValidator
from spawn_workspace.services.worktree_provisioner import WorktreeProvisioner

console = Console()
logger = get_logger(__name__)


@dataclass
class SpawnResult:
    """What a run produced."""

    workspace_dir: Path
    descriptor_path: Optional[Path] = None
    records: List[WorktreeRecord] = field(default_factory=list)
    cancelled: bool = False


class WorkspaceSpawner:
    """Main class for provisioning a multi-repository workspace."""

    def __init__(self, config: Union[Config, dict], git_ops: Optional[GitOperations] = None):
        """Initialize WorkspaceSpawner.

        Args:
            config: Configuration dict or Config object
            git_ops: Git collaborator, defaults to GitOperations()
        """
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config

        self.git_ops = git_ops or GitOperations()
        self.workspace_dir = self.config.workspace_dir.resolve()

        self.validator = RepositoryValidator(self.git_ops)
        self.resolver = BranchResolver(
            self.config.repositories, self.config.global_branch, self.git_ops
        )
        self.provisioner = WorktreeProvisioner(
            self.workspace_dir, self.git_ops, force=self.config.force
        )
        self.writer = DescriptorWriter(self.workspace_dir)
        self.display_service = DisplayService(self.git_ops)

    def run(self, show_summary: bool = False) -> SpawnResult:
        """Validate, provision every worktree and write the workspace descriptor.

        Any fatal error propagates. Worktrees created before it are left in place.
        """
        self.validator.validate(self.config.repositories)

        if self.workspace_dir.is_dir() and not self._confirm_update():
            console.print("[blue]ℹ[/blue] Operation cancelled.")
            return SpawnResult(workspace_dir=self.workspace_dir, cancelled=True)

        records = self.provisioner.provision_all(self.resolver.resolve_all())
        descriptor_path = self.writer.write(records)

        if show_summary:
            self.display_service.display_summary(self.workspace_dir, descriptor_path, records)

        return SpawnResult(
            workspace_dir=self.workspace_dir,
            descriptor_path=descriptor_path,
            records=records,
        )

    def _confirm_update(self) -> bool:
        """Ask whether to reuse an existing workspace directory."""
        logger.warning(f"Workspace directory already exists: {self.workspace_dir}")
        if self.config.assume_yes:
            return True
        try:
            response = console.input(
                f"Continue and update worktrees in [blue]{escape(str(self.workspace_dir))}[/blue]? \\[y/N] "
            )
        except EOFError as e:
            raise ConfigurationError(
                f"Workspace directory already exists: {self.workspace_dir} "
                "(no input to confirm; pass -y to reuse it)"
            ) from e
        return response.strip().lower() in ('y', 'yes')
