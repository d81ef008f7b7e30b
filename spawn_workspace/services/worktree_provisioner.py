"""Worktree provisioning service"""
from pathlib import Path
from typing import Iterable, List

from rich.console import Console
from rich.markup import escape

from spawn_workspace.logging_config import get_logger
from spawn_workspace.models.repository import RepositorySpec, ResolvedAssignment
from spawn_workspace.models.worktree import WorktreeRecord
from spawn_workspace.services.git import GitOperations

console = Console()
logger = get_logger(__name__)


class WorktreeProvisioner:
    """Creates one linked worktree per repository under the workspace directory."""

    def __init__(self, workspace_dir: Path, git_ops: GitOperations, force: bool = False):
        """Initialize the provisioner.

        Args:
            workspace_dir: Directory that receives one worktree per repository
            git_ops: Git collaborator
            force: Pass --force to git worktree add
        """
        self.workspace_dir = Path(workspace_dir).expanduser().resolve()
        self.git_ops = git_ops
        self.force = force

    def target_path_for(self, repo: RepositorySpec) -> Path:
        """Worktree location for a repository: <workspace_dir>/<repo dir name>.

        Two repositories with the same directory name map to the same target.
        """
        return self.workspace_dir / repo.name

    def provision(self, assignment: ResolvedAssignment) -> WorktreeRecord:
        """Create the worktree for one repository, or skip it if the target exists.

        Raises:
            WorktreeCreationError: git worktree add failed
        """
        repo = assignment.repo
        branch = assignment.branch
        target = self.target_path_for(repo)

        console.print(f"[blue]ℹ[/blue] Creating worktree for {escape(repo.name)} on branch '{escape(branch)}'")

        if target.is_dir():
            logger.warning(f"Worktree already exists at {target}, skipping...")
            return WorktreeRecord(
                source_repo_path=repo.path,
                worktree_path=str(target),
                branch=branch,
                created=False,
            )

        if self.git_ops.branch_exists(repo.path, branch):
            self.git_ops.add_worktree(repo.path, target, branch, force=self.force)
        else:
            logger.warning(f"Branch '{branch}' doesn't exist in {repo.name}, creating from HEAD")
            self.git_ops.add_worktree_with_new_branch(repo.path, target, branch, force=self.force)

        console.print(f"[green]✓[/green] Created worktree at {escape(str(target))}")
        return WorktreeRecord(
            source_repo_path=repo.path,
            worktree_path=str(target),
            branch=branch,
            created=True,
        )

    def provision_all(self, assignments: Iterable[ResolvedAssignment]) -> List[WorktreeRecord]:
        """Provision every assignment in order.

        The first failure propagates; worktrees created before it stay on disk.
        """
        console.print(f"[blue]ℹ[/blue] Creating workspace directory: {escape(str(self.workspace_dir))}")
        self.workspace_dir.mkdir(parents=True, exist_ok=True)

        records = []
        for assignment in assignments:
            record = self.provision(assignment)
            logger.debug(f"  {record}")
            records.append(record)

        created = sum(1 for r in records if r.created)
        logger.info(f"Provisioned {len(records)} worktrees ({created} created, {len(records) - created} skipped)")
        return records
