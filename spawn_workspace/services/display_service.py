"""Display service for the final workspace summary"""
from pathlib import Path
from typing import List, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from spawn_workspace.constants import USEFUL_COMMANDS
from spawn_workspace.exceptions import BranchResolutionError
from spawn_workspace.logging_config import get_logger
from spawn_workspace.models.worktree import WorktreeRecord
from spawn_workspace.services.git import GitOperations

console = Console()
logger = get_logger(__name__)


class DisplayService:
    def __init__(self, git_ops: GitOperations):
        self.git_ops = git_ops

    def branch_of(self, worktree_path: str) -> str:
        """Branch checked out in a worktree, or 'unknown'."""
        try:
            return self.git_ops.current_branch(worktree_path)
        except BranchResolutionError as e:
            logger.debug(f"Could not read branch of {worktree_path}: {e}")
            return "unknown"

    def display_summary(
            self,
            workspace_dir: Path,
            descriptor_path: Path,
            records: Sequence[WorktreeRecord]
        ) -> None:
        """Print where the workspace lives, how to open it and what it contains."""
        console.print()
        console.print("[green]========================================[/green]")
        console.print("[green]Workspace Created Successfully[/green]")
        console.print("[green]========================================[/green]")
        console.print()
        console.print(f"Workspace Directory: [blue]{escape(str(workspace_dir))}[/blue]")
        console.print(f"Workspace File: [blue]{escape(str(descriptor_path))}[/blue]")
        console.print()
        console.print("To open this workspace in VS Code:")
        console.print(f"  [blue]code \"{escape(str(descriptor_path))}\"[/blue]")
        console.print()

        table = Table(title="Repositories")
        table.add_column("Name")
        table.add_column("Branch", style="yellow")
        table.add_column("Status")
        table.add_column("Source")

        for record in self._unique_by_path(records):
            status = "created" if record.created else "existing"
            table.add_row(
                Path(record.worktree_path).name,
                self.branch_of(record.worktree_path),
                status,
                record.source_repo_path,
            )

        console.print(table)
        console.print(USEFUL_COMMANDS.format(workspace_dir=workspace_dir), markup=False)

    @staticmethod
    def _unique_by_path(records: Sequence[WorktreeRecord]) -> List[WorktreeRecord]:
        """First record for each worktree path, keeping order."""
        seen = set()
        unique = []
        for record in records:
            if record.worktree_path in seen:
                continue
            seen.add(record.worktree_path)
            unique.append(record)
        return unique
