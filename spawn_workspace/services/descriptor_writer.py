"""Workspace descriptor writing service"""
import json
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from spawn_workspace.constants import WORKSPACE_FILE_NAME
from spawn_workspace.logging_config import get_logger
from spawn_workspace.models.workspace import WorkspaceDescriptor
from spawn_workspace.models.worktree import WorktreeRecord

console = Console()
logger = get_logger(__name__)


class DescriptorWriter:
    """Writes the multi-root ``.code-workspace`` file for a set of worktrees."""

    def __init__(self, workspace_dir: Path):
        self.workspace_dir = Path(workspace_dir).expanduser().resolve()

    @property
    def descriptor_path(self) -> Path:
        return self.workspace_dir / WORKSPACE_FILE_NAME

    def write(self, records: Sequence[WorktreeRecord]) -> Path:
        """Serialize one folder per record, in order, and return the file path.

        Skipped records are included: their directories already exist.
        """
        descriptor = WorkspaceDescriptor.from_records(records)
        descriptor_path = self.descriptor_path

        console.print(f"[blue]ℹ[/blue] Generating VS Code workspace file: {escape(str(descriptor_path))}")
        self.workspace_dir.mkdir(parents=True, exist_ok=True)

        # Atomic write: write to temp file, then rename
        temp_file = descriptor_path.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(descriptor.to_dict(), f, indent=2)
                f.write('\n')
                f.flush()

            temp_file.replace(descriptor_path)
        finally:
            # Clean up temp file if it still exists
            if temp_file.exists():
                temp_file.unlink()

        logger.debug(f"Wrote {len(descriptor.folders)} folders to {descriptor_path}")
        console.print(f"[green]✓[/green] Workspace file created: {escape(str(descriptor_path))}")
        return descriptor_path
