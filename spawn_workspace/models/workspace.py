"""Editor workspace descriptor models."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List

from spawn_workspace.constants import WORKSPACE_SETTINGS
from spawn_workspace.models.worktree import WorktreeRecord


@dataclass(frozen=True)
class FolderEntry:
    """A single folder of a multi-root workspace."""

    path: str
    name: str

    @classmethod
    def from_path(cls, path: str) -> "FolderEntry":
        return cls(path=path, name=Path(path).name)


@dataclass
class WorkspaceDescriptor:
    """Multi-root workspace: ordered folders plus a fixed settings block."""

    folders: List[FolderEntry] = field(default_factory=list)
    settings: Dict[str, Any] = field(default_factory=lambda: dict(WORKSPACE_SETTINGS))

    @classmethod
    def from_records(cls, records: Iterable[WorktreeRecord]) -> "WorkspaceDescriptor":
        """Build a descriptor with one folder per record, in record order."""
        return cls(folders=[FolderEntry.from_path(r.worktree_path) for r in records])

    def to_dict(self) -> dict:
        return {
            "folders": [{"path": f.path, "name": f.name} for f in self.folders],
            "settings": dict(self.settings),
        }
