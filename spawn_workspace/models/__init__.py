"""Data models for spawn-workspace."""

from .repository import RepositorySpec, ResolvedAssignment
from .worktree import WorktreeRecord
from .workspace import FolderEntry, WorkspaceDescriptor

__all__ = [
    "RepositorySpec",
    "ResolvedAssignment",
    "WorktreeRecord",
    "FolderEntry",
    "WorkspaceDescriptor",
]
