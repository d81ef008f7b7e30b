"""
spawn-workspace - Provision git worktrees for several repositories as one editor workspace
"""

from .__version__ import __version__
from .core import WorkspaceSpawner
from .cli.main import main

__all__ = ["WorkspaceSpawner", "main", "__version__"]
