"""Git-related services for spawn-workspace."""

from .operations import GitOperations

__all__ = [
    "GitOperations",
]
