"""Services that validate, resolve, provision and describe a workspace."""

from .git import GitOperations
from .repository_validator import RepositoryValidator
from .branch_resolver import BranchResolver
from .worktree_provisioner import WorktreeProvisioner
from .descriptor_writer import DescriptorWriter
from .display_service import DisplayService

__all__ = [
    "GitOperations",
    "RepositoryValidator",
    "BranchResolver",
    "WorktreeProvisioner",
    "DescriptorWriter",
    "DisplayService",
]
