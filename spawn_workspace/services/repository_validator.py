"""Repository validation service"""
from typing import Sequence

from spawn_workspace.exceptions import ConfigurationError, InvalidRepositoryError
from spawn_workspace.logging_config import get_logger
from spawn_workspace.models.repository import RepositorySpec
from spawn_workspace.services.git import GitOperations

logger = get_logger(__name__)


class RepositoryValidator:
    """Checks that every requested path is a git repository before any work starts."""

    def __init__(self, git_ops: GitOperations):
        self.git_ops = git_ops

    def validate(self, repositories: Sequence[RepositorySpec]) -> None:
        """Validate all repositories, failing on the first invalid one.

        Raises:
            ConfigurationError: no repositories were given
            InvalidRepositoryError: a path is not a git repository
        """
        if not repositories:
            raise ConfigurationError("At least one repository path must be specified with -r")

        for repo in repositories:
            if not self.git_ops.is_valid_repository(repo.path):
                raise InvalidRepositoryError(repo.path)
            logger.debug(f"Validated repository {repo.path}")

        logger.info(f"Validated {len(repositories)} repositories")
