"""Pytest fixtures for spawn-workspace tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock
import pytest
import git

from spawn_workspace.services.git import GitOperations


def init_repo(repo_path: Path) -> git.Repo:
    """Initialize a repository with one commit on 'main'."""
    repo_path.mkdir(parents=True)
    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text(f"# {repo_path.name}\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')
    return repo


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        # resolve() so paths compare equal on systems with symlinked /tmp
        yield Path(tmpdir).resolve()


@pytest.fixture
def make_repo(temp_dir):
    """Factory for real Git repositories under temp_dir."""
    repos = []

    def _make(relative_path: str = "repos/app") -> git.Repo:
        repo = init_repo(temp_dir / relative_path)
        repos.append(repo)
        return repo

    yield _make

    for repo in repos:
        repo.close()


@pytest.fixture
def git_repo(make_repo):
    """Create a real Git repository with a 'feature/existing' branch."""
    repo = make_repo("repos/app")
    repo.create_head("feature/existing")
    return repo


@pytest.fixture
def workspace_dir(temp_dir):
    """Workspace directory path (not created)."""
    return temp_dir / "workspaces" / "ws"


@pytest.fixture
def git_ops():
    return GitOperations()


@pytest.fixture
def mock_git_ops():
    """Create a mock GitOperations."""
    ops = Mock(spec=GitOperations)
    ops.is_valid_repository = Mock(return_value=True)
    ops.current_branch = Mock(return_value="main")
    ops.branch_exists = Mock(return_value=True)
    ops.add_worktree = Mock(return_value=None)
    ops.add_worktree_with_new_branch = Mock(return_value=None)
    return ops
