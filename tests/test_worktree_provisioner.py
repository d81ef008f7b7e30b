"""Tests for WorktreeProvisioner"""
import logging
from pathlib import Path

import git
import pytest

from spawn_workspace.exceptions import WorktreeCreationError
from spawn_workspace.models.repository import RepositorySpec, ResolvedAssignment
from spawn_workspace.services.worktree_provisioner import WorktreeProvisioner


def assign(repo, branch, requested=None):
    return ResolvedAssignment(RepositorySpec(repo.working_dir, requested), branch)


class TestTargetPath:
    """Test deterministic target paths."""

    def test_target_is_workspace_dir_plus_basename(self, workspace_dir, mock_git_ops):
        provisioner = WorktreeProvisioner(workspace_dir, mock_git_ops)
        assert provisioner.target_path_for(RepositorySpec("/src/app")) == workspace_dir / "app"

    def test_trailing_slash_is_ignored(self, workspace_dir, mock_git_ops):
        provisioner = WorktreeProvisioner(workspace_dir, mock_git_ops)
        assert provisioner.target_path_for(RepositorySpec("/src/app/")) == workspace_dir / "app"

    def test_target_is_absolute(self, temp_dir, mock_git_ops, monkeypatch):
        monkeypatch.chdir(temp_dir)
        provisioner = WorktreeProvisioner(Path("workspaces/ws"), mock_git_ops)
        target = provisioner.target_path_for(RepositorySpec("/src/app"))
        assert target.is_absolute()
        assert target == temp_dir / "workspaces" / "ws" / "app"


class TestProvision:
    """Test provisioning a single repository."""

    def test_existing_branch(self, git_repo, git_ops, workspace_dir):
        provisioner = WorktreeProvisioner(workspace_dir, git_ops)
        workspace_dir.mkdir(parents=True)

        record = provisioner.provision(assign(git_repo, "feature/existing"))

        assert record.created is True
        assert record.branch == "feature/existing"
        assert record.worktree_path == str(workspace_dir / "app")
        assert record.source_repo_path == git_repo.working_dir
        assert git.Repo(record.worktree_path).active_branch.name == "feature/existing"

    def test_new_branch_created_from_head(self, git_repo, git_ops, workspace_dir, caplog):
        provisioner = WorktreeProvisioner(workspace_dir, git_ops)
        workspace_dir.mkdir(parents=True)
        head_sha = git_repo.head.commit.hexsha

        with caplog.at_level(logging.WARNING):
            record = provisioner.provision(assign(git_repo, "feature/brand-new"))

        assert record.created is True
        assert git_ops.branch_exists(git_repo.working_dir, "feature/brand-new") is True
        worktree = git.Repo(record.worktree_path)
        assert worktree.active_branch.name == "feature/brand-new"
        assert worktree.head.commit.hexsha == head_sha
        assert "doesn't exist in app, creating from HEAD" in caplog.text

    def test_existing_directory_is_skipped(self, workspace_dir, mock_git_ops, caplog):
        (workspace_dir / "app").mkdir(parents=True)
        provisioner = WorktreeProvisioner(workspace_dir, mock_git_ops)

        with caplog.at_level(logging.WARNING):
            record = provisioner.provision(
                ResolvedAssignment(RepositorySpec("/src/app"), "dev")
            )

        assert record.created is False
        assert record.worktree_path == str(workspace_dir / "app")
        assert "already exists" in caplog.text
        mock_git_ops.branch_exists.assert_not_called()
        mock_git_ops.add_worktree.assert_not_called()
        mock_git_ops.add_worktree_with_new_branch.assert_not_called()

    def test_existing_file_is_not_skipped(self, workspace_dir, mock_git_ops):
        workspace_dir.mkdir(parents=True)
        (workspace_dir / "app").write_text("not a directory")
        provisioner = WorktreeProvisioner(workspace_dir, mock_git_ops)

        record = provisioner.provision(ResolvedAssignment(RepositorySpec("/src/app"), "dev"))

        assert record.created is True
        mock_git_ops.add_worktree.assert_called_once()

    def test_force_is_passed_through(self, workspace_dir, mock_git_ops):
        provisioner = WorktreeProvisioner(workspace_dir, mock_git_ops, force=True)
        provisioner.provision(ResolvedAssignment(RepositorySpec("/src/app"), "dev"))

        mock_git_ops.add_worktree.assert_called_once_with(
            "/src/app", workspace_dir / "app", "dev", force=True
        )

    def test_creation_failure_propagates(self, git_repo, git_ops, workspace_dir):
        provisioner = WorktreeProvisioner(workspace_dir, git_ops)
        workspace_dir.mkdir(parents=True)

        # main is checked out in the source repository
        with pytest.raises(WorktreeCreationError):
            provisioner.provision(assign(git_repo, "main"))


class TestProvisionAll:
    """Test provisioning several repositories."""

    def test_creates_workspace_dir_and_keeps_order(self, make_repo, git_ops, workspace_dir):
        repos = [make_repo(f"repos/{name}") for name in ("c-app", "a-lib", "b-cfg")]
        provisioner = WorktreeProvisioner(workspace_dir, git_ops)

        records = provisioner.provision_all(assign(r, "feature/x") for r in repos)

        assert workspace_dir.is_dir()
        assert [Path(r.worktree_path).name for r in records] == ["c-app", "a-lib", "b-cfg"]
        assert all(r.created for r in records)

    def test_second_run_skips_everything(self, make_repo, git_ops, workspace_dir, caplog):
        repos = [make_repo("repos/app"), make_repo("repos/lib")]
        provisioner = WorktreeProvisioner(workspace_dir, git_ops)
        provisioner.provision_all([assign(r, "feature/x") for r in repos])

        with caplog.at_level(logging.WARNING):
            records = provisioner.provision_all([assign(r, "feature/x") for r in repos])

        assert [r.created for r in records] == [False, False]
        assert caplog.text.count("already exists") == 2

    def test_basename_collision_skips_second(self, make_repo, git_ops, workspace_dir, caplog):
        first = make_repo("a/proj")
        second = make_repo("b/proj")
        provisioner = WorktreeProvisioner(workspace_dir, git_ops)

        with caplog.at_level(logging.WARNING):
            records = provisioner.provision_all(
                [assign(first, "feature/x"), assign(second, "feature/x")]
            )

        assert [r.created for r in records] == [True, False]
        assert records[0].worktree_path == records[1].worktree_path
        assert "already exists" in caplog.text
        # Only the first repository got a worktree
        assert not git_ops.branch_exists(second.working_dir, "feature/x")

    def test_failure_leaves_earlier_worktrees(self, make_repo, git_ops, workspace_dir):
        ok = make_repo("repos/ok")
        bad = make_repo("repos/bad")
        provisioner = WorktreeProvisioner(workspace_dir, git_ops)

        with pytest.raises(WorktreeCreationError):
            provisioner.provision_all([assign(ok, "feature/x"), assign(bad, "main")])

        assert (workspace_dir / "ok" / "README.md").exists()
