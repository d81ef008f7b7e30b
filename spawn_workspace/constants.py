"""Shared constants for spawn-workspace."""

DEFAULT_OUTPUT_DIR = "./workspaces"
WORKSPACE_NAME_PREFIX = "workspace"
WORKSPACE_NAME_TIME_FORMAT = "%Y%m%d-%H%M%S"
WORKSPACE_FILE_NAME = "workspace.code-workspace"

# Fixed settings block written into every descriptor
WORKSPACE_SETTINGS = {
    "editor.formatOnSave": True,
}

# Separator between repository path and branch in -r arguments
REPO_BRANCH_SEPARATOR = ":"

USEFUL_COMMANDS = """
Useful commands:
  List worktrees: git worktree list
  Remove a worktree: git worktree remove <path>
  Switch branch in worktree: cd {workspace_dir}/<repo> && git checkout <branch>
"""
