"""Command-line argument parsing for spawn-workspace."""

import argparse
from spawn_workspace.__version__ import __version__
from spawn_workspace.constants import DEFAULT_OUTPUT_DIR

EPILOG = """\
examples:
  # Same branch for all repos
  spawn-workspace -r ~/my-app -r ~/my-lib -r ~/my-config -b feature/new-thing

  # A different branch per repo
  spawn-workspace -r ~/repo1:feature/one -r ~/repo2:feature/two -r ~/repo3:hotfix/bug

  # Output directory and workspace name
  spawn-workspace -r ~/repo1 -r ~/repo2 -b dev -o ~/workspaces -n dev-env
"""


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="spawn-workspace",
        description="Create git worktrees for multiple repositories and a VS Code multi-root workspace file",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-r",
        "--repo",
        dest="repos",
        action="append",
        required=True,
        metavar="PATH[:BRANCH]",
        help="Path to a repository, optionally with a branch for it (can be used multiple times)",
    )
    parser.add_argument(
        "-b", "--branch", help="Branch name to use for all repos (default: current branch)"
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT_DIR,
        metavar="DIR",
        help=f"Output directory for worktrees (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "-n",
        "--name",
        metavar="WORKSPACE_NAME",
        help="Name for the workspace (default: auto-generated timestamp)",
    )
    parser.add_argument(
        "-y", "--yes", action="store_true", help="Reuse an existing workspace directory without asking"
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Pass --force to git worktree add (e.g. to check out a branch already checked out elsewhere)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"spawn-workspace {__version__}")
    return parser


def parse_args(argv=None):
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
