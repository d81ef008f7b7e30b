"""Entry point for the spawn-workspace command"""

import sys
from rich.console import Console
from rich.markup import escape

from spawn_workspace.cli.args import parse_args
from spawn_workspace.config import Config
from spawn_workspace.core import WorkspaceSpawner
from spawn_workspace.exceptions import SpawnWorkspaceError
from spawn_workspace.logging_config import setup_logging

console = Console()


def main(argv=None):
    """Main entry point for the application."""
    parsed_args = parse_args(argv)

    # Setup logging before anything touches a repository
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    try:
        config = Config.from_specs(
            parsed_args.repos,
            global_branch=parsed_args.branch,
            output_dir=parsed_args.output,
            workspace_name=parsed_args.name,
            assume_yes=parsed_args.yes,
            force=parsed_args.force,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {escape(str(value))}")

        console.print("[blue]ℹ[/blue] Spawn Multi-Root Workspace")
        console.print()

        spawner = WorkspaceSpawner(config)
        spawner.run(show_summary=True)
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except SpawnWorkspaceError as e:
        console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        if parsed_args.debug:
            console.print_exception()
        return 1
    except Exception as e:
        console.print(f"[red]✗ Unexpected error: {escape(str(e))}[/red]")
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
