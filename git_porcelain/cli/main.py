"""Command-line interface for git-porcelain"""

import os
import sys

from rich.console import Console
from rich.markup import escape

from git_porcelain.cli.args import parse_args
from git_porcelain.config import Config
from git_porcelain.core import GitClient, RepositoryState
from git_porcelain.exceptions import GitPorcelainError, OutputError
from git_porcelain.logging_config import get_logger, setup_logging
from git_porcelain.models.results import MergeResult
from git_porcelain.services.display_service import DisplayService

console = Console()
logger = get_logger(__name__)


def _status(client: GitClient, args, display: DisplayService) -> int:
    display.display_changes(client.get_changed_files(), client.repo_path)
    return 0


def _branches(client: GitClient, args, display: DisplayService) -> int:
    state = RepositoryState(client)
    result = state.refresh()
    display.display_branches(state)
    for step, error in result.errors.items():
        console.print(f"[yellow]Could not load {step.replace('_', ' ')}: {escape(str(error))}[/yellow]")
    return 0 if result.ok else 1


def _log(client: GitClient, args, display: DisplayService) -> int:
    display.display_history(client.get_commit_history(args.max_count, args.path))
    return 0


def _checkout(client: GitClient, args, display: DisplayService) -> int:
    client.get_current_branch_name()
    client.checkout_branch(args.branch)
    console.print(f"[green]On branch {args.branch}[/green]")
    return 0


def _merge(client: GitClient, args, display: DisplayService) -> int:
    if args.abort:
        client.merges.abort_merge()
        console.print("[yellow]Merge aborted[/yellow]")
        return 0

    result = client.merge(args.branch, squash=args.squash)
    if result == MergeResult.ALREADY_UP_TO_DATE:
        console.print("Already up to date")
    elif result == MergeResult.SUCCESS:
        console.print(f"[green]Merged {args.branch}[/green]")
    else:
        console.print(f"[red]Merge of {args.branch} failed, resolve conflicts and commit[/red]")
        return 1
    return 0


def _stage(client: GitClient, args, display: DisplayService) -> int:
    client.stage(args.files)
    return 0


def _unstage(client: GitClient, args, display: DisplayService) -> int:
    client.unstage(args.files)
    return 0


def _commit(client: GitClient, args, display: DisplayService) -> int:
    client.commit(args.message)
    console.print("[green]Committed[/green]")
    return 0


def _stash(client: GitClient, args, display: DisplayService) -> int:
    if args.action == "list":
        display.display_stashes(client.stashes.list_stashes())
    elif args.action == "pop":
        client.stashes.pop()
    elif client.stash_changes(args.message):
        console.print("[green]Changes stashed[/green]")
    else:
        console.print("No local changes to save")
    return 0


def _remotes(client: GitClient, args, display: DisplayService) -> int:
    display.display_remotes(client.remotes.get_remotes())
    return 0


def _clone(client: GitClient, args, display: DisplayService) -> int:
    target = GitClient(os.path.abspath(args.directory), client.config, client.shell)
    events = target.clone_repository(args.url, args.branch, all_branches=not args.single_branch)
    display.display_clone_progress(events)
    console.print(f"[green]Cloned into {target.repo_path}[/green]")
    return 0


COMMANDS = {
    "status": _status,
    "branches": _branches,
    "log": _log,
    "checkout": _checkout,
    "merge": _merge,
    "stage": _stage,
    "unstage": _unstage,
    "commit": _commit,
    "stash": _stash,
    "remotes": _remotes,
    "clone": _clone,
}


def main(argv=None):
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config_values = {
            "default_branch": parsed_args.default_branch,
            "default_remote": parsed_args.remote,
            "verbose": parsed_args.verbose,
            "debug": parsed_args.debug,
        }
        if getattr(parsed_args, "recent", None):
            config_values["recent_branches_limit"] = parsed_args.recent
        config = Config.from_dict(config_values)

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        client = GitClient(parsed_args.repo_path or os.getcwd(), config)
        display = DisplayService(console, verbose=parsed_args.verbose)

        return COMMANDS[parsed_args.command](client, parsed_args, display)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except OutputError as e:
        console.print(f"[red]Error: {escape(e.output.strip() or str(e))}[/red]")
        if e.kind is not None:
            logger.debug(f"Classified as {e.kind.name}")
        return 1
    except (GitPorcelainError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
