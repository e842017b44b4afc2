"""Display and formatting service for repository information"""
from typing import Iterable, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn
from rich.table import Table

from git_porcelain.constants import SYMBOL_NO_VALUE
from git_porcelain.formatters import (
    format_branch_name,
    format_branch_type,
    format_change_kind,
    format_change_path,
    format_date,
    format_progress_description,
    get_branch_style,
    get_change_style,
)
from git_porcelain.logging_config import get_logger
from git_porcelain.models.changes import FileChangeRecord
from git_porcelain.models.commit import CommitHistory
from git_porcelain.models.remote import Remote
from git_porcelain.models.results import CloneProgressEvent
from git_porcelain.models.stash import StashEntry

logger = get_logger(__name__)


class DisplayService:
    """Renders git-porcelain records to the terminal with rich."""

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console or Console()
        self.verbose = verbose

    def display_changes(self, records: List[FileChangeRecord], root=None) -> None:
        """Display changed files, one row per file."""
        if not records:
            self.console.print("[green]Working tree clean[/green]")
            return

        table = Table()
        table.add_column("Status")
        table.add_column("File")
        if self.verbose:
            table.add_column("Code")

        for record in records:
            row = [format_change_kind(record.change_kind), escape(format_change_path(record, root))]
            if self.verbose:
                row.append(record.code)
            table.add_row(*row, style=get_change_style(record.change_kind))

        self.console.print(table)

    def display_branches(self, state) -> None:
        """Display every branch of a RepositoryState, then the recent ones."""
        table = Table()
        table.add_column("Branch")
        table.add_column("Type")
        table.add_column("Upstream")
        table.add_column("Tip")

        default_name = state.default_branch.name if state.default_branch else None
        for branch in state.all_branches:
            is_local = branch.is_local
            table.add_row(
                format_branch_name(
                    escape(branch.name),
                    is_current=is_local and branch.name == state.current_branch,
                    is_default=is_local and branch.name == default_name,
                ),
                format_branch_type(branch.type),
                branch.upstream or SYMBOL_NO_VALUE,
                (branch.tip or SYMBOL_NO_VALUE)[:8],
                style=get_branch_style(branch, state.current_branch),
            )

        self.console.print(table)

        if state.recent_branches:
            self.console.print("\nRecent branches:")
            for branch in state.recent_branches:
                self.console.print(f"  {escape(branch.name)}")

        if state.pull_with_rebase is not None:
            self.console.print(f"\npull.rebase: {'true' if state.pull_with_rebase else 'false'}")

    def display_history(self, commits: List[CommitHistory]) -> None:
        table = Table()
        table.add_column("Commit")
        table.add_column("Date")
        table.add_column("Author")
        table.add_column("Message")

        for commit in commits:
            table.add_row(
                commit.hash,
                format_date(commit.date),
                escape(commit.author),
                escape(commit.message),
                style="dim" if commit.is_merge else None,
            )

        self.console.print(table)

    def display_remotes(self, remotes: List[Remote]) -> None:
        if not remotes:
            self.console.print("No remotes configured")
            return

        table = Table()
        table.add_column("Remote")
        table.add_column("URL")
        for remote in remotes:
            table.add_row(escape(remote.name), escape(remote.url))
        self.console.print(table)

    def display_stashes(self, stashes: List[StashEntry]) -> None:
        if not stashes:
            self.console.print("No stashes")
            return

        table = Table()
        table.add_column("Stash")
        table.add_column("Branch")
        table.add_column("Message")
        for entry in stashes:
            table.add_row(escape(entry.name), escape(entry.branch_name or SYMBOL_NO_VALUE), escape(entry.message))
        self.console.print(table)

    def display_clone_progress(self, events: Iterable[CloneProgressEvent]) -> None:
        """Drive a clone event stream, drawing one progress bar per phase."""
        with Progress(
            TextColumn("{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=self.console,
        ) as progress:
            tasks = {}
            for event in events:
                if not event.has_percent:
                    if event.line:
                        progress.console.print(escape(event.line), style="dim")
                    continue

                if event.kind not in tasks:
                    tasks[event.kind] = progress.add_task(format_progress_description(event), total=100)
                progress.update(tasks[event.kind], completed=event.percent)
