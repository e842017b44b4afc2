"""Command-line argument parsing for git-porcelain."""

import argparse

from git_porcelain.__version__ import __version__
from git_porcelain.constants import DEFAULT_BRANCH_NAME, DEFAULT_REMOTE_NAME


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-porcelain",
        description="Inspect and operate on a git repository through typed records",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"git-porcelain {__version__}")
    parser.add_argument(
        "-C",
        "--repo",
        dest="repo_path",
        default=None,
        help="Repository working directory (default: current directory)",
    )
    parser.add_argument(
        "--default-branch",
        default=DEFAULT_BRANCH_NAME,
        help="Default branch name when the remote does not say",
    )
    parser.add_argument("--remote", default=DEFAULT_REMOTE_NAME, help="Preferred remote name")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("status", help="Show changed files")

    branches = subparsers.add_parser("branches", help="Show branches, default and recent branches")
    branches.add_argument(
        "--recent", type=int, default=None, metavar="N", help="How many recent branches to show"
    )

    log = subparsers.add_parser("log", help="Show commit history")
    log.add_argument("-n", "--max-count", type=int, default=20, help="Number of commits (default: 20)")
    log.add_argument("path", nargs="?", default=None, help="Only commits touching this file")

    checkout = subparsers.add_parser("checkout", help="Check out a branch")
    checkout.add_argument("branch")

    merge = subparsers.add_parser("merge", help="Merge a branch into the current branch")
    merge.add_argument("branch")
    merge.add_argument("--squash", action="store_true", help="Squash and commit")
    merge.add_argument("--abort", action="store_true", help="Abort the merge in progress")

    stage = subparsers.add_parser("stage", help="Stage files")
    stage.add_argument("files", nargs="+")

    unstage = subparsers.add_parser("unstage", help="Unstage files")
    unstage.add_argument("files", nargs="+")

    commit = subparsers.add_parser("commit", help="Commit staged changes")
    commit.add_argument("-m", "--message", required=True)

    stash = subparsers.add_parser("stash", help="Stash changes, or list/pop stashes")
    stash.add_argument("action", nargs="?", choices=["push", "pop", "list"], default="push")
    stash.add_argument("-m", "--message", default=None)

    subparsers.add_parser("remotes", help="Show remotes")

    clone = subparsers.add_parser("clone", help="Clone a repository with progress")
    clone.add_argument("url")
    clone.add_argument("directory")
    clone.add_argument("-b", "--branch", default=None, help="Branch to check out")
    clone.add_argument(
        "--single-branch", action="store_true", help="Fetch only the requested branch"
    )

    return parser


def parse_args(argv=None):
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
