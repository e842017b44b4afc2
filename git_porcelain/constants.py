"""Shared constants for git-porcelain."""

# Markers looked for in command output
NOT_A_REPOSITORY_MARKER = "fatal: not a git repository"
FATAL_MARKER = "fatal"

# `git merge` prints exactly this when there is nothing to merge.
# Compared after GitPython strips the trailing newline.
NOOP_MERGE_MESSAGE = "Already up to date."

# Checkout success markers
CHECKOUT_SUCCESS_MARKERS = (
    "Switched to branch",
    "Switched to a new branch",
    "Already on",
)

# Stash prints this (exit 0) when the working tree is clean
NO_LOCAL_CHANGES_MESSAGE = "No local changes to save"

# Log parsing: ASCII unit separator between fields
LOG_FIELD_DELIMITER = "\x1f"
LOG_PRETTY_FORMAT = "%x1f".join(["%h", "%H", "%s", "%aN", "%ae", "%cn", "%ce", "%aD", "%P"])
LOG_DATE_FORMAT = "%a, %d %b %Y %H:%M:%S %z"

# Reflog date format produced by --date=iso
REFLOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"

# Stash list format
STASH_PRETTY_FORMAT = "%x1f".join(["%gD", "%H", "%gs"])

# Ref namespaces
LOCAL_REF_PREFIX = "refs/heads/"
REMOTE_REF_PREFIX = "refs/remotes/"
BRANCH_REF_FORMAT = "%(refname)%1f%(refname:short)%1f%(upstream:short)%1f%(objectname)%1f%(symref)"

# Repository metadata files, relative to the working directory
GIT_DIR_NAME = ".git"
MERGE_HEAD_FILE = "MERGE_HEAD"
SQUASH_MSG_FILE = "SQUASH_MSG"
DESCRIPTION_FILE = "description"
DEFAULT_GIT_DESCRIPTION = "Unnamed repository; edit this file 'description' to name the repository.\n"

# The SHA of the empty tree, used to diff against an unborn HEAD
NIL_TREE_SHA = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"

# Defaults
DEFAULT_BRANCH_NAME = "main"
DEFAULT_REMOTE_NAME = "origin"
RECENT_BRANCHES_LIMIT = 5
REFLOG_SCAN_LIMIT = 2500


# CLI display
SYMBOL_CURRENT_BRANCH = " *"
SYMBOL_DEFAULT_BRANCH = " (default)"
SYMBOL_NO_VALUE = "-"

# Short status letters shown next to changed files
CHANGE_KIND_SYMBOLS = {
    "added": "A",
    "modified": "M",
    "deleted": "D",
    "renamed": "R",
    "copied": "C",
    "type-changed": "T",
    "unmerged": "U",
    "ignored": "!",
    "unknown": "?",
}

CHANGE_KIND_COLORS = {
    "added": "green",
    "modified": "yellow",
    "deleted": "red",
    "renamed": "cyan",
    "copied": "cyan",
    "type-changed": "magenta",
    "unmerged": "bold red",
    "ignored": "dim",
    "unknown": "blue",
}

BRANCH_TYPE_COLORS = {
    "local": None,
    "remote": "dim",
}
