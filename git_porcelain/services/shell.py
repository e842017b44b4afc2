"""Command runner: executes git command lines through GitPython.

Every git invocation in git-porcelain goes through `ShellClient`. Commands
are plain strings (``"git status --porcelain -u"``); callers escape any
user-controlled fragment with `quote` before building them. Failures are not
raised from here: a non-zero exit comes back as text for the caller to
inspect, because git mixes its diagnostics into both output streams.
"""

import os
import re
import shlex
import threading
from dataclasses import dataclass
from typing import Generator, Iterator, List, Sequence, Union

import git
from git.exc import GitCommandNotFound

from git_porcelain.exceptions import GitNotFoundError
from git_porcelain.logging_config import get_logger

logger = get_logger(__name__)

Command = Union[str, Sequence[str]]

_WHITESPACE_RE = re.compile(r"(\s)")
_LINE_BREAK_RE = re.compile(rb"[\r\n]")


def escape_whitespace(value: str) -> str:
    """Backslash-escape every whitespace character in `value`."""
    return _WHITESPACE_RE.sub(r"\\\1", str(value))


def quote(value) -> str:
    """Quote a user-controlled fragment (path, message, ref) for a command line."""
    return shlex.quote(str(value))


def format_command(command: Command, directory) -> str:
    """Render a command the way a shell would run it: ``cd <dir>; <command>``."""
    if not isinstance(command, str):
        command = shlex.join(command)
    return f"cd {escape_whitespace(str(directory))}; {command}"


@dataclass(frozen=True)
class CommandResult:
    """Exit status and output streams of one git invocation."""

    status: int
    stdout: str
    stderr: str

    @property
    def output(self) -> str:
        """Combined output, stdout first."""
        return "\n".join(part for part in (self.stdout, self.stderr) if part)

    @property
    def ok(self) -> bool:
        return self.status == 0


def _iter_fragments(stream, chunk_size: int = 4096) -> Iterator[str]:
    """Yield text fragments from a byte stream as soon as a line break arrives.

    Git redraws progress lines with carriage returns, so both ``\\r`` and
    ``\\n`` end a fragment.
    """
    buffer = b""
    read = stream.read1 if hasattr(stream, "read1") else stream.read
    while True:
        data = read(chunk_size)
        if not data:
            break
        buffer += data
        *complete, buffer = _LINE_BREAK_RE.split(buffer)
        for piece in complete:
            text = piece.decode("utf-8", errors="replace").strip()
            if text:
                yield text

    tail = buffer.decode("utf-8", errors="replace").strip()
    if tail:
        yield tail


class ShellClient:
    """Runs git commands in a working directory."""

    def __init__(self, git_executable: str = None):
        """Initialize the runner.

        Args:
            git_executable: Path of the git binary. When unset, the leading
                ``git`` of each command is resolved by GitPython as usual.
        """
        self.git_executable = git_executable

    def _argv(self, command: Command) -> List[str]:
        argv = shlex.split(command) if isinstance(command, str) else [str(arg) for arg in command]
        if not argv:
            raise ValueError("Cannot run an empty command")
        if self.git_executable and argv[0] == "git":
            argv[0] = self.git_executable
        return argv

    def _check_directory(self, command: Command, directory) -> None:
        # GitPython silently falls back to the process cwd for an unusable directory
        if not os.path.isdir(directory):
            raise GitNotFoundError(
                format_command(command, directory), f"working directory does not exist: {directory}"
            )

    def execute(self, command: Command, directory) -> CommandResult:
        """Run a command and wait for it to exit.

        Args:
            command: Command line, e.g. ``"git rev-parse --abbrev-ref HEAD"``
            directory: Working directory to run in

        Returns:
            CommandResult with exit status and both output streams

        Raises:
            GitNotFoundError: git or the working directory is missing
        """
        argv = self._argv(command)
        self._check_directory(command, directory)
        logger.debug(f"Running: {format_command(command, directory)}")

        try:
            status, stdout, stderr = git.Git(str(directory)).execute(
                argv,
                with_extended_output=True,
                with_exceptions=False,
            )
        except GitCommandNotFound as e:
            raise GitNotFoundError(format_command(command, directory), str(e)) from e

        result = CommandResult(status=status, stdout=stdout or "", stderr=stderr or "")
        if not result.ok:
            logger.debug(f"Command exited with {status}: {result.output}")
        return result

    def run(self, command: Command, directory) -> str:
        """Run a command and return its combined output."""
        return self.execute(command, directory).output

    def run_live(self, command: Command, directory) -> Generator[str, None, CommandResult]:
        """Run a command and yield its output fragments while it runs.

        Fragments come from stderr, where git writes progress; stdout is
        drained on a reader thread so a full pipe cannot stall the process,
        and its lines are yielded once stderr closes. The generator's return
        value (``StopIteration.value``) is the final CommandResult. Closing
        the generator early kills the process.
        """
        argv = self._argv(command)
        self._check_directory(command, directory)
        logger.debug(f"Running live: {format_command(command, directory)}")

        try:
            process = git.Git(str(directory)).execute(argv, as_process=True)
        except GitCommandNotFound as e:
            raise GitNotFoundError(format_command(command, directory), str(e)) from e

        popen = process.proc
        captured: List[str] = []
        stdout_chunks: List[bytes] = []
        reader = None
        if popen.stdout is not None:
            reader = threading.Thread(target=lambda: stdout_chunks.append(popen.stdout.read()), daemon=True)
            reader.start()

        stdout = ""
        try:
            for fragment in _iter_fragments(popen.stderr):
                captured.append(fragment)
                yield fragment

            status = popen.wait()
            if reader is not None:
                reader.join()
            stdout = b"".join(chunk for chunk in stdout_chunks if chunk).decode("utf-8", errors="replace")
            for line in stdout.splitlines():
                if line.strip():
                    yield line.strip()
        finally:
            if popen.poll() is None:
                logger.debug(f"Killing unfinished process: {shlex.join(argv)}")
                popen.kill()
                popen.wait()

        result = CommandResult(status=status, stdout=stdout.rstrip("\n"), stderr="\n".join(captured))
        if not result.ok:
            logger.debug(f"Live command exited with {status}")
        return result
