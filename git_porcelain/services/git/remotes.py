"""Remote management and remote queries."""

from typing import List, Optional

from git_porcelain.constants import LOCAL_REF_PREFIX, REMOTE_REF_PREFIX
from git_porcelain.logging_config import get_logger
from git_porcelain.models.remote import Remote
from git_porcelain.parsers.remotes import parse_remotes
from git_porcelain.services.git.base import GitCommandService
from git_porcelain.services.git.diagnostics import GitErrorKind, classify_output, output_error
from git_porcelain.services.shell import quote

logger = get_logger(__name__)

_SYMREF_PREFIX = "ref: "


class RemoteService(GitCommandService):
    """Service for remote operations."""

    def get_remotes(self) -> List[Remote]:
        """Configured remotes with their fetch URLs, sorted by name."""
        result = self._run_checked("remote -v", "get_remotes")
        remotes = parse_remotes(result.stdout)
        logger.debug(f"Found remotes: {[remote.name for remote in remotes]}")
        return remotes

    def add_remote(self, name: str, url: str) -> Remote:
        self._run_checked(f"remote add {quote(name)} {quote(url)}", "add_remote")
        logger.info(f"Added remote {name}")
        return Remote(name=name, url=url)

    def remove_remote(self, name: str) -> None:
        """Remove a remote; removing one that does not exist is not an error."""
        result = self._execute(f"remote remove {quote(name)}")
        self._ensure_repository(result.output)

        if classify_output(result.output) == GitErrorKind.NO_SUCH_REMOTE:
            logger.debug(f"Remote {name} does not exist")
            return
        if not result.ok:
            raise output_error(result.output, "remove_remote")
        logger.info(f"Removed remote {name}")

    def rename_remote(self, name: str, new_name: str) -> None:
        self._run_checked(f"remote rename {quote(name)} {quote(new_name)}", "rename_remote")
        logger.info(f"Renamed remote {name} to {new_name}")

    def set_remote_url(self, name: str, url: str) -> bool:
        self._run_checked(f"remote set-url {quote(name)} {quote(url)}", "set_remote_url")
        return True

    def get_remote_url(self, name: str) -> Optional[str]:
        """URL of a remote, or None if it is not configured."""
        result = self._execute(f"remote get-url {quote(name)}")
        self._ensure_repository(result.output)
        if not result.ok:
            return None
        return result.stdout.strip() or None

    def update_remote_head(self, name: str) -> None:
        """Ask the remote which branch its HEAD points at and record it locally."""
        self._run_checked(f"remote set-head -a {quote(name)}", "update_remote_head")

    def get_remote_head(self, name: str) -> Optional[str]:
        """Branch name the remote's HEAD points at, from the local symbolic ref."""
        namespace = f"{REMOTE_REF_PREFIX}{name}/"
        result = self._execute(f"symbolic-ref -q {quote(namespace + 'HEAD')}")
        self._ensure_repository(result.output)
        if not result.ok:
            return None

        ref = result.stdout.strip()
        if ref.startswith(namespace) and len(ref) > len(namespace):
            return ref[len(namespace):]
        return None

    def get_remote_default_branch(self, url: str) -> Optional[str]:
        """Default branch of a repository URL, asked of the server directly."""
        result = self._run_checked(f"ls-remote -q --symref {quote(url)} HEAD", "get_remote_default_branch")
        for line in result.stdout.splitlines():
            if not line.startswith(_SYMREF_PREFIX):
                continue
            ref = line[len(_SYMREF_PREFIX):].split("\t")[0].strip()
            if ref.startswith(LOCAL_REF_PREFIX):
                return ref[len(LOCAL_REF_PREFIX):]
        return None

    def get_remote_branch_names(self, url: str) -> List[str]:
        """Branch names published by a repository URL, sorted."""
        result = self._run_checked(f"ls-remote --heads {quote(url)}", "get_remote_branch_names")
        names = []
        for line in result.stdout.splitlines():
            _, _, ref = line.partition("\t")
            ref = ref.strip()
            if ref.startswith(LOCAL_REF_PREFIX):
                names.append(ref[len(LOCAL_REF_PREFIX):])
        return sorted(names)
