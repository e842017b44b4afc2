"""Reading git configuration values."""

from typing import Optional

from git_porcelain.logging_config import get_logger
from git_porcelain.services.git.base import GitCommandService
from git_porcelain.services.git.diagnostics import output_error
from git_porcelain.services.shell import quote

logger = get_logger(__name__)

# `git config --get` exits 1 when the key is not set
_KEY_NOT_SET_STATUS = 1


class GitConfigService(GitCommandService):
    """Service for git config lookups."""

    def _get(self, args: str, name: str) -> Optional[str]:
        result = self._execute(f"config -z {args} {quote(name)}")
        self._ensure_repository(result.output)

        if result.status == _KEY_NOT_SET_STATUS:
            return None
        if not result.ok:
            raise output_error(result.output, "get_config_value")

        # -z terminates each value with NUL instead of a newline
        return result.stdout.split("\0")[0]

    def get_config_value(self, name: str, only_local: bool = False) -> Optional[str]:
        """Value of a config key, or None if unset."""
        args = "--local --get" if only_local else "--get"
        value = self._get(args, name)
        logger.debug(f"{name} = {value!r}")
        return value

    def get_global_config_value(self, name: str) -> Optional[str]:
        return self._get("--global --get", name)

    def get_boolean_config_value(self, name: str, global_only: bool = False) -> Optional[bool]:
        """Boolean config value, normalised by git (yes/on/1 become true)."""
        args = "--global --type=bool --get" if global_only else "--type=bool --get"
        value = self._get(args, name)
        if value is None:
            return None
        return value == "true"
