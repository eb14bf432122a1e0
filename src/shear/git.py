"""Git repository operations."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

from shear.branches import split_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShellSuccess:
    """Captured output of a command that exited with status 0."""

    output: str


@dataclass(frozen=True)
class ShellError:
    """Captured failure of a command."""

    message: str
    code: int


ShellResult = Union[ShellSuccess, ShellError]


class GitError(Exception):
    """Git operation error."""


def partition_results(results: list[ShellResult]) -> tuple[list[str], list[str]]:
    """Split command outcomes into success and failure messages, keeping order."""
    successes = [result.output for result in results if isinstance(result, ShellSuccess)]
    failures = [result.message for result in results if isinstance(result, ShellError)]
    return successes, failures


class GitRepo:
    """Git repository operations."""

    def __init__(self, path: Path) -> None:
        """Initialize repository."""
        try:
            self.repo: Repo = Repo(path)
            if self.repo.bare:
                raise GitError("Cannot operate on bare repository")
        except (GitCommandError, ValueError, InvalidGitRepositoryError, NoSuchPathError) as err:
            raise GitError(f"Failed to open repository: {err}") from err

    def _execute(self, command: list[str]) -> tuple[int, str, str]:
        logger.debug("Running: %s", " ".join(command))
        status, stdout, stderr = self.repo.git.execute(
            command,
            with_extended_output=True,
            with_exceptions=False,
        )
        logger.debug("Exit status %d", status)
        return status, stdout, stderr

    def resolve_ref(self, refname: str) -> ShellResult:
        """Resolve a reference name with `git rev-parse`.

        Returns:
            ShellSuccess with the resolved object name, or ShellError carrying
            git's message and exit status if the name does not resolve.
        """
        status, stdout, stderr = self._execute(["git", "rev-parse", refname, "--"])
        if status != 0:
            return ShellError(stderr, status)
        return ShellSuccess(stdout.replace("--", "").rstrip())

    def merged_remotes(self, ref: str) -> str:
        """Get raw `git branch -r --merged` output for a reference."""
        try:
            logger.debug("Listing remote branches merged into %s", ref)
            return str(self.repo.git.branch("-r", "--merged", ref))
        except GitCommandError as err:
            raise GitError(f"Failed to list merged branches: {err}") from err

    def run_command(self, cmd: str) -> ShellResult:
        """Run one command string with empty stdin.

        Git reports branch deletions on stderr, so that is what a success carries.
        """
        program, args = split_command(cmd)
        status, _, stderr = self._execute([program, *args])
        if status != 0:
            return ShellError(stderr, status)
        return ShellSuccess(stderr)

    def run_commands(self, cmds: list[str]) -> list[ShellResult]:
        """Run commands one after another, collecting every outcome."""
        return [self.run_command(cmd) for cmd in cmds]
