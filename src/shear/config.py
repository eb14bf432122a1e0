"""Run configuration."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

DEFAULT_REMOTE = "origin"


class RunMode(Enum):
    """What to do with the generated delete commands."""

    DELETE = "delete"
    DRY_RUN = "dry-run"
    PRINT = "print"


@dataclass(frozen=True)
class ShearOptions:
    """Options for a single run.

    Attributes:
        refname: Reference the remote branches must be merged into
        dry_run: Run the delete commands with --dry-run
        limit: Maximum number of branches to process, None for no limit
        print_only: Only print the delete commands
        allow_empty: Treat an empty branch list as success instead of an error
        path: Path to the git repository
        remote: Remote name stripped from branch names
    """

    refname: str
    dry_run: bool = False
    limit: Optional[int] = None
    print_only: bool = False
    allow_empty: bool = False
    path: Path = Path(".")
    remote: str = DEFAULT_REMOTE

    def __post_init__(self) -> None:
        if self.dry_run and self.print_only:
            raise ValueError("--dry-run and --print cannot be used together")
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"Limit must not be negative, got {self.limit}")

    @property
    def mode(self) -> RunMode:
        if self.print_only:
            return RunMode.PRINT
        if self.dry_run:
            return RunMode.DRY_RUN
        return RunMode.DELETE
