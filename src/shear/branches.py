"""Branch name pipeline and delete command generation."""

from typing import Optional

PROTECTED_BRANCHES = ("origin/develop", "origin/master")
DELETE_COMMAND = "git push origin --delete"
DRY_RUN_FLAG = "--dry-run"


def is_protected_branch(name: str) -> bool:
    """Check if a branch name matches the protected denylist."""
    return any(protected in name for protected in PROTECTED_BRANCHES)


def filter_branches(names: list[str]) -> list[str]:
    """Drop protected branches, keeping the order of the rest."""
    return [name for name in names if not is_protected_branch(name)]


def extract_branches(text: str) -> list[str]:
    """Split `git branch` output into stripped branch names.

    Only ``\\n`` separates lines, and a trailing newline adds no entry.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.strip() for line in lines]


def get_branch_names(text: str) -> list[str]:
    """Extract, filter and sort branch names from `git branch` output."""
    return sorted(filter_branches(extract_branches(text)))


def take_branches(limit: Optional[int], names: list[str]) -> list[str]:
    """Keep the first `limit` names, or all of them if there is no limit."""
    if limit is None:
        return list(names)
    return names[:limit]


def strip_remote_from_name(remote: str, names: list[str]) -> list[str]:
    """Remove every occurrence of ``<remote>/`` from each name.

    This is a plain substring replacement, so ``xorigin/foo`` becomes ``xfoo``.
    """
    prefix = f"{remote}/"
    return [name.replace(prefix, "") for name in names]


def pipeline(text: str, limit: Optional[int], remote: str) -> list[str]:
    """Turn raw `git branch -r --merged` output into branch names to delete.

    The limit is applied after filtering and sorting, so it always picks the
    lexicographically first deletable branches.
    """
    return strip_remote_from_name(remote, take_branches(limit, get_branch_names(text)))


def branch_count(names: list[str]) -> str:
    """Format the summary line shown before previewing deletions."""
    return f"Would delete the following {len(names)} branch(es):"


def branch_delete_cmds(names: list[str]) -> list[str]:
    """Build one delete command per branch."""
    return [f"{DELETE_COMMAND} {name}" for name in names]


def dry_run_cmds(cmds: list[str]) -> list[str]:
    """Append the dry-run flag to each command."""
    return [f"{cmd} {DRY_RUN_FLAG}" for cmd in cmds]


def split_command(cmd: str) -> tuple[str, list[str]]:
    """Split a command string into program and arguments."""
    program, *args = cmd.split()
    return program, args
