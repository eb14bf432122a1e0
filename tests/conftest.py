"""Test configuration and fixtures."""

from pathlib import Path
from typing import Callable, Generator

import pytest
from git import Actor, Repo
from typer.testing import CliRunner


@pytest.fixture
def test_env(tmp_path: Path) -> Generator[tuple[Path, Path], None, None]:
    """Create a test environment with local and remote repositories.

    The remote has master and develop plus two feature branches merged into
    master and one that is not.

    Returns:
        Tuple of (local_repo_path, remote_repo_path)
    """
    remote_path = tmp_path / "remote"
    local_path = tmp_path / "local"
    remote_path.mkdir()
    local_path.mkdir()

    Repo.init(remote_path, bare=True)
    local_repo = Repo.init(local_path)

    author = Actor("Test User", "test@example.com")
    local_repo.config_writer().set_value("user", "name", author.name).release()
    local_repo.config_writer().set_value("user", "email", author.email).release()

    readme = local_path / "README.md"
    readme.write_text("# Test Repository")
    local_repo.index.add(["README.md"])
    local_repo.index.commit("Initial commit", author=author)

    # Whatever the default branch is called, the protected one is master
    local_repo.git.branch("-M", "master")
    master = local_repo.heads.master

    origin = local_repo.create_remote("origin", url=str(remote_path))
    origin.push("master")

    def create_branch(name: str, content: str, merge: bool = False) -> None:
        """Create and push a branch with one commit, optionally merging it."""
        master.checkout()
        branch = local_repo.create_head(name)
        branch.checkout()

        test_file = local_path / f"{name}.txt"
        test_file.write_text(content)
        local_repo.index.add([f"{name}.txt"])
        local_repo.index.commit(f"Add {name}", author=author)
        origin.push(name)

        if merge:
            master.checkout()
            local_repo.git.merge(name, "--no-ff", "--no-edit")
            origin.push("master")

    create_branch("feature-b", "Second merged branch", merge=True)
    create_branch("feature-a", "First merged branch", merge=True)
    create_branch("feature-unmerged", "Unmerged branch")

    # develop points at master, so it is merged too
    master.checkout()
    local_repo.create_head("develop")
    origin.push("develop")

    yield local_path, remote_path


@pytest.fixture
def test_repo(test_env: tuple[Path, Path]) -> Path:
    """Path of the local repository."""
    local_path, _ = test_env
    return local_path


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def remote_heads(test_env: tuple[Path, Path]) -> Callable[[], list[str]]:
    """Return a function listing the branches that exist on the remote."""
    _, remote_path = test_env

    def heads() -> list[str]:
        return sorted(head.name for head in Repo(remote_path).heads)

    return heads
