"""Command line interface for git-shear."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import print
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from shear import __version__
from shear.branches import branch_count, branch_delete_cmds, dry_run_cmds, pipeline
from shear.config import RunMode, ShearOptions
from shear.git import GitError, GitRepo, ShellError, partition_results

app = typer.Typer(help="git-shear - delete stale remote branches")
console = Console()
logger = logging.getLogger(__name__)

# Same status git itself uses for a bad revision.
BAD_REFNAME_EXIT_CODE = 128


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    if value:
        console.print(__version__)
        raise typer.Exit()


def get_repo(path: Path) -> GitRepo:
    """Get git repository instance."""
    try:
        return GitRepo(path)
    except GitError as err:
        print(f"Error: {err}")
        raise typer.Exit(code=1) from err


def print_output(text: str, style: Optional[str] = None) -> None:
    """Print git output verbatim, without rich markup or highlighting."""
    if text:
        console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)


def execute(repo: GitRepo, cmds: list[str]) -> None:
    """Run delete commands and report successes, then failures."""
    results = repo.run_commands(cmds)
    successes, failures = partition_results(results)
    logger.info("%d command(s) succeeded, %d failed", len(successes), len(failures))
    print_output("\n".join(successes))
    print_output("\n".join(failures), style="red")


def run(options: ShearOptions) -> None:
    """Delete, preview or print the branches merged into the configured ref."""
    repo = get_repo(options.path)

    ref = repo.resolve_ref(options.refname)
    if isinstance(ref, ShellError):
        print(f"[red]Error:[/red] {escape(ref.message.strip())}")
        raise typer.Exit(code=BAD_REFNAME_EXIT_CODE)
    logger.debug("Resolved %s to %s", options.refname, ref.output)

    try:
        output = repo.merged_remotes(ref.output)
    except GitError as err:
        print(f"[red]Error:[/red] {escape(str(err))}")
        raise typer.Exit(code=1) from err

    branches = pipeline(output, options.limit, options.remote)
    cmds = branch_delete_cmds(branches)
    if not cmds:
        if not options.allow_empty:
            print("[red]Error:[/red] No command to execute")
            raise typer.Exit(code=1)
        console.print(branch_count(branches))
        return

    mode = options.mode
    logger.info("Processing %d branch(es) in %s mode", len(branches), mode.value)
    if mode == RunMode.PRINT:
        console.print(branch_count(branches))
        for cmd in cmds:
            print_output(cmd)
    elif mode == RunMode.DRY_RUN:
        console.print(branch_count(branches))
        execute(repo, dry_run_cmds(cmds))
    else:
        execute(repo, cmds)


@app.command()
def main(
    refname: Annotated[str, typer.Argument(metavar="REFNAME", help="Reference the branches must be merged into")],
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            envvar="GIT_SHEAR_DRY_RUN",
            help="Show which branches would be deleted, without really deleting anything.",
        ),
    ] = False,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", metavar="L", min=0, envvar="GIT_SHEAR_LIMIT", help="Only delete L stale branches."),
    ] = None,
    print_only: Annotated[
        bool, typer.Option("--print", "-p", help="Only print the delete commands, do not run them.")
    ] = False,
    allow_empty: Annotated[
        bool, typer.Option("--allow-empty", help="Exit successfully when there is nothing to delete.")
    ] = False,
    path: Annotated[Path, typer.Option(help="Path to git repository")] = Path("."),
    verbose: Annotated[bool, typer.Option("--verbose", help="Show debug logging.")] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show the version and exit."),
    ] = None,
) -> None:
    """Delete remote branches that have been merged into REFNAME."""
    setup_logging(verbose)
    try:
        options = ShearOptions(
            refname=refname,
            dry_run=dry_run,
            limit=limit,
            print_only=print_only,
            allow_empty=allow_empty,
            path=path,
        )
    except ValueError as err:
        raise typer.BadParameter(str(err)) from err
    run(options)


if __name__ == "__main__":
    app()
