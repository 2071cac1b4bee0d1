"""
dev-drift CLI

Command-line interface for detecting environmental drift in a project.
Records a baseline of the runtime version, .env key names, manifest scripts
and top-level folders, then reports what changed since.

Commands:
    dev-drift init      Record the current state as the baseline
    dev-drift check     Compare the current state against the baseline
    dev-drift reset     Delete the baseline

Usage:
    $ dev-drift init
    $ dev-drift check --fail-on-drift
    $ dev-drift reset
"""

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from devdrift import __version__
from devdrift.drift import render
from devdrift.errors import (
    AbsentBaselineError,
    BaselineExistsError,
    BaselineFormatError,
    ManifestParseError,
)
from devdrift.snapshot import SnapshotCollector
from devdrift.storage import DEFAULT_BASELINE_PATH, BaselineStore
from devdrift.workflow import check_drift, init_baseline, reset_baseline

# Initialize Typer app and Rich consoles
app = typer.Typer(
    name="dev-drift",
    help="dev-drift: Detect environmental drift in a local project",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


# Exit codes
EXIT_STATE = 1
EXIT_INVALID_INPUT = 3

BASELINE_ENVVAR = "DEV_DRIFT_BASELINE"


def _project_argument():
    return typer.Argument(
        None,
        help="Path to the project (default: current directory)",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    )


def _baseline_option():
    return typer.Option(
        None,
        "--baseline",
        "-b",
        envvar=BASELINE_ENVVAR,
        help=f"Path to the baseline file (default: {DEFAULT_BASELINE_PATH} in project)",
    )


def _resolve(path: Optional[Path], baseline_path: Optional[Path]) -> tuple[Path, BaselineStore]:
    """Resolve the project root and the baseline store for a command."""
    if path is None:
        path = Path.cwd()
    if baseline_path is None:
        baseline_path = path / DEFAULT_BASELINE_PATH
    return path, BaselineStore(baseline_path)


def _fail(message: str, code: int, hint: Optional[str] = None) -> NoReturn:
    """Print an error message (and optional hint) to stderr and exit."""
    err_console.print(message, markup=False, highlight=False)
    if hint:
        err_console.print(hint, markup=False, highlight=False)
    raise typer.Exit(code)


@app.command()
def init(
    path: Optional[Path] = _project_argument(),
    baseline_path: Optional[Path] = _baseline_option(),
) -> None:
    """
    Record the current project state as the baseline.
    """
    path, store = _resolve(path, baseline_path)

    try:
        init_baseline(store, SnapshotCollector(path))
    except BaselineExistsError:
        _fail("dev-drift already initialized", EXIT_STATE)
    except ManifestParseError as e:
        _fail(f"Error: {e}", EXIT_INVALID_INPUT)

    console.print("[green]dev-drift initialized.[/green]")


@app.command()
def check(
    path: Optional[Path] = _project_argument(),
    baseline_path: Optional[Path] = _baseline_option(),
    fail_on_drift: bool = typer.Option(
        False,
        "--fail-on-drift",
        help="Exit with status 1 when drift is detected",
    ),
) -> None:
    """
    Compare the current project state against the baseline.

    Reports:
    - Node version changes
    - Added and removed .env variable names
    - Added and removed top-level folders
    - Scripts whose command changed
    """
    path, store = _resolve(path, baseline_path)

    try:
        report = check_drift(store, SnapshotCollector(path))
    except AbsentBaselineError:
        _fail("dev-drift not initialized.", EXIT_STATE, hint="Run: dev-drift init")
    except (ManifestParseError, BaselineFormatError) as e:
        _fail(f"Error: {e}", EXIT_INVALID_INPUT)

    for line in render(report):
        console.print(line, markup=False, highlight=False)

    if fail_on_drift and report.has_drift:
        raise typer.Exit(EXIT_STATE)


@app.command()
def reset(
    path: Optional[Path] = _project_argument(),
    baseline_path: Optional[Path] = _baseline_option(),
) -> None:
    """
    Delete the baseline so a new one can be recorded.
    """
    path, store = _resolve(path, baseline_path)

    try:
        reset_baseline(store)
    except AbsentBaselineError:
        _fail("No baseline to reset.", EXIT_STATE)

    console.print("Baseline reset.")
    console.print("Run [bold]dev-drift init[/bold] to create a new baseline.")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]dev-drift[/bold] version {__version__}")
        raise typer.Exit()


# Version and logging options
@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log debug output to stderr",
    ),
) -> None:
    """
    dev-drift: Detect environmental drift in a local project.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()
