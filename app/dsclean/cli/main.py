"""Main CLI application entry point.

Defines the Typer application that resolves command-line options into a
ScanConfiguration, runs the scan and reports the results.

Exit status:
    0: Scan completed. Partial disposal failures are reported in the
       summary but still exit 0 unless --fail-on-error is given.
    1: Invalid root path or settings file, or disposal failures with
       --fail-on-error.
    2: Invalid command-line usage.
"""

from pathlib import Path
from typing import Annotated

import typer

from dsclean import __version__
from dsclean.cleaner.errors import ConfigurationError
from dsclean.cleaner.models import ScanConfiguration, ScanEvent, ScanResult
from dsclean.cleaner.orchestrator import ScanOrchestrator
from dsclean.cli.display import print_event, print_scan_header, print_summary
from dsclean.core.settings import CleanerSettings, SettingsError, load_settings
from dsclean.utils.formatting import configure_logging, print_error

app = typer.Typer(
    name="dsclean",
    help="Recursively move .DS_Store junk files to the system trash.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dsclean version {__version__}")
        raise typer.Exit()


def exit_code_for(result: ScanResult, fail_on_error: bool) -> int:
    """Map a finished scan to a process exit status.

    Args:
        result: Result of the run.
        fail_on_error: Treat any disposal failure as an error.

    Returns:
        0 on success, 1 if failures occurred and fail_on_error is set.
    """
    if fail_on_error and result.has_failures:
        return 1
    return 0


def build_configuration(
    path: Path,
    settings: CleanerSettings,
    *,
    dry_run: bool,
    verbose: bool,
    no_recursive: bool,
    max_depth: int | None,
    skip_hidden: bool,
    workers: int | None,
) -> ScanConfiguration:
    """Merge command-line options over user settings.

    Args:
        path: Root directory argument.
        settings: Defaults loaded from the settings file.
        dry_run: Preview mode flag.
        verbose: Verbose output flag.
        no_recursive: Disable recursion flag.
        max_depth: Depth limit from the command line, None if not given.
        skip_hidden: Skip hidden directories flag.
        workers: Worker count from the command line, None if not given.

    Returns:
        Resolved ScanConfiguration.
    """
    return ScanConfiguration(
        root=path,
        max_depth=max_depth if max_depth is not None else settings.max_depth,
        recursive=not no_recursive,
        skip_hidden=skip_hidden or settings.skip_hidden,
        dry_run=dry_run,
        verbose=verbose,
        workers=workers if workers is not None else settings.workers,
    )


@app.command()
def main(
    path: Annotated[
        Path,
        typer.Argument(help="Directory path to scan (defaults to current directory)."),
    ] = Path("."),
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Preview mode: only show files that would be removed.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Display each file found."),
    ] = False,
    no_recursive: Annotated[
        bool,
        typer.Option("--no-recursive", help="Do not scan subdirectories."),
    ] = False,
    max_depth: Annotated[
        int | None,
        typer.Option(
            "--max-depth",
            min=1,
            help=(
                "Maximum recursion depth (1 = top level and its immediate subdirectories). "
                "Omit for unlimited; use --no-recursive to scan the top level only."
            ),
        ),
    ] = None,
    skip_hidden: Annotated[
        bool,
        typer.Option(
            "--skip-hidden",
            help="Skip hidden directories (names starting with '.').",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-w",
            min=1,
            max=64,
            help="Number of parallel disposal workers.",
        ),
    ] = None,
    fail_on_error: Annotated[
        bool,
        typer.Option(
            "--fail-on-error",
            help="Exit with status 1 if any file could not be moved.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Find .DS_Store files under PATH and move them to the system trash."""
    configure_logging(verbose)

    try:
        settings = load_settings()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    config = build_configuration(
        path,
        settings,
        dry_run=dry_run,
        verbose=verbose,
        no_recursive=no_recursive,
        max_depth=max_depth,
        skip_hidden=skip_hidden,
        workers=workers,
    )

    def _on_event(event: ScanEvent) -> None:
        print_event(event, verbose=verbose)

    orchestrator = ScanOrchestrator(
        config,
        on_start=lambda root: print_scan_header(root, config),
        on_event=_on_event,
    )

    try:
        result = orchestrator.run()
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_summary(result)

    code = exit_code_for(result, fail_on_error or settings.fail_on_error)
    if code:
        raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
