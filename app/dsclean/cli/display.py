"""Rich display functions for scan progress and results.

Provides the scan header, per-file event lines streamed while the
scan runs, and the final statistics summary.
"""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from dsclean.cleaner.models import DisposalOutcome, ScanConfiguration, ScanEvent, ScanResult
from dsclean.utils.formatting import console, err_console


def print_scan_header(root: Path, config: ScanConfiguration) -> None:
    """Print the scan path, mode and depth settings.

    Args:
        root: Resolved root directory.
        config: Configuration of the run.
    """
    console.print(f"[bold_header]Scan path:[/] [path]{escape(str(root))}[/]")

    if config.dry_run:
        console.print("[preview]Mode: Preview mode (files will not be removed)[/]")
    else:
        console.print("[success]Mode: Execution mode (files will be moved to trash)[/]")

    if not config.recursive:
        console.print("[bold]Recursion: Disabled[/]")
    elif config.max_depth is not None:
        console.print(f"[bold]Max depth:[/] {config.max_depth}")

    if config.skip_hidden:
        console.print("[bold]Hidden directories:[/] skipped")

    console.print()


def print_event(event: ScanEvent, *, verbose: bool) -> None:
    """Print the line(s) for one processed file.

    Previews are always listed. In execution mode, found files and
    successful moves are listed only when verbose; failures always go
    to stderr.

    Args:
        event: Disposal event to display.
        verbose: Whether verbose output was requested.
    """
    if event.outcome == DisposalOutcome.PREVIEWED:
        console.print(f"[preview]{escape('[Preview]')}[/] {escape(event.path)}", highlight=False)
        return

    if verbose:
        console.print(f"[found]{escape('[Found]')}[/] {escape(event.path)}", highlight=False)

    if event.outcome == DisposalOutcome.MOVED:
        if verbose:
            console.print("  [success]✓ Moved to trash[/]")
    elif event.outcome == DisposalOutcome.FAILED:
        err_console.print(
            f"  [error]✗[/] Failed to move file {escape(event.path)}: "
            f"[error]{escape(event.reason or '')}[/]",
            highlight=False,
        )
    elif verbose:
        reason = escape(event.reason or "")
        console.print(f"  [warning]Skipped:[/] [muted]{reason}[/]", highlight=False)


def create_statistics_table(result: ScanResult) -> Table:
    """Create a Rich table with the final counters.

    The moved and failed rows are omitted in preview mode; the failed
    and skipped rows only appear when non-zero.

    Args:
        result: Result of the run.

    Returns:
        Rich Table configured for statistics display.
    """
    stats = result.statistics
    table = Table(
        title="Cleanup Statistics",
        show_header=False,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Found .DS_Store files", f"[warning]{stats.found}[/]")

    if not result.dry_run:
        table.add_row("Successfully moved to trash", f"[success]{stats.moved}[/]")
        if stats.failed:
            table.add_row("Failed", f"[error]{stats.failed}[/]")
        if stats.skipped:
            table.add_row("Skipped (changed during scan)", f"[muted]{stats.skipped}[/]")

    return table


def print_summary(result: ScanResult) -> None:
    """Print the statistics table and follow-up hints.

    Args:
        result: Result of the run.
    """
    console.print()
    console.print(create_statistics_table(result))

    if result.dry_run and result.statistics.found > 0:
        console.print()
        console.print("[info]Tip: Remove --dry-run flag to actually execute cleanup[/]")
    elif result.has_failures:
        console.print()
        console.print(
            f"[warning]{result.statistics.failed} file(s) could not be moved "
            "and need manual attention.[/]"
        )
