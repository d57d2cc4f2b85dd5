"""Command-line interface for splicenorm.

This module provides the main entry point for the splicenorm CLI tool.
It uses Click to define commands.

Commands:
    parse: Normalize raw VAST-TOOLS event rows given as arguments
    event-type: Resolve a raw VAST-TOOLS event type code
    list-flags: List parse diagnostic flags

Example:
    $ splicenorm --help
    $ splicenorm parse "NFYA HsaEX0042823 chr6:41046768-41046903 136 chr6:41040823,41046768-41046903,41051785 C2 0 N 0 N"
    $ splicenorm parse --tsv --diagnostics "$ROW1" "$ROW2"
    $ splicenorm event-type IR-C
"""

import csv
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from splicenorm import __version__

# Initialize rich console for pretty output
console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="splicenorm")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="TOML configuration file.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, quiet: bool, config_path: Optional[Path]) -> None:
    """splicenorm: Normalize alternative splicing events from VAST-TOOLS.

    Converts raw VAST-TOOLS event rows into records with explicit exon
    boundaries (C1, A1, A2, C2) and strand.
    """
    from splicenorm.config import Config
    from splicenorm.utils.logging import setup_logging

    try:
        config = Config.load(config_path)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if verbose:
        config.logging.verbosity = 2
    elif quiet:
        config.logging.verbosity = 0

    setup_logging(
        verbosity=config.logging.verbosity,
        log_file=config.logging.log_file,
        use_rich=config.logging.use_rich,
    )

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config"] = config


# =============================================================================
# parse command
# =============================================================================


@main.command()
@click.argument("rows", nargs=-1, required=True)
@click.option(
    "--sep",
    type=str,
    default=None,
    help="Column separator within a row. Default: any whitespace.",
)
@click.option("--tsv", is_flag=True, help="Write a TSV table to stdout.")
@click.option(
    "--diagnostics",
    is_flag=True,
    help="Show parse flags raised for each row and a flag summary.",
)
@click.option(
    "-j",
    "--workers",
    type=int,
    default=None,
    help="Number of worker threads. Default: from configuration (1).",
)
@click.pass_context
def parse(
    ctx: click.Context,
    rows: tuple[str, ...],
    sep: Optional[str],
    tsv: bool,
    diagnostics: bool,
    workers: Optional[int],
) -> None:
    """Normalize raw VAST-TOOLS event rows.

    Each ROW is one event row: gene symbol, event ID, coordinates,
    length, full coordinates, event type and optional inclusion levels.

    \b
    Examples:
        $ splicenorm parse "NFYA HsaEX0042823 chr6:41046768-41046903 136 \\
            chr6:41040823,41046768-41046903,41051785 C2 0 N 0 N"
        $ splicenorm parse --tsv --sep $'\\t' "$ROW"
    """
    from splicenorm.core.events import parse_events_with_diagnostics
    from splicenorm.core.flags import max_severity, summarize_flags
    from splicenorm.core.models import RawEvent
    from splicenorm.core.table import events_to_records, format_value
    from splicenorm.utils.logging import Timer

    config = ctx.obj["config"]
    verbose = ctx.obj.get("verbose", False)
    quiet = ctx.obj.get("quiet", False)
    max_workers = workers if workers is not None else config.parse.max_workers

    if max_workers < 1:
        console.print("[red]Error:[/red] --workers must be >= 1")
        raise SystemExit(1)

    try:
        raws = [RawEvent.from_line(row, sep=sep) for row in rows]
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    with Timer(f"Parsing {len(raws)} event(s)"):
        results = parse_events_with_diagnostics(
            raws,
            max_workers=max_workers,
            program=config.parse.program,
            progress_interval=config.parse.progress_interval,
        )
    records = events_to_records(result.event for result in results)

    if tsv:
        out = click.get_text_stream("stdout")
        writer = csv.writer(out, delimiter="\t", lineterminator="\n")
        headers = list(records[0])
        if diagnostics:
            headers.append("Flags")
        writer.writerow(headers)
        for record, result in zip(records, results):
            row = [format_value(value) for value in record.values()]
            if diagnostics:
                row.append(",".join(sorted(f.code for f in result.flags)))
            writer.writerow(row)
        return

    for record, result in zip(records, results):
        table = Table(title=f"{record['Event ID']} ({record['Gene symbol']})", show_header=False)
        table.add_column("Field", style="blue")
        table.add_column("Value")
        for column, value in record.items():
            table.add_row(column, format_value(value))
        console.print(table)

        if diagnostics:
            if result.is_clean:
                console.print("  [green]No flags[/green]")
            for flag in sorted(result.flags, key=lambda f: f.code):
                color = "yellow" if flag.severity.value == "warning" else "cyan"
                console.print(f"  [{color}]{flag.code}[/{color}]: {flag.description}")

    if diagnostics:
        all_flags = [flag for result in results for flag in result.flags]
        worst = max_severity(all_flags)
        if worst is None:
            console.print("[green]No flags raised[/green]")
        else:
            console.print(f"[bold]Flag summary[/bold] (highest severity: {worst.value})")
            for code, count in sorted(summarize_flags(all_flags).items()):
                console.print(f"  {code}: {count}")

    if verbose and not quiet:
        n_flagged = sum(1 for result in results if not result.is_clean)
        console.print(f"[dim]{n_flagged}/{len(results)} row(s) raised flags[/dim]")


# =============================================================================
# event-type command
# =============================================================================


@main.command("event-type")
@click.argument("code")
def event_type(code: str) -> None:
    """Resolve a raw VAST-TOOLS event type CODE.

    Codes other than IR-C, IR-S, Alt3 and Alt5 resolve to SE.

    Example:
        $ splicenorm event-type Alt3
    """
    from splicenorm.core.events import is_recognized_event_type, resolve_event_type

    resolved = resolve_event_type(code)
    console.print(f"{code} -> {resolved.value} ({resolved.label})")
    if not is_recognized_event_type(code):
        console.print(f"[yellow]Warning:[/yellow] '{code}' is not a known code; defaulted to SE")


# =============================================================================
# list-flags command
# =============================================================================


@main.command("list-flags")
@click.option(
    "--severity",
    type=click.Choice(["info", "warning"]),
    help="Filter flags by severity.",
)
def list_flags(severity: Optional[str]) -> None:
    """List all parse diagnostic flags.

    Example:
        $ splicenorm list-flags
        $ splicenorm list-flags --severity warning
    """
    from splicenorm.core.flags import FlagSeverity, ParseFlags

    flags = ParseFlags.get_all()

    if severity:
        sev = FlagSeverity(severity)
        flags = [f for f in flags if f.severity == sev]

    console.print("[bold]Parse Flags:[/bold]\n")

    for flag in sorted(flags, key=lambda f: (f.severity.value, f.code)):
        severity_color = {
            "info": "cyan",
            "warning": "yellow",
        }.get(flag.severity.value, "white")

        console.print(f"  [{severity_color}]{flag.code}[/{severity_color}]")
        console.print(f"    Name: {flag.name}")
        console.print(f"    Description: {flag.description}")
        console.print(f"    Severity: {flag.severity.value}")
        console.print()


if __name__ == "__main__":
    main()
