"""Command-line interface for the DWG version classifier."""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from dwg_version import __version__
from dwg_version.core.lookup import DEFAULT_VERSION_LOOKUP, load_lookup
from dwg_version.core.pipeline import ClassificationPipeline
from dwg_version.core.resolver import resolve_status
from dwg_version.core.scanner import DEFAULT_SUFFIX, validate_folder
from dwg_version.core.summary import status_line, summarize
from dwg_version.models import RecordStatus
from dwg_version.output.json_export import JSONExporter
from dwg_version.output.text_report import format_text_report, write_text_report
from dwg_version.parsers.signature import SignatureErr, read_signature
from dwg_version.utils.exceptions import DWGVersionError

console = Console()

LOOKUP_ENVVAR = "DWG_VERSION_LOOKUP"

# Exit code when at least one file could not be read
EXIT_READ_FAILURES = 2


def print_status(status: str, message: str) -> None:
    """Print a status message with consistent formatting.

    Args:
        status: Status indicator ([OK], [FAIL], [WARN], [INFO], [ERROR])
        message: Message to display
    """
    color_map = {
        "[OK]": "green",
        "[FAIL]": "red",
        "[WARN]": "yellow",
        "[INFO]": "blue",
        "[ERROR]": "red bold",
    }
    color = color_map.get(status, "white")
    console.print(f"[{color}]{escape(status)}[/{color}] {escape(message)}")


def _configure_logging(verbose: int) -> None:
    """Route library logging to stderr at a level set by -v count."""
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_lookup_or_exit(lookup_path: str, merge_defaults: bool):
    """Load the lookup table, printing the error and exiting on failure."""
    try:
        return load_lookup(lookup_path, merge_defaults=merge_defaults)
    except DWGVersionError as e:
        print_status("[ERROR]", str(e))
        sys.exit(1)


lookup_option = click.option(
    "--lookup",
    "lookup_path",
    type=click.Path(dir_okay=False),
    envvar=LOOKUP_ENVVAR,
    help=f"YAML/JSON signature lookup file (default: built-in table, env: {LOOKUP_ENVVAR})",
)
merge_option = click.option(
    "--merge-defaults",
    is_flag=True,
    help="Add the lookup file's entries to the built-in table instead of replacing it",
)


@click.group()
@click.version_option(version=__version__, prog_name="dwg-version")
def main():
    """DWG Version Tool - report the AutoCAD format version of DWG files.

    Reads the version code at the start of each drawing in a folder and
    counts files per AutoCAD release.
    """


@main.command()
@click.argument("directory", type=click.Path())
@click.option("--suffix", default=DEFAULT_SUFFIX, show_default=True, help="File extension to scan for")
@lookup_option
@merge_option
@click.option("-f", "--format", "output_format", type=click.Choice(["table", "json", "text"]), default="table")
@click.option("-o", "--output", type=click.Path(), help="Write the JSON or text report to this file")
@click.option("--progress", is_flag=True, help="Show a progress bar while reading files")
@click.option("-v", "--verbose", count=True, help="Verbosity level")
def scan(directory: str, suffix: str, lookup_path: str, merge_defaults: bool, output_format: str,
         output: str, progress: bool, verbose: int):
    """Classify every drawing in a folder by format version.

    DIRECTORY is the folder containing the drawing files. Subfolders are
    not searched.
    """
    _configure_logging(verbose)
    lookup = _load_lookup_or_exit(lookup_path, merge_defaults)

    try:
        pipeline = ClassificationPipeline(lookup=lookup, suffix_filter=suffix, show_progress=progress)
        result = pipeline.classify_directory(Path(directory))
    except (DWGVersionError, ValueError) as e:
        print_status("[ERROR]", str(e))
        sys.exit(1)

    summary = summarize(result)

    if output_format == "json":
        exporter = JSONExporter(indent=2)
        if output:
            exporter.to_file(result, output, summary=summary)
            print_status("[OK]", f"Report saved to: {output}")
        else:
            click.echo(exporter.to_json(result, summary))
    elif output_format == "text":
        if output:
            write_text_report(result, output, summary=summary)
            print_status("[OK]", f"Report saved to: {output}")
        else:
            click.echo(format_text_report(result, summary), nl=False)
    else:
        _print_scan_tables(result, summary, verbose)

    if summary.read_failed_count:
        sys.exit(EXIT_READ_FAILURES)


def _print_scan_tables(result, summary, verbose: int) -> None:
    """Print records and summary as formatted tables."""
    console.print(Panel(f"[bold]DWG Version Scan[/bold]\nFolder: {escape(str(result.directory))}", style="blue"))

    status_colors = {
        RecordStatus.RESOLVED: "green",
        RecordStatus.UNRECOGNIZED: "yellow",
        RecordStatus.READ_FAILED: "red",
    }

    table = Table(title="Files", show_header=True, header_style="bold")
    table.add_column("Filename", style="cyan")
    table.add_column("Version")
    if verbose > 0:
        table.add_column("Signature")
        table.add_column("Status")

    for record in result:
        color = status_colors.get(record.status, "white")
        row = [escape(record.filename), f"[{color}]{escape(record.version)}[/{color}]"]
        if verbose > 0:
            row.append(escape(record.signature))
            row.append(record.status.value)
        table.add_row(*row)

    console.print(table)
    console.print()

    if summary.version_counts:
        table = Table(title="Version Summary", show_header=True, header_style="bold")
        table.add_column("Version", style="cyan")
        table.add_column("Count")
        table.add_column("Percentage")

        for label, count in summary.version_counts.items():
            pct = count / summary.total_count * 100
            table.add_row(escape(label), str(count), f"{pct:.1f}%")

        console.print(table)
        console.print()

    if summary.read_failed_count:
        print_status("[WARN]", f"{summary.read_failed_count} file(s) could not be read")
    if summary.unrecognized_count:
        print_status("[WARN]", f"{summary.unrecognized_count} file(s) have an unrecognized signature")

    print_status("[OK]" if summary.total_count else "[INFO]", status_line(summary))


@main.command()
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
@lookup_option
@merge_option
def signature(filepath: str, lookup_path: str, merge_defaults: bool):
    """Show the signature and version of a single file.

    FILEPATH is the path to the drawing file.
    """
    lookup = _load_lookup_or_exit(lookup_path, merge_defaults)
    result = read_signature(filepath)

    if isinstance(result, SignatureErr):
        print_status("[ERROR]", f"Cannot read file: {result.message}")
        sys.exit(1)

    if not result.as_text:
        print_status("[WARN]", "File is empty")
        sys.exit(1)

    label, status = resolve_status(result.as_text, lookup)

    table = Table(title="Signature", show_header=True, header_style="bold")
    table.add_column("Property", style="cyan")
    table.add_column("Value")
    table.add_row("File", escape(Path(filepath).name))
    table.add_row("Bytes", result.bytes_read.hex(" ").upper())
    table.add_row("Text", escape(repr(result.as_text)))
    table.add_row("Version", escape(label))
    table.add_row("Status", status.value)

    console.print(table)


@main.command(name="lookup")
@lookup_option
@merge_option
@click.option("-f", "--format", "output_format", type=click.Choice(["table", "json"]), default="table")
def show_lookup(lookup_path: str, merge_defaults: bool, output_format: str):
    """Display the effective signature lookup table."""
    lookup = _load_lookup_or_exit(lookup_path, merge_defaults)

    if output_format == "json":
        click.echo(json.dumps(dict(lookup), indent=2))
        return

    source = lookup.source or "built-in"
    table = Table(title=f"Version Lookup ({escape(source)})", show_header=True, header_style="bold")
    table.add_column("Signature", style="cyan")
    table.add_column("Version")

    for code, label in lookup.items():
        table.add_row(escape(code), escape(label))

    console.print(table)


@main.command()
@click.argument("directory", type=click.Path())
@click.option("--suffix", default=DEFAULT_SUFFIX, show_default=True, help="File extension to look for")
def check(directory: str, suffix: str):
    """Check that a folder exists and holds drawing files.

    DIRECTORY is the folder to check.
    """
    validation = validate_folder(directory, suffix)

    if validation.is_valid:
        print_status("[OK]", f"{directory} is ready to scan")
    else:
        print_status("[FAIL]", validation.message)
        sys.exit(1)


@main.command()
def info():
    """Display tool information and built-in version codes."""
    codes = "\n".join(
        f"  [->] {code}: {escape(label)}" for code, label in DEFAULT_VERSION_LOOKUP.items()
    )
    console.print(Panel(
        f"[bold]DWG Version Tool v{__version__}[/bold]\n\n"
        "Reports the AutoCAD format version of DWG files\n\n"
        "[bold]Built-in Version Codes:[/bold]\n"
        f"{codes}\n\n"
        f"[dim]Override with --lookup FILE or {LOOKUP_ENVVAR}[/dim]",
        title="About",
        style="blue",
    ))


if __name__ == "__main__":
    main()
