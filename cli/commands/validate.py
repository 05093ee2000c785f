"""
Validate command - check MIDI file chunk structure.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from midiinspect.analysis.inspector import SMFInspector
from midiinspect.models.report import InspectionReport, WarningKind

console = Console()
app = typer.Typer()


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: str  # "error", "warning", "info"
    area: str
    offset: int
    message: str


@dataclass
class ValidationResult:
    """Result of validating a MIDI file."""

    filepath: str
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    info: List[ValidationIssue] = field(default_factory=list)


AREAS = {
    WarningKind.HEADER_INVALID: "Header",
    WarningKind.TRACK_COUNT_MISMATCH: "Track Count",
    WarningKind.OUT_OF_RANGE_CHUNK: "Track Bounds",
}


def build_result(report: InspectionReport, filepath: str) -> ValidationResult:
    """Sort inspection findings into errors, warnings and passed checks."""
    result = ValidationResult(filepath=filepath, valid=report.header_valid)

    for warning in report.warnings:
        severity = "error" if warning.kind is WarningKind.HEADER_INVALID else "warning"
        issue = ValidationIssue(severity, AREAS[warning.kind], warning.offset, warning.message)
        if severity == "error":
            result.errors.append(issue)
        else:
            result.warnings.append(issue)

    if report.header is None:
        return result

    header = report.header
    result.info.append(ValidationIssue("info", "Header", 0, "MThd header is valid"))
    result.info.append(
        ValidationIssue("info", "Format", 8, f"Format {header.format} ({header.format_label})")
    )
    result.info.append(
        ValidationIssue("info", "Tracks", 14, f"{len(report.tracks)} MTrk chunks found")
    )
    if report.track_count_matches:
        result.info.append(
            ValidationIssue("info", "Track Count", 10, "Track count matches header")
        )

    return result


def display_validation(result: ValidationResult) -> None:
    """Display validation result with Rich formatting."""
    if result.valid:
        status = "[bold green]VALID[/bold green]"
        border = "green"
    else:
        status = "[bold red]INVALID[/bold red]"
        border = "red"

    console.print(
        Panel(
            f"[bold]File:[/bold] {result.filepath}\n"
            f"[bold]Status:[/bold] {status}\n\n"
            f"Errors: [red]{len(result.errors)}[/red]  "
            f"Warnings: [yellow]{len(result.warnings)}[/yellow]  "
            f"Info: [blue]{len(result.info)}[/blue]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    if result.errors or result.warnings:
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Severity", width=10)
        table.add_column("Area", style="cyan", width=14)
        table.add_column("Offset", style="dim", width=10)
        table.add_column("Message", width=50)

        for issue in result.errors:
            table.add_row("[red]ERROR[/red]", issue.area, f"0x{issue.offset:06X}", issue.message)

        for issue in result.warnings:
            table.add_row(
                "[yellow]WARN[/yellow]", issue.area, f"0x{issue.offset:06X}", issue.message
            )

        console.print(table)

    if result.info and (not result.errors and not result.warnings):
        info_table = Table(title="Validation Checks", box=box.SIMPLE, show_header=False)
        info_table.add_column("", width=60)

        for issue in result.info:
            info_table.add_row(f"[green]OK[/green] {issue.area}: {issue.message}")

        console.print(info_table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help="MIDI file to validate"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat warnings as errors"),
) -> None:
    """
    Validate the chunk structure of a MIDI file.

    Checks for:

    - Minimum file size and MThd header tag
    - Declared track count against MTrk chunks found
    - Track chunks whose declared length runs past the end of the file

    Exits with status 1 if the file is invalid.

    Examples:

        midiinspect validate song.mid

        midiinspect validate song.mid --strict
    """
    if not file.exists():
        console.print(f"[red]Error: File '{file}' not found[/red]")
        raise typer.Exit(1)

    try:
        report = SMFInspector().inspect_file(file)
    except OSError as e:
        console.print(f"[red]Error reading file: {e}[/red]")
        raise typer.Exit(1)

    result = build_result(report, str(file))

    # In strict mode, treat warnings as errors
    if strict and result.warnings:
        result.valid = False

    display_validation(result)

    if not result.valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
