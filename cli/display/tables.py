"""
Rich table displays for inspection results.
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

from midiinspect.models.report import InspectionReport, WarningKind
from midiinspect.models.header import HeaderInfo


console = Console()


def display_header_info(report: InspectionReport, filepath: str) -> None:
    """Display file summary and decoded MThd fields."""
    if report.header is None:
        status = "[red]Invalid[/red]"
    else:
        status = "[green]Valid MIDI file[/green]"

    summary = f"""[bold]File:[/bold] {filepath}
[bold]File Size:[/bold] {report.file_size} bytes
[bold]Status:[/bold] {status}"""

    if report.header_error:
        summary += f"\n[bold]Error:[/bold] [red]{escape(report.header_error)}[/red]"

    console.print(
        Panel(summary, title="[bold blue]MIDI File Info[/bold blue]", border_style="blue", expand=False)
    )

    if report.header is not None:
        console.print(header_table(report.header))


def header_table(header: HeaderInfo) -> Table:
    """Build a two-column table of header fields."""
    division = header.division

    table = Table(title="MThd Header", box=box.ROUNDED, show_header=False)
    table.add_column("Field", style="cyan", width=24)
    table.add_column("Value", width=40)

    table.add_row("Header Chunk", header.chunk_id)
    table.add_row("Header Length", f"{header.header_length} bytes")
    table.add_row("Format", f"{header.format} ({header.format_label})")
    table.add_row("Number of Tracks", str(header.num_tracks))
    table.add_row("Division", f"0x{division.raw:04X}")
    table.add_row("Timing Format", header.timing_format)

    if division.is_smpte:
        rate = str(division.frames_per_second)
        if not division.is_standard_rate:
            rate += " [yellow](non-standard)[/yellow]"
        table.add_row("SMPTE Format", f"0x{division.smpte_format:02X}")
        table.add_row("Frames per Second", rate)
        table.add_row("Ticks per Frame", str(division.ticks_per_frame))
    else:
        table.add_row("Ticks per Quarter Note", str(division.ticks_per_quarter_note))

    return table


def display_tracks_table(report: InspectionReport) -> None:
    """Display discovered MTrk chunks."""
    if not report.tracks:
        console.print("[yellow]No MTrk chunks found[/yellow]")
        return

    table = Table(
        title=f"Tracks Found: {len(report.tracks)}",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Track", width=6)
    table.add_column("Offset", style="dim", width=10)
    table.add_column("Length", justify="right", width=10)
    table.add_column("Data Range", width=22)
    table.add_column("Status", width=10)

    for i, track in enumerate(report.tracks):
        status = "[red]Clipped[/red]" if track.clipped else "[green]OK[/green]"
        table.add_row(
            str(i + 1),
            f"0x{track.offset:06X}",
            str(track.length),
            f"0x{track.data_start:06X}-0x{track.data_end:06X}",
            status,
        )

    console.print(table)

    if report.skipped_bytes:
        console.print(
            f"[dim]{report.skipped_bytes} bytes outside MTrk chunks were skipped[/dim]"
        )


def display_warnings(report: InspectionReport) -> None:
    """Display structural warnings (header failures are shown in the info panel)."""
    for warning in report.warnings:
        if warning.kind is WarningKind.HEADER_INVALID:
            continue
        console.print(f"[yellow]⚠ Warning:[/yellow] {warning.message}")
