"""
Tracks command - list MTrk chunks found in a MIDI file.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from midiinspect.analysis.inspector import SMFInspector
from cli.display.tables import display_tracks_table, display_warnings

console = Console()
app = typer.Typer()


@app.command()
def tracks(
    file: Path = typer.Argument(..., help="MIDI file to scan"),
) -> None:
    """
    List track chunks with offsets, declared lengths and data ranges.

    Tracks whose declared length runs past the end of the file are marked
    as clipped.

    Examples:

        midiinspect tracks song.mid
    """
    if not file.exists():
        console.print(f"[red]Error: File '{file}' not found[/red]")
        raise typer.Exit(1)

    try:
        report = SMFInspector().inspect_file(file)
    except OSError as e:
        console.print(f"[red]Error reading file: {e}[/red]")
        raise typer.Exit(1)

    if report.header is None:
        console.print(f"[red]✗ Error parsing MIDI file: {escape(report.header_error)}[/red]")
        raise typer.Exit(1)

    display_tracks_table(report)
    display_warnings(report)


if __name__ == "__main__":
    app()
