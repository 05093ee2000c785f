"""
Info command - full structural inspection of a MIDI file.
"""

from pathlib import Path

import typer
from rich.console import Console

from midiinspect.analysis.inspector import SMFInspector
from midiinspect.analysis.report import format_report
from midiinspect.utils.hexdump import DEFAULT_MAX_BYTES
from cli.display.tables import display_header_info, display_tracks_table, display_warnings
from cli.display.hex_view import display_hex_dump

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="MIDI file to inspect"),
    max_bytes: int = typer.Option(
        DEFAULT_MAX_BYTES, "--max-bytes", "-m", min=0, help="Bytes to include in the raw dump"
    ),
    no_dump: bool = typer.Option(False, "--no-dump", help="Hide the raw data dump"),
    plain: bool = typer.Option(False, "--plain", "-p", help="Plain text report without colors"),
) -> None:
    """
    Inspect the chunk structure of a Standard MIDI File.

    Shows:
    - Header chunk fields (format, track count, timing)
    - Discovered MTrk chunks with offsets and lengths
    - Structural warnings (track count mismatch, truncated chunks)
    - Hex/ASCII dump of the first bytes

    Examples:

        midiinspect info song.mid

        midiinspect info song.mid --max-bytes 128

        midiinspect info song.mid --plain
    """
    if not file.exists():
        console.print(f"[red]Error: File '{file}' not found[/red]")
        raise typer.Exit(1)

    try:
        with open(file, "rb") as f:
            data = f.read()
    except OSError as e:
        console.print(f"[red]Error reading file: {e}[/red]")
        raise typer.Exit(1)

    report = SMFInspector().inspect_bytes(data)

    if plain:
        typer.echo(
            format_report(report, data, name=file.name, max_bytes=max_bytes, show_dump=not no_dump),
            nl=False,
        )
        return

    display_header_info(report, str(file))

    if report.header is not None:
        console.print()
        display_tracks_table(report)
        display_warnings(report)

    if not no_dump:
        console.print()
        display_hex_dump(data, title=f"Raw Data (First {max_bytes} bytes)", max_bytes=max_bytes)


if __name__ == "__main__":
    app()
