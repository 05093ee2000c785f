"""
Dump command - hex/ASCII dump of the leading bytes of a file.
"""

from pathlib import Path

import typer
from rich.console import Console

from midiinspect.utils.hexdump import DEFAULT_MAX_BYTES, hex_dump
from cli.display.hex_view import display_hex_dump

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help="File to dump"),
    max_bytes: int = typer.Option(
        DEFAULT_MAX_BYTES, "--max-bytes", "-m", min=0, help="Maximum number of bytes to show"
    ),
    plain: bool = typer.Option(False, "--plain", "-p", help="Print the dump without a panel"),
) -> None:
    """
    Hex dump of the first bytes of a file.

    Each row shows the offset, 16 hex bytes and their printable ASCII
    characters. Works on any file, valid MIDI or not.

    Examples:

        midiinspect dump song.mid

        midiinspect dump song.mid --max-bytes 64 --plain
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

    if plain:
        typer.echo(hex_dump(data, max_bytes), nl=False)
        return

    display_hex_dump(data, title=f"{file.name} ({len(data)} bytes)", max_bytes=max_bytes)


if __name__ == "__main__":
    app()
