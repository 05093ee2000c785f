"""
midiinspect - Structural inspector for Standard MIDI Files.

A CLI tool for checking MIDI file chunk structure and dumping raw bytes.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from midiinspect import __version__
from cli.commands.info import info
from cli.commands.tracks import tracks
from cli.commands.dump import dump
from cli.commands.validate import validate

console = Console()

# Main app
app = typer.Typer(
    name="midiinspect",
    help="Inspect the chunk structure of Standard MIDI Files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="tracks")(tracks)
app.command(name="dump")(dump)
app.command(name="validate")(validate)


def setup_logging(verbose: bool) -> None:
    """Route library logging through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]midiinspect[/bold] version {__version__}")
    console.print("[dim]Structural inspector for Standard MIDI Files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    midiinspect - Check MIDI file structure.

    Reads the [cyan]MThd[/cyan] header and locates [cyan]MTrk[/cyan] track
    chunks without decoding MIDI events.

    [bold]Commands:[/bold]

        midiinspect info song.mid        # Header, tracks, warnings and dump
        midiinspect tracks song.mid      # Track chunk table
        midiinspect dump song.mid        # Hex/ASCII dump
        midiinspect validate song.mid    # Structure check with exit code

    Use --help with any command for more details.
    """
    setup_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
