"""
Hex dump display utilities.
"""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from midiinspect.utils.hexdump import DEFAULT_MAX_BYTES, hex_dump

console = Console()


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> None:
    """Display the hex/ASCII dump of the leading bytes inside a Rich panel."""
    dump = hex_dump(data, max_bytes).rstrip("\n")

    if not dump:
        console.print("[dim](empty file)[/dim]")
        return

    # Text keeps '[' and ']' bytes in the ASCII column from being read as markup
    content = Text(dump)
    content.highlight_regex(r"(?m)^[0-9a-f]{8}:", style="dim")
    content.highlight_regex(r"(?m)\|[^|\n]*\|$", style="cyan")
    content.highlight_regex(r"(?m)\.\.\. \(showing.*\)$", style="dim")

    console.print(Panel(content, title=title, border_style="blue", expand=False))
