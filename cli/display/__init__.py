"""
CLI display modules.
"""

from cli.display.tables import (
    display_header_info,
    display_tracks_table,
    display_warnings,
)
from cli.display.hex_view import display_hex_dump

__all__ = [
    "display_header_info",
    "display_tracks_table",
    "display_warnings",
    "display_hex_dump",
]
