"""
Plain-text hex/ASCII dump.

Row layout (16 bytes per row):

    00000000: 4d 54 68 64 00 00 00 06 00 01 00 02 00 60 4d 54 |MThd.........`MT|
"""

from midiinspect.utils.validation import validate_max_bytes

DEFAULT_MAX_BYTES = 512
BYTES_PER_ROW = 16
HEX_COLUMN_WIDTH = BYTES_PER_ROW * 3 - 1


def printable(byte: int) -> str:
    """Map a byte to its ASCII character, or '.' if not printable."""
    return chr(byte) if 32 <= byte <= 126 else "."


def format_row(offset: int, chunk: bytes) -> str:
    """Format one dump row; short rows are padded so columns align."""
    hex_str = " ".join(f"{b:02x}" for b in chunk)
    ascii_str = "".join(printable(b) for b in chunk)
    return f"{offset:08x}: {hex_str:<{HEX_COLUMN_WIDTH}} |{ascii_str}|\n"


def hex_dump(data: bytes, max_bytes: int = DEFAULT_MAX_BYTES) -> str:
    """
    Render the first max_bytes of data as a hex/ASCII dump.

    Args:
        data: Raw bytes
        max_bytes: Maximum number of bytes to show

    Returns:
        Dump text, one newline-terminated row per 16 bytes, followed by a
        truncation notice if data is longer than max_bytes
    """
    validate_max_bytes(max_bytes)

    shown = data[:max_bytes]
    rows = [
        format_row(offset, shown[offset : offset + BYTES_PER_ROW])
        for offset in range(0, len(shown), BYTES_PER_ROW)
    ]

    if len(data) > max_bytes:
        rows.append(f"\n... (showing first {max_bytes} of {len(data)} bytes)\n")

    return "".join(rows)
