"""
Validation errors and quick checks for SMF data.
"""

HEADER_MAGIC = b"MThd"
TRACK_MAGIC = b"MTrk"
MIN_HEADER_SIZE = 14  # tag + length + format + ntrks + division


class SMFError(ValueError):
    """Raised when SMF header data cannot be decoded."""

    pass


class TruncatedInput(SMFError):
    """Buffer is shorter than the minimum header size."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(
            f"File too small to be a valid MIDI file ({size} bytes, need {MIN_HEADER_SIZE})"
        )


class BadMagic(SMFError):
    """First four bytes are not the MThd tag."""

    def __init__(self, found: bytes):
        self.found = found
        super().__init__(
            f"Invalid MIDI header. Expected 'MThd', got '{ascii_tag(found)}'"
        )


def ascii_tag(tag: bytes) -> str:
    """Render a chunk tag for messages, replacing undecodable bytes."""
    return tag.decode("ascii", errors="replace")


def validate_max_bytes(max_bytes: int) -> None:
    """
    Validate a dump size limit.

    Raises:
        ValueError: If max_bytes is negative
    """
    if max_bytes < 0:
        raise ValueError(f"max_bytes must be >= 0, got {max_bytes}")
