"""Utility functions for midiinspect."""

from midiinspect.utils.hexdump import hex_dump, DEFAULT_MAX_BYTES
from midiinspect.utils.validation import (
    SMFError,
    TruncatedInput,
    BadMagic,
)

__all__ = [
    "hex_dump",
    "DEFAULT_MAX_BYTES",
    "SMFError",
    "TruncatedInput",
    "BadMagic",
]
