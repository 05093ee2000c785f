"""Format handlers."""

from midiinspect.formats.smf import ChunkScanner

__all__ = ["ChunkScanner"]
