"""Standard MIDI File chunk handling."""

from midiinspect.formats.smf.scanner import ChunkScanner, decode_header, scan_chunks, scan_tracks

__all__ = ["ChunkScanner", "decode_header", "scan_chunks", "scan_tracks"]
