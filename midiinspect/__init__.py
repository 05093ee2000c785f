"""
midiinspect - Structural inspector for Standard MIDI Files.

This library provides tools to:
- Decode the MThd header chunk (format, track count, division)
- Locate MTrk track chunks and bound their bodies
- Report structural discrepancies and render hex/ASCII dumps

Example usage:
    from midiinspect import inspect_file, format_report

    report = inspect_file("song.mid")
    print(report.header.format_label, len(report.tracks))
"""

__version__ = "0.1.0"
__author__ = "midiinspect Contributors"

from midiinspect.analysis.inspector import SMFInspector, inspect_bytes, inspect_file
from midiinspect.analysis.report import format_report
from midiinspect.formats.smf.scanner import ChunkScanner, decode_header, scan_tracks
from midiinspect.models.chunk import TrackDescriptor
from midiinspect.models.header import Division, HeaderInfo, MidiFormat, TimingMode
from midiinspect.models.report import InspectionReport, StructuralWarning, WarningKind
from midiinspect.utils.hexdump import hex_dump
from midiinspect.utils.validation import BadMagic, SMFError, TruncatedInput

__all__ = [
    "SMFInspector",
    "inspect_bytes",
    "inspect_file",
    "format_report",
    "ChunkScanner",
    "decode_header",
    "scan_tracks",
    "TrackDescriptor",
    "Division",
    "HeaderInfo",
    "MidiFormat",
    "TimingMode",
    "InspectionReport",
    "StructuralWarning",
    "WarningKind",
    "hex_dump",
    "BadMagic",
    "SMFError",
    "TruncatedInput",
]
