"""
SMF inspection module.

Provides structural inspection and plain-text reporting of MIDI files.
"""

from midiinspect.analysis.inspector import SMFInspector, inspect_bytes, inspect_file
from midiinspect.analysis.report import format_report, header_lines

__all__ = [
    "SMFInspector",
    "inspect_bytes",
    "inspect_file",
    "format_report",
    "header_lines",
]
