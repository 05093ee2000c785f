"""Data models for SMF inspection."""

from midiinspect.models.header import Division, HeaderInfo, MidiFormat, TimingMode
from midiinspect.models.chunk import TrackDescriptor
from midiinspect.models.report import InspectionReport, StructuralWarning, WarningKind

__all__ = [
    "Division",
    "HeaderInfo",
    "MidiFormat",
    "TimingMode",
    "TrackDescriptor",
    "InspectionReport",
    "StructuralWarning",
    "WarningKind",
]
