"""
Inspection result model.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from midiinspect.models.chunk import TrackDescriptor
from midiinspect.models.header import HeaderInfo


class WarningKind(Enum):
    """Categories of non-fatal structural findings."""

    HEADER_INVALID = "header_invalid"
    TRACK_COUNT_MISMATCH = "track_count_mismatch"
    OUT_OF_RANGE_CHUNK = "out_of_range_chunk"


@dataclass(frozen=True)
class StructuralWarning:
    """A single advisory finding. Never halts inspection."""

    kind: WarningKind
    message: str
    offset: int = 0

    def __str__(self) -> str:
        return self.message


@dataclass
class InspectionReport:
    """Complete structural inspection of one SMF byte stream."""

    file_size: int
    header: Optional[HeaderInfo] = None
    tracks: List[TrackDescriptor] = field(default_factory=list)
    warnings: List[StructuralWarning] = field(default_factory=list)
    header_error: Optional[str] = None
    skipped_bytes: int = 0

    @property
    def header_valid(self) -> bool:
        return self.header is not None

    @property
    def track_count_matches(self) -> bool:
        if self.header is None:
            return False
        return len(self.tracks) == self.header.num_tracks

    @property
    def messages(self) -> List[str]:
        """Warnings as free text."""
        return [w.message for w in self.warnings]

    def warnings_of(self, kind: WarningKind) -> List[StructuralWarning]:
        return [w for w in self.warnings if w.kind is kind]
