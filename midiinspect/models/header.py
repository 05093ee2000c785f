"""
Header chunk model for Standard MIDI Files.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MidiFormat(Enum):
    """
    SMF format codes.

    Codes outside 0-2 map to UNKNOWN; the raw code stays on HeaderInfo.
    """

    SINGLE_TRACK = 0
    MULTI_TRACK_SYNC = 1
    MULTI_TRACK_ASYNC = 2
    UNKNOWN = -1

    @classmethod
    def from_code(cls, code: int) -> "MidiFormat":
        """Get format variant from the header's format field."""
        for member in cls:
            if member.value == code:
                return member
        return cls.UNKNOWN

    def label(self, code: Optional[int] = None) -> str:
        """Human readable description of this format."""
        if self is MidiFormat.SINGLE_TRACK:
            return "Single track"
        if self is MidiFormat.MULTI_TRACK_SYNC:
            return "Multiple tracks, synchronous"
        if self is MidiFormat.MULTI_TRACK_ASYNC:
            return "Multiple tracks, asynchronous"
        if code is None:
            return "Unknown"
        return f"Unknown (code {code})"


class TimingMode(Enum):
    """Interpretation selected by bit 15 of the division field."""

    TICKS_PER_QUARTER = "Ticks per quarter note"
    SMPTE = "SMPTE"


SMPTE_FRAME_RATES = (24, 25, 29, 30)


@dataclass(frozen=True)
class Division:
    """
    Decoded division field.

    Exactly one of the two timing interpretations is populated:
    ticks_per_quarter_note in TICKS_PER_QUARTER mode, smpte_format and
    ticks_per_frame in SMPTE mode.
    """

    raw: int
    mode: TimingMode
    ticks_per_quarter_note: Optional[int] = None
    smpte_format: Optional[int] = None  # bits 14-8
    ticks_per_frame: Optional[int] = None  # bits 7-0

    @classmethod
    def decode(cls, raw: int) -> "Division":
        """
        Decode a 16-bit division value.

        Args:
            raw: Division field as read from the header

        Returns:
            Division with the fields of the selected mode filled in
        """
        if raw & 0x8000:
            return cls(
                raw=raw,
                mode=TimingMode.SMPTE,
                smpte_format=(raw >> 8) & 0x7F,
                ticks_per_frame=raw & 0xFF,
            )
        return cls(
            raw=raw,
            mode=TimingMode.TICKS_PER_QUARTER,
            ticks_per_quarter_note=raw & 0x7FFF,
        )

    @property
    def is_smpte(self) -> bool:
        return self.mode is TimingMode.SMPTE

    @property
    def frames_per_second(self) -> Optional[int]:
        """Frame rate from the high byte read as a negative 8-bit value."""
        if not self.is_smpte:
            return None
        return 0x100 - (self.raw >> 8)

    @property
    def is_standard_rate(self) -> bool:
        return self.frames_per_second in SMPTE_FRAME_RATES


@dataclass(frozen=True)
class HeaderInfo:
    """
    Decoded MThd chunk.

    num_tracks is the declared count only; discovered tracks come from the
    chunk scan.
    """

    chunk_id: str
    header_length: int
    format: int
    num_tracks: int
    division: Division

    @property
    def format_type(self) -> MidiFormat:
        return MidiFormat.from_code(self.format)

    @property
    def format_label(self) -> str:
        return self.format_type.label(self.format)

    @property
    def timing_format(self) -> str:
        return self.division.mode.value
