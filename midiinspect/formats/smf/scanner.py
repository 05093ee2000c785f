"""
Standard MIDI File chunk scanner.

Decodes the MThd header chunk and locates MTrk track chunks. Track bodies
are bounded, never parsed.

SMF Header Layout (14 bytes minimum):
    Offset  Size    Description
    0x00    4       Chunk tag "MThd"
    0x04    4       Header body length (big-endian, normally 6)
    0x08    2       Format (0, 1 or 2)
    0x0A    2       Declared number of tracks
    0x0C    2       Division (ticks per quarter note or SMPTE)

Track chunks follow as "MTrk" + 4-byte big-endian length + body.
"""

import logging
import struct
from pathlib import Path
from typing import List, Optional, Tuple, Union

from midiinspect.models.chunk import CHUNK_HEADER_SIZE, TrackDescriptor
from midiinspect.models.header import Division, HeaderInfo
from midiinspect.utils.validation import (
    HEADER_MAGIC,
    MIN_HEADER_SIZE,
    TRACK_MAGIC,
    BadMagic,
    TruncatedInput,
)

logger = logging.getLogger(__name__)


def decode_header(data: bytes) -> HeaderInfo:
    """
    Decode the MThd header chunk.

    Args:
        data: Raw file contents

    Returns:
        Decoded HeaderInfo

    Raises:
        TruncatedInput: If data is shorter than 14 bytes
        BadMagic: If data does not start with "MThd"
    """
    if len(data) < MIN_HEADER_SIZE:
        raise TruncatedInput(len(data))

    tag = bytes(data[0:4])
    if tag != HEADER_MAGIC:
        raise BadMagic(tag)

    header_length = struct.unpack(">I", data[4:8])[0]
    fmt, num_tracks, division = struct.unpack(">HHH", data[8:14])

    header = HeaderInfo(
        chunk_id=tag.decode("ascii"),
        header_length=header_length,
        format=fmt,
        num_tracks=num_tracks,
        division=Division.decode(division),
    )
    logger.debug(
        "MThd: length=%d format=%d ntrks=%d division=0x%04X",
        header_length,
        fmt,
        num_tracks,
        division,
    )
    return header


def scan_chunks(data: bytes) -> Tuple[List[TrackDescriptor], int]:
    """Scan for MTrk chunks, returning the tracks and the number of resync bytes."""
    tracks: List[TrackDescriptor] = []
    file_size = len(data)
    offset = MIN_HEADER_SIZE
    skipped = 0

    while offset + CHUNK_HEADER_SIZE <= file_size:
        if data[offset : offset + 4] == TRACK_MAGIC:
            length = struct.unpack(">I", data[offset + 4 : offset + 8])[0]
            track = TrackDescriptor(offset=offset, length=length, file_size=file_size)
            tracks.append(track)
            logger.debug("MTrk #%d at 0x%X: %d bytes", len(tracks), offset, length)
            offset += CHUNK_HEADER_SIZE + length
        else:
            # Resynchronize one byte at a time
            offset += 1
            skipped += 1

    if skipped:
        logger.debug("Skipped %d bytes outside MTrk chunks", skipped)

    return tracks, skipped


def scan_tracks(data: bytes) -> List[TrackDescriptor]:
    """
    Find all MTrk chunks after the 14-byte header region.

    Unknown chunk tags are stepped over one byte at a time. Declared
    lengths are trusted to locate the next chunk; descriptors whose length
    runs past the end of data are returned with clipped bounds.

    Args:
        data: Raw file contents

    Returns:
        Track descriptors in file order (possibly empty)
    """
    tracks, _ = scan_chunks(data)
    return tracks


class ChunkScanner:
    """
    Scanner for SMF chunk structure.

    Example:
        scanner = ChunkScanner()
        header, tracks = scanner.parse_file("song.mid")
    """

    def __init__(self):
        self.data: bytes = b""
        self.header: Optional[HeaderInfo] = None
        self.tracks: List[TrackDescriptor] = []
        self.skipped_bytes: int = 0

    def parse_file(self, filepath: Union[str, Path]) -> Tuple[HeaderInfo, List[TrackDescriptor]]:
        """
        Parse an SMF file.

        Args:
            filepath: Path to .mid file

        Returns:
            Tuple of (header, tracks)
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            data = f.read()

        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> Tuple[HeaderInfo, List[TrackDescriptor]]:
        """
        Parse SMF chunk structure from bytes.

        Args:
            data: Raw file contents

        Returns:
            Tuple of (header, tracks)

        Raises:
            TruncatedInput, BadMagic: If the header cannot be decoded
        """
        self.data = bytes(data)
        self.header = None
        self.tracks = []
        self.skipped_bytes = 0

        self.header = decode_header(self.data)
        self.tracks, self.skipped_bytes = scan_chunks(self.data)

        return self.header, self.tracks

    def dump_structure(self) -> str:
        """
        Generate a text dump of chunk structure for debugging.

        Returns:
            Formatted structure description
        """
        lines = ["SMF Chunk Structure:"]
        lines.append(f"  File size: {len(self.data)} bytes")

        if self.header:
            lines.append(f"  Header: {self.header.chunk_id} ({self.header.header_length} bytes)")
            lines.append(f"  Format: {self.header.format} ({self.header.format_label})")
            lines.append(f"  Declared tracks: {self.header.num_tracks}")
            lines.append(f"  Division: 0x{self.header.division.raw:04X}")

        lines.append("")
        lines.append("  Tracks:")
        for i, track in enumerate(self.tracks):
            note = " (clipped)" if track.clipped else ""
            lines.append(
                f"    MTrk {i + 1:3d} @ 0x{track.offset:06X}: {track.length:8d} bytes{note}"
            )

        if self.skipped_bytes:
            lines.append(f"  Skipped bytes: {self.skipped_bytes}")

        return "\n".join(lines)
