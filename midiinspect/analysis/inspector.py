"""
SMF structural inspector.

Runs header decode and track discovery over a byte buffer and collects
the results and any structural findings into an InspectionReport. Malformed
content never raises; header failures become report warnings.
"""

import logging
from pathlib import Path
from typing import List, Union

from midiinspect.formats.smf.scanner import decode_header, scan_chunks
from midiinspect.models.chunk import TrackDescriptor
from midiinspect.models.header import HeaderInfo
from midiinspect.models.report import InspectionReport, StructuralWarning, WarningKind
from midiinspect.utils.validation import SMFError

logger = logging.getLogger(__name__)


class SMFInspector:
    """
    Inspect the chunk structure of Standard MIDI Files.

    Example:
        inspector = SMFInspector()
        report = inspector.inspect_file("song.mid")
        for warning in report.warnings:
            print(warning)
    """

    def __init__(self):
        self.data: bytes = b""

    def inspect_file(self, filepath: Union[str, Path]) -> InspectionReport:
        """Inspect an SMF file on disk."""
        path = Path(filepath)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        with open(path, "rb") as f:
            self.data = f.read()

        return self._inspect()

    def inspect_bytes(self, data: bytes) -> InspectionReport:
        """Inspect SMF data from bytes."""
        self.data = bytes(data)
        return self._inspect()

    def _inspect(self) -> InspectionReport:
        report = InspectionReport(file_size=len(self.data))

        try:
            header = decode_header(self.data)
        except SMFError as e:
            logger.debug("Header decode failed: %s", e)
            report.header_error = str(e)
            report.warnings.append(
                StructuralWarning(kind=WarningKind.HEADER_INVALID, message=str(e), offset=0)
            )
            return report

        report.header = header
        report.tracks, report.skipped_bytes = scan_chunks(self.data)
        report.warnings.extend(self._check_track_bounds(report.tracks))
        report.warnings.extend(self._check_track_count(header, report.tracks))

        logger.debug(
            "Inspected %d bytes: %d tracks, %d warnings",
            report.file_size,
            len(report.tracks),
            len(report.warnings),
        )
        return report

    def _check_track_bounds(self, tracks: List[TrackDescriptor]) -> List[StructuralWarning]:
        """Flag tracks whose declared length runs past the end of the file."""
        warnings = []
        for i, track in enumerate(tracks):
            if not track.clipped:
                continue
            warnings.append(
                StructuralWarning(
                    kind=WarningKind.OUT_OF_RANGE_CHUNK,
                    message=(
                        f"Track {i + 1} declares {track.length} bytes but only "
                        f"{track.available} are present (clipped at offset {track.data_end})"
                    ),
                    offset=track.offset,
                )
            )
        return warnings

    def _check_track_count(
        self, header: HeaderInfo, tracks: List[TrackDescriptor]
    ) -> List[StructuralWarning]:
        """Compare the declared track count with the number found."""
        if len(tracks) == header.num_tracks:
            return []
        return [
            StructuralWarning(
                kind=WarningKind.TRACK_COUNT_MISMATCH,
                message=f"Header says {header.num_tracks} tracks, but found {len(tracks)}",
                offset=10,
            )
        ]


def inspect_bytes(data: bytes) -> InspectionReport:
    """
    Convenience function to inspect SMF bytes.

    Args:
        data: Raw file contents

    Returns:
        InspectionReport (never raises for malformed content)
    """
    return SMFInspector().inspect_bytes(data)


def inspect_file(filepath: Union[str, Path]) -> InspectionReport:
    """
    Convenience function to inspect an SMF file.

    Args:
        filepath: Path to .mid file

    Returns:
        InspectionReport

    Raises:
        FileNotFoundError: If the file does not exist
    """
    return SMFInspector().inspect_file(filepath)
