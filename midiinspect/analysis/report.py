"""
Plain-text structural report.
"""

from typing import List, Optional

from midiinspect.models.header import HeaderInfo
from midiinspect.models.report import InspectionReport, WarningKind
from midiinspect.utils.hexdump import DEFAULT_MAX_BYTES, hex_dump

RULE_WIDTH = 60


def header_lines(header: HeaderInfo) -> List[str]:
    """Header fields, one per line, including the timing fields of the active mode."""
    division = header.division
    lines = [
        f"Header Chunk: {header.chunk_id}",
        f"Header Length: {header.header_length} bytes",
        f"Format: {header.format} ({header.format_label})",
        f"Number of Tracks: {header.num_tracks}",
        f"Timing Format: {header.timing_format}",
    ]

    if division.is_smpte:
        rate = f"{division.frames_per_second}"
        if not division.is_standard_rate:
            rate += " (non-standard)"
        lines.append(f"SMPTE Format: 0x{division.smpte_format:02x}")
        lines.append(f"Frames per Second: {rate}")
        lines.append(f"Ticks per Frame: {division.ticks_per_frame}")
    else:
        lines.append(f"Ticks per Quarter Note: {division.ticks_per_quarter_note}")

    return lines


def format_report(
    report: InspectionReport,
    data: bytes,
    name: Optional[str] = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
    show_dump: bool = True,
) -> str:
    """
    Render the full inspection as plain text.

    Args:
        report: Result of inspecting data
        data: The inspected bytes, used for the raw dump
        name: File name for the banner
        max_bytes: Dump size limit
        show_dump: Include the raw data section

    Returns:
        Report text ending with a newline
    """
    out: List[str] = []

    out.append("=" * RULE_WIDTH)
    out.append(f"MIDI File Inspector - {name}" if name else "MIDI File Inspector")
    out.append("=" * RULE_WIDTH)
    out.append(f"File Size: {report.file_size} bytes")
    out.append("")

    if report.header is None:
        out.append(f"✗ Error parsing MIDI file: {report.header_error}")
        out.append("")
    else:
        out.append("✓ Valid MIDI file detected")
        out.append("")
        out.append("MIDI Header Information:")
        out.extend(f"  {line}" for line in header_lines(report.header))
        out.append("")

        out.append("Track Information:")
        out.append(f"  Tracks Found: {len(report.tracks)}")
        for i, track in enumerate(report.tracks):
            out.append(f"  Track {i + 1}: {track.length} bytes (offset: {track.offset})")
        out.append("")

        for warning in report.warnings:
            if warning.kind is WarningKind.HEADER_INVALID:
                continue
            out.append(f"⚠ Warning: {warning.message}")
            out.append("")

    if show_dump:
        out.append(f"Raw Data (First {max_bytes} bytes):")
        out.append("-" * RULE_WIDTH)
        out.append(hex_dump(data, max_bytes))

    return "\n".join(out) + "\n"
