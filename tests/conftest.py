"""Test configuration and fixtures."""

import io
import struct

import pytest


def build_header(fmt: int = 1, num_tracks: int = 2, division: int = 96, length: int = 6) -> bytes:
    """Build an MThd chunk (14 bytes for the standard 6-byte body)."""
    return b"MThd" + struct.pack(">IHHH", length, fmt, num_tracks, division)


def build_track(body: bytes, declared_length: int = None) -> bytes:
    """Build an MTrk chunk; declared_length overrides the real body size."""
    if declared_length is None:
        declared_length = len(body)
    return b"MTrk" + struct.pack(">I", declared_length) + body


END_OF_TRACK = b"\x00\xff\x2f\x00"
NOTE_BODY = b"\x00\x90\x3c\x40\x60\x80\x3c\x40" + END_OF_TRACK


@pytest.fixture
def two_track_data():
    """Well-formed format 1 file: header + two MTrk chunks."""
    return build_header(num_tracks=2) + build_track(END_OF_TRACK) + build_track(NOTE_BODY)


@pytest.fixture
def mismatch_data():
    """Header declares three tracks but only two are present."""
    return build_header(num_tracks=3) + build_track(END_OF_TRACK) + build_track(NOTE_BODY)


@pytest.fixture
def clipped_data():
    """Single track whose declared length runs past the end of the file."""
    return build_header(fmt=0, num_tracks=1) + build_track(END_OF_TRACK, declared_length=100)


@pytest.fixture
def smpte_data():
    """Format 0 file with SMPTE division 0x8228."""
    return build_header(fmt=0, num_tracks=1, division=0x8228) + build_track(END_OF_TRACK)


@pytest.fixture
def mido_data():
    """Format 1 file written by mido."""
    mido = pytest.importorskip("mido")

    mid = mido.MidiFile(type=1, ticks_per_beat=480)
    tempo_track = mido.MidiTrack()
    tempo_track.append(mido.MetaMessage("set_tempo", tempo=500000, time=0))
    mid.tracks.append(tempo_track)

    for note in (60, 64, 67):
        track = mido.MidiTrack()
        track.append(mido.Message("note_on", note=note, velocity=64, time=0))
        track.append(mido.Message("note_off", note=note, velocity=64, time=480))
        mid.tracks.append(track)

    buf = io.BytesIO()
    mid.save(file=buf)
    return buf.getvalue()


@pytest.fixture
def midi_file(tmp_path, two_track_data):
    """Return path to a well-formed MIDI file on disk."""
    path = tmp_path / "song.mid"
    path.write_bytes(two_track_data)
    return path
