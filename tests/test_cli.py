"""CLI tests for the midiinspect typer app."""

import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.app import app
from midiinspect import format_report, inspect_bytes
from midiinspect.utils.hexdump import hex_dump

runner = CliRunner()


def _flat(output: str) -> str:
    """Collapse Rich line wrapping so assertions don't depend on width."""
    return " ".join(output.split())


@pytest.fixture
def write_midi(tmp_path):
    def _write(data: bytes, name: str = "song.mid") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


class TestInfoCommand:
    def test_plain_matches_report(self, write_midi, two_track_data):
        """--plain prints the plain-text report verbatim."""
        path = write_midi(two_track_data)
        result = runner.invoke(app, ["info", str(path), "--plain"])

        assert result.exit_code == 0
        expected = format_report(inspect_bytes(two_track_data), two_track_data, name="song.mid")
        assert result.output == expected

    def test_plain_max_bytes(self, write_midi, two_track_data):
        path = write_midi(two_track_data)
        result = runner.invoke(app, ["info", str(path), "--plain", "--max-bytes", "16"])

        assert result.exit_code == 0
        assert "Raw Data (First 16 bytes):" in result.output
        assert f"... (showing first 16 of {len(two_track_data)} bytes)" in result.output

    def test_rich_output(self, write_midi, mismatch_data):
        path = write_midi(mismatch_data)
        result = runner.invoke(app, ["info", str(path)])
        output = _flat(result.output)

        assert result.exit_code == 0
        assert "Valid MIDI file" in output
        assert "Multiple tracks, synchronous" in output
        assert "Header says 3 tracks, but found 2" in output
        assert "|MThd" in output

    def test_invalid_file(self, write_midi):
        """Malformed files still exit 0 and show the dump."""
        path = write_midi(b"RIFF....WAVE")
        result = runner.invoke(app, ["info", str(path), "--plain"])

        assert result.exit_code == 0
        assert "✗ Error parsing MIDI file" in result.output
        assert "|RIFF....WAVE|" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["info", str(tmp_path / "missing.mid")])

        assert result.exit_code == 1
        assert "not found" in _flat(result.output)


class TestTracksCommand:
    def test_tracks(self, write_midi, clipped_data):
        path = write_midi(clipped_data)
        result = runner.invoke(app, ["tracks", str(path)])
        output = _flat(result.output)

        assert result.exit_code == 0
        assert "Tracks Found: 1" in output
        assert "Clipped" in output
        assert "declares 100 bytes" in output

    def test_tracks_bad_header(self, write_midi):
        path = write_midi(b"short")
        result = runner.invoke(app, ["tracks", str(path)])

        assert result.exit_code == 1
        assert "too small" in _flat(result.output)


class TestDumpCommand:
    def test_plain_dump(self, write_midi):
        data = bytes(range(256)) * 3
        path = write_midi(data, "blob.bin")
        result = runner.invoke(app, ["dump", str(path), "--plain"])

        assert result.exit_code == 0
        assert result.output == hex_dump(data)

    def test_panel_dump(self, write_midi, two_track_data):
        path = write_midi(two_track_data)
        result = runner.invoke(app, ["dump", str(path), "-m", "32"])

        assert result.exit_code == 0
        assert "00000000:" in result.output
        assert "showing first 32" in result.output

    def test_negative_max_bytes_rejected(self, write_midi, two_track_data):
        path = write_midi(two_track_data)
        result = runner.invoke(app, ["dump", str(path), "--max-bytes", "-1"])

        assert result.exit_code != 0


class TestValidateCommand:
    def test_valid(self, write_midi, two_track_data):
        path = write_midi(two_track_data)
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 0
        assert "VALID" in result.output
        assert "INVALID" not in result.output

    def test_warning_not_fatal(self, write_midi, mismatch_data):
        path = write_midi(mismatch_data)
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 0
        assert "WARN" in result.output

    def test_strict(self, write_midi, mismatch_data):
        path = write_midi(mismatch_data)
        result = runner.invoke(app, ["validate", str(path), "--strict"])

        assert result.exit_code == 1
        assert "INVALID" in result.output

    def test_bad_magic(self, write_midi):
        path = write_midi(b"RIFF" + bytes(20))
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "ERROR" in result.output


class TestAppCommands:
    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "midiinspect" in result.output

    def test_verbose_logging(self, write_midi, two_track_data):
        path = write_midi(two_track_data)
        result = runner.invoke(app, ["-v", "info", str(path), "--plain"])

        assert result.exit_code == 0
        assert "Tracks Found: 2" in result.output
