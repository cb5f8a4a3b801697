"""Tests for the command-line interface."""

import pytest
from pathlib import Path

# Add project root to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from typer.testing import CliRunner

from fretlab.cli import app
from fretlab.output import export_chord_to_midi
from fretlab.theory import build_chord


runner = CliRunner()


class TestDetectCommand:
    """Tests for `fretlab detect`."""

    def test_note_names(self):
        result = runner.invoke(app, ["detect", "C4", "E4", "G4"])
        assert result.exit_code == 0
        assert "Most likely: C" in result.output

    def test_midi_numbers(self):
        result = runner.invoke(app, ["detect", "57", "60", "64"])
        assert result.exit_code == 0
        assert "Most likely: Am" in result.output

    def test_no_match(self):
        result = runner.invoke(app, ["detect", "C4", "E4"])
        assert result.exit_code == 0
        assert "No chord matches" in result.output

    def test_bad_note(self):
        result = runner.invoke(app, ["detect", "H4"])
        assert result.exit_code == 1


class TestChordCommand:
    """Tests for `fretlab chord`."""

    def test_notes(self):
        result = runner.invoke(app, ["chord", "Am7"])
        assert result.exit_code == 0
        assert "A4 C5 E5 G5" in result.output

    def test_flats(self):
        result = runner.invoke(app, ["chord", "Bb", "--flats"])
        assert result.exit_code == 0
        assert "Bb4 D5 F5" in result.output

    def test_invalid_symbol(self):
        result = runner.invoke(app, ["chord", "Cmaj7#11"])
        assert result.exit_code == 1

    def test_unspellable_root(self):
        result = runner.invoke(app, ["chord", "Cb"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Unrecognized chord symbol" in result.output


class TestScaleCommand:
    """Tests for `fretlab scale`."""

    def test_c_major(self):
        result = runner.invoke(app, ["scale", "C", "major"])
        assert result.exit_code == 0
        assert "C D E F G A B" in result.output
        assert "C Dm Em F G Am Bdim" in result.output

    def test_unknown_type(self):
        result = runner.invoke(app, ["scale", "C", "bebop"])
        assert result.exit_code == 1


class TestVoicingsCommand:
    """Tests for `fretlab voicings`."""

    def test_preset_shape_listed(self):
        result = runner.invoke(app, ["voicings", "C"])
        assert result.exit_code == 0
        assert "x32010" in result.output

    def test_unspellable_root(self):
        result = runner.invoke(app, ["voicings", "E#"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)

    def test_no_room_on_neck(self):
        result = runner.invoke(app, ["voicings", "Cm7", "--max-fret", "3"])
        assert result.exit_code == 0
        assert "No voicings found" in result.output


class TestProgressionCommand:
    """Tests for `fretlab progression`."""

    def test_preset_export(self, tmp_path):
        out = tmp_path / "blues.mid"
        result = runner.invoke(app, ["progression", "-p", "12-bar-blues", "-k", "A", "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_bytes()[:4] == b"MThd"

    def test_roman_with_transpose(self):
        result = runner.invoke(app, ["progression", "-r", "I,V,vi,IV", "--transpose", "G"])
        assert result.exit_code == 0
        assert "Em" in result.output

    def test_invalid_numeral(self):
        result = runner.invoke(app, ["progression", "-r", "I,X"])
        assert result.exit_code == 1

    def test_unknown_preset(self):
        result = runner.invoke(app, ["progression", "-p", "nope"])
        assert result.exit_code == 1

    def test_requires_source(self):
        result = runner.invoke(app, ["progression"])
        assert result.exit_code == 1


class TestExportCommand:
    """Tests for `fretlab export`."""

    def test_export_chord(self, tmp_path):
        out = tmp_path / "g7.mid"
        result = runner.invoke(app, ["export", "G7", "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_bytes()[:4] == b"MThd"

    def test_duration_and_tempo(self, tmp_path):
        out = tmp_path / "am.mid"
        result = runner.invoke(app, ["export", "Am", "-o", str(out), "-d", "2", "-t", "90"])
        assert result.exit_code == 0
        assert out.read_bytes() == export_chord_to_midi(build_chord("A", "minor"), 2.0, 90)

    def test_zero_tempo(self, tmp_path):
        result = runner.invoke(app, ["export", "C", "-o", str(tmp_path / "c.mid"), "-t", "0"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Tempo must be positive" in result.output

    def test_unspellable_root(self, tmp_path):
        result = runner.invoke(app, ["export", "B#7", "-o", str(tmp_path / "b.mid")])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
