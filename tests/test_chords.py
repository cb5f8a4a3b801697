"""Tests for the chord catalog, chord construction and symbol parsing."""

import pytest
from pathlib import Path

# Add project root to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from fretlab.core import NOTE_NAMES, UnknownChordType
from fretlab.theory import (
    CHORD_TYPES,
    COMMON_CHORD_QUALITIES,
    Chord,
    ChordSymbol,
    build_chord,
    chord_from_symbol,
    chord_type_from_suffix,
    get_all_chord_types,
    get_chord_definition,
    parse_chord_symbol,
)


class TestCatalog:
    """Tests for the chord type registry."""

    def test_registry_contents(self):
        assert get_all_chord_types() == [
            "major", "minor", "diminished", "augmented", "sus2", "sus4",
            "dominant7", "major7", "minor7", "diminished7", "halfDiminished7",
            "major6", "minor6", "major9", "dominant9", "minor9", "add9",
        ]

    def test_interval_sets(self):
        assert CHORD_TYPES["halfDiminished7"].intervals == (0, 3, 6, 10)
        assert CHORD_TYPES["halfDiminished7"].symbol == "m7b5"
        assert CHORD_TYPES["add9"].intervals == (0, 4, 7, 14)
        assert CHORD_TYPES["dominant9"].symbol == "9"
        assert CHORD_TYPES["major"].symbol == ""

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            CHORD_TYPES["power"] = None  # type: ignore[index]

    def test_get_chord_definition(self):
        assert get_chord_definition("minor7").name == "Minor 7th"
        assert get_chord_definition("power") is None


class TestBuildChord:
    """Tests for build_chord."""

    def test_c_major(self):
        chord = build_chord("C", "major")
        assert chord == Chord(root="C", chord_type="major", notes=[60, 64, 67], symbol="C")

    def test_root_anchored_in_octave_four(self):
        chord = build_chord("A", "minor7")
        assert chord.notes == [69, 72, 76, 79]
        assert chord.symbol == "Am7"

    def test_explicit_root_midi(self):
        chord = build_chord("C", "major9", 48)
        assert chord.notes == [48, 52, 55, 59, 62]

    def test_flat_root_keeps_spelling(self):
        chord = build_chord("Bb", "dominant7")
        assert chord.symbol == "Bb7"
        assert chord.notes[0] == 70

    def test_unknown_type_raises(self):
        with pytest.raises(UnknownChordType):
            build_chord("C", "power")

    def test_notes_match_definition(self):
        """Every chord has one note per interval and the expected pitch classes."""
        for root_pc, root in enumerate(NOTE_NAMES):
            for chord_type, definition in CHORD_TYPES.items():
                chord = build_chord(root, chord_type)
                assert len(chord.notes) == len(definition.intervals)
                assert chord.pitch_classes == {
                    (root_pc + i) % 12 for i in definition.intervals
                }


class TestParseChordSymbol:
    """Tests for exact-suffix symbol parsing."""

    def test_half_diminished(self):
        assert parse_chord_symbol("Am7b5") == ChordSymbol(root="A", chord_type="halfDiminished7")

    def test_common_symbols(self):
        assert parse_chord_symbol("C") == ("C", "major")
        assert parse_chord_symbol("Dm") == ("D", "minor")
        assert parse_chord_symbol("G7") == ("G", "dominant7")
        assert parse_chord_symbol("Cm7") == ("C", "minor7")
        assert parse_chord_symbol("Emaj9") == ("E", "major9")

    def test_flat_root_normalized(self):
        assert parse_chord_symbol("Bbmaj7") == ("A#", "major7")

    def test_no_root(self):
        assert parse_chord_symbol("Hm") is None
        assert parse_chord_symbol("m7") is None
        assert parse_chord_symbol("") is None

    def test_unspellable_root(self):
        # Matches the root pattern but is in neither note-name table
        assert parse_chord_symbol("Cb") is None
        assert parse_chord_symbol("E#7") is None
        assert parse_chord_symbol("B#m") is None
        assert chord_from_symbol("Fbmaj7") is None

    def test_unknown_suffix(self):
        assert parse_chord_symbol("Cmaj7#11") is None
        assert parse_chord_symbol("Cmin") is None

    def test_exact_and_containment_parsers_diverge(self):
        """Symbol parsing is exact; progression parsing uses containment."""
        assert parse_chord_symbol("Cmaj7#11") is None
        assert chord_type_from_suffix("maj7#11") == "major7"

    def test_chord_from_symbol(self):
        chord = chord_from_symbol("Am")
        assert chord.notes == [69, 72, 76]
        assert chord_from_symbol("Xyz") is None


class TestChordQualities:
    """Tests for the quality sequences of common progressions."""

    def test_case_of_numeral_gives_quality(self):
        for name, qualities in COMMON_CHORD_QUALITIES.items():
            expected = tuple(
                "minor" if numeral == numeral.lower() else "major"
                for numeral in name.split("-")
            )
            assert qualities == expected, name
