"""Tests for reverse chord detection.

Tests cover:
- Exact matches and confidence ranking
- The 75% confidence threshold
- Missing/extra pitch class reporting
- Most-likely selection preferring exact fits
- Result formatting
- Detection from fret shapes
"""

import pytest
from pathlib import Path

# Add project root to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from fretlab.core import NOTE_NAMES
from fretlab.theory import CHORD_TYPES, STANDARD_TUNING, build_chord
from fretlab.inference import (
    ChordDetector,
    DetectedChord,
    DetectionConfig,
    detect_chord,
    detect_chord_from_frets,
    format_detection_results,
    get_most_likely_chord,
)


class TestDetectChord:
    """Tests for detect_chord."""

    def test_c_major_triad(self):
        detected = detect_chord([60, 64, 67])
        first = detected[0]
        assert (first.root, first.chord_type, first.symbol) == ("C", "major", "C")
        assert first.confidence == 1.0
        assert first.missing_notes is None
        assert first.extra_notes is None

    def test_ranking_keeps_registry_order_on_ties(self):
        detected = detect_chord([60, 64, 67])
        assert [c.symbol for c in detected] == ["C", "C7", "Cmaj7", "C6", "Cadd9"]

    def test_partial_match_reports_missing(self):
        detected = detect_chord([60, 64, 67])
        c7 = next(c for c in detected if c.chord_type == "dominant7")
        assert c7.confidence == 0.75
        assert c7.missing_notes == [10]
        assert c7.extra_notes is None

    def test_octave_doublings_ignored(self):
        assert detect_chord([48, 60, 64, 67, 72, 76]) == detect_chord([60, 64, 67])

    def test_input_order_irrelevant(self):
        assert detect_chord([67, 60, 64]) == detect_chord([60, 64, 67])

    def test_empty_input(self):
        assert detect_chord([]) == []

    def test_single_note_has_no_match(self):
        # Every template has at least three tones, so one note scores 1/3
        assert detect_chord([60]) == []

    def test_round_trip_all_types_and_roots(self):
        """Every built chord is detected with its own root and type at 100%."""
        for root in NOTE_NAMES:
            for chord_type in CHORD_TYPES:
                chord = build_chord(root, chord_type)
                detected = detect_chord(chord.notes)
                assert any(
                    d.root == root and d.chord_type == chord_type and d.confidence == 1.0
                    for d in detected
                ), f"{root} {chord_type} not detected"

    def test_results_sorted_by_confidence(self):
        detected = detect_chord([60, 62, 64, 67, 71])
        confidences = [d.confidence for d in detected]
        assert confidences == sorted(confidences, reverse=True)


class TestThreshold:
    """Tests for the 0.75 confidence cutoff."""

    def test_two_of_four_excluded(self):
        detected = detect_chord([60, 64])
        assert not any(d.chord_type == "dominant7" and d.root == "C" for d in detected)
        assert detected == []

    def test_three_of_four_included(self):
        detected = detect_chord([60, 64, 70])
        c7 = [d for d in detected if d.root == "C" and d.chord_type == "dominant7"]
        assert len(c7) == 1
        assert c7[0].confidence == 0.75
        assert c7[0].missing_notes == [7]

    def test_custom_threshold(self):
        detector = ChordDetector(DetectionConfig(min_confidence=1.0))
        detected = detector.detect([60, 64, 67])
        assert [d.symbol for d in detected] == ["C"]


class TestMostLikely:
    """Tests for get_most_likely_chord."""

    def test_prefers_chord_without_extra_notes(self):
        # C E G + D: C major has an extra D, Cadd9 fits exactly
        detected = detect_chord([60, 62, 64, 67])
        assert detected[0].symbol == "C"
        assert detected[0].extra_notes == [2]

        best = get_most_likely_chord(detected)
        assert best.symbol == "Cadd9"
        assert best.extra_notes is None

    def test_empty_list(self):
        assert get_most_likely_chord([]) is None

    def test_confidence_breaks_ties(self):
        candidates = [
            DetectedChord(root="C", chord_type="dominant7", symbol="C7", confidence=0.75, missing_notes=[10]),
            DetectedChord(root="C", chord_type="major", symbol="C", confidence=1.0),
        ]
        assert get_most_likely_chord(candidates).symbol == "C"

    def test_does_not_reorder_input(self):
        detected = detect_chord([60, 62, 64, 67])
        before = list(detected)
        get_most_likely_chord(detected)
        assert detected == before


class TestFormatting:
    """Tests for format_detection_results."""

    def test_format_top_five(self):
        assert format_detection_results(detect_chord([60, 64, 67])) == [
            "C", "C7 (75%)", "Cmaj7 (75%)", "C6 (75%)", "Cadd9 (75%)",
        ]

    def test_extra_notes_marker(self):
        formatted = format_detection_results(detect_chord([60, 62, 64, 67]), limit=1)
        assert formatted == ["C +notes"]

    def test_partial_with_extra(self):
        chord = DetectedChord(
            root="E", chord_type="minor7", symbol="Em7", confidence=0.75,
            missing_notes=[11], extra_notes=[0],
        )
        assert chord.format() == "Em7 (75%) +notes"

    def test_limit(self):
        detected = detect_chord([60, 64, 67])
        assert len(format_detection_results(detected, limit=2)) == 2
        assert format_detection_results([]) == []


class TestDetectFromFrets:
    """Tests for detection from fret shapes."""

    def test_open_c_shape(self):
        detected = detect_chord_from_frets([None, 3, 2, 0, 1, 0], STANDARD_TUNING.strings)
        assert detected[0].symbol == "C"
        assert detected[0].confidence == 1.0

    def test_open_am_shape(self):
        detected = detect_chord_from_frets([None, 0, 2, 2, 1, 0], STANDARD_TUNING.strings)
        assert get_most_likely_chord(detected).symbol == "Am"

    def test_all_muted(self):
        assert detect_chord_from_frets([None] * 6, STANDARD_TUNING.strings) == []

    def test_open_shapes_are_exact(self):
        c_shape = detect_chord_from_frets([None, 3, 2, 0, 1, 0], STANDARD_TUNING.strings)
        assert c_shape[0].is_exact
        # A low F is outside the C triad
        f_bass = detect_chord_from_frets([1, 3, 2, 0, 1, 0], STANDARD_TUNING.strings)
        assert not f_bass[0].is_exact
