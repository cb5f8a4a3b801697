"""Inference layer - Musical understanding from raw notes.

Pipeline: MIDI notes / fret shapes → pitch classes → ranked chord candidates
"""

from .chords import (
    ChordDetector,
    DetectedChord,
    DetectionConfig,
    detect_chord,
    detect_chord_from_frets,
    get_most_likely_chord,
    format_detection_results,
)

__all__ = [
    "ChordDetector",
    "DetectedChord",
    "DetectionConfig",
    "detect_chord",
    "detect_chord_from_frets",
    "get_most_likely_chord",
    "format_detection_results",
]
