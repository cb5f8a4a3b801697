"""Chord detection - Reverse chord finder.

Infers chord identity from a raw set of MIDI notes by template matching:
- Every pitch class present is tried as a root
- Every registered chord type is tried as a template
- Confidence is the fraction of template tones present
- Missing and extra pitch classes are reported for each candidate
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core import NOTE_NAMES, note_at_fret
from ..theory.chords import CHORD_TYPES, ChordDefinition

logger = logging.getLogger(__name__)


@dataclass
class DetectedChord:
    """A candidate chord with its confidence score."""

    root: str
    chord_type: str
    symbol: str
    confidence: float  # 0-1
    missing_notes: Optional[List[int]] = None  # pitch classes, None when complete
    extra_notes: Optional[List[int]] = None  # pitch classes, None when exact

    @property
    def extra_count(self) -> int:
        return len(self.extra_notes) if self.extra_notes else 0

    @property
    def is_exact(self) -> bool:
        return self.confidence >= 1.0 and not self.extra_notes

    def format(self) -> str:
        """Render as "Am7", "Am7 (75%)" or "C +notes"."""
        result = self.symbol
        if self.confidence < 1.0:
            result += f" ({math.floor(self.confidence * 100 + 0.5)}%)"
        if self.extra_notes:
            result += " +notes"
        return result


@dataclass
class DetectionConfig:
    """Configuration for chord detection.

    Attributes:
        min_confidence: Minimum fraction of chord tones present (default: 0.75)
        max_results: Number of results rendered by format_results (default: 5)
    """

    min_confidence: float = 0.75
    max_results: int = 5


class ChordDetector:
    """Detect chords from unordered MIDI note sets.

    Results are sorted by confidence, highest first. Ties keep discovery
    order: ascending root pitch class, then chord registry order.
    """

    def __init__(self, config: Optional[DetectionConfig] = None):
        """
        Initialize ChordDetector.

        Args:
            config: Detection settings (default: DetectionConfig())
        """
        self.config = config or DetectionConfig()

    def detect(self, midi_notes: Iterable[int]) -> List[DetectedChord]:
        """
        Detect candidate chords from MIDI notes.

        Args:
            midi_notes: MIDI numbers; duplicates and octave doublings allowed

        Returns:
            List of DetectedChord sorted by confidence (empty for empty input)
        """
        pitches = self.notes_to_pitch_classes(midi_notes)
        if not pitches:
            return []

        detected = []
        for root_pc in pitches:
            for chord_type, definition in CHORD_TYPES.items():
                candidate = self._score_template(pitches, root_pc, chord_type, definition)
                if candidate.confidence >= self.config.min_confidence:
                    detected.append(candidate)

        detected.sort(key=lambda c: -c.confidence)
        logger.debug(
            "Pitch classes %s matched %d chord candidates", pitches, len(detected)
        )
        return detected

    def detect_from_frets(
        self,
        frets: Sequence[Optional[int]],
        open_strings: Sequence[int],
    ) -> List[DetectedChord]:
        """Detect chords from a fretboard shape (None = string not played)."""
        notes = [
            note_at_fret(open_strings[i], fret)
            for i, fret in enumerate(frets)
            if fret is not None
        ]
        return self.detect(notes)

    def most_likely(self, detected: Sequence[DetectedChord]) -> Optional[DetectedChord]:
        """
        Pick the most likely chord, preferring exact fits over supersets.

        Sorted by extra pitch class count (fewest first), then confidence.
        """
        if not detected:
            return None
        ranked = sorted(detected, key=lambda c: (c.extra_count, -c.confidence))
        return ranked[0]

    def format_results(
        self,
        detected: Sequence[DetectedChord],
        limit: Optional[int] = None,
    ) -> List[str]:
        """Render the first results as display strings."""
        if limit is None:
            limit = self.config.max_results
        return [chord.format() for chord in detected[:limit]]

    def notes_to_pitch_classes(self, midi_notes: Iterable[int]) -> List[int]:
        """Convert notes to sorted distinct pitch classes (0-11)."""
        return sorted({note % 12 for note in midi_notes})

    def _score_template(
        self,
        pitches: List[int],
        root_pc: int,
        chord_type: str,
        definition: ChordDefinition,
    ) -> DetectedChord:
        """
        Score how well pitch classes match a chord template.
        """
        expected = [(root_pc + interval) % 12 for interval in definition.intervals]
        matched, missing, extra = _partition(pitches, expected)
        root = NOTE_NAMES[root_pc]

        return DetectedChord(
            root=root,
            chord_type=chord_type,
            symbol=f"{root}{definition.symbol}",
            confidence=len(matched) / len(expected),
            missing_notes=missing or None,
            extra_notes=extra or None,
        )


def _partition(
    pitches: List[int], expected: List[int]
) -> Tuple[List[int], List[int], List[int]]:
    matched = [p for p in expected if p in pitches]
    missing = [p for p in expected if p not in pitches]
    extra = [p for p in pitches if p not in expected]
    return matched, missing, extra


_default_detector = ChordDetector()


def detect_chord(midi_notes: Iterable[int]) -> List[DetectedChord]:
    """Detect chords from MIDI notes with the default settings."""
    return _default_detector.detect(midi_notes)


def detect_chord_from_frets(
    frets: Sequence[Optional[int]], open_strings: Sequence[int]
) -> List[DetectedChord]:
    return _default_detector.detect_from_frets(frets, open_strings)


def get_most_likely_chord(detected: Sequence[DetectedChord]) -> Optional[DetectedChord]:
    return _default_detector.most_likely(detected)


def format_detection_results(
    detected: Sequence[DetectedChord], limit: int = 5
) -> List[str]:
    return _default_detector.format_results(detected, limit)
