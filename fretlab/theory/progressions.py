"""Chord progressions: Roman numeral and symbol notation, presets, transposition."""

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

from ..core import (
    NOTE_NAMES,
    InvalidChordSymbol,
    InvalidNoteName,
    InvalidRomanNumeral,
    pitch_class_of,
)
from ..core.constants import DEFAULT_DURATION_BEATS, DEFAULT_TEMPO
from .chords import ROOT_PATTERN, Chord, build_chord, default_root_midi

logger = logging.getLogger(__name__)

# Roman numeral -> scale degree (0-based); letter case carries the quality
ROMAN_TO_DEGREE: Mapping[str, int] = MappingProxyType({
    "I": 0, "i": 0,
    "II": 1, "ii": 1,
    "III": 2, "iii": 2,
    "IV": 3, "iv": 3,
    "V": 4, "v": 4,
    "VI": 5, "vi": 5,
    "VII": 6, "vii": 6,
})

MAJOR_SCALE_INTERVALS = (0, 2, 4, 5, 7, 9, 11)

COMMON_PROGRESSIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "I-IV-V": ("I", "IV", "V"),
    "I-V-vi-IV": ("I", "V", "vi", "IV"),
    "ii-V-I": ("ii", "V", "I"),
    "I-vi-IV-V": ("I", "vi", "IV", "V"),
    "vi-IV-I-V": ("vi", "IV", "I", "V"),
    "I-IV-vi-V": ("I", "IV", "vi", "V"),
    "I-vi-ii-V": ("I", "vi", "ii", "V"),
    "I-iii-IV-V": ("I", "iii", "IV", "V"),
    "12-bar-blues": ("I", "I", "I", "I", "IV", "IV", "I", "I", "V", "IV", "I", "V"),
})

# Checked in order: longer patterns must precede the ones they contain
# ("m7b5" before "m7", "maj7" before "7", "dim7" before "dim").
SUFFIX_PATTERNS: Tuple[Tuple[str, str], ...] = (
    ("m7b5", "halfDiminished7"),
    ("dim7", "diminished7"),
    ("maj7", "major7"),
    ("m7", "minor7"),
    ("sus4", "sus4"),
    ("sus2", "sus2"),
    ("dim", "diminished"),
    ("aug", "augmented"),
    ("7", "dominant7"),
    ("m", "minor"),
)


@dataclass
class ProgressionChord:
    """A chord placed in a progression."""

    chord: Chord
    duration: float = DEFAULT_DURATION_BEATS  # beats
    roman_numeral: Optional[str] = None


@dataclass
class Progression:
    """An ordered chord sequence in a key."""

    name: str
    key: str
    chords: List[ProgressionChord] = field(default_factory=list)
    tempo: float = DEFAULT_TEMPO  # BPM

    @property
    def symbols(self) -> List[str]:
        """Get list of chord symbols."""
        return [pc.chord.symbol for pc in self.chords]

    @property
    def total_beats(self) -> float:
        return sum(pc.duration for pc in self.chords)


def roman_numeral_to_chord(
    roman_numeral: str,
    key: str,
    key_midi: Optional[int] = None,
) -> Optional[Chord]:
    """
    Convert a Roman numeral to a chord in a key.

    Degrees always come from the major scale, whatever the mode of the
    progression. Uppercase numerals give major triads, lowercase minor.

    Args:
        roman_numeral: "I".."VII" or "i".."vii"
        key: Key root name
        key_midi: MIDI pitch of the tonic; defaults to the key in octave 4

    Returns:
        Chord rooted on the degree, or None for an unrecognized numeral
    """
    degree = ROMAN_TO_DEGREE.get(roman_numeral)
    if degree is None:
        return None

    chord_type = "minor" if roman_numeral == roman_numeral.lower() else "major"
    interval = MAJOR_SCALE_INTERVALS[degree]
    root = NOTE_NAMES[(pitch_class_of(key) + interval) % 12]

    if key_midi is None:
        key_midi = default_root_midi(key)

    return build_chord(root, chord_type, key_midi + interval)


def chord_type_from_suffix(suffix: str) -> str:
    """Classify a chord suffix by ordered substring containment (default major)."""
    for pattern, chord_type in SUFFIX_PATTERNS:
        if pattern in suffix:
            return chord_type
    return "major"


def create_progression_from_roman(
    name: str,
    key: str,
    roman_numerals: Sequence[str],
    tempo: float = DEFAULT_TEMPO,
) -> Progression:
    """
    Build a progression from Roman numerals, one four-beat chord each.

    Raises:
        InvalidRomanNumeral: on the first unrecognized numeral
    """
    chords = []
    for numeral in roman_numerals:
        chord = roman_numeral_to_chord(numeral, key)
        if chord is None:
            raise InvalidRomanNumeral(numeral)
        chords.append(ProgressionChord(chord=chord, roman_numeral=numeral))

    logger.debug("Built progression %r in %s: %s", name, key, " ".join(c.chord.symbol for c in chords))
    return Progression(name=name, key=key, chords=chords, tempo=tempo)


def create_progression_from_symbols(
    name: str,
    key: str,
    chord_symbols: Sequence[str],
    tempo: float = DEFAULT_TEMPO,
) -> Progression:
    """
    Build a progression from chord symbols such as "Am7" or "F#m7b5".

    Unlike parse_chord_symbol, the suffix is classified by substring
    containment, so unknown decorations ("Cmaj7#11") still yield a chord.

    Raises:
        InvalidChordSymbol: if a symbol does not start with a known root note
    """
    chords = []
    for symbol in chord_symbols:
        match = ROOT_PATTERN.match(symbol)
        if not match:
            raise InvalidChordSymbol(symbol)

        root = match.group(1)
        try:
            pitch_class_of(root)
        except InvalidNoteName as e:
            raise InvalidChordSymbol(symbol) from e

        chord_type = chord_type_from_suffix(symbol[match.end():])
        chords.append(ProgressionChord(chord=build_chord(root, chord_type)))

    return Progression(name=name, key=key, chords=chords, tempo=tempo)


def get_preset_progression(name: str, key: str = "C") -> Optional[Progression]:
    roman_numerals = COMMON_PROGRESSIONS.get(name)
    if roman_numerals is None:
        return None
    return create_progression_from_roman(name, key, roman_numerals)


def get_preset_progression_names() -> List[str]:
    return list(COMMON_PROGRESSIONS)


def transpose_progression(progression: Progression, new_key: str) -> Progression:
    """
    Transpose a progression to a new key.

    Each chord keeps its type, duration and Roman numeral label; its root
    moves by the distance between the keys and its notes move with it.
    Moved roots are spelled with sharps; unmoved roots keep their spelling.
    """
    semitones = pitch_class_of(new_key) - pitch_class_of(progression.key)

    chords = []
    for pc in progression.chords:
        if semitones == 0:
            new_root = pc.chord.root
        else:
            new_root = NOTE_NAMES[(pitch_class_of(pc.chord.root) + semitones + 12) % 12]
        root_midi = pc.chord.notes[0] + semitones if pc.chord.notes else None
        chords.append(ProgressionChord(
            chord=build_chord(new_root, pc.chord.chord_type, root_midi),
            duration=pc.duration,
            roman_numeral=pc.roman_numeral,
        ))

    return replace(progression, key=new_key, chords=chords)
