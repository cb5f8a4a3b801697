"""Note representation and pitch arithmetic.

MIDI numbers are absolute pitches (C4 = 60). A pitch class is ``midi % 12``
and carries no spelling of its own: a name is picked from the sharp or the
flat table depending on context.
"""

import re
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .constants import A4_FREQ, A4_MIDI, FLAT_NOTE_NAMES, NOTE_NAMES
from .errors import InvalidNoteName

_FLAT_TO_SHARP = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
}

_NOTE_PATTERN = re.compile(r"^([A-Ga-g][#b]?)(-?\d+)$")


@dataclass(frozen=True)
class Note:
    """A spelled note at a specific octave."""

    name: str  # "C", "C#" or "Db", ...
    octave: int
    midi: int

    @property
    def pitch_class(self) -> int:
        """Get pitch class (0-11, where 0=C)."""
        return self.midi % 12

    @property
    def frequency(self) -> float:
        """Frequency in Hz (equal temperament, A4 = 440 Hz)."""
        return midi_to_freq(self.midi)

    def __str__(self) -> str:
        return f"{self.name}{self.octave}"


def note_to_midi(name: str, octave: int) -> int:
    """
    Convert a note name and octave to a MIDI number.

    The name is looked up in the sharp table first, then the flat table.

    Args:
        name: Pitch name like "C", "C#" or "Db"
        octave: Octave number (4 => 60 for C)

    Returns:
        MIDI note number

    Raises:
        InvalidNoteName: if the name is in neither spelling table
    """
    if name in NOTE_NAMES:
        index = NOTE_NAMES.index(name)
    elif name in FLAT_NOTE_NAMES:
        index = FLAT_NOTE_NAMES.index(name)
    else:
        raise InvalidNoteName(name)
    return (octave + 1) * 12 + index


def midi_to_note(midi: int, use_flats: bool = False) -> Note:
    """Convert a MIDI number to a spelled Note. Never fails, even for negative input."""
    octave = midi // 12 - 1
    names = FLAT_NOTE_NAMES if use_flats else NOTE_NAMES
    return Note(name=names[midi % 12], octave=octave, midi=midi)


def midi_to_name_and_octave(midi: int, use_flats: bool = False) -> Tuple[str, int]:
    note = midi_to_note(midi, use_flats)
    return note.name, note.octave


def normalize_note_name(name: str) -> str:
    """Map the five flat spellings to sharps; anything else passes through."""
    return _FLAT_TO_SHARP.get(name, name)


def pitch_class_of(name: str) -> int:
    """Pitch class (0-11) of a note name in either spelling."""
    return note_to_midi(name, -1)


def parse_note(text: str) -> int:
    """Parse a note string like 'C4', 'Db3' or 'G#-1' into a MIDI number."""
    match = _NOTE_PATTERN.match(text.strip())
    if not match:
        raise InvalidNoteName(text)
    name = match.group(1)
    name = name[0].upper() + name[1:]
    return note_to_midi(name, int(match.group(2)))


def get_interval(note1: int, note2: int) -> int:
    """Distance in semitones between two MIDI notes."""
    return abs(note2 - note1)


def transpose(midi: int, semitones: int) -> int:
    return midi + semitones


def note_at_fret(open_string: int, fret: int) -> int:
    """MIDI note sounded by a string stopped at a fret (0 = open)."""
    return open_string + fret


def midi_to_freq(midi: float) -> float:
    """Convert MIDI pitch to frequency (Hz)."""
    return A4_FREQ * (2 ** ((midi - A4_MIDI) / 12.0))


def freq_to_midi(freq: float) -> int:
    """Convert frequency (Hz) to the nearest MIDI pitch."""
    if freq <= 0:
        raise ValueError(f"Frequency must be positive: {freq}")
    return int(round(A4_MIDI + 12 * np.log2(freq / A4_FREQ)))
