"""Core types and constants for fretlab."""

from .note import (
    Note,
    note_to_midi,
    midi_to_note,
    midi_to_name_and_octave,
    normalize_note_name,
    pitch_class_of,
    parse_note,
    get_interval,
    transpose,
    note_at_fret,
    midi_to_freq,
    freq_to_midi,
)
from .constants import (
    NOTE_NAMES,
    FLAT_NOTE_NAMES,
    MIDDLE_C,
    DEFAULT_TEMPO,
    DEFAULT_DURATION_BEATS,
    TICKS_PER_BEAT,
    DEFAULT_VELOCITY,
    DEFAULT_MAX_FRET,
)
from .errors import (
    FretlabError,
    InvalidNoteName,
    UnknownChordType,
    UnknownScaleType,
    InvalidRomanNumeral,
    InvalidChordSymbol,
)

__all__ = [
    "Note",
    "note_to_midi",
    "midi_to_note",
    "midi_to_name_and_octave",
    "normalize_note_name",
    "pitch_class_of",
    "parse_note",
    "get_interval",
    "transpose",
    "note_at_fret",
    "midi_to_freq",
    "freq_to_midi",
    "NOTE_NAMES",
    "FLAT_NOTE_NAMES",
    "MIDDLE_C",
    "DEFAULT_TEMPO",
    "DEFAULT_DURATION_BEATS",
    "TICKS_PER_BEAT",
    "DEFAULT_VELOCITY",
    "DEFAULT_MAX_FRET",
    "FretlabError",
    "InvalidNoteName",
    "UnknownChordType",
    "UnknownScaleType",
    "InvalidRomanNumeral",
    "InvalidChordSymbol",
]
