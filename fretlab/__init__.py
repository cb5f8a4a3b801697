"""fretlab - Guitar-oriented music theory toolkit.

Architecture Layers:
    1. core/       - Note names, MIDI arithmetic, errors
    2. theory/     - Chord, scale, tuning and progression catalogs
    3. inference/  - Reverse chord detection from note sets
    4. fretboard/  - Voicing search and preset shapes
    5. output/     - Export (MIDI bytes, MIDI files, pretty_midi)
"""

__version__ = "0.1.0"

# Core types
from .core import Note, note_to_midi, midi_to_note, FretlabError

# Theory layer
from .theory import (
    Chord,
    Progression,
    ProgressionChord,
    Tuning,
    build_chord,
    parse_chord_symbol,
    generate_scale,
    get_diatonic_chords,
    get_tuning,
    create_progression_from_roman,
    create_progression_from_symbols,
    transpose_progression,
)

# Inference layer
from .inference import ChordDetector, DetectedChord, detect_chord, get_most_likely_chord

# Fretboard layer
from .fretboard import Voicing, VoicingGenerator, generate_voicings, get_preset_voicing

# Output layer
from .output import MIDIExporter, export_chord_to_midi, export_progression_to_midi

__all__ = [
    # Core
    "Note",
    "note_to_midi",
    "midi_to_note",
    "FretlabError",
    # Theory
    "Chord",
    "Progression",
    "ProgressionChord",
    "Tuning",
    "build_chord",
    "parse_chord_symbol",
    "generate_scale",
    "get_diatonic_chords",
    "get_tuning",
    "create_progression_from_roman",
    "create_progression_from_symbols",
    "transpose_progression",
    # Inference
    "ChordDetector",
    "DetectedChord",
    "detect_chord",
    "get_most_likely_chord",
    # Fretboard
    "Voicing",
    "VoicingGenerator",
    "generate_voicings",
    "get_preset_voicing",
    # Output
    "MIDIExporter",
    "export_chord_to_midi",
    "export_progression_to_midi",
]
