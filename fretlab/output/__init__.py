"""Output layer - Export to playback formats.

This layer handles exporting chords and progressions to:
- Standard MIDI files (byte-exact encoder)
- pretty_midi objects for playback tooling
"""

from .midi import (
    MIDIExporter,
    MidiConfig,
    encode_vlq,
    decode_vlq,
    export_chord_to_midi,
    export_progression_to_midi,
    create_midi_file,
    microseconds_per_beat,
)

__all__ = [
    "MIDIExporter",
    "MidiConfig",
    "encode_vlq",
    "decode_vlq",
    "export_chord_to_midi",
    "export_progression_to_midi",
    "create_midi_file",
    "microseconds_per_beat",
]
