"""Global constants for fretlab."""

# Pitch names
NOTE_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NOTE_NAMES = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

# Reference pitch
MIDDLE_C = 60  # C4
A4_MIDI = 69
A4_FREQ = 440.0

# Musical defaults
DEFAULT_TEMPO = 120.0
DEFAULT_DURATION_BEATS = 4.0

# MIDI file defaults
TICKS_PER_BEAT = 480
DEFAULT_VELOCITY = 80
MIDI_MIN = 0
MIDI_MAX = 127

# Fretboard defaults
DEFAULT_MAX_FRET = 15
