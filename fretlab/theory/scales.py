"""Scale patterns and diatonic helpers for 12-TET.

Provides the scale registry, scale generation from a root, degree lookup
and the diatonic triads of major and natural minor keys.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

from ..core import NOTE_NAMES, UnknownScaleType, pitch_class_of
from .chords import default_root_midi


@dataclass(frozen=True)
class ScaleDefinition:
    name: str
    intervals: Tuple[int, ...]  # ascending semitones from root, each < 12


SCALE_TYPES: Mapping[str, ScaleDefinition] = MappingProxyType({
    "major": ScaleDefinition("Major", (0, 2, 4, 5, 7, 9, 11)),
    "minor": ScaleDefinition("Natural Minor", (0, 2, 3, 5, 7, 8, 10)),
    "harmonicMinor": ScaleDefinition("Harmonic Minor", (0, 2, 3, 5, 7, 8, 11)),
    "melodicMinor": ScaleDefinition("Melodic Minor", (0, 2, 3, 5, 7, 9, 11)),
    "dorian": ScaleDefinition("Dorian", (0, 2, 3, 5, 7, 9, 10)),
    "phrygian": ScaleDefinition("Phrygian", (0, 1, 3, 5, 7, 8, 10)),
    "lydian": ScaleDefinition("Lydian", (0, 2, 4, 6, 7, 9, 11)),
    "mixolydian": ScaleDefinition("Mixolydian", (0, 2, 4, 5, 7, 9, 10)),
    "pentatonicMajor": ScaleDefinition("Major Pentatonic", (0, 2, 4, 7, 9)),
    "pentatonicMinor": ScaleDefinition("Minor Pentatonic", (0, 3, 5, 7, 10)),
    "blues": ScaleDefinition("Blues", (0, 3, 5, 6, 7, 10)),
    "chromatic": ScaleDefinition("Chromatic", tuple(range(12))),
})

# Diatonic triad suffix for each scale degree (0-based)
DIATONIC_TRIADS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "major": ("", "m", "m", "", "", "m", "dim"),  # I ii iii IV V vi vii°
    "minor": ("m", "dim", "", "m", "m", "", ""),  # i ii° III iv v VI VII
})


def generate_scale(root: str, scale_type: str, root_midi: Optional[int] = None) -> List[int]:
    """
    Generate the MIDI notes of a scale.

    Args:
        root: Root note name
        scale_type: Key into SCALE_TYPES
        root_midi: MIDI pitch of the root; defaults to the root in octave 4

    Returns:
        List of MIDI notes, root_midi + each interval

    Raises:
        UnknownScaleType: if scale_type is not registered
    """
    scale = SCALE_TYPES.get(scale_type)
    if scale is None:
        raise UnknownScaleType(scale_type)

    if root_midi is None:
        root_midi = default_root_midi(root)

    return [root_midi + interval for interval in scale.intervals]


def get_scale_degree(scale: Sequence[int], note_midi: int) -> Optional[int]:
    """1-based position of the note's pitch class in the scale, or None."""
    pitch = note_midi % 12
    scale_pitches = [note % 12 for note in scale]
    if pitch not in scale_pitches:
        return None
    return scale_pitches.index(pitch) + 1


def is_note_in_scale(note_midi: int, scale: Sequence[int]) -> bool:
    pitch = note_midi % 12
    return any(note % 12 == pitch for note in scale)


def get_diatonic_chords(root: str, scale_type: str = "major") -> List[str]:
    """
    Get the diatonic triad symbols of a key.

    Only major and natural minor have a degree→quality table; any other
    scale type yields an empty list.

    Args:
        root: Key root name
        scale_type: "major" or "minor"

    Returns:
        Seven chord symbols (e.g., ["C", "Dm", "Em", "F", "G", "Am", "Bdim"])
    """
    qualities = DIATONIC_TRIADS.get(scale_type)
    if qualities is None:
        return []

    root_pc = pitch_class_of(root)
    intervals = SCALE_TYPES[scale_type].intervals
    return [
        f"{NOTE_NAMES[(root_pc + interval) % 12]}{suffix}"
        for interval, suffix in zip(intervals, qualities)
    ]


def get_all_scale_types() -> List[str]:
    return list(SCALE_TYPES)


def get_relative_minor(major_root: str) -> str:
    return NOTE_NAMES[(pitch_class_of(major_root) + 9) % 12]


def get_relative_major(minor_root: str) -> str:
    return NOTE_NAMES[(pitch_class_of(minor_root) + 3) % 12]
