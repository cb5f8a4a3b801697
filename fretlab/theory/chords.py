"""Chord definitions and construction.

The registry below is read-only and its iteration order is significant:
chord detection reports ties in registry order and symbol parsing returns
the first definition whose suffix matches.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple, Optional, Set, Tuple

from ..core import InvalidNoteName, UnknownChordType, normalize_note_name, pitch_class_of
from ..core.constants import MIDDLE_C


@dataclass(frozen=True)
class ChordDefinition:
    """A chord type: display name, intervals from the root and symbol suffix."""

    name: str
    intervals: Tuple[int, ...]  # semitones from root, may exceed 11 (9th = 14)
    symbol: str


@dataclass
class Chord:
    """A concrete chord built from a root and a chord type."""

    root: str  # Root note name (e.g., "C", "F#")
    chord_type: str  # Registry key (e.g., "minor7")
    notes: List[int] = field(default_factory=list)  # MIDI pitches, definition order
    symbol: str = ""

    @property
    def pitch_classes(self) -> Set[int]:
        """Get pitch classes in the chord."""
        return {n % 12 for n in self.notes}

    @property
    def definition(self) -> "ChordDefinition":
        return CHORD_TYPES[self.chord_type]


class ChordSymbol(NamedTuple):
    """Result of parsing a chord symbol like "Am7"."""

    root: str
    chord_type: str


_CHORD_TYPES: Dict[str, ChordDefinition] = {
    "major": ChordDefinition("Major", (0, 4, 7), ""),
    "minor": ChordDefinition("Minor", (0, 3, 7), "m"),
    "diminished": ChordDefinition("Diminished", (0, 3, 6), "dim"),
    "augmented": ChordDefinition("Augmented", (0, 4, 8), "aug"),
    "sus2": ChordDefinition("Suspended 2nd", (0, 2, 7), "sus2"),
    "sus4": ChordDefinition("Suspended 4th", (0, 5, 7), "sus4"),
    "dominant7": ChordDefinition("Dominant 7th", (0, 4, 7, 10), "7"),
    "major7": ChordDefinition("Major 7th", (0, 4, 7, 11), "maj7"),
    "minor7": ChordDefinition("Minor 7th", (0, 3, 7, 10), "m7"),
    "diminished7": ChordDefinition("Diminished 7th", (0, 3, 6, 9), "dim7"),
    "halfDiminished7": ChordDefinition("Half Diminished 7th", (0, 3, 6, 10), "m7b5"),
    "major6": ChordDefinition("Major 6th", (0, 4, 7, 9), "6"),
    "minor6": ChordDefinition("Minor 6th", (0, 3, 7, 9), "m6"),
    "major9": ChordDefinition("Major 9th", (0, 4, 7, 11, 14), "maj9"),
    "dominant9": ChordDefinition("Dominant 9th", (0, 4, 7, 10, 14), "9"),
    "minor9": ChordDefinition("Minor 9th", (0, 3, 7, 10, 14), "m9"),
    "add9": ChordDefinition("Add 9", (0, 4, 7, 14), "add9"),
}

CHORD_TYPES: Mapping[str, ChordDefinition] = MappingProxyType(_CHORD_TYPES)

# Quality sequences of common progressions
COMMON_CHORD_QUALITIES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "I-IV-V": ("major", "major", "major"),
    "I-V-vi-IV": ("major", "major", "minor", "major"),
    "ii-V-I": ("minor", "major", "major"),
    "I-vi-IV-V": ("major", "minor", "major", "major"),
    "I-IV-I-V": ("major", "major", "major", "major"),
    "vi-IV-I-V": ("minor", "major", "major", "major"),
})

ROOT_PATTERN = re.compile(r"^([A-G][#b]?)")


def default_root_midi(root: str) -> int:
    """MIDI number of a root anchored in octave 4 (C4 = 60 .. B4 = 71)."""
    return MIDDLE_C + pitch_class_of(root)


def build_chord(root: str, chord_type: str, root_midi: Optional[int] = None) -> Chord:
    """
    Build a chord from a root name and a chord type.

    Args:
        root: Root note name (sharp or flat spelling)
        chord_type: Key into CHORD_TYPES
        root_midi: MIDI pitch of the root; defaults to the root in octave 4

    Returns:
        Chord whose notes are root_midi + each interval, in definition order

    Raises:
        UnknownChordType: if chord_type is not registered
    """
    definition = CHORD_TYPES.get(chord_type)
    if definition is None:
        raise UnknownChordType(chord_type)

    if root_midi is None:
        root_midi = default_root_midi(root)

    return Chord(
        root=root,
        chord_type=chord_type,
        notes=[root_midi + interval for interval in definition.intervals],
        symbol=f"{root}{definition.symbol}",
    )


def get_all_chord_types() -> List[str]:
    return list(CHORD_TYPES)


def get_chord_definition(chord_type: str) -> Optional[ChordDefinition]:
    return CHORD_TYPES.get(chord_type)


def parse_chord_symbol(symbol: str) -> Optional[ChordSymbol]:
    """
    Parse a chord symbol such as "Am7" or "Bbmaj7".

    The suffix must equal a registered symbol suffix exactly; the first
    matching definition in registry order wins. Progression parsing uses a
    looser containment rule, see progressions.chord_type_from_suffix.

    Returns:
        ChordSymbol with a sharp-normalized root, or None if unparseable
    """
    match = ROOT_PATTERN.match(symbol)
    if not match:
        return None

    root = normalize_note_name(match.group(1))
    # Cb, Fb, E# and B# match the pattern but are in neither spelling table
    try:
        pitch_class_of(root)
    except InvalidNoteName:
        return None

    suffix = symbol[match.end():]

    for chord_type, definition in CHORD_TYPES.items():
        if definition.symbol == suffix:
            return ChordSymbol(root=root, chord_type=chord_type)

    return None


def chord_from_symbol(symbol: str, root_midi: Optional[int] = None) -> Optional[Chord]:
    """Parse a chord symbol and build the chord, or None if unparseable."""
    parsed = parse_chord_symbol(symbol)
    if parsed is None:
        return None
    return build_chord(parsed.root, parsed.chord_type, root_midi)
