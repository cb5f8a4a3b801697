"""Fretboard voicing generation for guitar.

Searches hand positions along the neck for fingerings that sound every
pitch class of a chord, and looks up hand-verified open shapes.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Set, Tuple

from ..core import DEFAULT_MAX_FRET, normalize_note_name, note_at_fret
from ..theory.tunings import STANDARD_TUNING, Tuning

logger = logging.getLogger(__name__)

Shape = Tuple[Optional[int], ...]

# Common shapes in standard tuning, low E string first (None = muted)
COMMON_VOICINGS: Mapping[str, Mapping[str, Tuple[Shape, ...]]] = MappingProxyType({
    "major": MappingProxyType({
        "C": ((None, 3, 2, 0, 1, 0), (3, 3, 2, 0, 1, 0), (None, 3, 5, 5, 5, 3)),
        "D": ((None, None, 0, 2, 3, 2), (None, None, 0, 7, 7, 7)),
        "E": ((0, 2, 2, 1, 0, 0), (0, 7, 6, 4, 5, 4)),
        "F": ((1, 3, 3, 2, 1, 1), (None, None, 3, 2, 1, 1)),
        "G": ((3, 2, 0, 0, 0, 3), (3, 5, 5, 4, 3, 3)),
        "A": ((None, 0, 2, 2, 2, 0), (5, 7, 7, 6, 5, 5)),
        "B": ((None, 2, 4, 4, 4, 2), (7, 9, 9, 8, 7, 7)),
    }),
    "minor": MappingProxyType({
        "A": ((None, 0, 2, 2, 1, 0), (5, 7, 7, 5, 5, 5)),
        "B": ((None, 2, 4, 4, 3, 2), (7, 9, 9, 7, 7, 7)),
        "C": ((None, 3, 5, 5, 4, 3),),
        "D": ((None, None, 0, 2, 3, 1), (None, 5, 7, 7, 6, 5)),
        "E": ((0, 2, 2, 0, 0, 0), (0, 7, 5, 4, 5, 3)),
        "F": ((1, 3, 3, 1, 1, 1),),
        "G": ((3, 5, 5, 3, 3, 3),),
    }),
})


@dataclass
class Voicing:
    """A fret (or None for a muted string) per string, with the sounding notes."""

    frets: List[Optional[int]] = field(default_factory=list)
    notes: List[Optional[int]] = field(default_factory=list)

    @property
    def played_strings(self) -> int:
        return sum(1 for f in self.frets if f is not None)

    @property
    def pitch_classes(self) -> Set[int]:
        return {n % 12 for n in self.notes if n is not None}

    @property
    def span(self) -> int:
        return get_voicing_span(self)

    def to_tab(self) -> str:
        """Compact tab string, e.g. "x32010"."""
        return "".join("x" if f is None else str(f) if f < 10 else f"({f})" for f in self.frets)

    @classmethod
    def from_frets(cls, frets: Iterable[Optional[int]], tuning: Tuning) -> "Voicing":
        frets = list(frets)
        notes = [
            None if fret is None else note_at_fret(tuning.strings[i], fret)
            for i, fret in enumerate(frets)
        ]
        return cls(frets=frets, notes=notes)


@dataclass
class VoicingConfig:
    """Configuration for the voicing search.

    Attributes:
        max_fret: Highest fret the search may use (default: 15)
        hand_span: Frets reachable above the base fret (default: 4)
        max_base_fret: Highest base fret tried (default: 12)
        open_position_limit: Highest base fret where open strings still count (default: 3)
        min_strings: Minimum number of sounding strings (default: 3)
        max_voicings: Maximum voicings returned (default: 5)
    """

    max_fret: int = DEFAULT_MAX_FRET
    hand_span: int = 4
    max_base_fret: int = 12
    open_position_limit: int = 3
    min_strings: int = 3
    max_voicings: int = 5


class VoicingGenerator:
    """Find playable chord voicings on a fretted instrument."""

    def __init__(self, config: Optional[VoicingConfig] = None):
        self.config = config or VoicingConfig()

    def generate(
        self,
        chord_notes: Iterable[int],
        tuning: Tuning,
        max_fret: Optional[int] = None,
    ) -> List[Voicing]:
        """
        Generate voicings for a chord.

        For each base fret, every string takes the first fret within the
        hand span that sounds a chord tone, falling back to the open string
        in the first positions. A candidate is kept only when enough strings
        sound and every chord pitch class is present.

        Args:
            chord_notes: MIDI notes of the chord (octaves are ignored)
            tuning: Instrument tuning
            max_fret: Highest usable fret (default: config.max_fret)

        Returns:
            Up to config.max_voicings voicings in ascending base fret order
        """
        if max_fret is None:
            max_fret = self.config.max_fret
        chord_pitches = {note % 12 for note in chord_notes}

        voicings = []
        last_base = min(self.config.max_base_fret, max_fret - self.config.hand_span)
        for base_fret in range(0, last_base + 1):
            voicing, found = self._voice_at(chord_pitches, tuning, base_fret, max_fret)
            if voicing.played_strings >= self.config.min_strings and chord_pitches <= found:
                voicings.append(voicing)

        logger.debug(
            "Found %d voicings for pitch classes %s in %s",
            len(voicings), sorted(chord_pitches), tuning.name,
        )
        return voicings[: self.config.max_voicings]

    def _voice_at(
        self,
        chord_pitches: Set[int],
        tuning: Tuning,
        base_fret: int,
        max_fret: int,
    ) -> Tuple[Voicing, Set[int]]:
        voicing = Voicing()
        found: Set[int] = set()
        top_fret = min(base_fret + self.config.hand_span, max_fret)

        for open_string in tuning.strings:
            fret = self._first_chord_tone(open_string, chord_pitches, base_fret, top_fret)
            if fret is None and base_fret <= self.config.open_position_limit:
                if open_string % 12 in chord_pitches:
                    fret = 0

            if fret is None:
                voicing.frets.append(None)
                voicing.notes.append(None)
            else:
                note = note_at_fret(open_string, fret)
                voicing.frets.append(fret)
                voicing.notes.append(note)
                found.add(note % 12)

        return voicing, found

    @staticmethod
    def _first_chord_tone(
        open_string: int,
        chord_pitches: Set[int],
        low_fret: int,
        high_fret: int,
    ) -> Optional[int]:
        for fret in range(low_fret, high_fret + 1):
            if note_at_fret(open_string, fret) % 12 in chord_pitches:
                return fret
        return None


def generate_voicings(
    chord_notes: Iterable[int],
    tuning: Tuning,
    max_fret: int = DEFAULT_MAX_FRET,
) -> List[Voicing]:
    return VoicingGenerator().generate(chord_notes, tuning, max_fret)


def get_preset_voicing(root: str, chord_type: str, tuning: Tuning) -> Optional[Voicing]:
    """
    Get the first hand-verified shape for a chord.

    Shapes are standard-tuning fingerings, so any other tuning has no preset.
    """
    if tuning.strings != STANDARD_TUNING.strings:
        return None
    shapes = COMMON_VOICINGS.get(chord_type, {}).get(normalize_note_name(root))
    if not shapes:
        return None
    return Voicing.from_frets(shapes[0], tuning)


def get_voicing_span(voicing: Voicing) -> int:
    """Distance between the lowest and highest fretted (non-open) strings."""
    fretted = [f for f in voicing.frets if f is not None and f > 0]
    if not fretted:
        return 0
    return max(fretted) - min(fretted)


def is_voicing_playable(voicing: Voicing, max_span: int = 4) -> bool:
    return get_voicing_span(voicing) <= max_span
