"""Guitar tuning definitions (open strings from lowest to highest)."""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Tuple

from ..core import note_to_midi

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tuning:
    name: str
    strings: Tuple[int, ...]  # MIDI numbers of the open strings, low to high

    @property
    def string_count(self) -> int:
        return len(self.strings)


def _strings(*notes: Tuple[str, int]) -> Tuple[int, ...]:
    return tuple(note_to_midi(name, octave) for name, octave in notes)


STANDARD_TUNING = Tuning(
    "Standard (EADGBE)",
    _strings(("E", 2), ("A", 2), ("D", 3), ("G", 3), ("B", 3), ("E", 4)),
)

TUNINGS: Mapping[str, Tuning] = MappingProxyType({
    "standard": STANDARD_TUNING,
    "dropD": Tuning(
        "Drop D",
        _strings(("D", 2), ("A", 2), ("D", 3), ("G", 3), ("B", 3), ("E", 4)),
    ),
    "openG": Tuning(
        "Open G",
        _strings(("D", 2), ("G", 2), ("D", 3), ("G", 3), ("B", 3), ("D", 4)),
    ),
    "openD": Tuning(
        "Open D",
        _strings(("D", 2), ("A", 2), ("D", 3), ("F#", 3), ("A", 3), ("D", 4)),
    ),
    "dadgad": Tuning(
        "DADGAD",
        _strings(("D", 2), ("A", 2), ("D", 3), ("G", 3), ("A", 3), ("D", 4)),
    ),
})


def get_default_tuning() -> Tuning:
    return STANDARD_TUNING


def get_tuning(name: str) -> Tuning:
    """Look up a tuning by key, falling back to standard tuning."""
    tuning = TUNINGS.get(name)
    if tuning is None:
        logger.warning("Unknown tuning %r, using %s", name, STANDARD_TUNING.name)
        return STANDARD_TUNING
    return tuning


def get_all_tunings() -> List[Tuning]:
    return list(TUNINGS.values())
