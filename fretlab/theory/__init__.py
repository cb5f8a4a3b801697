"""Theory layer - Static music data and builders.

- Chord types and chord construction/parsing
- Scale types and diatonic chords
- Guitar tunings
- Chord progressions (Roman numerals, symbols, presets, transposition)

All registries are read-only mappings built once at import.
"""

from .chords import (
    ChordDefinition,
    Chord,
    ChordSymbol,
    CHORD_TYPES,
    COMMON_CHORD_QUALITIES,
    build_chord,
    chord_from_symbol,
    get_all_chord_types,
    get_chord_definition,
    parse_chord_symbol,
)
from .scales import (
    ScaleDefinition,
    SCALE_TYPES,
    generate_scale,
    get_scale_degree,
    is_note_in_scale,
    get_diatonic_chords,
    get_all_scale_types,
    get_relative_minor,
    get_relative_major,
)
from .tunings import (
    Tuning,
    STANDARD_TUNING,
    TUNINGS,
    get_default_tuning,
    get_tuning,
    get_all_tunings,
)
from .progressions import (
    ProgressionChord,
    Progression,
    COMMON_PROGRESSIONS,
    roman_numeral_to_chord,
    chord_type_from_suffix,
    create_progression_from_roman,
    create_progression_from_symbols,
    get_preset_progression,
    get_preset_progression_names,
    transpose_progression,
)

__all__ = [
    # Chords
    "ChordDefinition",
    "Chord",
    "ChordSymbol",
    "CHORD_TYPES",
    "COMMON_CHORD_QUALITIES",
    "build_chord",
    "chord_from_symbol",
    "get_all_chord_types",
    "get_chord_definition",
    "parse_chord_symbol",
    # Scales
    "ScaleDefinition",
    "SCALE_TYPES",
    "generate_scale",
    "get_scale_degree",
    "is_note_in_scale",
    "get_diatonic_chords",
    "get_all_scale_types",
    "get_relative_minor",
    "get_relative_major",
    # Tunings
    "Tuning",
    "STANDARD_TUNING",
    "TUNINGS",
    "get_default_tuning",
    "get_tuning",
    "get_all_tunings",
    # Progressions
    "ProgressionChord",
    "Progression",
    "COMMON_PROGRESSIONS",
    "roman_numeral_to_chord",
    "chord_type_from_suffix",
    "create_progression_from_roman",
    "create_progression_from_symbols",
    "get_preset_progression",
    "get_preset_progression_names",
    "transpose_progression",
]
