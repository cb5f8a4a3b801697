"""Fretboard layer - Chord voicings on fretted instruments."""

from .voicings import (
    Voicing,
    VoicingConfig,
    VoicingGenerator,
    COMMON_VOICINGS,
    generate_voicings,
    get_preset_voicing,
    get_voicing_span,
    is_voicing_playable,
)

__all__ = [
    "Voicing",
    "VoicingConfig",
    "VoicingGenerator",
    "COMMON_VOICINGS",
    "generate_voicings",
    "get_preset_voicing",
    "get_voicing_span",
    "is_voicing_playable",
]
