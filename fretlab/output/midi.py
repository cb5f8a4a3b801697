"""MIDI export functionality.

Chords and progressions are encoded byte for byte as a format 1 Standard
MIDI File with a single track:

    MThd <len=6> <format=1> <ntracks> <ticks per beat=480>
    MTrk <len> events...

Events are (delta-time, bytes) pairs; delta-times are variable-length
quantities. The output is deterministic: equal input gives equal bytes.
"""

import io
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

import pretty_midi

from ..core.constants import DEFAULT_DURATION_BEATS, DEFAULT_TEMPO, DEFAULT_VELOCITY, TICKS_PER_BEAT
from ..theory.chords import Chord
from ..theory.progressions import Progression

logger = logging.getLogger(__name__)

HEADER_CHUNK = b"MThd"
TRACK_CHUNK = b"MTrk"

NOTE_ON = 0x90
NOTE_OFF = 0x80
META = 0xFF
META_TRACK_NAME = 0x03
META_TEMPO = 0x51
META_END_OF_TRACK = 0x2F

MAX_VLQ = 0x0FFFFFFF
MAX_TRACK_NAME = 127
MAX_TEMPO_MICROSECONDS = 0xFFFFFF


@dataclass
class MidiConfig:
    """Configuration for MIDI encoding.

    Attributes:
        ticks_per_beat: Time division written to the header (default: 480)
        velocity: Note-on velocity (default: 80)
        channel: MIDI channel 0-15 (default: 0)
    """

    ticks_per_beat: int = TICKS_PER_BEAT
    velocity: int = DEFAULT_VELOCITY
    channel: int = 0


def encode_vlq(value: int) -> bytes:
    """
    Encode a non-negative integer as a MIDI variable-length quantity.

    Seven data bits per byte, most significant group first, with the high
    bit set on every byte except the last.
    """
    if value < 0 or value > MAX_VLQ:
        raise ValueError(f"VLQ value out of range: {value}")

    groups = [value & 0x7F]
    value >>= 7
    while value > 0:
        groups.append((value & 0x7F) | 0x80)
        value >>= 7
    return bytes(reversed(groups))


def decode_vlq(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a variable-length quantity.

    Returns:
        (value, offset of the first byte after the quantity)
    """
    value = 0
    while True:
        if offset >= len(data):
            raise ValueError("Truncated variable-length quantity")
        byte = data[offset]
        offset += 1
        value = (value << 7) | (byte & 0x7F)
        if not byte & 0x80:
            return value, offset


def microseconds_per_beat(tempo: float) -> int:
    """Tempo meta value for a BPM; it must fit the event's three data bytes."""
    if tempo <= 0:
        raise ValueError(f"Tempo must be positive: {tempo}")
    microseconds = math.floor(60_000_000 / tempo)
    if microseconds > MAX_TEMPO_MICROSECONDS:
        raise ValueError(f"Tempo too slow to encode: {tempo}")
    return microseconds


class MIDIExporter:
    """Export chords and progressions to MIDI format."""

    def __init__(self, config: Optional[MidiConfig] = None):
        """
        Initialize MIDIExporter.

        Args:
            config: Encoding settings (default: MidiConfig())
        """
        self.config = config or MidiConfig()

    def chord_to_bytes(
        self,
        chord: Chord,
        duration: float = DEFAULT_DURATION_BEATS,
        tempo: float = DEFAULT_TEMPO,
    ) -> bytes:
        """
        Encode a single chord held for `duration` beats.

        Args:
            chord: Chord to encode
            duration: Length in beats
            tempo: Tempo in BPM

        Returns:
            Complete MIDI file as bytes
        """
        events = bytearray()
        events += self._tempo_event(tempo)
        events += self._chord_events(chord.notes, 0, self._ticks(duration))
        events += self._end_of_track()
        return self._header(1) + self._track(events)

    def progression_to_bytes(self, progression: Progression) -> bytes:
        """
        Encode a progression as one track.

        Each chord's note-offs come its own duration after its note-ons; the
        next chord starts the previous chord's duration after those note-offs.

        Args:
            progression: Progression to encode

        Returns:
            Complete MIDI file as bytes
        """
        events = bytearray()
        events += self._tempo_event(progression.tempo)
        events += self._track_name_event(progression.name)

        previous_ticks = 0
        for pc in progression.chords:
            ticks = self._ticks(pc.duration)
            events += self._chord_events(pc.chord.notes, previous_ticks, ticks)
            previous_ticks = ticks

        events += self._end_of_track()
        logger.debug(
            "Encoded progression %r: %d chords, %d event bytes",
            progression.name, len(progression.chords), len(events),
        )
        return self._header(1) + self._track(events)

    def to_bytes(
        self,
        item: Union[Chord, Progression],
        duration: float = DEFAULT_DURATION_BEATS,
        tempo: float = DEFAULT_TEMPO,
    ) -> bytes:
        """Encode either item; duration and tempo apply to a single chord only."""
        if isinstance(item, Progression):
            return self.progression_to_bytes(item)
        return self.chord_to_bytes(item, duration, tempo)

    def export(
        self,
        item: Union[Chord, Progression],
        output_path: str,
        duration: float = DEFAULT_DURATION_BEATS,
        tempo: float = DEFAULT_TEMPO,
    ) -> Path:
        """
        Write a chord or progression to a MIDI file.

        Args:
            item: Chord or Progression
            output_path: Path to output MIDI file
            duration: Length in beats of a single chord
            tempo: Tempo in BPM of a single chord (progressions carry their own)

        Returns:
            Path of the written file
        """
        data = self.to_bytes(item, duration, tempo)

        # Ensure output directory exists
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

        logger.info("Wrote %d bytes to %s", len(data), path)
        return path

    def to_pretty_midi(self, item: Union[Chord, Progression]) -> pretty_midi.PrettyMIDI:
        """Convert to a PrettyMIDI object without saving, e.g. for playback."""
        return pretty_midi.PrettyMIDI(io.BytesIO(self.to_bytes(item)))

    def _ticks(self, beats: float) -> int:
        return math.floor(beats * self.config.ticks_per_beat)

    def _header(self, num_tracks: int) -> bytes:
        return (
            HEADER_CHUNK
            + (6).to_bytes(4, "big")
            + (1).to_bytes(2, "big")  # format 1: simultaneous tracks
            + num_tracks.to_bytes(2, "big")
            + self.config.ticks_per_beat.to_bytes(2, "big")
        )

    def _track(self, events: bytes) -> bytes:
        return TRACK_CHUNK + len(events).to_bytes(4, "big") + bytes(events)

    def _tempo_event(self, tempo: float) -> bytes:
        return (
            encode_vlq(0)
            + bytes([META, META_TEMPO, 0x03])
            + microseconds_per_beat(tempo).to_bytes(3, "big")
        )

    def _track_name_event(self, name: str) -> bytes:
        text = name.encode("ascii", errors="replace")[:MAX_TRACK_NAME]
        return encode_vlq(0) + bytes([META, META_TRACK_NAME, len(text)]) + text

    def _end_of_track(self) -> bytes:
        return encode_vlq(0) + bytes([META, META_END_OF_TRACK, 0x00])

    def _chord_events(self, notes: List[int], start_delta: int, duration_ticks: int) -> bytes:
        """Note-ons then note-offs; only the first of each group carries a delta."""
        for note in notes:
            if not 0 <= note <= 127:
                raise ValueError(f"MIDI note out of range: {note}")

        channel = self.config.channel & 0x0F
        events = bytearray()
        for i, note in enumerate(notes):
            events += encode_vlq(start_delta if i == 0 else 0)
            events += bytes([NOTE_ON | channel, note, self.config.velocity])
        for i, note in enumerate(notes):
            events += encode_vlq(duration_ticks if i == 0 else 0)
            events += bytes([NOTE_OFF | channel, note, 0])
        return bytes(events)


def export_chord_to_midi(
    chord: Chord,
    duration: float = DEFAULT_DURATION_BEATS,
    tempo: float = DEFAULT_TEMPO,
) -> bytes:
    return MIDIExporter().chord_to_bytes(chord, duration, tempo)


def export_progression_to_midi(progression: Progression) -> bytes:
    return MIDIExporter().progression_to_bytes(progression)


create_midi_file = export_progression_to_midi
