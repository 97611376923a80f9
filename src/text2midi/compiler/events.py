"""
Timeline events - the lowest-level representation before encoding.

Each Event pairs an absolute tick with one MIDI message. Messages are
small frozen variants that know their own priority and wire bytes, so
a tempo meta is always 6 bytes and a note message always 3.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from text2midi.constants import (
    CHANNEL_RANGE,
    MAX_TICK_POSITION,
    META_END_OF_TRACK,
    META_SET_TEMPO,
    META_STATUS,
    NOTE_OFF_STATUS,
    NOTE_ON_STATUS,
    PITCH_RANGE,
    VELOCITY_RANGE,
    EventPriority,
)


def _check_note(channel: int, pitch: int, velocity: int) -> None:
    if not CHANNEL_RANGE[0] <= channel <= CHANNEL_RANGE[1]:
        raise ValueError(f"Channel must be 0-15, got {channel}")
    if not PITCH_RANGE[0] <= pitch <= PITCH_RANGE[1]:
        raise ValueError(f"Pitch must be 0-127, got {pitch}")
    if not VELOCITY_RANGE[0] <= velocity <= VELOCITY_RANGE[1]:
        raise ValueError(f"Velocity must be 0-127, got {velocity}")


@dataclass(frozen=True)
class TempoMeta:
    """Set Tempo meta event (FF 51 03 tt tt tt)."""

    microseconds_per_quarter: int

    priority = EventPriority.META
    kind = "tempo"

    def __post_init__(self) -> None:
        if not 0 < self.microseconds_per_quarter <= 0xFFFFFF:
            raise ValueError(f"Tempo must fit in 24 bits, got {self.microseconds_per_quarter}")

    def to_bytes(self) -> bytes:
        tempo = self.microseconds_per_quarter.to_bytes(3, "big")
        return bytes([META_STATUS, META_SET_TEMPO, 0x03]) + tempo


@dataclass(frozen=True)
class NoteOn:
    """Note On channel message (9n pp vv)."""

    channel: int
    pitch: int
    velocity: int

    priority = EventPriority.NOTE_ON
    kind = "note_on"

    def __post_init__(self) -> None:
        _check_note(self.channel, self.pitch, self.velocity)

    def to_bytes(self) -> bytes:
        return bytes([NOTE_ON_STATUS | self.channel, self.pitch, self.velocity])


@dataclass(frozen=True)
class NoteOff:
    """Note Off channel message (8n pp 00)."""

    channel: int
    pitch: int

    priority = EventPriority.NOTE_OFF
    kind = "note_off"

    def __post_init__(self) -> None:
        _check_note(self.channel, self.pitch, 0)

    def to_bytes(self) -> bytes:
        return bytes([NOTE_OFF_STATUS | self.channel, self.pitch, 0])


@dataclass(frozen=True)
class EndOfTrack:
    """End of Track meta event (FF 2F 00)."""

    priority = EventPriority.META
    kind = "end_of_track"

    def to_bytes(self) -> bytes:
        return bytes([META_STATUS, META_END_OF_TRACK, 0x00])


Message = Union[TempoMeta, NoteOn, NoteOff, EndOfTrack]


@dataclass(frozen=True)
class Event:
    """
    A message placed at an absolute tick.

    source_index records emission order and breaks ties between
    events with the same time and priority.
    """

    time: int
    message: Message
    source_index: int

    def __post_init__(self) -> None:
        if not 0 <= self.time <= MAX_TICK_POSITION:
            raise ValueError(f"Event time must be 0-{MAX_TICK_POSITION}, got {self.time}")

    @property
    def priority(self) -> EventPriority:
        return self.message.priority

    @property
    def payload(self) -> bytes:
        return self.message.to_bytes()

    @property
    def sort_key(self) -> tuple[int, int, int]:
        """(time, priority, source_index) - the timeline order."""
        return (self.time, int(self.priority), self.source_index)
