"""
SMF export - the end of the pipeline.

Writes a Standard MIDI File, format 0, one track, byte for byte:

    MThd <len=6> <format=0> <ntrks=1> <division=ppq>
    MTrk <len> { <delta VLQ> <message bytes> }* 00 FF 2F 00

All multi-byte integers are big-endian. Same events -> same bytes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from text2midi.compiler.buffer import ByteBuffer, decode_vlq, encode_vlq
from text2midi.compiler.events import EndOfTrack

if TYPE_CHECKING:
    from collections.abc import Sequence

    from text2midi.compiler.events import Event

HEADER_CHUNK = b"MThd"
TRACK_CHUNK = b"MTrk"
HEADER_LENGTH = 6
SMF_FORMAT = 0
TRACK_COUNT = 1


def encode_track(events: Sequence[Event]) -> bytes:
    """
    Encode the body of the single track chunk.

    Args:
        events: Timeline, already ordered

    Returns:
        Delta-timed messages followed by End of Track
    """
    body = ByteBuffer()
    last_tick = 0
    for event in events:
        body.put_vlq(event.time - last_tick)
        body.put(event.payload)
        last_tick = event.time

    body.put_vlq(0)
    body.put(EndOfTrack().to_bytes())
    return body.getvalue()


def encode_smf(events: Sequence[Event], ppq: int) -> bytes:
    """
    Encode an ordered timeline as a complete SMF file.

    Args:
        events: Timeline, already ordered by the scheduler
        ppq: Ticks per quarter note for the header division field

    Returns:
        The file contents
    """
    track = encode_track(events)

    out = ByteBuffer()
    out.put(HEADER_CHUNK)
    out.put_be32(HEADER_LENGTH)
    out.put_be16(SMF_FORMAT)
    out.put_be16(TRACK_COUNT)
    out.put_be16(ppq)

    out.put(TRACK_CHUNK)
    out.put_be32(len(track))
    out.put(track)
    return out.getvalue()


__all__ = [
    "HEADER_CHUNK",
    "TRACK_CHUNK",
    "decode_vlq",
    "encode_smf",
    "encode_track",
    "encode_vlq",
]
