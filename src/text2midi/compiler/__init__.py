"""
Compilation pipeline - transforms text scores to MIDI.

The pipeline:
    Score text → ScoreParser (PlaybackState threaded per line)
    → Events (unordered, emission-indexed)
    → order_events (deterministic timeline)
    → encode_smf (SMF format 0 bytes)
"""

from text2midi.compiler.buffer import ByteBuffer, decode_vlq, encode_vlq
from text2midi.compiler.events import EndOfTrack, Event, NoteOff, NoteOn, TempoMeta
from text2midi.compiler.parser import ParseResult, PlaybackState, ScoreParser
from text2midi.compiler.pipeline import (
    CompileResult,
    ScoreCompiler,
    compile_score,
    describe_event,
)
from text2midi.compiler.scheduler import order_events
from text2midi.compiler.smf import encode_smf, encode_track

__all__ = [
    # Buffer
    "ByteBuffer",
    "encode_vlq",
    "decode_vlq",
    # Events
    "Event",
    "TempoMeta",
    "NoteOn",
    "NoteOff",
    "EndOfTrack",
    # Parser
    "PlaybackState",
    "ParseResult",
    "ScoreParser",
    # Scheduling and encoding
    "order_events",
    "encode_smf",
    "encode_track",
    # Pipeline
    "CompileResult",
    "ScoreCompiler",
    "compile_score",
    "describe_event",
]
