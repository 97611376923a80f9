"""
Score compiler - text to SMF bytes.

This is the central compilation pipeline:
    Score text → ScoreParser → Events → order_events → Timeline → encode_smf → bytes

Each stage runs to completion before the next starts. A parse error
stops the run before anything is encoded, so callers never see
partial output.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Any

from mido import MidiFile

from text2midi.compiler.events import Event, NoteOff, NoteOn, TempoMeta
from text2midi.compiler.parser import PlaybackState, ScoreParser
from text2midi.compiler.scheduler import order_events
from text2midi.compiler.smf import encode_smf
from text2midi.config import CompilerConfig
from text2midi.constants import US_PER_MINUTE
from text2midi.core import midi_to_name

logger = logging.getLogger(__name__)


@dataclass
class CompileResult:
    """Result of compiling a score."""

    data: bytes
    timeline: list[Event]
    state: PlaybackState

    @property
    def ppq(self) -> int:
        """Division written to the header (the last ppq in force)."""
        return self.state.ppq

    @property
    def event_count(self) -> int:
        return len(self.timeline)

    @property
    def last_tick(self) -> int:
        """Absolute tick of the final event before End of Track."""
        return self.timeline[-1].time if self.timeline else 0

    @property
    def note_count(self) -> int:
        return sum(1 for event in self.timeline if isinstance(event.message, NoteOn))

    def to_midi_file(self) -> MidiFile:
        """Read the compiled bytes back as a mido MidiFile."""
        return MidiFile(file=io.BytesIO(self.data))

    def summary(self) -> dict[str, Any]:
        """Generate a summary for quick inspection."""
        pitches = [e.message.pitch for e in self.timeline if isinstance(e.message, NoteOn)]
        return {
            "ppq": self.ppq,
            "bytes": len(self.data),
            "events": self.event_count,
            "notes": self.note_count,
            "last_tick": self.last_tick,
            "final_tempo": self.state.bpm,
            "pitch_range": (min(pitches), max(pitches)) if pitches else None,
        }


def describe_event(event: Event) -> dict[str, Any]:
    """JSON-friendly view of a timeline event."""
    message = event.message
    d: dict[str, Any] = {
        "tick": event.time,
        "kind": message.kind,
        "bytes": event.payload.hex(" "),
    }
    if isinstance(message, TempoMeta):
        d["tempo_us"] = message.microseconds_per_quarter
        d["bpm"] = round(US_PER_MINUTE / message.microseconds_per_quarter, 3)
    elif isinstance(message, (NoteOn, NoteOff)):
        d["channel"] = message.channel
        d["pitch"] = message.pitch
        d["note"] = midi_to_name(message.pitch)
        if isinstance(message, NoteOn):
            d["velocity"] = message.velocity
    return d


class ScoreCompiler:
    """
    Compiles score text to a Standard MIDI File.

    Example:
        result = ScoreCompiler().compile("tempo 90\\nC4 200\\nE4 200\\n")
        Path("out.midi").write_bytes(result.data)
    """

    def __init__(self, config: CompilerConfig | None = None):
        """
        Initialize the compiler.

        Args:
            config: Starting playback state and velocity defaults
        """
        self.config = config or CompilerConfig()
        self.parser = ScoreParser(self.config)

    def compile(self, text: str) -> CompileResult:
        """
        Compile a score.

        Args:
            text: Score source

        Returns:
            CompileResult with the encoded file and its timeline

        Raises:
            ScoreError: On the first invalid line
            ResourceExhaustionError: If the output cannot be allocated
        """
        parsed = self.parser.parse(text)
        timeline = order_events(parsed.events)
        data = encode_smf(timeline, parsed.state.ppq)

        result = CompileResult(data=data, timeline=timeline, state=parsed.state)
        logger.info(
            f"Compiled {parsed.lines_read} lines: {result.event_count} events, "
            f"last tick {result.last_tick}, ppq {result.ppq}"
        )
        return result


def compile_score(text: str, config: CompilerConfig | None = None) -> CompileResult:
    """Compile score text with the given (or default) configuration."""
    return ScoreCompiler(config).compile(text)
