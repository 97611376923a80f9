"""
Score parser - text lines to timed events.

The parser walks the score one line at a time. Each line is a command
(tempo, ppq, channel, rest) or a note:

    tempo 90
    ppq 960
    channel 1
    C4 150
    F#3 120 90
    rest 75

Playback state is an immutable value: every step takes the current
state and returns the next one along with the messages it emitted.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Optional

from text2midi.compiler.events import Event, Message, NoteOff, NoteOn, TempoMeta
from text2midi.config import CompilerConfig
from text2midi.constants import (
    BPM_RANGE,
    CHANNEL_RANGE,
    MAX_TICK_POSITION,
    PPQ_RANGE,
    VELOCITY_RANGE,
    ErrorMessages,
    ScoreCommand,
)
from text2midi.core import resolve_note, tempo_to_microseconds, ticks_for
from text2midi.errors import MalformedCommandError, OutOfRangeError, ScoreError

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")

# Messages emitted by one step, each with its absolute tick
Emission = list[tuple[int, Message]]


@dataclass(frozen=True)
class PlaybackState:
    """
    Tempo, resolution, channel and position while reading a score.

    cursor_tick only moves forward: notes and rests advance it, other
    commands leave it where it is.
    """

    bpm: int
    ppq: int
    channel: int
    cursor_tick: int = 0

    @classmethod
    def from_config(cls, config: CompilerConfig) -> PlaybackState:
        return cls(
            bpm=config.default_bpm,
            ppq=config.default_ppq,
            channel=config.default_channel,
        )

    def advance(self, ticks: int) -> PlaybackState:
        """Move the cursor forward by `ticks`."""
        cursor = self.cursor_tick + ticks
        if cursor > MAX_TICK_POSITION:
            raise OutOfRangeError(ErrorMessages.TIMELINE_OVERFLOW)
        return replace(self, cursor_tick=cursor)


@dataclass
class ParseResult:
    """Events in emission order plus the state after the last line."""

    events: list[Event]
    state: PlaybackState
    lines_read: int = 0
    commands: dict[str, int] = field(default_factory=dict)


Handler = Callable[[PlaybackState, Optional[str]], tuple[PlaybackState, Emission]]


def _score_lines(text: str) -> list[str]:
    """Split on '\\n' only, so line numbers match what an editor shows."""
    lines = [line.rstrip("\r") for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _is_skippable(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def _require(value: str | None, command: str, argument: str) -> str:
    if value is None:
        raise MalformedCommandError(
            ErrorMessages.MISSING_ARGUMENT.format(command=command, argument=argument)
        )
    return value


def _parse_int(value: str, argument: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise MalformedCommandError(
            ErrorMessages.NOT_AN_INTEGER.format(argument=argument, value=value)
        )
    return int(value)


def _in_range(value: int, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= value <= bounds[1]


class ScoreParser:
    """
    Interprets score text into an unordered list of timed events.

    The first event is always a tempo meta at tick 0 for the starting
    tempo, so every track opens with a tempo declaration.
    """

    def __init__(self, config: CompilerConfig | None = None):
        """
        Initialize the parser.

        Args:
            config: Starting tempo, resolution, channel and velocity
        """
        self.config = config or CompilerConfig()
        self._commands: dict[str, Handler] = {
            ScoreCommand.TEMPO: self._tempo,
            ScoreCommand.PPQ: self._ppq,
            ScoreCommand.CHANNEL: self._channel,
            ScoreCommand.REST: self._rest,
        }

    def initial_state(self) -> PlaybackState:
        """Playback state before the first line."""
        return PlaybackState.from_config(self.config)

    def parse(self, text: str) -> ParseResult:
        """
        Parse a complete score.

        Args:
            text: Score source

        Returns:
            ParseResult with events in emission order

        Raises:
            ScoreError: On the first invalid line, with its line number
        """
        state = self.initial_state()
        events = [Event(0, TempoMeta(tempo_to_microseconds(state.bpm)), 0)]
        commands: dict[str, int] = {}
        line_no = 0

        for line_no, line in enumerate(_score_lines(text), start=1):
            if _is_skippable(line):
                continue

            tokens = line.split()
            try:
                state, emitted = self.step(state, tokens)
            except ScoreError as e:
                raise e.at_line(line_no) from None

            for tick, message in emitted:
                events.append(Event(tick, message, len(events)))

            name = tokens[0] if tokens[0] in self._commands else "note"
            commands[name] = commands.get(name, 0) + 1

        return ParseResult(events=events, state=state, lines_read=line_no, commands=commands)

    def step(self, state: PlaybackState, tokens: list[str]) -> tuple[PlaybackState, Emission]:
        """
        Interpret one tokenized line.

        Only the first three tokens are significant.

        Args:
            state: State before the line
            tokens: Whitespace-split line, non-empty

        Returns:
            (state after the line, emitted (tick, message) pairs)
        """
        head = tokens[0]
        arg = tokens[1] if len(tokens) > 1 else None
        extra = tokens[2] if len(tokens) > 2 else None

        handler = self._commands.get(head)
        if handler is not None:
            logger.debug(f"{head} {arg} at tick {state.cursor_tick}")
            return handler(state, arg)
        return self._note(state, head, arg, extra)

    def _tempo(self, state: PlaybackState, arg: str | None) -> tuple[PlaybackState, Emission]:
        bpm = _parse_int(_require(arg, ScoreCommand.TEMPO, "bpm"), "bpm")
        if not _in_range(bpm, BPM_RANGE):
            raise OutOfRangeError(ErrorMessages.BPM_OUT_OF_RANGE)
        message = TempoMeta(tempo_to_microseconds(bpm))
        return replace(state, bpm=bpm), [(state.cursor_tick, message)]

    def _ppq(self, state: PlaybackState, arg: str | None) -> tuple[PlaybackState, Emission]:
        # Ticks already placed keep the resolution they were computed under
        ppq = _parse_int(_require(arg, ScoreCommand.PPQ, "value"), "ppq")
        if not _in_range(ppq, PPQ_RANGE):
            raise OutOfRangeError(ErrorMessages.PPQ_OUT_OF_RANGE)
        return replace(state, ppq=ppq), []

    def _channel(self, state: PlaybackState, arg: str | None) -> tuple[PlaybackState, Emission]:
        channel = _parse_int(_require(arg, ScoreCommand.CHANNEL, "0..15"), "channel")
        if not _in_range(channel, CHANNEL_RANGE):
            raise OutOfRangeError(ErrorMessages.CHANNEL_OUT_OF_RANGE)
        return replace(state, channel=channel), []

    def _rest(self, state: PlaybackState, arg: str | None) -> tuple[PlaybackState, Emission]:
        ms = _parse_int(_require(arg, ScoreCommand.REST, "ms"), "rest ms")
        if ms < 0:
            raise OutOfRangeError(ErrorMessages.REST_NEGATIVE)
        return state.advance(ticks_for(ms, state.bpm, state.ppq)), []

    def _note(
        self,
        state: PlaybackState,
        token: str,
        arg: str | None,
        velocity_arg: str | None,
    ) -> tuple[PlaybackState, Emission]:
        duration_arg = _require(arg, "note", "duration ms")
        pitch = resolve_note(token)

        ms = _parse_int(duration_arg, "duration")
        if ms <= 0:
            raise OutOfRangeError(ErrorMessages.DURATION_NOT_POSITIVE)

        velocity = self.config.default_velocity
        if velocity_arg is not None:
            low, high = VELOCITY_RANGE
            velocity = max(low, min(high, _parse_int(velocity_arg, "velocity")))

        duration = ticks_for(ms, state.bpm, state.ppq)
        after = state.advance(duration)
        logger.debug(
            f"note {token} pitch={pitch} vel={velocity} ticks {state.cursor_tick}-{after.cursor_tick}"
        )

        # Monophonic: the next line starts where this note ends
        return after, [
            (state.cursor_tick, NoteOn(state.channel, pitch, velocity)),
            (after.cursor_tick, NoteOff(state.channel, pitch)),
        ]
