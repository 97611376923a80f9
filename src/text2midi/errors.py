"""
Error hierarchy for score compilation.

Parse errors carry the 1-based line number of the offending score line.
Every failure is fatal: the pipeline never writes partial output.
"""

from __future__ import annotations


class Text2MidiError(Exception):
    """Base class for all text2midi errors."""


class ScoreError(Text2MidiError, ValueError):
    """A score line could not be interpreted."""

    kind = "score_error"

    def __init__(self, message: str, line: int | None = None) -> None:
        self.message = message
        self.line = line
        super().__init__(str(self))

    def at_line(self, line: int) -> ScoreError:
        """Return a copy of this error bound to a score line."""
        return type(self)(self.message, line=line)

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"Line {self.line}: {self.message}"


class MalformedCommandError(ScoreError):
    """Missing or non-integer argument."""

    kind = "malformed_command"


class OutOfRangeError(ScoreError):
    """Numeric argument outside its documented bound."""

    kind = "out_of_range"


class InvalidNoteTokenError(ScoreError):
    """Unparseable note name or pitch outside 0-127."""

    kind = "invalid_note_token"


class ResourceExhaustionError(Text2MidiError):
    """Memory could not be allocated for the output."""

    kind = "resource_exhaustion"
