"""
Pitch primitives - PitchClass and note-name resolution.

PitchClass represents the 12 chromatic pitches (octave-independent).
resolve_note turns a score token like 'C4', 'F#3' or 'Bb-1' into a
MIDI note number using the standard octave convention (C4 = 60,
C-1 = 0).
"""

from __future__ import annotations

import re
from enum import IntEnum

from text2midi.constants import PITCH_RANGE, ErrorMessages
from text2midi.errors import InvalidNoteTokenError

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# Letter, optional accidental ('b' is lowercase only), signed octave
_NOTE_TOKEN = re.compile(r"([A-Ga-g])([#b]?)(-?[0-9]+)")


class PitchClass(IntEnum):
    """
    The natural pitch classes a note letter can name.

    Accidentals shift these by one semitone; enharmonic spelling is a
    display concern handled by midi_to_name.
    """

    C = 0
    D = 2
    E = 4
    F = 5
    G = 7
    A = 9
    B = 11

    def to_midi(self, octave: int = 4, accidental: int = 0) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return (octave + 1) * 12 + self.value + accidental

    @classmethod
    def from_letter(cls, letter: str) -> PitchClass:
        """Look up a note letter, case-insensitive."""
        try:
            return cls[letter.upper()]
        except KeyError:
            raise ValueError(f"Unknown note letter: {letter}") from None


def resolve_note(token: str) -> int:
    """
    Resolve a note token to a MIDI pitch.

    Args:
        token: Note letter, optional '#' or 'b', then an integer octave

    Returns:
        MIDI note number in 0..127

    Raises:
        InvalidNoteTokenError: If the token is malformed or out of range

    Example:
        resolve_note("C4")   # 60
        resolve_note("Bb2")  # 46
        resolve_note("C-1")  # 0
    """
    match = _NOTE_TOKEN.fullmatch(token)
    if match is None:
        raise InvalidNoteTokenError(ErrorMessages.INVALID_NOTE.format(token=token))

    letter, accidental, octave = match.groups()
    shift = {"#": 1, "b": -1}.get(accidental, 0)
    pitch = PitchClass.from_letter(letter).to_midi(int(octave), shift)

    low, high = PITCH_RANGE
    if not low <= pitch <= high:
        raise InvalidNoteTokenError(ErrorMessages.PITCH_OUT_OF_RANGE.format(token=token))
    return pitch


def midi_to_name(pitch: int, prefer_flats: bool = False) -> str:
    """Spell a MIDI note number, e.g. 61 -> 'C#4'."""
    names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
    return f"{names[pitch % 12]}{pitch // 12 - 1}"
