"""
Constants and enums for the score compiler.

No magic numbers - ranges, defaults and MIDI status bytes live here.
"""

from enum import IntEnum

# Defaults applied before the first score line
DEFAULT_BPM = 120
DEFAULT_PPQ = 480
DEFAULT_CHANNEL = 0
DEFAULT_VELOCITY = 100

# Inclusive bounds for score arguments
BPM_RANGE: tuple[int, int] = (20, 400)
PPQ_RANGE: tuple[int, int] = (48, 9600)
CHANNEL_RANGE: tuple[int, int] = (0, 15)
VELOCITY_RANGE: tuple[int, int] = (0, 127)
PITCH_RANGE: tuple[int, int] = (0, 127)

# Timing
MS_PER_MINUTE = 60_000
US_PER_MINUTE = 60_000_000
MAX_TICKS = 0x7FFFFFFF  # Largest single duration in ticks
MAX_TICK_POSITION = 0xFFFFFFFF  # Absolute ticks are unsigned 32-bit

# MIDI status bytes
NOTE_OFF_STATUS = 0x80
NOTE_ON_STATUS = 0x90
META_STATUS = 0xFF
META_SET_TEMPO = 0x51
META_END_OF_TRACK = 0x2F

# Output location
DEFAULT_OUTPUT_DIR = "midis"
DEFAULT_OUTPUT_EXTENSION = ".midi"


class EventPriority(IntEnum):
    """
    Ordering of events that share the same tick.

    Lower values are written first: tempo changes land before any note
    boundary, and a note-off always precedes a note-on at the same tick.
    """

    META = 0
    NOTE_OFF = 1
    NOTE_ON = 2


class ScoreCommand:
    """Keywords recognised at the start of a score line."""

    TEMPO = "tempo"
    PPQ = "ppq"
    CHANNEL = "channel"
    REST = "rest"


class ErrorMessages:
    """Standardized error messages."""

    MISSING_ARGUMENT = "{command} needs {argument}"
    NOT_AN_INTEGER = "{argument} must be an integer, got '{value}'"
    BPM_OUT_OF_RANGE = "bpm out of range (20..400)"
    PPQ_OUT_OF_RANGE = "ppq out of range (48..9600)"
    CHANNEL_OUT_OF_RANGE = "channel out of range (0..15)"
    REST_NEGATIVE = "rest ms must be >= 0"
    DURATION_NOT_POSITIVE = "duration must be > 0"
    INVALID_NOTE = "invalid note token '{token}'"
    PITCH_OUT_OF_RANGE = "note '{token}' is outside MIDI range 0..127"
    TIMELINE_OVERFLOW = "score runs past the maximum tick position"
