"""
Timing primitives - milliseconds to ticks, BPM to MIDI tempo.

Score durations are written in milliseconds. They become ticks under
the tempo and resolution in force when the line is read, so the same
'200' means a different tick count after a 'tempo' or 'ppq' change.
"""

from __future__ import annotations

from text2midi.constants import MAX_TICKS, MS_PER_MINUTE, US_PER_MINUTE


def ticks_for(ms: int, bpm: int, ppq: int) -> int:
    """
    Convert a duration in milliseconds to MIDI ticks.

    ticks = ms * bpm * ppq / 60000, rounded half-up and clamped to
    0..2**31-1.

    Args:
        ms: Duration in milliseconds (>= 0)
        bpm: Quarter notes per minute
        ppq: Ticks per quarter note

    Returns:
        Number of ticks

    Example:
        ticks_for(200, 120, 480)  # 192
        ticks_for(1, 120, 480)    # 1 (0.96 rounds up)
    """
    numerator = ms * bpm * ppq
    ticks = (numerator + MS_PER_MINUTE // 2) // MS_PER_MINUTE
    return max(0, min(MAX_TICKS, ticks))


def tempo_to_microseconds(bpm: int) -> int:
    """Microseconds per quarter note for a tempo, truncating."""
    return US_PER_MINUTE // bpm
