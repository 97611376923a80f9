"""
Core primitives - the pure leaves of the compiler.

- PitchClass / resolve_note: note names to MIDI pitches
- midi_to_name: MIDI pitches back to names for display
- ticks_for: millisecond durations to ticks
- tempo_to_microseconds: BPM to the SMF tempo value
"""

from text2midi.core.pitch import PitchClass, midi_to_name, resolve_note
from text2midi.core.timing import tempo_to_microseconds, ticks_for

__all__ = [
    # Pitch
    "PitchClass",
    "resolve_note",
    "midi_to_name",
    # Timing
    "ticks_for",
    "tempo_to_microseconds",
]
