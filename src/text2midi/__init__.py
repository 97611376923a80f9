"""
text2midi - compile line-oriented text scores to Standard MIDI Files.

    from text2midi import compile_score

    result = compile_score("tempo 100\nC4 200\nE4 200\nG4 400\n")
    open("melody.midi", "wb").write(result.data)
"""

from text2midi.compiler import CompileResult, ScoreCompiler, compile_score
from text2midi.config import CompilerConfig, load_config
from text2midi.errors import (
    InvalidNoteTokenError,
    MalformedCommandError,
    OutOfRangeError,
    ResourceExhaustionError,
    ScoreError,
    Text2MidiError,
)

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "CompileResult",
    "ScoreCompiler",
    "compile_score",
    # Config
    "CompilerConfig",
    "load_config",
    # Errors
    "Text2MidiError",
    "ScoreError",
    "MalformedCommandError",
    "OutOfRangeError",
    "InvalidNoteTokenError",
    "ResourceExhaustionError",
]
