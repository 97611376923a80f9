#!/usr/bin/env python3
"""
Command-line entry point for the score compiler.

Usage:
    text2midi melody.txt            # writes midis/melody.txt.midi
    text2midi melody.txt intro      # writes midis/intro.midi
    text2midi melody.txt --dump     # also lists the written messages
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from text2midi.compiler import CompileResult, compile_score
from text2midi.config import load_config
from text2midi.errors import Text2MidiError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def output_name_for(input_path: Path, output_name: str | None) -> str:
    """Output name: the explicit one, else the input's file name."""
    return output_name or input_path.name


def write_output(result: CompileResult, path: Path) -> None:
    """Write compiled bytes, creating the output directory if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(result.data)


def dump_midi(result: CompileResult) -> None:
    """Print the compiled track as read back by mido."""
    midi = result.to_midi_file()
    print(f"format={midi.type} tracks={len(midi.tracks)} ticks_per_beat={midi.ticks_per_beat}")
    for message in midi.tracks[0]:
        print(f"  {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compile a text score to a Standard MIDI File")
    parser.add_argument("input", type=Path, help="Score text file")
    parser.add_argument(
        "output_name",
        nargs="?",
        default=None,
        help="Output file name without extension (default: input file name)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the MIDI file (default: midis)",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--dump", action="store_true", help="Print the written MIDI messages")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = load_config(args.config)
        if args.output_dir is not None:
            config = config.model_copy(update={"output_dir": args.output_dir})

        text = args.input.read_text(encoding="utf-8")
        result = compile_score(text, config)

        output_path = config.output_path(output_name_for(args.input, args.output_name))
        write_output(result, output_path)
    except Text2MidiError as e:
        logger.error(str(e))
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    print(
        f"Wrote {output_path} (ppq={result.ppq}, lastTick={result.last_tick}, "
        f"events={result.event_count})"
    )
    if args.dump:
        dump_midi(result)
    return 0


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
