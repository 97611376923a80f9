#!/usr/bin/env python3
"""
Example: Compile a text score to MIDI.

Compiles examples/melody.txt, writes it next to this script, then
prints the timeline and the messages mido reads back.

Usage:
    python examples/compile_melody.py
    # Creates: examples/output/melody.midi
"""

from pathlib import Path

from text2midi import compile_score
from text2midi.compiler import describe_event


def main() -> None:
    """Compile the example score."""
    here = Path(__file__).parent
    output_dir = here / "output"
    output_dir.mkdir(exist_ok=True)

    print("Compiling melody.txt...")
    result = compile_score((here / "melody.txt").read_text(encoding="utf-8"))
    output_path = output_dir / "melody.midi"
    output_path.write_bytes(result.data)
    print(f"  Created: {output_path} ({len(result.data)} bytes)")

    print("\nTimeline:")
    for event in result.timeline:
        d = describe_event(event)
        note = d.get("note", "")
        print(f"  {d['tick']:>6}  {d['kind']:<9} {note:<4} {d['bytes']}")

    print("\nRead back with mido:")
    for message in result.to_midi_file().tracks[0]:
        print(f"  {message}")


if __name__ == "__main__":
    main()
