"""Allow `python -m text2midi`."""

from text2midi.cli import run

run()
