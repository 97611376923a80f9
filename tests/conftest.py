"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

MELODY = """\
# tempo in BPM
tempo 120

# simple melody
C4 200
E4 200
G4 400
rest 200
D4 400 80
"""


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def melody() -> str:
    """A short score exercising tempo, notes, rests and velocity."""
    return MELODY


@pytest.fixture
def melody_path(temp_dir: Path, melody: str) -> Path:
    """The melody score written to a file."""
    path = temp_dir / "melody.txt"
    path.write_text(melody, encoding="utf-8")
    return path
