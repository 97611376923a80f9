"""
Compiler configuration.

Defaults for the playback state and the output location. Values can be
overridden from a YAML file:

    default_bpm: 96
    default_ppq: 960
    output_dir: renders
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from text2midi.constants import (
    DEFAULT_BPM,
    DEFAULT_CHANNEL,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_OUTPUT_EXTENSION,
    DEFAULT_PPQ,
    DEFAULT_VELOCITY,
)

logger = logging.getLogger(__name__)


class CompilerConfig(BaseModel):
    """Settings applied before the first score line is read."""

    default_bpm: int = Field(DEFAULT_BPM, ge=20, le=400, description="Initial tempo")
    default_ppq: int = Field(DEFAULT_PPQ, ge=48, le=9600, description="Initial resolution")
    default_channel: int = Field(DEFAULT_CHANNEL, ge=0, le=15, description="Initial channel")
    default_velocity: int = Field(
        DEFAULT_VELOCITY, ge=0, le=127, description="Velocity for notes without one"
    )
    output_dir: Path = Field(Path(DEFAULT_OUTPUT_DIR), description="Where MIDI files are written")
    output_extension: str = Field(DEFAULT_OUTPUT_EXTENSION, description="Output file suffix")

    model_config = {"extra": "forbid"}

    def output_path(self, name: str) -> Path:
        """
        Path for an output file named `name`.

        Raises:
            ValueError: If the name is empty or would leave output_dir
        """
        if not name or name in (".", "..") or "/" in name or "\\" in name:
            raise ValueError(f"Invalid output name: {name!r}")
        return self.output_dir / f"{name}{self.output_extension}"


def load_config(path: Path | str | None = None) -> CompilerConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: YAML file, or None for defaults

    Returns:
        Validated CompilerConfig

    Raises:
        pydantic.ValidationError: If a value is out of range
    """
    if path is None:
        return CompilerConfig()

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    logger.debug(f"Loaded config from {path}: {data}")
    return CompilerConfig(**data)
