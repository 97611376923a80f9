"""
Tests for compiler configuration.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from text2midi.config import CompilerConfig, load_config


class TestCompilerConfig:
    """Tests for the config model."""

    def test_defaults(self) -> None:
        config = CompilerConfig()
        assert config.default_bpm == 120
        assert config.default_ppq == 480
        assert config.default_channel == 0
        assert config.default_velocity == 100
        assert config.output_dir == Path("midis")
        assert config.output_extension == ".midi"

    def test_output_path(self) -> None:
        config = CompilerConfig(output_dir=Path("out"))
        assert config.output_path("song") == Path("out") / "song.midi"

    @pytest.mark.parametrize("name", ["", ".", "..", "../x", "a/b", "a\\b"])
    def test_output_path_rejects_unsafe_names(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid output name"):
            CompilerConfig().output_path(name)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("default_bpm", 19),
            ("default_bpm", 401),
            ("default_ppq", 47),
            ("default_channel", 16),
            ("default_velocity", 128),
        ],
    )
    def test_ranges(self, field: str, value: int) -> None:
        with pytest.raises(ValidationError):
            CompilerConfig(**{field: value})

    def test_unknown_field(self) -> None:
        with pytest.raises(ValidationError):
            CompilerConfig(tempo=120)


class TestLoadConfig:
    """Tests for YAML loading."""

    def test_none_gives_defaults(self) -> None:
        assert load_config(None) == CompilerConfig()

    def test_empty_file(self, temp_dir: Path) -> None:
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert load_config(path) == CompilerConfig()

    def test_overrides(self, temp_dir: Path) -> None:
        path = temp_dir / "config.yaml"
        path.write_text("default_bpm: 96\noutput_dir: renders\noutput_extension: .mid\n")
        config = load_config(path)
        assert config.default_bpm == 96
        assert config.output_path("a") == Path("renders") / "a.mid"

    def test_not_a_mapping(self, temp_dir: Path) -> None:
        path = temp_dir / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(path)
