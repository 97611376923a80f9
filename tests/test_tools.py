"""
Tests for MCP tools.

Tests the compilation tools: compile, validate and inspect.
"""

import json
from pathlib import Path

import pytest
from mido import MidiFile

from text2midi.config import CompilerConfig
from text2midi.tools.compilation import register_compilation_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def tools(temp_dir: Path) -> dict:
    """Compilation tools writing into a temporary directory."""
    return register_compilation_tools(MockMCPServer("test"), temp_dir)


class TestRegistration:
    """Tests for tool registration."""

    def test_registers_all_tools(self, temp_dir: Path) -> None:
        mcp = MockMCPServer("test")
        tools = register_compilation_tools(mcp, temp_dir)
        expected = {"text2midi_compile", "text2midi_validate", "text2midi_inspect"}
        assert set(tools) == expected
        assert set(mcp.tools) == expected


class TestCompileTool:
    """Tests for text2midi_compile."""

    @pytest.mark.asyncio
    async def test_compile(self, tools: dict, temp_dir: Path, melody: str):
        result = await tools["text2midi_compile"](score=melody, output_name="melody")
        data = json.loads(result)

        assert data["status"] == "success"
        assert data["path"] == str(temp_dir / "melody.midi")
        assert data["compilation"]["notes"] == 4
        assert "lastTick=1344" in data["message"]
        assert MidiFile(data["path"]).ticks_per_beat == 480

    @pytest.mark.asyncio
    async def test_compile_error(self, tools: dict, temp_dir: Path):
        result = await tools["text2midi_compile"](score="C4 200\nZ4 100\n", output_name="bad")
        data = json.loads(result)

        assert data["status"] == "error"
        assert data["kind"] == "invalid_note_token"
        assert data["line"] == 2
        assert not (temp_dir / "bad.midi").exists()

    @pytest.mark.asyncio
    async def test_compile_rejects_path_in_name(self, tools: dict, temp_dir: Path, melody: str):
        result = await tools["text2midi_compile"](score=melody, output_name="../escape")
        data = json.loads(result)

        assert data["status"] == "error"
        assert "Invalid output name" in data["message"]
        assert not (temp_dir.parent / "escape.midi").exists()

    @pytest.mark.asyncio
    async def test_compile_uses_config(self, temp_dir: Path):
        config = CompilerConfig(default_ppq=96, output_extension=".mid")
        tools = register_compilation_tools(MockMCPServer("test"), temp_dir, config)

        result = await tools["text2midi_compile"](score="C4 500", output_name="short")
        data = json.loads(result)

        assert data["path"] == str(temp_dir / "short.mid")
        assert data["compilation"]["last_tick"] == 96


class TestValidateTool:
    """Tests for text2midi_validate."""

    @pytest.mark.asyncio
    async def test_valid(self, tools: dict, melody: str):
        data = json.loads(await tools["text2midi_validate"](score=melody))
        assert data["status"] == "success"
        assert data["valid"] is True
        assert data["events"] == 10
        assert data["end_tick"] == 1344
        assert data["commands"] == {"tempo": 1, "note": 4, "rest": 1}

    @pytest.mark.asyncio
    async def test_invalid(self, tools: dict):
        data = json.loads(await tools["text2midi_validate"](score="tempo 500"))
        assert data["valid"] is False
        assert data["error"]["kind"] == "out_of_range"
        assert data["error"]["line"] == 1
        assert data["error"]["message"] == "Line 1: bpm out of range (20..400)"

    @pytest.mark.asyncio
    async def test_writes_nothing(self, tools: dict, temp_dir: Path, melody: str):
        await tools["text2midi_validate"](score=melody)
        assert list(temp_dir.iterdir()) == []


class TestInspectTool:
    """Tests for text2midi_inspect."""

    @pytest.mark.asyncio
    async def test_inspect(self, tools: dict):
        data = json.loads(await tools["text2midi_inspect"](score="C4 200\nC4 200"))

        assert data["status"] == "success"
        assert data["header"] == {"format": 0, "tracks": 1, "division": 480}
        kinds = [(e["tick"], e["kind"]) for e in data["events"]]
        assert kinds == [
            (0, "tempo"),
            (0, "note_on"),
            (192, "note_off"),
            (192, "note_on"),
            (384, "note_off"),
        ]
        assert data["events"][1]["note"] == "C4"

    @pytest.mark.asyncio
    async def test_inspect_without_events(self, tools: dict):
        data = json.loads(await tools["text2midi_inspect"](score="C4 200", include_events=False))
        assert "events" not in data
        assert data["summary"]["events"] == 3

    @pytest.mark.asyncio
    async def test_inspect_error(self, tools: dict):
        data = json.loads(await tools["text2midi_inspect"](score="C4 0"))
        assert data["status"] == "error"
        assert data["kind"] == "out_of_range"
