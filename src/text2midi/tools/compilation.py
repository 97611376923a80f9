"""
Compilation tools - MCP tools for score compilation.

Tools for compiling, validating and inspecting text scores.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from text2midi.compiler import ScoreCompiler, ScoreParser, describe_event
from text2midi.config import CompilerConfig
from text2midi.errors import ScoreError

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _score_error(e: ScoreError) -> str:
    return json.dumps(
        {
            "status": "error",
            "kind": e.kind,
            "line": e.line,
            "message": str(e),
        }
    )


def register_compilation_tools(
    mcp: ChukMCPServer,
    output_dir: Path | None = None,
    config: CompilerConfig | None = None,
) -> dict[str, Any]:
    """
    Register compilation tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for output files (overrides config.output_dir)
        config: Compiler defaults

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    config = config or CompilerConfig()
    if output_dir is not None:
        config = config.model_copy(update={"output_dir": output_dir})
    compiler = ScoreCompiler(config)

    @mcp.tool  # type: ignore[arg-type]
    async def text2midi_compile(score: str, output_name: str = "score") -> str:
        """
        Compile a text score to a MIDI file.

        The score has one command per line: 'tempo <bpm>', 'ppq <n>',
        'channel <0-15>', 'rest <ms>' or '<note> <ms> [velocity]'.

        Args:
            score: Score text
            output_name: Output filename (without extension)

        Returns:
            JSON string with compilation result and file path

        Example:
            text2midi_compile(score="C4 200\\nE4 200\\nG4 400", output_name="arpeggio")
        """
        try:
            result = compiler.compile(score)

            output_path = config.output_path(output_name)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(result.data)

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "compilation": result.summary(),
                    "message": (
                        f"Wrote {output_path} (ppq={result.ppq}, "
                        f"lastTick={result.last_tick}, events={result.event_count})"
                    ),
                }
            )
        except ScoreError as e:
            return _score_error(e)
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to compile score")
            return json.dumps({"status": "error", "message": str(e)})

    tools["text2midi_compile"] = text2midi_compile

    @mcp.tool  # type: ignore[arg-type]
    async def text2midi_validate(score: str) -> str:
        """
        Check a score without writing anything.

        Args:
            score: Score text

        Returns:
            JSON string with validity, or the first error and its line

        Example:
            text2midi_validate(score="tempo 500")
        """
        try:
            parsed = ScoreParser(config).parse(score)
            return json.dumps(
                {
                    "status": "success",
                    "valid": True,
                    "events": len(parsed.events),
                    "end_tick": parsed.state.cursor_tick,
                    "commands": parsed.commands,
                }
            )
        except ScoreError as e:
            return json.dumps(
                {
                    "status": "success",
                    "valid": False,
                    "error": {"kind": e.kind, "line": e.line, "message": str(e)},
                }
            )
        except Exception as e:
            logger.exception("Failed to validate score")
            return json.dumps({"status": "error", "message": str(e)})

    tools["text2midi_validate"] = text2midi_validate

    @mcp.tool  # type: ignore[arg-type]
    async def text2midi_inspect(score: str, include_events: bool = True) -> str:
        """
        Compile a score in memory and show the resulting timeline.

        Useful for checking tick placement and event order before
        writing a file.

        Args:
            score: Score text
            include_events: Whether to list individual events (default True)

        Returns:
            JSON string with header fields and ordered events

        Example:
            text2midi_inspect(score="tempo 90\\nC4 150")
        """
        try:
            result = compiler.compile(score)
            midi = result.to_midi_file()

            response: dict[str, Any] = {
                "status": "success",
                "header": {
                    "format": midi.type,
                    "tracks": len(midi.tracks),
                    "division": midi.ticks_per_beat,
                },
                "summary": result.summary(),
            }
            if include_events:
                response["events"] = [describe_event(e) for e in result.timeline]
            return json.dumps(response)
        except ScoreError as e:
            return _score_error(e)
        except Exception as e:
            logger.exception("Failed to inspect score")
            return json.dumps({"status": "error", "message": str(e)})

    tools["text2midi_inspect"] = text2midi_inspect

    return tools
