"""
MCP tool implementations.

- compilation - compile, validate and inspect text scores
"""

from text2midi.tools.compilation import register_compilation_tools

__all__ = [
    "register_compilation_tools",
]
