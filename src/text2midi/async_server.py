#!/usr/bin/env python3
"""
Async text2midi MCP Server using chuk-mcp-server

This server exposes the score compiler as MCP tools:
- Compiling text scores to MIDI files
- Validating scores with line-numbered diagnostics
- Inspecting the compiled timeline without writing a file
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from text2midi.config import load_config
from text2midi.tools import register_compilation_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("text2midi")

# Paths - output relative to the working directory
BASE_PATH = Path.cwd()
CONFIG_PATH = os.environ.get("TEXT2MIDI_CONFIG")

config = load_config(CONFIG_PATH)
OUTPUT_DIR = BASE_PATH / config.output_dir

# Register all tools
compilation_tools = register_compilation_tools(mcp, OUTPUT_DIR, config)

# Export tool functions for direct access
text2midi_compile = compilation_tools["text2midi_compile"]
text2midi_validate = compilation_tools["text2midi_validate"]
text2midi_inspect = compilation_tools["text2midi_inspect"]

logger.info("text2midi MCP Server initialized")
logger.info(f"  Config: {CONFIG_PATH or 'defaults'}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
