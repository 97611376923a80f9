#!/usr/bin/env python3
"""
Entry point for the text2midi MCP Server.

    text2midi-mcp                          # stdio transport
    text2midi-mcp --transport http --port 8080
    text2midi-mcp --config text2midi.yaml  # compiler defaults from YAML
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Parse server options, then start the chosen transport."""
    parser = argparse.ArgumentParser(description="text2midi MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument("--port", type=int, default=8000, help="HTTP port (http transport only)")
    parser.add_argument("--config", default=None, help="YAML file with compiler defaults")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.config:
        # Read by async_server at import time
        os.environ["TEXT2MIDI_CONFIG"] = args.config

    from text2midi.async_server import mcp

    logger.info(f"Starting text2midi MCP Server ({args.transport})")
    if args.transport == "http":
        asyncio.run(mcp.run_http(port=args.port))
    else:
        asyncio.run(mcp.run_stdio())


if __name__ == "__main__":
    main()
