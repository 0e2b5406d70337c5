#!/usr/bin/env python3
"""
Entry point for the CHUK Fretboard MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Fretboard MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML quiz config (default: ./fretboard.yaml if present)",
    )
    parser.add_argument(
        "--tuning",
        default=None,
        help="Default tuning for new challenges (overrides config)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing to avoid issues
    from chuk_mcp_fretboard.async_server import build_server
    from chuk_mcp_fretboard.config import load_config
    from chuk_mcp_fretboard.core import Tuning

    config = load_config(args.config)
    if args.tuning:
        config = config.model_copy(update={"tuning": Tuning.parse(args.tuning)})

    mcp, _ = build_server(config)

    if args.transport == "stdio":
        logger.info("Starting CHUK Fretboard MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Fretboard MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
