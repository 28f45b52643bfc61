#!/usr/bin/env python3
"""
Entry point for the CHUK Modes MCP Server.

Parses transport options, points the server at a project tunings
directory and hands off to the stdio or http transport.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TUNINGS_DIR_ENV = "CHUK_MODES_TUNINGS_DIR"


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(description="CHUK Modes MCP Server")
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
        "--tunings-dir",
        default=None,
        help="Directory of project tuning YAML files (default: ./tunings)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.tunings_dir:
        os.environ[TUNINGS_DIR_ENV] = args.tunings_dir

    # The server module reads the tunings directory at import time
    from chuk_mcp_modes.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Modes MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Modes MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
