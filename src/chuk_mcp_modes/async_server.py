#!/usr/bin/env python3
"""
Async Modes MCP Server using chuk-mcp-server

This server exposes modal pitch arithmetic as MCP tools. Modes are
passed in as interval vectors, so any scale the caller can describe
as semitone steps is supported.

The server provides tools for:
- Converting between pitch names, keynums and frequencies
- Measuring distance and melodic motion between pitches
- Building keys and looking up scale degrees
- Transposing pitches by scale steps within a key
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_modes.tools import register_key_tools, register_pitch_tools
from chuk_mcp_modes.tunings import TuningLoader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-modes")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
TUNINGS_DIR = Path(os.environ.get("CHUK_MODES_TUNINGS_DIR", BASE_PATH / "tunings"))
TUNINGS_LIBRARY_PATH = Path(__file__).parent / "tunings" / "library"

tuning_loader = TuningLoader(
    library_path=TUNINGS_LIBRARY_PATH,
    project_path=TUNINGS_DIR,
)

# Register all tools
pitch_tools = register_pitch_tools(mcp, tuning_loader)
key_tools = register_key_tools(mcp)

# Export tool functions for direct access
modes_keynum = pitch_tools["modes_keynum"]
modes_from_keynum = pitch_tools["modes_from_keynum"]
modes_frequency = pitch_tools["modes_frequency"]
modes_interval = pitch_tools["modes_interval"]
modes_list_tunings = pitch_tools["modes_list_tunings"]

modes_notes_of_key = key_tools["modes_notes_of_key"]
modes_notes_above_base = key_tools["modes_notes_above_base"]
modes_scale_degree = key_tools["modes_scale_degree"]
modes_transpose = key_tools["modes_transpose"]

logger.info("CHUK Modes MCP Server initialized")
logger.info(f"  Tunings library: {TUNINGS_LIBRARY_PATH}")
logger.info(f"  Project tunings dir: {TUNINGS_DIR}")
