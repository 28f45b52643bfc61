"""
MCP tool implementations.

Tools are organized by domain:
- pitch - Keynums, frequencies, intervals and tunings
- key - Keys, scale degrees and modal transposition
"""

from chuk_mcp_modes.tools.key import register_key_tools
from chuk_mcp_modes.tools.pitch import register_pitch_tools

__all__ = [
    "register_key_tools",
    "register_pitch_tools",
]
