"""
Key tools - MCP tools for keys, scale degrees and modal transposition.

A mode is passed as its interval vector, e.g. [2, 2, 1, 2, 2, 2, 1]
for major. Pitches are passed in scientific notation.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_modes.constants import Direction, ErrorMessages
from chuk_mcp_modes.core import (
    PitchClass,
    from_keynum,
    modal_transposition,
    mode_notes_above_base,
    notes_of_key,
    scale_degree,
)
from chuk_mcp_modes.tools.pitch import describe_pitch

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def parse_direction(direction: str) -> Direction:
    """Parse a direction name like 'up', 'DOWN' or 'oblique'."""
    try:
        return Direction(direction.strip().lower())
    except ValueError:
        raise ValueError(ErrorMessages.INVALID_DIRECTION.format(direction=direction)) from None


def register_key_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register key tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def modes_notes_of_key(tonic: str, steps: list[int]) -> str:
        """
        Get the notes of the key built on a tonic.

        The tonic comes first, followed by one pitch class per step.

        Args:
            tonic: Tonic pitch (e.g., "E4")
            steps: Interval vector of the mode (e.g., [2, 2, 1, 2, 2, 2, 1])

        Returns:
            JSON string with the pitch classes of the key

        Example:
            modes_notes_of_key(tonic="E4", steps=[2, 2, 1, 2, 2, 2, 1])
            # [4, 6, 8, 9, 11, 1, 3, 4]
        """
        try:
            pc = PitchClass.parse(tonic)
            return json.dumps(
                {
                    "status": "success",
                    "tonic": describe_pitch(pc),
                    "notes": notes_of_key(pc, steps),
                }
            )
        except Exception as e:
            logger.exception("Failed to build key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modes_notes_of_key"] = modes_notes_of_key

    @mcp.tool  # type: ignore[arg-type]
    async def modes_notes_above_base(base: str, steps: list[int]) -> str:
        """
        Get the pitch classes each step of a mode reaches above a base.

        Unlike modes_notes_of_key the base itself is not included.

        Args:
            base: Base pitch (e.g., "C4")
            steps: Interval vector of the mode

        Returns:
            JSON string with one pitch class per step

        Example:
            modes_notes_above_base(base="C4", steps=[2, 2, 1])  # [2, 4, 5]
        """
        try:
            pc = PitchClass.parse(base)
            return json.dumps(
                {
                    "status": "success",
                    "base": describe_pitch(pc),
                    "notes": mode_notes_above_base(pc, steps),
                }
            )
        except Exception as e:
            logger.exception("Failed to accumulate mode notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modes_notes_above_base"] = modes_notes_above_base

    @mcp.tool  # type: ignore[arg-type]
    async def modes_scale_degree(pitch: str, tonic: str, steps: list[int]) -> str:
        """
        Find the scale degree of a pitch in a key.

        Degrees are 1-based; 0 means the pitch is not in the key. When a
        pitch class appears twice (the octave-closing note of a full mode)
        the later degree is reported.

        Args:
            pitch: Pitch to look up (e.g., "G4")
            tonic: Tonic of the key (e.g., "C4")
            steps: Interval vector of the mode

        Returns:
            JSON string with the degree and whether the pitch is in the key

        Example:
            modes_scale_degree(pitch="G4", tonic="C4", steps=[2, 2, 1, 2, 2, 2, 1])
            # degree 5
        """
        try:
            pc = PitchClass.parse(pitch)
            tonic_pc = PitchClass.parse(tonic)
            degree = scale_degree(pc, tonic_pc, steps)
            return json.dumps(
                {
                    "status": "success",
                    "pitch": describe_pitch(pc),
                    "degree": degree,
                    "in_key": degree > 0,
                }
            )
        except Exception as e:
            logger.exception("Failed to find scale degree")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modes_scale_degree"] = modes_scale_degree

    @mcp.tool  # type: ignore[arg-type]
    async def modes_transpose(
        pitch: str,
        tonic: str,
        steps: list[int],
        numsteps: int,
        direction: str = "up",
    ) -> str:
        """
        Transpose a pitch by scale steps within a key.

        The pitch must be a note of the key.

        Args:
            pitch: Pitch to transpose (e.g., "E4")
            tonic: Tonic of the key (e.g., "C4")
            steps: Interval vector of the mode
            numsteps: Number of scale steps to move
            direction: "up", "down" or "oblique"

        Returns:
            JSON string with the resulting keynum and pitch

        Example:
            modes_transpose(pitch="E4", tonic="C4", steps=[2, 2, 1, 2, 2, 2, 1],
                            numsteps=2, direction="up")
            # keynum 67 (G4)
        """
        try:
            pc = PitchClass.parse(pitch)
            tonic_pc = PitchClass.parse(tonic)
            motion = parse_direction(direction)
            result = modal_transposition(pc, tonic_pc, steps, numsteps, motion)
            return json.dumps(
                {
                    "status": "success",
                    "from": describe_pitch(pc),
                    "direction": motion.value,
                    "numsteps": numsteps,
                    "keynum": result,
                    "pitch": describe_pitch(from_keynum(result)),
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modes_transpose"] = modes_transpose

    return tools
