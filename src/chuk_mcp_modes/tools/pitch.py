"""
Pitch tools - MCP tools for keynums, frequencies and intervals.

Tools for converting between pitch names and keynums, deriving
frequencies under a tuning, and measuring melodic motion.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_modes.constants import ErrorMessages
from chuk_mcp_modes.core import PitchClass, diff_with_direction, from_keynum
from chuk_mcp_modes.tunings import TuningLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def describe_pitch(pc: PitchClass) -> dict[str, Any]:
    """JSON-ready description of a pitch."""
    return {
        "name": pc.spell(),
        "note": pc.note,
        "octave": pc.octave,
        "keynum": pc.keynum,
    }


def register_pitch_tools(
    mcp: ChukMCPServer,
    tuning_loader: TuningLoader,
) -> dict[str, Any]:
    """
    Register pitch tools with the MCP server.

    Args:
        mcp: The MCP server instance
        tuning_loader: The tuning loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def modes_keynum(pitch: str) -> str:
        """
        Convert a pitch name to its keynum.

        Args:
            pitch: Pitch in scientific notation (e.g., "C4", "F#3", "Bb2")

        Returns:
            JSON string with the pitch and its keynum

        Example:
            modes_keynum(pitch="C4")  # keynum 60
        """
        try:
            pc = PitchClass.parse(pitch)
            return json.dumps({"status": "success", "pitch": describe_pitch(pc)})
        except Exception as e:
            logger.exception("Failed to convert pitch to keynum")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modes_keynum"] = modes_keynum

    @mcp.tool  # type: ignore[arg-type]
    async def modes_from_keynum(keynum: int) -> str:
        """
        Convert a keynum to a pitch.

        Args:
            keynum: Non-negative key number (60 = C4)

        Returns:
            JSON string with the pitch name, note and octave

        Example:
            modes_from_keynum(keynum=69)  # A4
        """
        try:
            pc = from_keynum(keynum)
            return json.dumps({"status": "success", "pitch": describe_pitch(pc)})
        except Exception as e:
            logger.exception("Failed to convert keynum to pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modes_from_keynum"] = modes_from_keynum

    @mcp.tool  # type: ignore[arg-type]
    async def modes_frequency(pitch: str, tuning: str = "standard") -> str:
        """
        Get the frequency of a pitch in Hz.

        Frequencies are truncated to whole Hz. In mirrored tunings
        (the default) pitches below the reference get the frequency of
        the pitch the same distance above it.

        Args:
            pitch: Pitch in scientific notation (e.g., "A4")
            tuning: Tuning name (default "standard", A4 = 440 Hz)

        Returns:
            JSON string with the frequency

        Example:
            modes_frequency(pitch="A5")  # 880
        """
        try:
            tuning_def = tuning_loader.get_tuning(tuning)
            if tuning_def is None:
                message = ErrorMessages.TUNING_NOT_FOUND.format(name=tuning)
                return json.dumps({"status": "error", "message": message})

            pc = PitchClass.parse(pitch)
            return json.dumps(
                {
                    "status": "success",
                    "pitch": describe_pitch(pc),
                    "tuning": tuning_def.name,
                    "frequency": tuning_def.frequency_of(pc),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modes_frequency"] = modes_frequency

    @mcp.tool  # type: ignore[arg-type]
    async def modes_interval(from_pitch: str, to_pitch: str) -> str:
        """
        Measure the distance and motion between two pitches.

        Args:
            from_pitch: Starting pitch (e.g., "C4")
            to_pitch: Target pitch (e.g., "G4")

        Returns:
            JSON string with semitones and direction (up, down, oblique)

        Example:
            modes_interval(from_pitch="C4", to_pitch="G3")  # 5, down
        """
        try:
            start = PitchClass.parse(from_pitch)
            end = PitchClass.parse(to_pitch)
            semitones, direction = diff_with_direction(start, end)
            return json.dumps(
                {
                    "status": "success",
                    "from": describe_pitch(start),
                    "to": describe_pitch(end),
                    "semitones": semitones,
                    "direction": direction.value,
                }
            )
        except Exception as e:
            logger.exception("Failed to measure interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modes_interval"] = modes_interval

    @mcp.tool  # type: ignore[arg-type]
    async def modes_list_tunings() -> str:
        """
        List available tunings.

        Returns all tunings from the library and project.

        Returns:
            JSON string with list of tunings

        Example:
            modes_list_tunings()
        """
        try:
            tunings = tuning_loader.list_tunings()
            return json.dumps(
                {
                    "status": "success",
                    "tunings": [t.model_dump() for t in tunings],
                    "count": len(tunings),
                }
            )
        except Exception as e:
            logger.exception("Failed to list tunings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modes_list_tunings"] = modes_list_tunings

    return tools
