"""
chuk-mcp-modes - modal pitch arithmetic with an MCP tool surface.

Pitch classes, keynums, frequencies, keys built from interval vectors,
scale degrees and stepwise modal transposition.
"""

from chuk_mcp_modes.constants import OCTAVEBASE, Direction
from chuk_mcp_modes.core import (
    EmptyModeError,
    FrequencyRangeError,
    InvalidPitchError,
    ModeError,
    OutOfKeyError,
    PitchClass,
    abs_diff,
    diff_with_direction,
    frequency,
    from_keynum,
    keynum,
    modal_transposition,
    mode_notes_above_base,
    notes_of_key,
    scale_degree,
    transpose_pitch,
)

__all__ = [
    "OCTAVEBASE",
    "Direction",
    "PitchClass",
    "keynum",
    "from_keynum",
    "frequency",
    "abs_diff",
    "diff_with_direction",
    "mode_notes_above_base",
    "notes_of_key",
    "scale_degree",
    "modal_transposition",
    "transpose_pitch",
    "ModeError",
    "InvalidPitchError",
    "EmptyModeError",
    "FrequencyRangeError",
    "OutOfKeyError",
]
