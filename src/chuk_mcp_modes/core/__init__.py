"""
Core modal arithmetic - the Radix layer.

These are the mathematical invariants everything else composes on:
- PitchClass: A pitch class (0-11) plus an octave
- keynum / from_keynum: Absolute key numbers (C4 = 60)
- frequency: Hz relative to A4
- notes_of_key: A mode's interval vector accumulated from a tonic
- scale_degree: 1-based position of a pitch class in a key
- modal_transposition: Moving a pitch by scale steps within a key
"""

from chuk_mcp_modes.core.errors import (
    EmptyModeError,
    FrequencyRangeError,
    InvalidPitchError,
    ModeError,
    OutOfKeyError,
)
from chuk_mcp_modes.core.key import mode_notes_above_base, notes_of_key, scale_degree
from chuk_mcp_modes.core.pitch import (
    PitchClass,
    abs_diff,
    diff_with_direction,
    frequency,
    from_keynum,
    keynum,
    to_keynum,
)
from chuk_mcp_modes.core.transposition import modal_transposition, transpose_pitch

__all__ = [
    # Pitch
    "PitchClass",
    "keynum",
    "to_keynum",
    "from_keynum",
    "frequency",
    "abs_diff",
    "diff_with_direction",
    # Key
    "mode_notes_above_base",
    "notes_of_key",
    "scale_degree",
    # Transposition
    "modal_transposition",
    "transpose_pitch",
    # Errors
    "ModeError",
    "InvalidPitchError",
    "EmptyModeError",
    "FrequencyRangeError",
    "OutOfKeyError",
]
