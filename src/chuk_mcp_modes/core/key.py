"""
Key primitives - interval accumulation and scale degrees.

A mode is an interval vector: the semitone steps between adjacent scale
notes (major is 2 2 1 2 2 2 1). Applying a mode to a tonic accumulates
those steps into the notes of the key, reduced modulo the octave.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate

from chuk_mcp_modes.constants import OCTAVEBASE
from chuk_mcp_modes.core.pitch import PitchClass


def mode_notes_above_base(pc: PitchClass, steps: Sequence[int]) -> list[int]:
    """
    Get the pitch classes reached by each step of a mode above a base.

    The base itself is not included, so the result has one entry per step.

    Example:
        mode_notes_above_base(PitchClass(0, 4), [2, 2, 1])
        -> [2, 4, 5]
    """
    return [(pc.note + total) % OCTAVEBASE for total in accumulate(steps)]


def notes_of_key(pc: PitchClass, steps: Sequence[int]) -> list[int]:
    """
    Get the notes of the key built on a tonic.

    The tonic comes first, followed by one note per step, so the result
    has len(steps) + 1 entries. A mode spanning a full octave ends on the
    tonic's pitch class again.

    Example:
        notes_of_key(PitchClass(4, 4), [2, 2, 1, 2, 2, 2, 1])
        -> [4, 6, 8, 9, 11, 1, 3, 4]
    """
    return [pc.note, *mode_notes_above_base(pc, steps)]


def scale_degree(pc: PitchClass, tonic: PitchClass, steps: Sequence[int]) -> int:
    """
    Find the 1-based position of a pitch class in a key.

    When the pitch class appears more than once (the octave-closing note
    of a full mode repeats the tonic) the last position wins, so the
    tonic of a seven-note mode is degree 8, not 1.

    Args:
        pc: The pitch to look up (octave is ignored)
        tonic: Tonic of the key
        steps: The mode's interval vector

    Returns:
        The scale degree, or 0 if the pitch class is not in the key
    """
    degree = 0
    for position, note in enumerate(notes_of_key(tonic, steps), start=1):
        if note == pc.note:
            degree = position
    return degree
