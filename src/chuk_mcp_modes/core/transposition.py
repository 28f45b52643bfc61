"""
Modal transposition - moving a pitch by scale steps within a key.

Transposition walks the mode's interval vector rather than the notes of
the key, so the semitone distance accumulates correctly however many
octaves are crossed. Moving up reads the step leaving the current degree
and then advances; moving down retreats first and then reads, so both
directions are anchored on the step between the two degrees involved.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import assert_never

from chuk_mcp_modes.constants import Direction, ErrorMessages
from chuk_mcp_modes.core.errors import EmptyModeError, ModeError, OutOfKeyError
from chuk_mcp_modes.core.key import notes_of_key, scale_degree
from chuk_mcp_modes.core.pitch import PitchClass, from_keynum, keynum


def modal_transposition(
    pc: PitchClass,
    tonic: PitchClass,
    steps: Sequence[int],
    numsteps: int,
    direction: Direction,
) -> int:
    """
    Transpose a pitch by a number of scale steps.

    Args:
        pc: The pitch to transpose; must be a note of the key
        tonic: Tonic of the key
        steps: The mode's interval vector (must not be empty)
        numsteps: How many scale steps to move (0 returns pc unchanged)
        direction: UP, DOWN or OBLIQUE (OBLIQUE never moves)

    Returns:
        The keynum of the transposed pitch

    Raises:
        EmptyModeError: steps is empty
        OutOfKeyError: pc is not a note of the key
        ModeError: numsteps is negative

    Example:
        # E4 up a third in C major -> G4
        modal_transposition(PitchClass(4, 4), PitchClass(0, 4),
                            [2, 2, 1, 2, 2, 2, 1], 2, Direction.UP)
        -> 67
    """
    direction = Direction(direction)
    steps = tuple(steps)
    if not steps:
        raise EmptyModeError()
    if numsteps < 0:
        raise ModeError(ErrorMessages.NEGATIVE_STEPS.format(numsteps=numsteps))

    degree = scale_degree(pc, tonic, steps)
    if degree == 0:
        raise OutOfKeyError(pc, notes_of_key(tonic, steps))

    # scale_degree counts the octave-closing note, so wrap back onto the vector
    index = (degree - 1) % len(steps)
    start = keynum(pc)

    if direction is Direction.UP:
        return start + _walk_up(steps, index, numsteps)
    elif direction is Direction.DOWN:
        return start - _walk_down(steps, index, numsteps)
    elif direction is Direction.OBLIQUE:
        return start
    else:
        assert_never(direction)


def transpose_pitch(
    pc: PitchClass,
    tonic: PitchClass,
    steps: Sequence[int],
    numsteps: int,
    direction: Direction,
) -> PitchClass:
    """Transpose a pitch by scale steps and return the resulting pitch."""
    return from_keynum(modal_transposition(pc, tonic, steps, numsteps, direction))


def _walk_up(steps: tuple[int, ...], index: int, numsteps: int) -> int:
    """Sum the steps read while advancing numsteps degrees."""
    total = 0
    for _ in range(numsteps):
        total += steps[index]
        index = (index + 1) % len(steps)
    return total


def _walk_down(steps: tuple[int, ...], index: int, numsteps: int) -> int:
    """Sum the steps read while retreating numsteps degrees."""
    total = 0
    for _ in range(numsteps):
        index = len(steps) - 1 if index == 0 else index - 1
        total += steps[index]
    return total
