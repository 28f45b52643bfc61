"""
Error taxonomy for modal arithmetic.

Everything derives from ValueError so callers validating plain values
keep catching the same thing.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_modes.constants import ErrorMessages


class ModeError(ValueError):
    """Base class for invalid input to the modal arithmetic."""


class InvalidPitchError(ModeError):
    """A pitch could not be constructed from the given values."""


class EmptyModeError(ModeError):
    """An operation that walks the interval vector got an empty one."""

    def __init__(self) -> None:
        super().__init__(ErrorMessages.EMPTY_MODE)


class OutOfKeyError(ModeError):
    """The pitch is not one of the notes of the key."""

    def __init__(self, pitch: object, key: Sequence[int]) -> None:
        self.pitch = pitch
        self.key = tuple(key)
        super().__init__(ErrorMessages.OUT_OF_KEY.format(pitch=pitch, key=list(self.key)))


class FrequencyRangeError(ModeError):
    """The frequency of a pitch doesn't fit in a float."""
