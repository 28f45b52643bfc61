"""
Constants and enums for the modal arithmetic system.

No magic numbers - the octave size and tuning reference live here.
"""

from enum import Enum

# Semitones per octave; every pitch class is reduced modulo this.
OCTAVEBASE = 12

# A4 - the keynum and frequency that anchor frequency derivation.
REFERENCE_KEYNUM = 69
REFERENCE_FREQUENCY = 440

# Lowest octave a PitchClass may carry. Keynums 0-11 live in octave -1.
LOWEST_OCTAVE = -1


class Direction(str, Enum):
    """
    Melodic motion between two pitches.

    Used both as the result of comparing two pitches and as the
    direction of a modal transposition.
    """

    OBLIQUE = "oblique"  # No motion
    UP = "up"
    DOWN = "down"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Note must be in [0, {octavebase}), got {note}."
    INVALID_OCTAVE = "Octave must be >= {lowest}, got {octave}."
    INVALID_PITCH = "Invalid pitch: '{pitch}'. Expected a name with octave like 'C4' or 'F#3'."
    NEGATIVE_KEYNUM = "Keynum must be non-negative, got {keynum}."
    FREQUENCY_OUT_OF_RANGE = "Frequency of {pitch} is too large to represent."
    EMPTY_MODE = "Mode interval vector must not be empty."
    OUT_OF_KEY = "Pitch {pitch} is not a member of the key {key}."
    NEGATIVE_STEPS = "Number of steps must be non-negative, got {numsteps}."
    INVALID_DIRECTION = "Invalid direction: '{direction}'. Expected one of: up, down, oblique."
    TUNING_NOT_FOUND = "Tuning '{name}' not found."
