"""
Pitch primitives - PitchClass and its numeric mappings.

A PitchClass is a tempered pitch class plus an octave. Everything else
in the library is arithmetic on top of it:
- keynum: the MIDI-style absolute key number (C4 = 60)
- frequency: Hz derived from the keynum relative to A4
- abs_diff / diff_with_direction: distance and melodic motion
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from chuk_mcp_modes.constants import (
    LOWEST_OCTAVE,
    OCTAVEBASE,
    REFERENCE_FREQUENCY,
    REFERENCE_KEYNUM,
    Direction,
    ErrorMessages,
)
from chuk_mcp_modes.core.errors import FrequencyRangeError, InvalidPitchError

# Display name mappings
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

# Natural letter names; accidentals are applied on top and may cross an octave (Cb4 = B3)
_NATURAL_NOTES: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
_ACCIDENTALS: dict[str, int] = {"": 0, "#": 1, "b": -1}

_PITCH_PATTERN = re.compile(r"^([A-Ga-g])([#b]?)(-?\d+)$")


@dataclass(frozen=True)
class PitchClass:
    """
    A pitch class within an octave.

    note is 0-11 (0 = C, 1 = C#, ...), octave follows scientific pitch
    notation so C4 is middle C (keynum 60).

    Immutable and hashable.

    Examples:
        PitchClass(0, 4) = C4
        PitchClass(9, 4) = A4 (keynum 69, 440 Hz)
    """

    note: int
    octave: int

    def __post_init__(self) -> None:
        if not 0 <= self.note < OCTAVEBASE:
            raise InvalidPitchError(
                ErrorMessages.INVALID_NOTE.format(octavebase=OCTAVEBASE, note=self.note)
            )
        if self.octave < LOWEST_OCTAVE:
            raise InvalidPitchError(
                ErrorMessages.INVALID_OCTAVE.format(lowest=LOWEST_OCTAVE, octave=self.octave)
            )

    @classmethod
    def from_int(cls, note: int, octave: int) -> PitchClass:
        """
        Build a pitch from an arbitrary integer note.

        The note is reduced modulo the octave size and whole octaves are
        carried into the octave, so from_int(14, 4) is D5.
        """
        carry, reduced = divmod(note, OCTAVEBASE)
        return cls(reduced, octave + carry)

    @classmethod
    def from_keynum(cls, value: int) -> PitchClass:
        """Recover a pitch from its keynum."""
        return from_keynum(value)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch from a string like 'C4', 'F#3', 'Bb-1'.

        Accidentals that cross the octave boundary carry into the octave,
        so 'Cb4' is B3 and 'B#3' is C4.
        """
        match = _PITCH_PATTERN.match(name.strip())
        if match is None:
            raise InvalidPitchError(ErrorMessages.INVALID_PITCH.format(pitch=name))

        letter, accidental, octave = match.groups()
        note = _NATURAL_NOTES[letter.upper()] + _ACCIDENTALS[accidental]
        return cls.from_int(note, int(octave))

    @property
    def keynum(self) -> int:
        """Absolute key number of this pitch."""
        return keynum(self)

    def frequency(self) -> int:
        """Frequency in Hz against the A4 = 440 reference."""
        return frequency(self)

    def abs_diff(self, other: PitchClass) -> int:
        """Semitone distance to another pitch."""
        return abs_diff(self, other)

    def diff_with_direction(self, other: PitchClass) -> tuple[int, Direction]:
        """Semitone distance to another pitch and the motion needed to reach it."""
        return diff_with_direction(self, other)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name with octave, e.g. 'C#4'."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return f"{names[self.note]}{self.octave}"

    def __str__(self) -> str:
        return self.spell()

    def __repr__(self) -> str:
        return f"PitchClass(note={self.note}, octave={self.octave})"


def keynum(pc: PitchClass) -> int:
    """Convert a pitch to its keynum. C4 = 60."""
    return pc.note + OCTAVEBASE * (pc.octave + 1)


def from_keynum(value: int) -> PitchClass:
    """
    Convert a keynum back to a pitch.

    Total over non-negative keynums; keynums 0-11 land in octave -1.
    """
    if value < 0:
        raise InvalidPitchError(ErrorMessages.NEGATIVE_KEYNUM.format(keynum=value))
    octave, note = divmod(value, OCTAVEBASE)
    return PitchClass(note, octave - 1)


def frequency(
    pc: PitchClass,
    *,
    reference_keynum: int = REFERENCE_KEYNUM,
    reference_frequency: int | float = REFERENCE_FREQUENCY,
    mirror_below_reference: bool = True,
) -> int:
    """
    Approximate the frequency of a pitch in Hz.

    Computes reference_frequency * 2 ** (offset / 12) and truncates to
    an integer. With mirror_below_reference the semitone offset is taken
    as an absolute value, so pitches below the reference get the same
    magnitude as the pitches mirrored above it (A3 -> 880 at A4 = 440).
    Pass mirror_below_reference=False for true exponential decay.

    Args:
        pc: The pitch
        reference_keynum: Keynum of the reference pitch (default A4 = 69)
        reference_frequency: Frequency of the reference pitch in Hz
        mirror_below_reference: Reproduce the magnitude-symmetric approximation

    Returns:
        Truncated frequency in Hz

    Raises:
        FrequencyRangeError: the frequency is too large to represent
    """
    offset = keynum(pc) - reference_keynum
    if mirror_below_reference:
        offset = abs(offset)
    try:
        return int(reference_frequency * 2 ** (offset / OCTAVEBASE))
    except OverflowError:
        raise FrequencyRangeError(ErrorMessages.FREQUENCY_OUT_OF_RANGE.format(pitch=pc)) from None


def abs_diff(pc1: PitchClass, pc2: PitchClass) -> int:
    """Absolute semitone distance between two pitches."""
    return abs(keynum(pc1) - keynum(pc2))


def diff_with_direction(pc1: PitchClass, pc2: PitchClass) -> tuple[int, Direction]:
    """
    Semitone distance between two pitches plus the melodic motion.

    Direction is UP when pc2 is higher than pc1, DOWN when lower and
    OBLIQUE when they are the same pitch.
    """
    k1 = keynum(pc1)
    k2 = keynum(pc2)
    if k2 > k1:
        return k2 - k1, Direction.UP
    if k2 < k1:
        return k1 - k2, Direction.DOWN
    return 0, Direction.OBLIQUE


# Alias matching the name used when converting in the pitch -> keynum direction.
to_keynum = keynum
