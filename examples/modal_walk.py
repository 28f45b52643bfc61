#!/usr/bin/env python3
"""
Example: Walk a melody through a mode.

This demonstrates the core modal arithmetic - building a key from an
interval vector, looking up scale degrees and transposing a motif by
scale steps so it keeps the shape of the mode.

Usage:
    python examples/modal_walk.py
"""

from chuk_mcp_modes import (
    Direction,
    PitchClass,
    frequency,
    notes_of_key,
    scale_degree,
    transpose_pitch,
)

MODES: dict[str, list[int]] = {
    "major": [2, 2, 1, 2, 2, 2, 1],
    "dorian": [2, 1, 2, 2, 2, 1, 2],
    "pentatonic": [2, 2, 3, 2, 3],
}


def main() -> None:
    """Print keys, degrees and a transposed motif for each mode."""
    tonic = PitchClass.parse("D4")

    for name, steps in MODES.items():
        print(f"\n{tonic.spell()[:-1]} {name}")
        print(f"  Notes of key: {notes_of_key(tonic, steps)}")

        motif = [tonic]
        for _ in range(3):
            motif.append(transpose_pitch(motif[-1], tonic, steps, 1, Direction.UP))

        print("  Motif:")
        for pc in motif:
            degree = scale_degree(pc, tonic, steps)
            print(f"    {pc.spell():>4}  degree {degree}  {frequency(pc)} Hz")

        shifted = [transpose_pitch(pc, tonic, steps, 2, Direction.DOWN) for pc in motif]
        print(f"  Down two steps: {' '.join(pc.spell() for pc in shifted)}")


if __name__ == "__main__":
    main()
