"""
Tuning system - reference pitches for frequency derivation.

Built-in tunings ship in the library directory; projects can add or
override them with their own YAML files.
"""

from chuk_mcp_modes.tunings.loader import TuningLoader

__all__ = [
    "TuningLoader",
]
