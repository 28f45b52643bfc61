"""
Tuning model - the reference that frequency derivation hangs off.

A tuning names the reference pitch (A4 by default) and its frequency,
and whether pitches below the reference mirror the ones above it.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_modes.constants import REFERENCE_FREQUENCY, REFERENCE_KEYNUM
from chuk_mcp_modes.core.pitch import PitchClass, frequency


def normalize_tuning_name(name: str) -> str:
    """Canonical form of a tuning name: lowercase with hyphens."""
    return name.strip().lower().replace("_", "-")


class Tuning(BaseModel):
    """
    Reference pitch and frequency for converting pitches to Hz.

    mirror_below_reference keeps the magnitude-symmetric approximation:
    a pitch n semitones below the reference gets the frequency of the
    pitch n semitones above it.
    """

    name: str = Field(..., description="Tuning name (e.g., 'standard', 'baroque')")
    description: str = Field(default="", description="Human-readable description")
    reference_keynum: int = Field(
        default=REFERENCE_KEYNUM,
        ge=0,
        le=127,
        description="Keynum of the reference pitch",
    )
    reference_frequency: float = Field(
        default=REFERENCE_FREQUENCY,
        gt=0,
        description="Frequency of the reference pitch in Hz",
    )
    mirror_below_reference: bool = Field(
        default=True,
        description="Mirror pitches below the reference instead of decaying",
    )

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure tuning name is a valid identifier."""
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid tuning name: {v}")
        return normalize_tuning_name(v)

    def frequency_of(self, pc: PitchClass) -> int:
        """Frequency of a pitch in Hz under this tuning."""
        return frequency(
            pc,
            reference_keynum=self.reference_keynum,
            reference_frequency=self.reference_frequency,
            mirror_below_reference=self.mirror_below_reference,
        )


STANDARD_TUNING = Tuning(
    name="standard",
    description="A4 = 440 Hz, pitches below A4 mirrored above it",
)
