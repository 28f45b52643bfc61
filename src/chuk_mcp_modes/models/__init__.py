"""
Data models for configuration.

These are Pydantic models that define configuration and validation.
"""

from chuk_mcp_modes.models.tuning import STANDARD_TUNING, Tuning, normalize_tuning_name

__all__ = [
    "STANDARD_TUNING",
    "Tuning",
    "normalize_tuning_name",
]
