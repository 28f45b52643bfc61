"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_modes.core import PitchClass

MAJOR = [2, 2, 1, 2, 2, 2, 1]
DORIAN = [2, 1, 2, 2, 2, 1, 2]


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def major() -> list[int]:
    """Interval vector of the major mode."""
    return list(MAJOR)


@pytest.fixture
def dorian() -> list[int]:
    """Interval vector of the dorian mode."""
    return list(DORIAN)


@pytest.fixture
def c4() -> PitchClass:
    """Middle C."""
    return PitchClass(0, 4)


@pytest.fixture
def e4() -> PitchClass:
    """E above middle C."""
    return PitchClass(4, 4)
