"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_pitch.core import Accidental, NoteName, Pitch


@pytest.fixture
def a440() -> Pitch:
    """The tuning reference, A in octave 1."""
    return Pitch(NoteName.A, 1)


@pytest.fixture
def c_sharp() -> Pitch:
    """C sharp just above middle C."""
    return Pitch(NoteName.C, 1, Accidental.SHARP)


@pytest.fixture
def d_flat() -> Pitch:
    """D flat just above middle C."""
    return Pitch(NoteName.D, 1, Accidental.FLAT)
