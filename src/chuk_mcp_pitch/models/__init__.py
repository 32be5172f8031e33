"""
Pydantic models for the pitch tools.

This module provides:
- PitchSpec: Pitch as given by a caller
- PitchInfo: Pitch plus derived halftone, frequency and symbol
- LineShiftResult: Note + octave shift from staff stepping
- HalfToneWrapInfo: Within-octave halftone + octave overflow
"""

from chuk_mcp_pitch.models.pitch import (
    HalfToneWrapInfo,
    LineShiftResult,
    PitchInfo,
    PitchSpec,
)

__all__ = [
    "HalfToneWrapInfo",
    "LineShiftResult",
    "PitchInfo",
    "PitchSpec",
]
