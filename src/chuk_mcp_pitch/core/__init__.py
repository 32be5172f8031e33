"""
Core pitch primitives.

These are the value types and pure functions everything else calls into:
- NoteName: The 7 natural letters with their halftone offsets
- Accidental: The 18 accidentals with halftone deltas and display symbols
- Pitch: Letter + octave + accidental, with derived halftone and frequency
"""

from chuk_mcp_pitch.core.accidental import (
    Accidental,
    accidental_from_half_tones,
    accidental_symbol,
    half_tones_from_accidental,
)
from chuk_mcp_pitch.core.note import (
    DIATONIC_NOTES,
    NoteName,
    ceiling_note,
    floor_note,
    is_diatonic,
    line_shift,
)
from chuk_mcp_pitch.core.pitch import (
    HalfToneWrap,
    Pitch,
    calc_fractional_key,
    calc_frequency,
    transposed_half_tone,
    wrap_around_check,
)

__all__ = [
    # Notes
    "NoteName",
    "DIATONIC_NOTES",
    "is_diatonic",
    "line_shift",
    "ceiling_note",
    "floor_note",
    # Accidentals
    "Accidental",
    "half_tones_from_accidental",
    "accidental_from_half_tones",
    "accidental_symbol",
    # Pitch
    "Pitch",
    "HalfToneWrap",
    "calc_frequency",
    "calc_fractional_key",
    "wrap_around_check",
    "transposed_half_tone",
]
