"""
Pitch models - the tool boundary.

PitchSpec is what callers send (letter, octave, accidental), PitchInfo is
what comes back (the same fields plus everything derived from it).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_pitch.core.accidental import Accidental
from chuk_mcp_pitch.core.note import NoteName
from chuk_mcp_pitch.core.pitch import HalfToneWrap, Pitch


class PitchSpec(BaseModel):
    """
    A pitch as given by a caller.

    Note accepts a letter ('C') or a halftone offset (0). Accidental accepts
    a name ('SHARP'), a value ('double-flat') or a symbol ('#').
    """

    note: NoteName = Field(..., description="Note letter (C, D, E, F, G, A, B)")
    octave: int = Field(..., description="Octave (A440 is in octave 1)")
    accidental: Accidental = Field(Accidental.NONE, description="Accidental")
    display_hint: str | None = Field(None, description="Source spelling, passed through")

    model_config = {"frozen": True}

    @field_validator("note", mode="before")
    @classmethod
    def parse_note(cls, v: Any) -> Any:
        """Accept note letters as well as offsets."""
        if isinstance(v, str):
            return int(v) if v.strip().isdigit() else NoteName.parse(v)
        return v

    @field_validator("accidental", mode="before")
    @classmethod
    def parse_accidental(cls, v: Any) -> Any:
        """Accept accidental names and symbols."""
        if v is None:
            return Accidental.NONE
        if isinstance(v, str) and not isinstance(v, Accidental):
            return Accidental.parse(v)
        return v

    def to_pitch(self) -> Pitch:
        """Build the core Pitch value."""
        return Pitch(self.note, self.octave, self.accidental, self.display_hint)

    @classmethod
    def from_pitch(cls, pitch: Pitch) -> PitchSpec:
        """Create a spec from a Pitch."""
        return cls(
            note=pitch.fundamental_note,
            octave=pitch.octave,
            accidental=pitch.accidental,
            display_hint=pitch.display_hint,
        )


class PitchInfo(BaseModel):
    """A pitch with its derived values, for tool output."""

    note: str = Field(..., description="Note letter")
    octave: int = Field(..., description="Octave (A440 is in octave 1)")
    accidental: Accidental = Field(..., description="Accidental")
    symbol: str = Field("", description="Accidental display symbol")
    label: str = Field(..., description="Compact name like 'C#1'")
    half_tone: float = Field(..., description="Absolute halftone index")
    frequency: float = Field(..., gt=0, description="Frequency in Hz")
    display_hint: str | None = Field(None, description="Source spelling, passed through")

    @classmethod
    def from_pitch(cls, pitch: Pitch) -> PitchInfo:
        """Create info from a Pitch."""
        return cls(
            note=pitch.fundamental_note.spell(),
            octave=pitch.octave,
            accidental=pitch.accidental,
            symbol=pitch.accidental.symbol,
            label=pitch.label,
            half_tone=pitch.half_tone,
            frequency=pitch.frequency,
            display_hint=pitch.display_hint,
        )


class LineShiftResult(BaseModel):
    """Result of stepping a note along the staff."""

    note: str = Field(..., description="Resulting note letter")
    octave_shift: int = Field(..., description="Octave change (not the new octave)")


class HalfToneWrapInfo(BaseModel):
    """A within-octave halftone and the octave overflow."""

    halftone: float = Field(..., ge=0, lt=12, description="Halftone within the octave")
    overflow: int = Field(..., description="Octave change (not the new octave)")

    @classmethod
    def from_wrap(cls, wrap: HalfToneWrap) -> HalfToneWrapInfo:
        """Create info from a HalfToneWrap."""
        return cls(halftone=wrap.halftone, overflow=wrap.overflow)
