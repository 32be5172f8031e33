"""
Pitch - a single notated note and the arithmetic around it.

A Pitch is a letter name, an octave and an accidental. From those it derives
an absolute position on the halftone numberline and a 12-TET frequency.
The middle A (440 Hz) lies in octave 1.

Immutable and hashable. Equality is spelling-sensitive (C# != Db), ordering
only looks at octave and letter.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, NamedTuple

from chuk_mcp_pitch.constants import (
    CONCERT_A_FREQUENCY,
    CONCERT_A_KEY,
    CONCERT_A_OCTAVE,
    MAX_TRANSPOSE_FACTOR,
    OCTAVE_XML_DIFFERENCE,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)

from .accidental import Accidental, accidental_from_half_tones, half_tones_from_accidental
from .note import NoteName, is_diatonic, line_shift


class HalfToneWrap(NamedTuple):
    """A value reduced into [0, limit) plus how many times it wrapped."""

    halftone: float
    overflow: int


def _absolute_half_tone(note: NoteName, octave: int) -> int:
    """Halftone index of a natural note on the numberline."""
    return int(note) + (octave + OCTAVE_XML_DIFFERENCE) * SEMITONES_PER_OCTAVE


@dataclass(frozen=True)
class Pitch:
    """
    A notated pitch.

    Examples:
        Pitch(NoteName.A, 1) = A440
        Pitch(NoteName.C, 1, Accidental.SHARP) = C# just above middle C
    """

    fundamental_note: NoteName
    octave: int
    accidental: Accidental = Accidental.NONE
    # Original source spelling (e.g. from a score file), carried through untouched
    display_hint: str | None = field(default=None, compare=False)

    half_tone: float = field(init=False, compare=False, repr=False)
    frequency: float = field(init=False, compare=False, repr=False)

    OCTAVE_XML_DIFFERENCE: ClassVar[int] = OCTAVE_XML_DIFFERENCE

    def __post_init__(self) -> None:
        note = self.fundamental_note
        if isinstance(note, str):
            note = NoteName.parse(note)
        object.__setattr__(self, "fundamental_note", NoteName(note))

        accidental = self.accidental
        if not isinstance(accidental, Accidental):
            accidental = Accidental.parse(accidental)
        object.__setattr__(self, "accidental", accidental)

        object.__setattr__(
            self,
            "half_tone",
            _absolute_half_tone(self.fundamental_note, self.octave) + self.accidental_half_tones,
        )
        object.__setattr__(self, "frequency", calc_frequency(self))

    @property
    def accidental_half_tones(self) -> float:
        """Halftone delta of this pitch's accidental."""
        return half_tones_from_accidental(self.accidental)

    @property
    def label(self) -> str:
        """Compact name, e.g. 'C#1' or 'Bb0'."""
        return f"{self.fundamental_note.spell()}{self.accidental.symbol}{self.octave}"

    # -- construction from physical values --------------------------------

    @classmethod
    def from_frequency(cls, frequency: float) -> Pitch:
        """
        Get the nearest pitch for a frequency in Hz.

        Non-natural results are always spelled as the natural below plus a
        sharp (never as the natural above plus a flat).
        """
        key = calc_fractional_key(frequency) + 0.5
        octave = math.floor(key / SEMITONES_PER_OCTAVE) - OCTAVE_XML_DIFFERENCE
        return cls._snap(math.floor(key) % SEMITONES_PER_OCTAVE, octave)

    @classmethod
    def from_halftone(cls, halftone: float) -> Pitch:
        """Get the pitch at an absolute halftone, with the same sharp spelling."""
        whole = math.floor(halftone)
        octave = math.floor(whole / SEMITONES_PER_OCTAVE) - OCTAVE_XML_DIFFERENCE
        return cls._snap(whole % SEMITONES_PER_OCTAVE, octave)

    @classmethod
    def _snap(cls, within_octave: int, octave: int) -> Pitch:
        if is_diatonic(within_octave):
            return cls(NoteName(within_octave), octave, Accidental.NONE)
        return cls(NoteName(within_octave - 1), octave, Accidental.SHARP)

    # -- transformations --------------------------------------------------

    def transposed(self, factor: int) -> Pitch:
        """
        Move the pitch up (+) or down (-) by a number of letters.

        The result is always a natural (accidental NONE). Only a single octave
        of wrap-around is supported.

        Args:
            factor: Diatonic steps, -12 to 12

        Raises:
            ValueError: If abs(factor) > 12
        """
        if abs(factor) > MAX_TRANSPOSE_FACTOR:
            raise ValueError(ErrorMessages.TRANSPOSE_OUT_OF_RANGE.format(factor=factor))
        if factor == 0:
            return self
        note, octave_shift = line_shift(self.fundamental_note, factor)
        return Pitch(note, self.octave + octave_shift, Accidental.NONE)

    def enharmonic_change(self) -> Pitch:
        """
        Respell a sharp/flat pitch on the neighbouring letter.

        Flats move to the letter below, sharps to the letter above; the new
        accidental keeps half_tone unchanged (C# -> Db, Fb -> E, B# -> C).
        Other accidentals are returned as they are.
        """
        if self.accidental in (Accidental.FLAT, Accidental.DOUBLEFLAT):
            note, octave_shift = line_shift(self.fundamental_note, -1)
        elif self.accidental in (Accidental.SHARP, Accidental.DOUBLESHARP):
            note, octave_shift = line_shift(self.fundamental_note, 1)
        else:
            return self

        octave = self.octave + octave_shift
        delta = self.half_tone - _absolute_half_tone(note, octave)
        return Pitch(note, octave, accidental_from_half_tones(delta))

    # -- comparisons ------------------------------------------------------

    def is_above(self, other: Pitch) -> bool:
        """Higher on the staff (octave, then letter; accidentals ignored)."""
        if self.octave == other.octave:
            return self.fundamental_note > other.fundamental_note
        return self.octave > other.octave

    def is_below(self, other: Pitch) -> bool:
        """Lower on the staff (octave, then letter; accidentals ignored)."""
        if self.octave == other.octave:
            return self.fundamental_note < other.fundamental_note
        return self.octave < other.octave

    def __gt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.is_above(other)

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.is_below(other)

    def __str__(self) -> str:
        return (
            f"Key: {self.fundamental_note.spell()}{self.accidental.symbol}, "
            f"Note: {int(self.fundamental_note)}, octave: {self.octave}"
        )

    def __repr__(self) -> str:
        if self.accidental == Accidental.NONE:
            return f"Pitch({self.fundamental_note!r}, {self.octave})"
        return f"Pitch({self.fundamental_note!r}, {self.octave}, {self.accidental!r})"


def calc_frequency(source: Pitch | float) -> float:
    """
    Get the 12-TET frequency in Hz of a pitch or a fractional key number.

    Both forms agree: a pitch's frequency equals the frequency of its
    half_tone used as a key number (A440 = key 57).
    """
    if isinstance(source, Pitch):
        octave_steps = source.octave - CONCERT_A_OCTAVE
        half_tone_steps = (
            int(source.fundamental_note) - int(NoteName.A) + source.accidental_half_tones
        )
    else:
        octave_steps = 0
        half_tone_steps = source - CONCERT_A_KEY
    return (
        CONCERT_A_FREQUENCY
        * 2.0**octave_steps
        * 2.0 ** (half_tone_steps / SEMITONES_PER_OCTAVE)
    )


def calc_fractional_key(frequency: float) -> float:
    """Get the continuous key number of a frequency (A440 = 57.0)."""
    return CONCERT_A_KEY + SEMITONES_PER_OCTAVE * math.log2(frequency / CONCERT_A_FREQUENCY)


def wrap_around_check(value: float, limit: int) -> HalfToneWrap:
    """
    Reduce a value into [0, limit), counting each wrap as an octave.

    Examples:
        wrap_around_check(-13, 12) = HalfToneWrap(halftone=11, overflow=-2)
        wrap_around_check(25, 12) = HalfToneWrap(halftone=1, overflow=2)
    """
    overflow = 0
    while value < 0:
        value += limit
        overflow -= 1
    while value >= limit:
        value -= limit
        overflow += 1
    return HalfToneWrap(value, overflow)


def transposed_half_tone(pitch: Pitch, transpose: float) -> HalfToneWrap:
    """
    Transpose a pitch's within-octave halftone.

    Returns the new halftone in [0, 12) and the octave shift (not the new octave).
    """
    value = int(pitch.fundamental_note) + pitch.accidental_half_tones + transpose
    return wrap_around_check(value, SEMITONES_PER_OCTAVE)
