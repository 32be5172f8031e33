"""
Note names - the seven diatonic letters.

NoteName values are halftone offsets within an octave, so a NoteName can be
used directly in pitch arithmetic. DIATONIC_NOTES is the ordered letter cycle
used for stepping along staff lines and spaces.
"""

from __future__ import annotations

import math
from enum import IntEnum

from chuk_mcp_pitch.constants import SEMITONES_PER_OCTAVE, ErrorMessages


class NoteName(IntEnum):
    """
    The seven natural note names.

    The value is the number of halftones above C in the same octave.
    """

    C = 0
    D = 2
    E = 4
    F = 5
    G = 7
    A = 9
    B = 11

    def spell(self) -> str:
        """Get the letter name."""
        return self.name

    @property
    def index(self) -> int:
        """Position in the diatonic cycle (C=0 ... B=6)."""
        return DIATONIC_NOTES.index(self)

    def next(self) -> NoteName:
        """The next letter up, wrapping B -> C."""
        return DIATONIC_NOTES[(self.index + 1) % len(DIATONIC_NOTES)]

    def previous(self) -> NoteName:
        """The next letter down, wrapping C -> B."""
        return DIATONIC_NOTES[(self.index - 1) % len(DIATONIC_NOTES)]

    @classmethod
    def parse(cls, name: str) -> NoteName:
        """Parse a note letter like 'C' or 'g'."""
        key = name.strip().upper()
        if key in cls.__members__:
            return cls[key]
        raise ValueError(ErrorMessages.UNKNOWN_NOTE.format(name=name))


DIATONIC_NOTES: tuple[NoteName, ...] = (
    NoteName.C,
    NoteName.D,
    NoteName.E,
    NoteName.F,
    NoteName.G,
    NoteName.A,
    NoteName.B,
)

_DIATONIC_OFFSETS: frozenset[int] = frozenset(n.value for n in DIATONIC_NOTES)


def is_diatonic(halftone: int) -> bool:
    """Whether a halftone offset within the octave is a natural letter."""
    return halftone in _DIATONIC_OFFSETS


def line_shift(note: NoteName, lines: int) -> tuple[NoteName, int]:
    """
    Move a note up (+) or down (-) a number of staff lines/spaces.

    Steps along the white keys, e.g. two steps down from D is B.

    Args:
        note: The starting note
        lines: Number of diatonic steps (0 returns the note unchanged)

    Returns:
        (new note, octave shift) - the shift is relative, not the new octave
    """
    if lines == 0:
        return note, 0
    octave_shift, index = divmod(note.index + lines, len(DIATONIC_NOTES))
    return DIATONIC_NOTES[index], octave_shift


def ceiling_note(halftone: float) -> NoteName:
    """Nearest natural letter at or above a halftone (octave ignored)."""
    within = int(math.floor(halftone)) % SEMITONES_PER_OCTAVE
    if not is_diatonic(within):
        within += 1
    return NoteName(within)


def floor_note(halftone: float) -> NoteName:
    """Nearest natural letter at or below a halftone (octave ignored)."""
    within = int(math.floor(halftone)) % SEMITONES_PER_OCTAVE
    if not is_diatonic(within):
        within -= 1
    return NoteName(within)
