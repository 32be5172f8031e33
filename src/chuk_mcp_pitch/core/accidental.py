"""
Accidentals - the closed set of pitch modifiers.

The Accidental member is the identity. Its halftone delta and display symbol
come from fixed tables defined once at module level.

Five microtonal accidentals (slash-quarter-sharp, slash-sharp,
double-slash-flat, sori, koron) carry tiny "tag" deltas instead of 0 so that
they stay distinguishable when only the numeric delta is available.
"""

from __future__ import annotations

from enum import Enum

from chuk_mcp_pitch.constants import ErrorMessages


class Accidental(str, Enum):
    """The 18 supported accidentals."""

    NONE = "none"
    SHARP = "sharp"
    FLAT = "flat"
    NATURAL = "natural"
    DOUBLESHARP = "double-sharp"
    DOUBLEFLAT = "double-flat"
    TRIPLESHARP = "triple-sharp"
    TRIPLEFLAT = "triple-flat"
    QUARTERTONESHARP = "quarter-tone-sharp"
    QUARTERTONEFLAT = "quarter-tone-flat"
    SLASHFLAT = "slash-flat"
    THREEQUARTERSSHARP = "three-quarters-sharp"
    THREEQUARTERSFLAT = "three-quarters-flat"
    SLASHQUARTERSHARP = "slash-quarter-sharp"
    SLASHSHARP = "slash-sharp"
    DOUBLESLASHFLAT = "double-slash-flat"
    SORI = "sori"
    KORON = "koron"

    @property
    def half_tones(self) -> float:
        """Halftone delta applied to the note."""
        return half_tones_from_accidental(self)

    @property
    def symbol(self) -> str:
        """Notation symbol code for renderers (empty for NONE)."""
        return accidental_symbol(self)

    @property
    def is_tag(self) -> bool:
        """Whether the delta is an identification tag rather than a real offset."""
        return self in _TAG_ACCIDENTALS

    @classmethod
    def parse(cls, name: str) -> Accidental:
        """
        Parse an accidental from a member name, value or display symbol.

        Examples:
            Accidental.parse("SHARP") -> Accidental.SHARP
            Accidental.parse("double-flat") -> Accidental.DOUBLEFLAT
            Accidental.parse("##") -> Accidental.DOUBLESHARP
            Accidental.parse("") -> Accidental.NONE
        """
        stripped = name.strip()
        if stripped in _SYMBOL_LOOKUP:
            return _SYMBOL_LOOKUP[stripped]

        lowered = stripped.lower()
        for member in cls:
            if member.value == lowered or member.name.lower() == lowered:
                return member
        compact = lowered.replace("-", "").replace("_", "").replace(" ", "")
        for member in cls:
            if member.name.lower() == compact:
                return member

        raise ValueError(ErrorMessages.UNKNOWN_ACCIDENTAL.format(name=name))


_HALF_TONES: dict[Accidental, float] = {
    Accidental.NONE: 0,
    Accidental.SHARP: 1,
    Accidental.FLAT: -1,
    Accidental.NATURAL: 0,
    Accidental.DOUBLESHARP: 2,
    Accidental.DOUBLEFLAT: -2,
    Accidental.TRIPLESHARP: 3,
    Accidental.TRIPLEFLAT: -3,
    Accidental.QUARTERTONESHARP: 0.5,
    Accidental.QUARTERTONEFLAT: -0.5,
    Accidental.SLASHFLAT: -0.51,  # keeps it apart from QUARTERTONEFLAT
    Accidental.THREEQUARTERSSHARP: 1.5,
    Accidental.THREEQUARTERSFLAT: -1.5,
    Accidental.SLASHQUARTERSHARP: 0.0013,  # tag
    Accidental.SLASHSHARP: 0.0014,  # tag
    Accidental.DOUBLESLASHFLAT: -0.0015,  # tag
    Accidental.SORI: 0.0016,  # tag
    Accidental.KORON: 0.0017,  # tag
}

_TAG_ACCIDENTALS: frozenset[Accidental] = frozenset(
    {
        Accidental.SLASHQUARTERSHARP,
        Accidental.SLASHSHARP,
        Accidental.DOUBLESLASHFLAT,
        Accidental.SORI,
        Accidental.KORON,
    }
)

# Inverse for deltas that map back unambiguously. NATURAL is never produced.
_FROM_HALF_TONES: dict[float, Accidental] = {
    0: Accidental.NONE,
    1: Accidental.SHARP,
    -1: Accidental.FLAT,
    2: Accidental.DOUBLESHARP,
    -2: Accidental.DOUBLEFLAT,
    3: Accidental.TRIPLESHARP,
    -3: Accidental.TRIPLEFLAT,
    0.5: Accidental.QUARTERTONESHARP,
    -0.5: Accidental.QUARTERTONEFLAT,
    1.5: Accidental.THREEQUARTERSSHARP,
    -1.5: Accidental.THREEQUARTERSFLAT,
}

# VexFlow accidental codes
_SYMBOLS: dict[Accidental, str] = {
    Accidental.NONE: "",
    Accidental.SHARP: "#",
    Accidental.FLAT: "b",
    Accidental.NATURAL: "n",
    Accidental.DOUBLESHARP: "##",
    Accidental.DOUBLEFLAT: "bb",
    Accidental.TRIPLESHARP: "###",
    Accidental.TRIPLEFLAT: "bbs",  # VexFlow has no "bbb"
    Accidental.QUARTERTONESHARP: "+",
    Accidental.QUARTERTONEFLAT: "d",
    Accidental.SLASHFLAT: "bs",
    Accidental.THREEQUARTERSSHARP: "++",
    Accidental.THREEQUARTERSFLAT: "db",
    Accidental.SLASHQUARTERSHARP: "+-",
    Accidental.SLASHSHARP: "++-",
    Accidental.DOUBLESLASHFLAT: "bss",
    Accidental.SORI: "o",
    Accidental.KORON: "k",
}

_SYMBOL_LOOKUP: dict[str, Accidental] = {symbol: acc for acc, symbol in _SYMBOLS.items()}


def half_tones_from_accidental(accidental: Accidental) -> float:
    """
    Get the halftone delta for an accidental.

    Raises:
        ValueError: If the value is not one of the 18 accidentals
    """
    try:
        return _HALF_TONES[accidental]
    except (KeyError, TypeError):
        raise ValueError(
            ErrorMessages.UNHANDLED_ACCIDENTAL.format(accidental=accidental)
        ) from None


def accidental_from_half_tones(half_tones: float) -> Accidental:
    """
    Get the accidental for a halftone delta.

    Exact for 0, ±0.5, ±1, ±1.5, ±2 and ±3. Any other delta strictly between
    -1 and 0 is treated as a quarter-tone flat, anything else (including values
    that are not handled at all) as a quarter-tone sharp.
    """
    exact = _FROM_HALF_TONES.get(half_tones)
    if exact is not None:
        return exact
    if -1 < half_tones < 0:
        return Accidental.QUARTERTONEFLAT
    return Accidental.QUARTERTONESHARP


def accidental_symbol(accidental: Accidental) -> str:
    """Get the notation symbol code for an accidental."""
    try:
        return _SYMBOLS[accidental]
    except (KeyError, TypeError):
        raise ValueError(
            ErrorMessages.UNHANDLED_ACCIDENTAL.format(accidental=accidental)
        ) from None
