"""
Constants for the pitch model.

No magic numbers - the tuning reference and octave offsets live here.
"""

# Octave numbering: A440 lies in octave 1 internally, while the halftone
# numberline (and file-format octaves) are offset by this many octaves.
OCTAVE_XML_DIFFERENCE: int = 3

SEMITONES_PER_OCTAVE: int = 12

# Tuning reference (12-TET anchored at A440)
CONCERT_A_FREQUENCY: float = 440.0
CONCERT_A_KEY: float = 57.0  # continuous key number of A440
CONCERT_A_OCTAVE: int = 1

# Largest factor Pitch.transposed() accepts (single octave wrap only)
MAX_TRANSPOSE_FACTOR: int = 12


class ErrorMessages:
    """Standardized error messages."""

    UNHANDLED_ACCIDENTAL = "Unhandled accidental value: {accidental!r}"
    UNKNOWN_NOTE = "Unknown note name: {name!r}. Expected one of C, D, E, F, G, A, B."
    UNKNOWN_ACCIDENTAL = "Unknown accidental: {name!r}"
    TRANSPOSE_OUT_OF_RANGE = (
        "Transpose factor {factor} is out of range. "
        "Only factors between -12 and 12 are supported."
    )
