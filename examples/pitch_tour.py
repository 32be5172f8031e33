#!/usr/bin/env python3
"""
Example: A quick tour of the pitch model.

Builds a few pitches, converts between frequencies and pitches,
transposes along the staff and respells accidentals.

Usage:
    python examples/pitch_tour.py
"""

from chuk_mcp_pitch.core import (
    Accidental,
    NoteName,
    Pitch,
    calc_fractional_key,
    line_shift,
)


def main() -> None:
    """Print a tour of the pitch model."""
    print("Reference pitches:")
    for pitch in (
        Pitch(NoteName.A, 1),
        Pitch(NoteName.C, 1),
        Pitch(NoteName.C, 1, Accidental.SHARP),
        Pitch(NoteName.A, 1, Accidental.QUARTERTONESHARP),
    ):
        print(f"  {pitch.label:<6} half tone {pitch.half_tone:>5}  {pitch.frequency:8.2f} Hz")

    print("\nFrequencies to pitches:")
    for frequency in (220.0, 261.63, 277.18, 440.0, 466.16):
        pitch = Pitch.from_frequency(frequency)
        key = calc_fractional_key(frequency)
        print(f"  {frequency:7.2f} Hz -> key {key:6.2f} -> {pitch.label}")

    print("\nStepping a D down the staff:")
    for lines in range(0, -4, -1):
        note, octave_shift = line_shift(NoteName.D, lines)
        print(f"  {lines:+d} lines -> {note.spell()} (octave {octave_shift:+d})")

    print("\nC major triad from C1:")
    root = Pitch(NoteName.C, 1)
    print("  " + " ".join(root.transposed(step).label for step in (0, 2, 4)))

    print("\nEnharmonic respelling:")
    for pitch in (
        Pitch(NoteName.C, 1, Accidental.SHARP),
        Pitch(NoteName.B, 1, Accidental.SHARP),
        Pitch(NoteName.F, 1, Accidental.DOUBLEFLAT),
        Pitch(NoteName.G, 1, Accidental.NATURAL),
    ):
        print(f"  {pitch.label:<5} -> {pitch.enharmonic_change().label}")


if __name__ == "__main__":
    main()
