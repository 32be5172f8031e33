"""
Conversion tools - MCP tools between pitches, frequencies and key numbers.

Tools for describing a pitch, finding the pitch nearest a frequency or an
absolute halftone, and converting between Hz and continuous key numbers.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.core import (
    Pitch,
    calc_fractional_key,
    calc_frequency,
    ceiling_note,
    floor_note,
)
from chuk_mcp_pitch.models import PitchInfo, PitchSpec

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_conversion_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register pitch conversion tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_describe(
        note: str,
        octave: int,
        accidental: str = "none",
        display_hint: str | None = None,
    ) -> str:
        """
        Describe a pitch.

        Returns the absolute halftone, the frequency and the accidental
        display symbol for a letter/octave/accidental.

        Args:
            note: Note letter (C, D, E, F, G, A, B)
            octave: Octave number (A440 lies in octave 1)
            accidental: Accidental name or symbol (e.g. "sharp", "bb", "koron")
            display_hint: Optional source spelling to carry through

        Returns:
            JSON string with pitch details

        Example:
            pitch_describe(note="A", octave=1)
        """
        try:
            spec = PitchSpec(
                note=note, octave=octave, accidental=accidental, display_hint=display_hint
            )
            pitch = spec.to_pitch()
            return json.dumps(
                {
                    "status": "success",
                    "pitch": PitchInfo.from_pitch(pitch).model_dump(mode="json"),
                    "text": str(pitch),
                }
            )
        except Exception as e:
            logger.exception("Failed to describe pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_describe"] = pitch_describe

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_from_frequency(frequency: float) -> str:
        """
        Find the pitch nearest a frequency.

        Black keys are spelled as the natural below plus a sharp.

        Args:
            frequency: Frequency in Hz (must be positive)

        Returns:
            JSON string with the pitch and its fractional key number

        Example:
            pitch_from_frequency(frequency=466.16)
        """
        try:
            if frequency <= 0:
                return json.dumps(
                    {"status": "error", "message": f"Frequency must be positive, got {frequency}"}
                )
            pitch = Pitch.from_frequency(frequency)
            return json.dumps(
                {
                    "status": "success",
                    "pitch": PitchInfo.from_pitch(pitch).model_dump(mode="json"),
                    "fractional_key": calc_fractional_key(frequency),
                }
            )
        except Exception as e:
            logger.exception("Failed to convert frequency to pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_from_frequency"] = pitch_from_frequency

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_from_halftone(halftone: float) -> str:
        """
        Get the pitch at an absolute halftone.

        Args:
            halftone: Position on the halftone numberline (A440 = 57)

        Returns:
            JSON string with pitch details

        Example:
            pitch_from_halftone(halftone=49)
        """
        try:
            pitch = Pitch.from_halftone(halftone)
            return json.dumps(
                {
                    "status": "success",
                    "pitch": PitchInfo.from_pitch(pitch).model_dump(mode="json"),
                }
            )
        except Exception as e:
            logger.exception("Failed to convert halftone to pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_from_halftone"] = pitch_from_halftone

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_frequency_from_key(key: float) -> str:
        """
        Convert a continuous key number to a frequency.

        Args:
            key: Fractional key number (A440 = 57)

        Returns:
            JSON string with the frequency in Hz

        Example:
            pitch_frequency_from_key(key=60)
        """
        try:
            return json.dumps(
                {"status": "success", "key": key, "frequency": calc_frequency(key)}
            )
        except Exception as e:
            logger.exception("Failed to convert key to frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_frequency_from_key"] = pitch_frequency_from_key

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_key_from_frequency(frequency: float) -> str:
        """
        Convert a frequency to a continuous key number.

        Args:
            frequency: Frequency in Hz (must be positive)

        Returns:
            JSON string with the fractional key number

        Example:
            pitch_key_from_frequency(frequency=440.0)
        """
        try:
            if frequency <= 0:
                return json.dumps(
                    {"status": "error", "message": f"Frequency must be positive, got {frequency}"}
                )
            return json.dumps(
                {
                    "status": "success",
                    "frequency": frequency,
                    "fractional_key": calc_fractional_key(frequency),
                }
            )
        except Exception as e:
            logger.exception("Failed to convert frequency to key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_key_from_frequency"] = pitch_key_from_frequency

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_nearest_natural(halftone: float) -> str:
        """
        Get the natural letters at or around a halftone.

        Args:
            halftone: Halftone (only its position within the octave matters)

        Returns:
            JSON string with the ceiling and floor letters

        Example:
            pitch_nearest_natural(halftone=6)  # ceiling G, floor F
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "ceiling": ceiling_note(halftone).spell(),
                    "floor": floor_note(halftone).spell(),
                }
            )
        except Exception as e:
            logger.exception("Failed to find nearest natural")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_nearest_natural"] = pitch_nearest_natural

    return tools
