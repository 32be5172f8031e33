"""
Transposition tools - MCP tools for moving and respelling pitches.

Tools for diatonic transposition, staff-line stepping, enharmonic
respelling, and within-octave halftone transposition.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.core import NoteName, line_shift, transposed_half_tone
from chuk_mcp_pitch.models import HalfToneWrapInfo, LineShiftResult, PitchInfo, PitchSpec

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_transposition_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register transposition tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_transpose(
        note: str,
        octave: int,
        factor: int,
        accidental: str = "none",
    ) -> str:
        """
        Transpose a pitch by a number of letters.

        The result is always a natural. Factors beyond one octave
        (more than 12 steps either way) are rejected.

        Args:
            note: Note letter (C, D, E, F, G, A, B)
            octave: Octave number (A440 lies in octave 1)
            factor: Diatonic steps up (+) or down (-), -12 to 12
            accidental: Accidental of the input pitch (dropped in the result)

        Returns:
            JSON string with the original and transposed pitch

        Example:
            pitch_transpose(note="C", octave=1, factor=4)  # -> G1
        """
        try:
            pitch = PitchSpec(note=note, octave=octave, accidental=accidental).to_pitch()
            result = pitch.transposed(factor)
            return json.dumps(
                {
                    "status": "success",
                    "original": PitchInfo.from_pitch(pitch).model_dump(mode="json"),
                    "transposed": PitchInfo.from_pitch(result).model_dump(mode="json"),
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_transpose"] = pitch_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_line_shift(note: str, lines: int) -> str:
        """
        Step a note up or down the staff.

        Args:
            note: Note letter (C, D, E, F, G, A, B)
            lines: Lines/spaces to move, positive is up

        Returns:
            JSON string with the new letter and the octave shift

        Example:
            pitch_line_shift(note="D", lines=-2)  # -> B, one octave down
        """
        try:
            new_note, octave_shift = line_shift(NoteName.parse(note), lines)
            result = LineShiftResult(note=new_note.spell(), octave_shift=octave_shift)
            return json.dumps({"status": "success", **result.model_dump()})
        except Exception as e:
            logger.exception("Failed to shift note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_line_shift"] = pitch_line_shift

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_enharmonic(note: str, octave: int, accidental: str) -> str:
        """
        Respell a sharp or flat pitch on the neighbouring letter.

        Only sharp, flat, double-sharp and double-flat are respelled;
        anything else is returned unchanged with "changed": false.

        Args:
            note: Note letter (C, D, E, F, G, A, B)
            octave: Octave number (A440 lies in octave 1)
            accidental: Accidental name or symbol

        Returns:
            JSON string with the respelled pitch

        Example:
            pitch_enharmonic(note="C", octave=1, accidental="#")  # -> Db1
        """
        try:
            pitch = PitchSpec(note=note, octave=octave, accidental=accidental).to_pitch()
            respelled = pitch.enharmonic_change()
            return json.dumps(
                {
                    "status": "success",
                    "original": PitchInfo.from_pitch(pitch).model_dump(mode="json"),
                    "respelled": PitchInfo.from_pitch(respelled).model_dump(mode="json"),
                    "changed": respelled != pitch,
                }
            )
        except Exception as e:
            logger.exception("Failed to respell pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_enharmonic"] = pitch_enharmonic

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_transposed_halftone(
        note: str,
        octave: int,
        transpose: float,
        accidental: str = "none",
    ) -> str:
        """
        Transpose a pitch by halftones within the octave.

        Args:
            note: Note letter (C, D, E, F, G, A, B)
            octave: Octave number (A440 lies in octave 1)
            transpose: Halftones to add (may be negative or fractional)
            accidental: Accidental name or symbol

        Returns:
            JSON string with the halftone within the octave (0-12) and the
            octave overflow

        Example:
            pitch_transposed_halftone(note="B", octave=1, transpose=2)  # -> 1, +1
        """
        try:
            pitch = PitchSpec(note=note, octave=octave, accidental=accidental).to_pitch()
            wrap = HalfToneWrapInfo.from_wrap(transposed_half_tone(pitch, transpose))
            return json.dumps({"status": "success", **wrap.model_dump()})
        except Exception as e:
            logger.exception("Failed to transpose halftone")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_transposed_halftone"] = pitch_transposed_halftone

    return tools
