#!/usr/bin/env python3
"""
Async Pitch MCP Server using chuk-mcp-server

This server provides MCP tools over the notation engine's pitch model:
letter + octave + accidental, with derived halftone and frequency.

The server provides tools for:
- Describing pitches (halftone, frequency, accidental symbol)
- Converting between frequencies, key numbers, halftones and pitches
- Diatonic transposition and staff-line stepping
- Enharmonic respelling
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_pitch.constants import CONCERT_A_FREQUENCY, OCTAVE_XML_DIFFERENCE
from chuk_mcp_pitch.tools import register_conversion_tools, register_transposition_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVER_NAME = "chuk-mcp-pitch"

# Create the MCP server instance
mcp = ChukMCPServer(SERVER_NAME)

# Register all tools
conversion_tools = register_conversion_tools(mcp)
transposition_tools = register_transposition_tools(mcp)

# Export tool functions for direct access
pitch_describe = conversion_tools["pitch_describe"]
pitch_from_frequency = conversion_tools["pitch_from_frequency"]
pitch_from_halftone = conversion_tools["pitch_from_halftone"]
pitch_frequency_from_key = conversion_tools["pitch_frequency_from_key"]
pitch_key_from_frequency = conversion_tools["pitch_key_from_frequency"]
pitch_nearest_natural = conversion_tools["pitch_nearest_natural"]

pitch_transpose = transposition_tools["pitch_transpose"]
pitch_line_shift = transposition_tools["pitch_line_shift"]
pitch_enharmonic = transposition_tools["pitch_enharmonic"]
pitch_transposed_halftone = transposition_tools["pitch_transposed_halftone"]

logger.info("CHUK Pitch MCP Server initialized")
logger.info(f"  Tools: {len(conversion_tools) + len(transposition_tools)}")
logger.info(f"  Tuning: A = {CONCERT_A_FREQUENCY} Hz, octave offset {OCTAVE_XML_DIFFERENCE}")
