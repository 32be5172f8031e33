"""
MCP tool implementations.

Tools are organized by domain:
- conversion - Pitch, frequency, key number and halftone conversions
- transposition - Diatonic transposition, staff stepping, enharmonics
"""

from chuk_mcp_pitch.tools.conversion import register_conversion_tools
from chuk_mcp_pitch.tools.transposition import register_transposition_tools

__all__ = [
    "register_conversion_tools",
    "register_transposition_tools",
]
