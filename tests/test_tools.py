"""
Tests for MCP tools.

Tests the MCP tool implementations for conversions and transposition.
"""

import json

import pytest

from chuk_mcp_pitch.tools.conversion import register_conversion_tools
from chuk_mcp_pitch.tools.transposition import register_transposition_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def conversion_tools():
    """Conversion tools registered on a mock server."""
    return register_conversion_tools(MockMCPServer("test"))


@pytest.fixture
def transposition_tools():
    """Transposition tools registered on a mock server."""
    return register_transposition_tools(MockMCPServer("test"))


class TestRegistration:
    """Tests for tool registration."""

    def test_registers_on_server(self):
        """Every returned tool is registered on the server."""
        mcp = MockMCPServer("test")
        tools = register_conversion_tools(mcp)
        tools.update(register_transposition_tools(mcp))
        assert set(tools) == set(mcp.tools)
        assert len(tools) == 10


class TestConversionTools:
    """Tests for conversion tools."""

    @pytest.mark.asyncio
    async def test_describe(self, conversion_tools):
        """Describe returns derived values."""
        result = await conversion_tools["pitch_describe"](note="A", octave=1)
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["pitch"]["frequency"] == 440.0
        assert data["pitch"]["half_tone"] == 57
        assert data["text"] == "Key: A, Note: 9, octave: 1"

    @pytest.mark.asyncio
    async def test_describe_with_hint(self, conversion_tools):
        """Display hints pass through."""
        result = await conversion_tools["pitch_describe"](
            note="F", octave=1, accidental="#", display_hint="sharp"
        )
        data = json.loads(result)
        assert data["pitch"]["label"] == "F#1"
        assert data["pitch"]["display_hint"] == "sharp"

    @pytest.mark.asyncio
    async def test_describe_invalid_note(self, conversion_tools):
        """Unknown letters return an error."""
        result = await conversion_tools["pitch_describe"](note="H", octave=1)
        data = json.loads(result)
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_from_frequency(self, conversion_tools):
        """Frequencies map to the nearest pitch."""
        result = await conversion_tools["pitch_from_frequency"](frequency=440.0)
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["pitch"]["label"] == "A1"
        assert data["fractional_key"] == 57.0

    @pytest.mark.asyncio
    async def test_from_frequency_black_key(self, conversion_tools):
        """Black keys come back sharp."""
        result = await conversion_tools["pitch_from_frequency"](frequency=466.16)
        data = json.loads(result)
        assert data["pitch"]["label"] == "A#1"

    @pytest.mark.asyncio
    async def test_from_frequency_not_positive(self, conversion_tools):
        """Zero and negative frequencies are rejected."""
        result = await conversion_tools["pitch_from_frequency"](frequency=0)
        data = json.loads(result)
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_from_halftone(self, conversion_tools):
        """Halftones map to pitches."""
        result = await conversion_tools["pitch_from_halftone"](halftone=49)
        data = json.loads(result)
        assert data["pitch"]["label"] == "C#1"

    @pytest.mark.asyncio
    async def test_frequency_from_key(self, conversion_tools):
        """Key 57 is 440 Hz."""
        result = await conversion_tools["pitch_frequency_from_key"](key=57)
        data = json.loads(result)
        assert data["frequency"] == 440.0

    @pytest.mark.asyncio
    async def test_key_from_frequency(self, conversion_tools):
        """880 Hz is key 69."""
        result = await conversion_tools["pitch_key_from_frequency"](frequency=880.0)
        data = json.loads(result)
        assert data["fractional_key"] == 69.0

    @pytest.mark.asyncio
    async def test_key_from_frequency_not_positive(self, conversion_tools):
        """Negative frequencies are rejected."""
        result = await conversion_tools["pitch_key_from_frequency"](frequency=-1.0)
        data = json.loads(result)
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_nearest_natural(self, conversion_tools):
        """F# lies between F and G."""
        result = await conversion_tools["pitch_nearest_natural"](halftone=6)
        data = json.loads(result)
        assert data["ceiling"] == "G"
        assert data["floor"] == "F"


class TestTranspositionTools:
    """Tests for transposition tools."""

    @pytest.mark.asyncio
    async def test_transpose(self, transposition_tools):
        """Transpose moves letters."""
        result = await transposition_tools["pitch_transpose"](note="C", octave=1, factor=4)
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["transposed"]["label"] == "G1"

    @pytest.mark.asyncio
    async def test_transpose_drops_accidental(self, transposition_tools):
        """Transposed pitches are naturals."""
        result = await transposition_tools["pitch_transpose"](
            note="B", octave=1, factor=1, accidental="b"
        )
        data = json.loads(result)
        assert data["original"]["label"] == "Bb1"
        assert data["transposed"]["label"] == "C2"
        assert data["transposed"]["accidental"] == "none"

    @pytest.mark.asyncio
    async def test_transpose_out_of_range(self, transposition_tools):
        """Factors beyond 12 return an error."""
        result = await transposition_tools["pitch_transpose"](note="C", octave=1, factor=13)
        data = json.loads(result)
        assert data["status"] == "error"
        assert "13" in data["message"]

    @pytest.mark.asyncio
    async def test_line_shift(self, transposition_tools):
        """Line shift reports the octave change."""
        result = await transposition_tools["pitch_line_shift"](note="D", lines=-2)
        data = json.loads(result)
        assert data == {"status": "success", "note": "B", "octave_shift": -1}

    @pytest.mark.asyncio
    async def test_enharmonic(self, transposition_tools):
        """C# respells as Db."""
        result = await transposition_tools["pitch_enharmonic"](
            note="C", octave=1, accidental="#"
        )
        data = json.loads(result)
        assert data["respelled"]["label"] == "Db1"
        assert data["respelled"]["half_tone"] == data["original"]["half_tone"]
        assert data["changed"] is True

    @pytest.mark.asyncio
    async def test_enharmonic_no_op(self, transposition_tools):
        """Naturals are not respelled."""
        result = await transposition_tools["pitch_enharmonic"](
            note="C", octave=1, accidental="natural"
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["changed"] is False

    @pytest.mark.asyncio
    async def test_transposed_halftone(self, transposition_tools):
        """B up two halftones wraps into the next octave."""
        result = await transposition_tools["pitch_transposed_halftone"](
            note="B", octave=1, transpose=2
        )
        data = json.loads(result)
        assert data == {"status": "success", "halftone": 1, "overflow": 1}
