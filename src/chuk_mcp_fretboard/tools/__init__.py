"""
MCP tool implementations.

- quiz - Challenge lifecycle, guessing and theory lookups
"""

from chuk_mcp_fretboard.tools.quiz import register_quiz_tools

__all__ = [
    "register_quiz_tools",
]
