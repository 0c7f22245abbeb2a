"""MCP tools for listing courses and generating lecture notes.

Each tool is exposed as a plain Python function to facilitate testing.
An MCP runtime adapter (see `server.py`) registers these with the
FastMCP runtime. The tool functions return `ToolResponse` envelopes.
"""

from .courses import list_courses
from .notes import Stage, generate_notes

__all__ = [
    "list_courses",
    "generate_notes",
    "Stage",
]
