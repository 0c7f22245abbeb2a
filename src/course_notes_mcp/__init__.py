"""Course Notes MCP Server package.

This package provides a stdio MCP server that turns lecture transcripts
into notes. Transcripts come from local files, a remote video transcript
helper or a generic HTTP fetch helper; rendering is delegated to an
external note generator.

Usage example:
    from course_notes_mcp.server import main
    if __name__ == "__main__":
        main()

Note: Tools can also be imported and registered by an external MCP runtime.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
