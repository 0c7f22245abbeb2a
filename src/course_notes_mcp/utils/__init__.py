"""Utility functions for naming and formatting.

This package includes the transcript/note filename conventions and the
helpers used to turn helper-process output into text.
"""

from .filenames import hyphenate, note_filename, transcript_filename
from .formatting import format_data, tail

__all__ = [
    "hyphenate",
    "note_filename",
    "transcript_filename",
    "format_data",
    "tail",
]
