"""Filename helpers for transcripts and notes."""

from __future__ import annotations

import re

from ..schemas import SourceType

_WHITESPACE = re.compile(r"\s+")

# Local transcripts are never re-saved, so they have no suffix.
TRANSCRIPT_SUFFIXES = {
    SourceType.REMOTE_VIDEO: "YT",
    SourceType.HTTP_API: "API",
}


def hyphenate(value: str) -> str:
    """Collapse runs of whitespace into single hyphens.

    Example:
        >>> hyphenate("  Linear   Algebra ")
        'Linear-Algebra'
    """

    return _WHITESPACE.sub("-", value.strip())


def transcript_filename(
    course_name: str, lecture_number: str, source_type: SourceType
) -> str:
    """Default name for a saved transcript.

    Example:
        >>> transcript_filename("Math", "3", SourceType.REMOTE_VIDEO)
        'Math-Lecture-3-YT.txt'
    """

    suffix = TRANSCRIPT_SUFFIXES[source_type]
    return f"{hyphenate(course_name)}-Lecture-{hyphenate(lecture_number)}-{suffix}.txt"


def note_filename(course_name: str, lecture_number: str) -> str:
    """Default name for a rendered note.

    Example:
        >>> note_filename("Data Science", "12")
        'Data-Science-Lecture-12.md'
    """

    return f"{hyphenate(course_name)}-Lecture-{hyphenate(lecture_number)}.md"
