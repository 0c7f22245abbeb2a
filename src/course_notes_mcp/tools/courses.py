"""Course listing tool function."""

from __future__ import annotations

from typing import List

from ..paths import PathResolver
from ..schemas import ToolResponse


def list_courses(resolver: PathResolver) -> ToolResponse:
    """List configured courses and the fallback directories."""

    lines: List[str] = []
    courses = resolver.courses()
    if courses:
        lines.append("Configured courses:")
        for mapping in courses:
            lines.append("")
            lines.append(f"- {mapping.name}")
            lines.append(f"  Notes: {mapping.notes_dir}")
            lines.append(f"  Transcripts: {mapping.transcript_dir}")
    else:
        lines.append("No courses configured.")

    defaults = resolver.defaults
    lines.append("")
    lines.append(f"Default notes directory: {defaults.notes_dir}")
    lines.append(f"Default transcript directory: {defaults.transcript_dir}")
    return ToolResponse.ok("\n".join(lines))
