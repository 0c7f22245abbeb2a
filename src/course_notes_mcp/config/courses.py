"""Course mapping loader.

Merges the inline ``courses`` setting with the optional ``courses_file``.
The file may hold either a list of mappings or an object keyed by course
name::

    {"Math": {"notes_dir": "~/Math/notes", "transcript_dir": "~/Math/transcripts"}}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Tuple

from pydantic import ValidationError

from .env import AppConfig, CourseMapping


def _read_courses_file(path: Path) -> List[CourseMapping]:
    try:
        raw: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Cannot read courses file {path}: {exc}") from exc

    if isinstance(raw, dict):
        entries = []
        for name, dirs in raw.items():
            if not isinstance(dirs, dict):
                raise ValueError(f"Course '{name}' in {path} must be an object")
            entries.append({"name": name, **dirs})
    elif isinstance(raw, list):
        entries = raw
    else:
        raise ValueError(f"Courses file {path} must contain a list or an object")

    try:
        return [CourseMapping.model_validate(entry) for entry in entries]
    except ValidationError as exc:
        raise ValueError(f"Invalid course mapping in {path}: {exc}") from exc


def load_course_mappings(config: AppConfig) -> Tuple[CourseMapping, ...]:
    """Return all configured course mappings in configuration order.

    Raises:
        ValueError: If the courses file is unreadable or two mappings share
            a name.
    """

    mappings = list(config.courses)
    if config.courses_file is not None:
        mappings.extend(_read_courses_file(config.courses_file))

    seen = set()
    for mapping in mappings:
        if mapping.name in seen:
            raise ValueError(f"Duplicate course mapping: '{mapping.name}'")
        seen.add(mapping.name)
    return tuple(mappings)
