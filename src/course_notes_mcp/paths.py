"""Course path resolution.

Maps a course name to its notes and transcript directories. The table is
built once from configuration and never mutated afterwards.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, NamedTuple, Tuple

from .config import AppConfig, CourseMapping, load_course_mappings

logger = logging.getLogger(__name__)


class CoursePaths(NamedTuple):
    notes_dir: Path
    transcript_dir: Path


class PathResolver:
    """Read-only lookup from course name to directories.

    Args:
        mappings: Course mappings; names must be unique.
        default_notes_dir: Fallback notes directory for unmapped courses.
        default_transcript_dir: Fallback transcript directory.

    Raises:
        ValueError: If two mappings share a name.
    """

    def __init__(
        self,
        mappings: Iterable[CourseMapping],
        default_notes_dir: Path,
        default_transcript_dir: Path,
    ) -> None:
        table = {}
        for mapping in mappings:
            if mapping.name in table:
                raise ValueError(f"Duplicate course mapping: '{mapping.name}'")
            table[mapping.name] = mapping
        self._table = MappingProxyType(table)
        self._defaults = CoursePaths(Path(default_notes_dir), Path(default_transcript_dir))

    @classmethod
    def from_config(cls, config: AppConfig) -> PathResolver:
        return cls(
            load_course_mappings(config),
            config.default_notes_dir,
            config.default_transcript_dir,
        )

    @property
    def defaults(self) -> CoursePaths:
        return self._defaults

    def courses(self) -> Tuple[CourseMapping, ...]:
        """Mappings in configuration order."""
        return tuple(self._table.values())

    def resolve(self, course_name: str) -> CoursePaths:
        """Return the directories for ``course_name``; never raises."""
        mapping = self._table.get(course_name)
        if mapping is None:
            logger.warning(
                "No mapping for course '%s'; using default directories", course_name
            )
            return self._defaults
        return CoursePaths(mapping.notes_dir, mapping.transcript_dir)
