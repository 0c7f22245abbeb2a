"""Transcript source abstraction layer.

Provides pluggable implementations for acquiring lecture transcripts
from different sources (local file, remote video, HTTP API) behind a
single interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .schemas import HttpRequestOptions, SourceType


@dataclass(frozen=True)
class AcquisitionParams:
    """Per-request context for a transcript source.

    Attributes:
        transcript_dir: Resolved transcript directory of the course.
        http: Request options; only read by the HTTP source.
    """

    transcript_dir: Path
    http: Optional[HttpRequestOptions] = None


@dataclass(frozen=True)
class AcquisitionResult:
    text: str
    source_path: str


class TranscriptSource(ABC):
    """Abstract interface for transcript sources."""

    source_type: SourceType

    @abstractmethod
    def acquire(self, location: str, params: AcquisitionParams) -> AcquisitionResult:
        """Fetch transcript text.

        Args:
            location: File path, video locator or URL.
            params: Request context.

        Returns:
            Non-empty transcript text and the resolved location.

        Raises:
            NotFoundError: Local transcript missing or unreadable.
            ExternalToolError: Helper process failed or returned bad output.
        """
        pass
