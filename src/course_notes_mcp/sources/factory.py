"""Factory for wiring transcript sources from configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable

from ..collaborator import SubprocessCollaborator
from ..schemas import SourceType
from ..transcript_source import AcquisitionParams, AcquisitionResult, TranscriptSource
from .http_api import HttpApiTranscriptSource
from .local_file import LocalFileTranscriptSource
from .remote_video import RemoteVideoTranscriptSource

if TYPE_CHECKING:
    from ..config import AppConfig


class SourceAcquirer:
    """Dispatches an acquisition to the source registered for its type.

    Args:
        sources: One source per `SourceType`.

    Raises:
        ValueError: If a source type is registered twice or missing.
    """

    def __init__(self, sources: Iterable[TranscriptSource]) -> None:
        registry: Dict[SourceType, TranscriptSource] = {}
        for source in sources:
            if source.source_type in registry:
                raise ValueError(f"Duplicate source for {source.source_type.value}")
            registry[source.source_type] = source
        missing = [t.value for t in SourceType if t not in registry]
        if missing:
            raise ValueError(f"No transcript source for: {', '.join(missing)}")
        self._sources = registry

    def acquire(
        self, source_type: SourceType, location: str, params: AcquisitionParams
    ) -> AcquisitionResult:
        return self._sources[source_type].acquire(location, params)


def create_source_acquirer(config: AppConfig) -> SourceAcquirer:
    """Create the acquirer with subprocess-backed helpers from configuration.

    Args:
        config: Application configuration.

    Returns:
        SourceAcquirer covering every source type.
    """

    video = SubprocessCollaborator("video transcript helper", config.video_transcript_command)
    http = SubprocessCollaborator("HTTP fetch helper", config.http_fetch_command)
    return SourceAcquirer(
        [
            LocalFileTranscriptSource(),
            RemoteVideoTranscriptSource(video),
            HttpApiTranscriptSource(
                http,
                default_headers={
                    "User-Agent": config.http_user_agent,
                    "Content-Type": "application/json",
                },
            ),
        ]
    )
