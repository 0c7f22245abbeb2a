"""Remote video transcript source.

Delegates to the video transcript helper, which takes a video locator
(URL or ID) as its only argument and prints the transcript on stdout.
"""

from __future__ import annotations

from ..collaborator import ExternalCollaborator
from ..errors import ExternalToolError
from ..schemas import SourceType
from ..transcript_source import AcquisitionParams, AcquisitionResult, TranscriptSource


class RemoteVideoTranscriptSource(TranscriptSource):
    """Transcript source backed by the video transcript helper.

    Args:
        collaborator: Helper invoked as ``<command> <locator>``.
    """

    source_type = SourceType.REMOTE_VIDEO

    def __init__(self, collaborator: ExternalCollaborator) -> None:
        self._collaborator = collaborator

    def acquire(self, location: str, params: AcquisitionParams) -> AcquisitionResult:
        result = self._collaborator.run_checked([location])
        text = result.stdout.strip()
        if not text:
            raise ExternalToolError(
                f"{self._collaborator.name} returned no transcript for {location}",
                {"locator": location},
            )
        return AcquisitionResult(text=text, source_path=location)
