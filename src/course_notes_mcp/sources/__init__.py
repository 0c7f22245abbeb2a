"""Transcript source implementations."""

from .factory import SourceAcquirer, create_source_acquirer
from .http_api import HttpApiTranscriptSource
from .local_file import LocalFileTranscriptSource
from .remote_video import RemoteVideoTranscriptSource

__all__ = [
    "HttpApiTranscriptSource",
    "LocalFileTranscriptSource",
    "RemoteVideoTranscriptSource",
    "SourceAcquirer",
    "create_source_acquirer",
]
