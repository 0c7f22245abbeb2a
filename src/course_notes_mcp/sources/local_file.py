"""Local file transcript source.

Reads transcripts that already exist on disk. Relative locations are
resolved against the course transcript directory.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import NotFoundError
from ..schemas import SourceType
from ..transcript_source import AcquisitionParams, AcquisitionResult, TranscriptSource


class LocalFileTranscriptSource(TranscriptSource):
    """Transcript source that reads a UTF-8 file."""

    source_type = SourceType.LOCAL_FILE

    @staticmethod
    def resolve_location(location: str, transcript_dir: Path) -> Path:
        path = Path(os.path.expanduser(location))
        if not path.is_absolute():
            path = transcript_dir / path
        return path

    def acquire(self, location: str, params: AcquisitionParams) -> AcquisitionResult:
        path = self.resolve_location(location, params.transcript_dir)
        if not path.is_file():
            raise NotFoundError(
                f"Transcript file not found: {path}", {"path": str(path)}
            )

        # Bytes, not read_text: keep line endings exactly as stored.
        try:
            text = path.read_bytes().decode("utf-8")
        except OSError as exc:
            raise NotFoundError(
                f"Transcript file is unreadable: {path} ({exc})", {"path": str(path)}
            ) from exc
        except UnicodeDecodeError as exc:
            raise NotFoundError(
                f"Transcript file is not valid UTF-8: {path}", {"path": str(path)}
            ) from exc

        if not text.strip():
            raise NotFoundError(
                f"Transcript file is empty: {path}", {"path": str(path)}
            )
        return AcquisitionResult(text=text, source_path=str(path))
