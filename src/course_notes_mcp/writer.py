"""Transcript persistence."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import WriteError

logger = logging.getLogger(__name__)


class ArtifactWriter:
    """Writes acquired transcripts into a course transcript directory."""

    def persist(self, transcript_dir: Path, filename: str, content: str) -> Path:
        """Write ``content`` to ``transcript_dir/filename`` as UTF-8.

        Missing directories are created. An existing file is overwritten.

        Raises:
            WriteError: On any filesystem failure.
        """

        path = Path(transcript_dir) / filename
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8", newline="") as fh:
                fh.write(content)
        except OSError as exc:
            raise WriteError(
                f"Could not save transcript to {path}: {exc}", {"path": str(path)}
            ) from exc
        logger.info("Saved transcript (%d characters) to %s", len(content), path)
        return path
