"""Note rendering delegate.

Marshals the parameter bundle for the external note renderer and
reports its outcome. The renderer is invoked as::

    <command> <bundle-json>

with the transcript text on stdin. Rendering itself happens entirely in
the helper.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .collaborator import ExternalCollaborator
from .errors import ExternalToolError
from .schemas import NoteRenderRequest

logger = logging.getLogger(__name__)


class NoteDelegate:
    """Invokes the note renderer for one lecture.

    Args:
        collaborator: The note-rendering helper.
        verify_output: When true, a zero exit without a file at the
            computed output path is reported as a failure.
    """

    def __init__(
        self, collaborator: ExternalCollaborator, *, verify_output: bool = True
    ) -> None:
        self._collaborator = collaborator
        self.verify_output = verify_output

    def render(self, request: NoteRenderRequest, transcript: str) -> Path:
        """Run the renderer and return the note path.

        Raises:
            ExternalToolError: If the renderer exits non-zero, or if
                verification is enabled and no note was written.
        """

        self._collaborator.run_checked([request.to_argument()], stdin=transcript)

        output_path = request.output_path
        if self.verify_output and not output_path.is_file():
            raise ExternalToolError(
                f"{self._collaborator.name} exited successfully but did not write {output_path}",
                {"output_path": str(output_path)},
            )
        logger.info(
            "Rendered note for %s lecture %s at %s",
            request.course_name,
            request.lecture_number,
            output_path,
        )
        return output_path
