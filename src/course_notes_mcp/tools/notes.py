"""Note generation tool function.

Runs one request through the pipeline::

    Received -> Validated -> PathResolved -> Acquired -> [Persisted]
             -> Delegated -> Completed

Any step may end in Failed; the first failure short-circuits the rest
and is reported as an error envelope naming the step.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from ..errors import AppError, RequestValidationError, to_error_payload
from ..paths import CoursePaths
from ..schemas import GenerateNotesInput, NoteRenderRequest, SourceType, ToolResponse
from ..services import NoteServices
from ..transcript_source import AcquisitionParams, AcquisitionResult
from ..utils import note_filename, transcript_filename

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    PATH_RESOLVED = "path-resolved"
    ACQUIRED = "acquired"
    PERSISTED = "persisted"
    DELEGATED = "delegated"
    COMPLETED = "completed"
    FAILED = "failed"


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        where = ".".join(str(p) for p in err.get("loc", ())) or "request"
        problems.append(f"{where}: {err.get('msg')}")
    return "; ".join(problems)


def _output_location(
    request: GenerateNotesInput, paths: CoursePaths
) -> Tuple[Path, str]:
    output_dir = paths.notes_dir
    if request.output_directory:
        override = Path(request.output_directory).expanduser()
        output_dir = override if override.is_absolute() else paths.notes_dir / override

    filename = request.output_filename or note_filename(
        request.course_name, request.lecture_number
    )
    if Path(filename).suffix.lower() != ".md":
        filename += ".md"
    return output_dir, filename


def _failure(step: str, error: Exception) -> ToolResponse:
    payload = to_error_payload(error)
    logger.debug("generate-notes: %s", Stage.FAILED.value)
    return ToolResponse.error(
        f"Error during {step} [{payload['code']}]: {payload['message']}"
    )


def _summary(
    request: GenerateNotesInput,
    result: AcquisitionResult,
    saved_path: Optional[Path],
    output_path: Path,
    verified: bool,
) -> str:
    lines: List[str] = [
        f"Successfully generated notes for {request.course_name} "
        f"Lecture {request.lecture_number}: {request.lecture_topic}",
        f"Source: {request.source_type.value} ({result.source_path})",
    ]
    if saved_path is not None:
        lines.append(f"Transcript saved to: {saved_path}")
    if verified:
        lines.append(f"Notes written to: {output_path}")
    else:
        lines.append(f"Notes expected at: {output_path}")
    lines.append(f"Transcript length: {len(result.text)} characters")
    return "\n".join(lines)


def generate_notes(
    services: NoteServices,
    arguments: Union[GenerateNotesInput, Mapping[str, Any]],
) -> ToolResponse:
    """Acquire a transcript, optionally save it, and render a note.

    Never raises: every failure, expected or not, becomes an error
    envelope.
    """

    logger.debug("generate-notes: %s", Stage.RECEIVED.value)
    step = "validation"
    try:
        if isinstance(arguments, GenerateNotesInput):
            request = arguments
        else:
            try:
                request = GenerateNotesInput.model_validate(dict(arguments))
            except ValidationError as exc:
                raise RequestValidationError(
                    f"Invalid request: {_describe_validation_error(exc)}"
                ) from exc
        logger.debug("generate-notes: %s", Stage.VALIDATED.value)

        step = "path resolution"
        paths = services.resolver.resolve(request.course_name)
        logger.debug("generate-notes: %s", Stage.PATH_RESOLVED.value)

        step = "transcript acquisition"
        params = AcquisitionParams(
            transcript_dir=paths.transcript_dir,
            http=request.http_options
            if request.source_type is SourceType.HTTP_API
            else None,
        )
        result = services.acquirer.acquire(
            request.source_type, request.source_location, params
        )
        logger.debug("generate-notes: %s", Stage.ACQUIRED.value)

        transcript_path: Optional[Path] = None
        saved_path: Optional[Path] = None
        if request.source_type.is_remote:
            if request.save_transcript:
                step = "transcript persistence"
                filename = request.transcript_filename or transcript_filename(
                    request.course_name, request.lecture_number, request.source_type
                )
                saved_path = services.writer.persist(
                    paths.transcript_dir, filename, result.text
                )
                transcript_path = saved_path
                logger.debug("generate-notes: %s", Stage.PERSISTED.value)
        else:
            transcript_path = Path(result.source_path)

        step = "note rendering"
        output_dir, output_name = _output_location(request, paths)
        render_request = NoteRenderRequest(
            course_name=request.course_name,
            lecture_number=request.lecture_number,
            lecture_topic=request.lecture_topic,
            source_type=request.source_type,
            transcript_dir=paths.transcript_dir,
            transcript_path=transcript_path,
            output_dir=output_dir,
            output_filename=output_name,
            special_formatting=request.special_formatting,
            content_to_emphasize=request.content_to_emphasize,
            other_instructions=request.other_instructions,
        )
        output_path = services.delegate.render(render_request, result.text)
        logger.debug("generate-notes: %s", Stage.DELEGATED.value)
    except AppError as exc:
        logger.warning("generate-notes failed during %s: %s", step, exc.message)
        return _failure(step, exc)
    except Exception as exc:
        logger.exception("Unexpected error during %s", step)
        return _failure(step, exc)

    logger.debug("generate-notes: %s", Stage.COMPLETED.value)
    return ToolResponse.ok(
        _summary(
            request,
            result,
            saved_path,
            output_path,
            verified=services.delegate.verify_output,
        )
    )
