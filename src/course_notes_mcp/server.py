"""FastMCP server entrypoint.

Registers the course notes tools. The tool implementations live in
`tools/` and return `ToolResponse` envelopes; this adapter turns error
envelopes into `ToolError` so clients receive ``isError=true``.

Logging goes to stderr because stdout carries the stdio transport.
"""

import logging
import sys
from typing import Annotated, Any, Dict, List, Optional, Union

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from .config import AppConfig, load_config
from .schemas import ToolResponse
from .services import NoteServices, build_services
from .tools import generate_notes, list_courses

logger = logging.getLogger(__name__)

SERVER_NAME = "course-notes-mcp"


def _unwrap(response: ToolResponse) -> str:
    if response.is_error:
        raise ToolError(response.message)
    return response.message


def _register_fastmcp_tools(app, services: NoteServices) -> None:
    @app.tool("list-courses")
    def list_courses_tool() -> str:
        """List configured courses with their notes and transcript directories."""
        return _unwrap(list_courses(services.resolver))

    @app.tool("generate-notes-from-source")
    def generate_notes_from_source(
        courseName: Annotated[str, Field(description="Course name, e.g. 'Math'")],
        lectureNumber: Annotated[Union[str, int], Field(description="Lecture number")],
        lectureTopic: Annotated[str, Field(description="Lecture topic")],
        sourceType: Annotated[
            str, Field(description="One of: local-file, remote-video, http-api")
        ],
        sourceLocation: Annotated[
            str,
            Field(
                description="Transcript path (absolute or relative to the course "
                "transcript directory), video URL/ID, or API URL"
            ),
        ],
        apiMethod: Annotated[
            Optional[str], Field(description="HTTP method for http-api (default GET)")
        ] = None,
        apiHeaders: Annotated[
            Optional[Dict[str, str]],
            Field(
                description="Headers for http-api, any case: Authorization, Accept, "
                "Content-Type, User-Agent, X-API-Key"
            ),
        ] = None,
        apiBody: Annotated[
            Optional[Union[Dict[str, Any], List[Any], str]],
            Field(description="Request body for http-api"),
        ] = None,
        outputDirectory: Annotated[
            Optional[str],
            Field(description="Notes directory override (relative to the course notes dir)"),
        ] = None,
        outputFilename: Annotated[
            Optional[str],
            Field(description="Note file name override; .md is appended if missing"),
        ] = None,
        saveTranscript: Annotated[
            bool, Field(description="Save fetched transcripts to the transcript dir")
        ] = True,
        transcriptFilename: Annotated[
            Optional[str], Field(description="Saved transcript file name override")
        ] = None,
        specialFormatting: Annotated[
            Optional[str], Field(description="Formatting instructions for the note")
        ] = None,
        contentToEmphasize: Annotated[
            Optional[str], Field(description="Topics the note should emphasize")
        ] = None,
        otherInstructions: Annotated[
            Optional[str], Field(description="Any other instructions for the note")
        ] = None,
    ) -> str:
        """Fetch a lecture transcript and generate Markdown notes from it."""
        # Wire names are camelCase; GenerateNotesInput accepts them as aliases.
        arguments = {
            "courseName": courseName,
            "lectureNumber": lectureNumber,
            "lectureTopic": lectureTopic,
            "sourceType": sourceType,
            "sourceLocation": sourceLocation,
            "apiMethod": apiMethod,
            "apiHeaders": apiHeaders,
            "apiBody": apiBody,
            "outputDirectory": outputDirectory,
            "outputFilename": outputFilename,
            "saveTranscript": saveTranscript,
            "transcriptFilename": transcriptFilename,
            "specialFormatting": specialFormatting,
            "contentToEmphasize": contentToEmphasize,
            "otherInstructions": otherInstructions,
        }
        return _unwrap(generate_notes(services, arguments))


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(config: AppConfig) -> FastMCP:
    """Build the FastMCP application with all tools registered."""
    services = build_services(config)
    app = FastMCP(SERVER_NAME)
    _register_fastmcp_tools(app, services)
    return app


def main() -> None:
    """Run the FastMCP application over stdio.

    Configuration or transport setup failures are fatal and exit with
    status 1; request-level failures never stop the server.
    """

    try:
        config = load_config()
    except Exception as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        sys.exit(1)
    configure_logging(config)

    try:
        app = create_app(config)
        logger.info("%s running on stdio", SERVER_NAME)
        app.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error in %s", SERVER_NAME)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
