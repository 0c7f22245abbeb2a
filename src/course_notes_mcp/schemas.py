"""Pydantic schemas for tool inputs and outputs.

These models define the JSON contracts of the MCP tools and of the
note-rendering bundle. Tool input accepts both camelCase and snake_case
field names.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]
HttpBody = Union[Dict[str, Any], List[Any], str]


class SourceType(str, Enum):
    """Where a lecture transcript comes from."""

    LOCAL_FILE = "local-file"
    REMOTE_VIDEO = "remote-video"
    HTTP_API = "http-api"

    @property
    def is_remote(self) -> bool:
        return self is not SourceType.LOCAL_FILE


_HEADER_NAMES = {
    "authorization": "Authorization",
    "accept": "Accept",
    "content-type": "Content-Type",
    "content_type": "Content-Type",
    "user-agent": "User-Agent",
    "user_agent": "User-Agent",
    "x-api-key": "X-API-Key",
    "api_key": "X-API-Key",
}


class HttpHeaders(BaseModel):
    """Recognized request headers for the HTTP fetch helper.

    Header names are matched case-insensitively and emitted in their
    canonical spelling. Unknown names are rejected.

    Example:
        >>> HttpHeaders.model_validate({"content-type": "text/plain"}).as_dict()
        {'Content-Type': 'text/plain'}
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    authorization: Optional[str] = Field(default=None, alias="Authorization")
    accept: Optional[str] = Field(default=None, alias="Accept")
    content_type: Optional[str] = Field(default=None, alias="Content-Type")
    user_agent: Optional[str] = Field(default=None, alias="User-Agent")
    api_key: Optional[str] = Field(default=None, alias="X-API-Key")

    @model_validator(mode="before")
    @classmethod
    def _canonical_names(cls, data):
        if not isinstance(data, dict):
            return data
        canonical: Dict[Any, Any] = {}
        for key, value in data.items():
            name = _HEADER_NAMES.get(key.lower(), key) if isinstance(key, str) else key
            if name in canonical:
                raise ValueError(f"header {name!r} given more than once")
            canonical[name] = value
        return canonical

    def as_dict(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True, exclude_none=True)


class HttpRequestOptions(BaseModel):
    """Method, headers and body forwarded to the HTTP fetch helper."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod = "GET"
    headers: HttpHeaders = Field(default_factory=HttpHeaders)
    body: Optional[HttpBody] = None

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, v):
        return v.upper() if isinstance(v, str) else v


def _is_bare_filename(value: str) -> bool:
    return bool(value) and Path(value).name == value and value not in (".", "..")


class GenerateNotesInput(BaseModel):
    """Arguments of the ``generate-notes-from-source`` tool.

    Attributes:
        course_name: Course key used to resolve notes/transcript directories.
        lecture_number: Lecture number; integers are normalized to strings.
        lecture_topic: Human readable lecture topic.
        source_type: One of ``local-file``, ``remote-video``, ``http-api``.
        source_location: File path, video locator or URL.
        save_transcript: Persist remote transcripts to the transcript dir.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    course_name: str = Field(min_length=1)
    lecture_number: str = Field(min_length=1)
    lecture_topic: str = Field(min_length=1)
    source_type: SourceType
    source_location: str = Field(min_length=1)

    api_method: Optional[HttpMethod] = None
    api_headers: Optional[HttpHeaders] = None
    api_body: Optional[HttpBody] = None

    output_directory: Optional[str] = None
    output_filename: Optional[str] = None
    save_transcript: bool = True
    transcript_filename: Optional[str] = None

    special_formatting: Optional[str] = None
    content_to_emphasize: Optional[str] = None
    other_instructions: Optional[str] = None

    @field_validator("lecture_number", mode="before")
    @classmethod
    def _number_to_str(cls, v):
        if isinstance(v, bool):
            return v
        if isinstance(v, int):
            return str(v)
        return v

    @field_validator("course_name", "lecture_number", "lecture_topic", "source_location")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("api_method", mode="before")
    @classmethod
    def _upper_method(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("output_filename", "transcript_filename")
    @classmethod
    def _bare_filename(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not _is_bare_filename(v):
            raise ValueError("must be a file name without directory components")
        return v

    @model_validator(mode="after")
    def _check_location(self) -> "GenerateNotesInput":
        if self.source_type is SourceType.HTTP_API and not self.source_location.startswith(
            ("http://", "https://")
        ):
            raise ValueError("source_location must be an http(s) URL for http-api")
        return self

    @property
    def http_options(self) -> HttpRequestOptions:
        return HttpRequestOptions(
            method=self.api_method or "GET",
            headers=self.api_headers or HttpHeaders(),
            body=self.api_body,
        )


class NoteRenderRequest(BaseModel):
    """Parameter bundle handed to the note-rendering helper."""

    model_config = ConfigDict(frozen=True)

    course_name: str
    lecture_number: str
    lecture_topic: str
    source_type: SourceType
    transcript_dir: Path
    transcript_path: Optional[Path] = None
    output_dir: Path
    output_filename: str
    special_formatting: Optional[str] = None
    content_to_emphasize: Optional[str] = None
    other_instructions: Optional[str] = None

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.output_filename

    def to_argument(self) -> str:
        """Serialize the bundle, including the computed output path, as JSON."""
        payload = self.model_dump(mode="json")
        payload["output_path"] = str(self.output_path)
        return json.dumps(payload, ensure_ascii=False)


class ToolResponse(BaseModel):
    """Uniform result envelope returned by every tool."""

    success: bool
    message: str
    is_error: bool = False

    @classmethod
    def ok(cls, message: str) -> "ToolResponse":
        return cls(success=True, message=message, is_error=False)

    @classmethod
    def error(cls, message: str) -> "ToolResponse":
        return cls(success=False, message=message, is_error=True)
