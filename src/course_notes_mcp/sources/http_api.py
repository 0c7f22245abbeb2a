"""HTTP API transcript source.

Delegates to the HTTP fetch helper, invoked as::

    <command> <url> <METHOD> <headers-json> [<body>]

The helper must print a JSON object whose ``data`` field holds the
transcript. Non-string data is pretty-printed as JSON.
"""

from __future__ import annotations

import json
from typing import Dict, List, Mapping, Optional

from ..collaborator import ExternalCollaborator
from ..errors import ExternalToolError
from ..schemas import HttpBody, HttpRequestOptions, SourceType
from ..transcript_source import AcquisitionParams, AcquisitionResult, TranscriptSource
from ..utils import format_data, tail


def _serialize_body(body: Optional[HttpBody]) -> Optional[str]:
    if body is None:
        return None
    if isinstance(body, str):
        return body
    return json.dumps(body, ensure_ascii=False)


class HttpApiTranscriptSource(TranscriptSource):
    """Transcript source backed by the HTTP fetch helper.

    Args:
        collaborator: Helper that performs the request.
        default_headers: Headers sent unless the request overrides them.
    """

    source_type = SourceType.HTTP_API

    def __init__(
        self,
        collaborator: ExternalCollaborator,
        default_headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._collaborator = collaborator
        self._default_headers: Dict[str, str] = dict(default_headers or {})

    def build_args(self, url: str, options: HttpRequestOptions) -> List[str]:
        headers = {**self._default_headers, **options.headers.as_dict()}
        args = [url, options.method, json.dumps(headers, ensure_ascii=False)]
        body = _serialize_body(options.body)
        if body is not None:
            args.append(body)
        return args

    def acquire(self, location: str, params: AcquisitionParams) -> AcquisitionResult:
        options = params.http or HttpRequestOptions()
        result = self._collaborator.run_checked(self.build_args(location, options))

        name = self._collaborator.name
        try:
            payload = json.loads(result.stdout)
        except json.JSONDecodeError as exc:
            raise ExternalToolError(
                f"{name} returned invalid JSON: {exc.msg}",
                {"stdout": tail(result.stdout)},
            ) from exc
        if not isinstance(payload, dict):
            raise ExternalToolError(f"{name} returned JSON that is not an object")
        if payload.get("data") is None:
            raise ExternalToolError(
                f"{name} response has no 'data' field",
                {"keys": sorted(payload)},
            )

        text = format_data(payload["data"])
        if not text.strip():
            raise ExternalToolError(f"{name} returned an empty 'data' field")
        return AcquisitionResult(text=text, source_path=location)
