from __future__ import annotations

import pytest
from pydantic import ValidationError

from course_notes_mcp.schemas import GenerateNotesInput, HttpHeaders, SourceType

BASE = {
    "courseName": "Math",
    "lectureNumber": "3",
    "lectureTopic": "Limits",
    "sourceType": "remote-video",
    "sourceLocation": "abc123",
}


def test_camel_and_snake_case_are_equivalent() -> None:
    camel = GenerateNotesInput.model_validate(BASE)
    snake = GenerateNotesInput.model_validate(
        {
            "course_name": "Math",
            "lecture_number": 3,
            "lecture_topic": "Limits",
            "source_type": "remote-video",
            "source_location": "abc123",
        }
    )
    assert camel == snake
    assert camel.source_type is SourceType.REMOTE_VIDEO
    assert camel.save_transcript is True


@pytest.mark.parametrize(
    "override",
    [
        {"sourceType": "ftp"},
        {"courseName": "   "},
        {"lectureNumber": True},
        {"transcriptFilename": "../escape.txt"},
        {"outputFilename": "sub/note.md"},
        {"apiMethod": "TRACE"},
        {"unexpected": 1},
        {"sourceType": "http-api", "sourceLocation": "file:///etc/passwd"},
    ],
)
def test_invalid_requests(override) -> None:
    with pytest.raises(ValidationError):
        GenerateNotesInput.model_validate({**BASE, **override})


def test_missing_required_field() -> None:
    data = dict(BASE)
    del data["lectureTopic"]
    with pytest.raises(ValidationError):
        GenerateNotesInput.model_validate(data)


def test_http_options_from_request() -> None:
    request = GenerateNotesInput.model_validate(
        {
            **BASE,
            "sourceType": "http-api",
            "sourceLocation": "https://api.test/t",
            "apiMethod": "post",
            "apiHeaders": {"Authorization": "Bearer t", "X-API-Key": "k"},
            "apiBody": {"q": 1},
        }
    )
    options = request.http_options
    assert options.method == "POST"
    assert options.headers.as_dict() == {"Authorization": "Bearer t", "X-API-Key": "k"}
    assert options.body == {"q": 1}


def test_unknown_header_rejected() -> None:
    with pytest.raises(ValidationError):
        HttpHeaders.model_validate({"X-Forwarded-For": "1.2.3.4"})


def test_header_names_are_case_insensitive() -> None:
    headers = HttpHeaders.model_validate(
        {"content-type": "text/plain", "AUTHORIZATION": "Bearer t", "x-api-key": "k"}
    )
    assert headers.as_dict() == {
        "Content-Type": "text/plain",
        "Authorization": "Bearer t",
        "X-API-Key": "k",
    }


def test_field_names_still_accepted_for_headers() -> None:
    assert HttpHeaders(user_agent="ua").as_dict() == {"User-Agent": "ua"}
    assert HttpHeaders.model_validate({"user_agent": "ua"}).as_dict() == {"User-Agent": "ua"}


def test_header_given_twice_in_different_case_rejected() -> None:
    with pytest.raises(ValidationError):
        HttpHeaders.model_validate({"Accept": "a", "accept": "b"})
