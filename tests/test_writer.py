from __future__ import annotations

from pathlib import Path

import pytest

from course_notes_mcp.errors import WriteError
from course_notes_mcp.schemas import SourceType
from course_notes_mcp.utils import hyphenate, note_filename, transcript_filename
from course_notes_mcp.writer import ArtifactWriter


def test_derived_transcript_filenames() -> None:
    assert transcript_filename("Math", "3", SourceType.REMOTE_VIDEO) == "Math-Lecture-3-YT.txt"
    assert (
        transcript_filename("Intro to  ML", "10", SourceType.HTTP_API)
        == "Intro-to-ML-Lecture-10-API.txt"
    )


def test_note_filename_and_hyphenate() -> None:
    assert note_filename("Data Science", "2") == "Data-Science-Lecture-2.md"
    assert hyphenate("\tA \n B ") == "A-B"


def test_persist_creates_directories(tmp_path: Path) -> None:
    target = tmp_path / "new" / "transcripts"
    path = ArtifactWriter().persist(target, "Math-Lecture-3-YT.txt", "line1\r\nline2")
    assert path == target / "Math-Lecture-3-YT.txt"
    assert path.read_bytes() == b"line1\r\nline2"


def test_persist_overwrites(tmp_path: Path) -> None:
    writer = ArtifactWriter()
    writer.persist(tmp_path, "t.txt", "first")
    writer.persist(tmp_path, "t.txt", "second")
    assert (tmp_path / "t.txt").read_text(encoding="utf-8") == "second"


def test_persist_failure_raises_write_error(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(WriteError) as excinfo:
        ArtifactWriter().persist(blocker, "t.txt", "content")
    assert excinfo.value.code == "WRITE_ERROR"
