"""Shared fixtures for course notes server tests.

Provides a course layout under ``tmp_path``, a config pointing at it and
fake collaborators that record every invocation instead of spawning
processes.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import pytest

from course_notes_mcp.collaborator import CollaboratorResult, ExternalCollaborator
from course_notes_mcp.config import AppConfig
from course_notes_mcp.notes import NoteDelegate
from course_notes_mcp.paths import PathResolver
from course_notes_mcp.services import NoteServices
from course_notes_mcp.sources import (
    HttpApiTranscriptSource,
    LocalFileTranscriptSource,
    RemoteVideoTranscriptSource,
    SourceAcquirer,
)
from course_notes_mcp.writer import ArtifactWriter


class FakeCollaborator(ExternalCollaborator):
    """Collaborator stub that records calls and returns a canned result."""

    def __init__(
        self,
        name: str = "fake helper",
        *,
        stdout: str = "",
        exit_code: int = 0,
        stderr: str = "",
        side_effect: Optional[Callable[[Sequence[str], Optional[str]], None]] = None,
    ) -> None:
        self.name = name
        self.stdout = stdout
        self.exit_code = exit_code
        self.stderr = stderr
        self.side_effect = side_effect
        self.calls: List[Tuple[List[str], Optional[str]]] = []

    def invoke(self, args, *, stdin=None) -> CollaboratorResult:
        self.calls.append((list(args), stdin))
        if self.side_effect is not None:
            self.side_effect(args, stdin)
        return CollaboratorResult(self.exit_code, self.stdout, self.stderr)


class RecordingWriter(ArtifactWriter):
    def __init__(self) -> None:
        self.calls: List[Tuple[Path, str, str]] = []

    def persist(self, transcript_dir: Path, filename: str, content: str) -> Path:
        self.calls.append((transcript_dir, filename, content))
        return super().persist(transcript_dir, filename, content)


def write_note_from_bundle(args: Sequence[str], stdin: Optional[str]) -> None:
    """Renderer side effect: write a note where the bundle says it goes."""
    bundle = json.loads(args[0])
    path = Path(bundle["output_path"])
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"# {bundle['lecture_topic']}\n\n{stdin}", encoding="utf-8")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in list(os.environ):
        if key.upper().startswith("COURSE_NOTES_"):
            monkeypatch.delenv(key, raising=False)
    # Keep stray .env files out of AppConfig.
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def math_dirs(tmp_path: Path) -> Tuple[Path, Path]:
    notes = tmp_path / "math" / "notes"
    transcripts = tmp_path / "math" / "transcripts"
    notes.mkdir(parents=True)
    transcripts.mkdir(parents=True)
    return notes, transcripts


@pytest.fixture()
def config(tmp_path: Path, math_dirs: Tuple[Path, Path]) -> AppConfig:
    notes, transcripts = math_dirs
    return AppConfig(
        default_notes_dir=tmp_path / "default" / "notes",
        default_transcript_dir=tmp_path / "default" / "transcripts",
        courses=[
            {"name": "Math", "notes_dir": notes, "transcript_dir": transcripts},
            {
                "name": "Data Science",
                "notes_dir": tmp_path / "ds" / "notes",
                "transcript_dir": tmp_path / "ds" / "transcripts",
            },
        ],
    )


@pytest.fixture()
def video() -> FakeCollaborator:
    return FakeCollaborator("video transcript helper", stdout="video transcript text\n")


@pytest.fixture()
def http() -> FakeCollaborator:
    return FakeCollaborator(
        "HTTP fetch helper", stdout=json.dumps({"data": "api transcript text"})
    )


@pytest.fixture()
def renderer() -> FakeCollaborator:
    return FakeCollaborator("note renderer", side_effect=write_note_from_bundle)


@pytest.fixture()
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture()
def services(
    config: AppConfig,
    video: FakeCollaborator,
    http: FakeCollaborator,
    renderer: FakeCollaborator,
    writer: RecordingWriter,
) -> NoteServices:
    acquirer = SourceAcquirer(
        [
            LocalFileTranscriptSource(),
            RemoteVideoTranscriptSource(video),
            HttpApiTranscriptSource(http, default_headers={"User-Agent": "tests"}),
        ]
    )
    return NoteServices(
        resolver=PathResolver.from_config(config),
        acquirer=acquirer,
        delegate=NoteDelegate(renderer, verify_output=True),
        writer=writer,
    )
