"""Tests for the subprocess-backed collaborator, using real child processes."""

from __future__ import annotations

import sys

import pytest

from course_notes_mcp.collaborator import CollaboratorResult, SubprocessCollaborator
from course_notes_mcp.errors import ExternalToolError


def _python(code: str) -> SubprocessCollaborator:
    return SubprocessCollaborator("python helper", [sys.executable, "-c", code])


def test_captures_stdout_and_args() -> None:
    helper = _python("import sys; print('|'.join(sys.argv[1:]))")
    result = helper.invoke(["a b", "c"])
    assert result == CollaboratorResult(0, "a b|c\n", "")
    assert result.ok


def test_passes_stdin() -> None:
    helper = _python("import sys; sys.stdout.write(sys.stdin.read().upper())")
    assert helper.invoke([], stdin="transcript").stdout == "TRANSCRIPT"


def test_non_zero_exit_is_reported_not_raised() -> None:
    helper = _python("import sys; sys.stderr.write('boom'); sys.exit(3)")
    result = helper.invoke([])
    assert result.exit_code == 3
    assert result.stderr == "boom"
    assert not result.ok


def test_run_checked_raises_on_non_zero_exit() -> None:
    helper = _python("import sys; sys.stderr.write('bad locator'); sys.exit(2)")
    with pytest.raises(ExternalToolError) as excinfo:
        helper.run_checked(["x"])
    assert excinfo.value.code == "EXTERNAL_TOOL_ERROR"
    assert excinfo.value.details == {"exit_code": 2, "stderr": "bad locator"}


def test_missing_executable() -> None:
    helper = SubprocessCollaborator("ghost", ["definitely-not-a-real-helper-binary"])
    with pytest.raises(ExternalToolError, match="Could not start ghost"):
        helper.invoke([])


def test_non_utf8_output() -> None:
    helper = _python("import sys; sys.stdout.buffer.write(b'\\xff\\xfe\\xfa')")
    with pytest.raises(ExternalToolError, match="not valid UTF-8"):
        helper.invoke([])


def test_empty_command_rejected() -> None:
    with pytest.raises(ValueError):
        SubprocessCollaborator("empty", [])


def test_child_does_not_inherit_stdin() -> None:
    helper = _python("import sys; print(repr(sys.stdin.read()))")
    assert helper.invoke([]).stdout.strip() == "''"
