"""External collaborator abstraction.

The server never talks to the video, HTTP or note-rendering helpers
directly. Each one is an `ExternalCollaborator`: something that can be
invoked with an argument list (and optional stdin) and reports an exit
code plus captured output. Argument serialization and output parsing
belong to the callers; process spawning and decoding live here.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import ExternalToolError
from .utils import tail

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollaboratorResult:
    exit_code: int
    stdout: str
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class ExternalCollaborator(ABC):
    """Abstract interface for helper processes."""

    name: str = "collaborator"

    @abstractmethod
    def invoke(
        self, args: Sequence[str], *, stdin: Optional[str] = None
    ) -> CollaboratorResult:
        """Run the collaborator and wait for it to exit.

        Args:
            args: Arguments appended to the collaborator's command.
            stdin: Optional text written to the process' standard input.

        Returns:
            Exit code and captured stdout/stderr.

        Raises:
            ExternalToolError: If the collaborator cannot be started or
                its output cannot be decoded.
        """
        pass

    def run_checked(
        self, args: Sequence[str], *, stdin: Optional[str] = None
    ) -> CollaboratorResult:
        """Invoke and raise `ExternalToolError` on a non-zero exit."""
        result = self.invoke(args, stdin=stdin)
        if not result.ok:
            raise ExternalToolError(
                f"{self.name} exited with status {result.exit_code}",
                {"exit_code": result.exit_code, "stderr": tail(result.stderr)},
            )
        return result


class SubprocessCollaborator(ExternalCollaborator):
    """Collaborator backed by a local command.

    Blocks until the process exits; there is no timeout.

    Args:
        name: Label used in logs and error messages.
        command: Executable plus any fixed leading arguments.
    """

    def __init__(self, name: str, command: Sequence[str]) -> None:
        if not command:
            raise ValueError(f"{name}: command must not be empty")
        self.name = name
        self._command: List[str] = list(command)

    def invoke(
        self, args: Sequence[str], *, stdin: Optional[str] = None
    ) -> CollaboratorResult:
        argv = [*self._command, *args]
        logger.debug("Invoking %s: %s", self.name, argv[: len(self._command) + 1])
        # Our own stdin is the MCP transport; children must never read it.
        stdin_kwargs = {"input": stdin} if stdin is not None else {"stdin": subprocess.DEVNULL}
        try:
            completed = subprocess.run(
                argv,
                **stdin_kwargs,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except OSError as exc:
            raise ExternalToolError(
                f"Could not start {self.name}: {exc}",
                {"command": self._command[0]},
            ) from exc
        except UnicodeDecodeError as exc:
            raise ExternalToolError(
                f"{self.name} produced output that is not valid UTF-8",
                {"command": self._command[0]},
            ) from exc

        logger.debug("%s exited with status %s", self.name, completed.returncode)
        return CollaboratorResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
