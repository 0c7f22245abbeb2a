"""Component wiring for the tool dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field

from .collaborator import SubprocessCollaborator
from .config import AppConfig
from .notes import NoteDelegate
from .paths import PathResolver
from .sources import SourceAcquirer, create_source_acquirer
from .writer import ArtifactWriter


@dataclass(frozen=True)
class NoteServices:
    resolver: PathResolver
    acquirer: SourceAcquirer
    delegate: NoteDelegate
    writer: ArtifactWriter = field(default_factory=ArtifactWriter)


def build_services(config: AppConfig) -> NoteServices:
    """Build every component from configuration.

    Raises:
        ValueError: If the course table or a helper command is invalid.
    """

    renderer = SubprocessCollaborator("note renderer", config.note_render_command)
    return NoteServices(
        resolver=PathResolver.from_config(config),
        acquirer=create_source_acquirer(config),
        delegate=NoteDelegate(renderer, verify_output=config.verify_note_output),
    )
