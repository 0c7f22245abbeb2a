"""Environment configuration for the Course Notes MCP Server.

Settings are read once at startup and frozen. Every variable carries the
``COURSE_NOTES_`` prefix:

```bash
export COURSE_NOTES_DEFAULT_NOTES_DIR="~/Documents/Notes"
export COURSE_NOTES_DEFAULT_TRANSCRIPT_DIR="~/Documents/Transcripts"
export COURSE_NOTES_COURSES='[{"name": "Math", "notes_dir": "~/Math/notes", "transcript_dir": "~/Math/transcripts"}]'
export COURSE_NOTES_VIDEO_TRANSCRIPT_COMMAND='["node", "/opt/youtube-transcript/build/index.js"]'
```

```python
from course_notes_mcp.config import load_config
cfg = load_config()
print(cfg.default_notes_dir)
```
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _expand_path(p: str | Path | None) -> Path | None:
    """Expand ~ and environment variables in a path-like value."""
    if p is None:
        return None
    if isinstance(p, Path):
        s = str(p)
    else:
        s = p
    return Path(os.path.expanduser(os.path.expandvars(s)))


class CourseMapping(BaseModel):
    """Notes and transcript directories for one course."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    notes_dir: Path
    transcript_dir: Path

    @field_validator("notes_dir", "transcript_dir", mode="before")
    @classmethod
    def _expand_dirs(cls, v):
        return _expand_path(v)


class AppConfig(BaseSettings):
    """Application configuration settings loaded from environment variables.

    All environment variables are prefixed with COURSE_NOTES_ (e.g.,
    COURSE_NOTES_DEFAULT_NOTES_DIR). List-valued settings are given as JSON.
    """

    # ---- directories ----
    default_notes_dir: Path = Field(
        default="~/Documents/Notes",
        description="Notes directory used for courses without a mapping",
    )
    default_transcript_dir: Path = Field(
        default="~/Documents/Transcripts",
        description="Transcript directory used for courses without a mapping",
    )
    courses: List[CourseMapping] = Field(
        default_factory=list,
        description="Course name to directory mappings",
    )
    courses_file: Optional[Path] = Field(
        default=None,
        description="Optional JSON file with additional course mappings",
    )

    # ---- external helpers (argv prefixes) ----
    video_transcript_command: List[str] = Field(
        default_factory=lambda: ["youtube-transcript"],
        description="Command that prints a video transcript for a locator",
    )
    http_fetch_command: List[str] = Field(
        default_factory=lambda: ["curl-fetch"],
        description="Command that performs an HTTP request and prints JSON",
    )
    note_render_command: List[str] = Field(
        default_factory=lambda: ["note-gen"],
        description="Command that renders a Markdown note from a parameter bundle",
    )

    # ---- behavior ----
    http_user_agent: str = Field(
        default="course-notes-mcp/0.1.0",
        description="Default User-Agent passed to the HTTP fetch helper",
    )
    verify_note_output: bool = Field(
        default=True,
        description="Fail the request when the renderer exits 0 but writes no note",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level for stderr logging"
    )

    model_config = SettingsConfigDict(
        env_prefix="COURSE_NOTES_",
        case_sensitive=False,
        env_file=(".env",),  # will read if present
        env_file_encoding="utf-8",
        frozen=True,
    )

    # ---- validators ----
    @field_validator(
        "default_notes_dir", "default_transcript_dir", "courses_file", mode="before"
    )
    @classmethod
    def _expand_all_paths(cls, v):
        return _expand_path(v)

    @field_validator(
        "video_transcript_command",
        "http_fetch_command",
        "note_render_command",
    )
    @classmethod
    def _non_empty_command(cls, v: List[str]) -> List[str]:
        if not v or not v[0]:
            raise ValueError("command must contain at least the executable")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v


def load_config() -> AppConfig:
    """Load and validate application configuration from environment variables.

    • All variables are prefixed with COURSE_NOTES_.
    • Missing values fall back to the documented defaults.
    • Paths expand ~ and ${VARS}.
    """
    return AppConfig()
