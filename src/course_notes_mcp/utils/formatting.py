"""Formatting helpers for helper-process payloads."""

from __future__ import annotations

import json
from typing import Any


def format_data(data: Any) -> str:
    """Render a JSON ``data`` value as transcript text.

    Strings pass through untouched; objects, arrays and scalars are
    pretty-printed as JSON.
    """

    if isinstance(data, str):
        return data
    return json.dumps(data, indent=2, ensure_ascii=False)


def tail(text: str, limit: int = 500) -> str:
    """Return the last ``limit`` characters of ``text``, stripped."""
    text = (text or "").strip()
    if len(text) <= limit:
        return text
    return "…" + text[-limit:]
