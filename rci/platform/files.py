"""Filesystem helpers."""

from __future__ import annotations

from pathlib import Path

__all__ = ["append_text"]


def append_text(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Append text to path, creating the file and parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding=encoding, newline="") as handle:
        handle.write(content)
        handle.flush()
