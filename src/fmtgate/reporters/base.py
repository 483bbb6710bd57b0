"""Helpers shared by the verdict reporters."""

from __future__ import annotations

from pathlib import Path


def write_report(output_path: str | Path, content: str) -> Path:
    """Write a rendered report, creating parent directories. Returns the path."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if not content.endswith("\n"):
        content += "\n"
    path.write_text(content, encoding="utf-8")
    return path
