"""Configuration management for fmtgate."""

from __future__ import annotations

from dataclasses import dataclass, field
from fnmatch import fnmatch
from pathlib import Path
from typing import Any

import yaml  # type: ignore

CONFIG_FILENAME = ".fmtgate.yml"

DEFAULT_FORMATTER_COMMAND = ["rustfmt", "--check", "--config", "skip_children=true"]

_DEFAULT_CONFIG = {
    "extensions": [".rs"],
    "formatter": {
        "command": list(DEFAULT_FORMATTER_COMMAND),
    },
    "exclusions": {
        "paths": [],
    },
    "restage": True,
    "reporting": {
        "format": ["text"],
        "output_dir": None,
    },
}


@dataclass
class FmtGateConfig:
    """Full fmtgate configuration loaded from `.fmtgate.yml`."""

    extensions: list[str] = field(default_factory=lambda: [".rs"])
    formatter_command: list[str] = field(default_factory=lambda: list(DEFAULT_FORMATTER_COMMAND))
    excluded_paths: list[str] = field(default_factory=list)
    restage: bool = True
    report_formats: list[str] = field(default_factory=lambda: ["text"])
    output_dir: str | None = None

    @classmethod
    def load(
        cls,
        config_path: str | Path | None = None,
        root: str | Path | None = None,
    ) -> FmtGateConfig:
        """Load configuration from a YAML file, falling back to defaults.

        Search order:
        1. Explicit ``config_path`` argument
        2. ``.fmtgate.yml`` in ``root`` (the current directory when omitted)
        3. Built-in defaults
        """
        raw: dict[str, Any] = dict(_DEFAULT_CONFIG)

        search_paths: list[Path] = []
        if config_path:
            search_paths.append(Path(config_path))
        search_paths.append(Path(root or ".") / CONFIG_FILENAME)

        for path in search_paths:
            if path.exists():
                with open(path, encoding="utf-8") as f:
                    loaded = yaml.safe_load(f)
                if loaded and isinstance(loaded, dict):
                    raw = _deep_merge(raw, loaded)
                break

        return cls._from_raw(raw)

    @classmethod
    def _from_raw(cls, raw: dict[str, Any]) -> FmtGateConfig:
        """Build config from a raw dict (merged defaults + user overrides)."""
        cfg = cls()

        extensions = raw.get("extensions") or cfg.extensions
        if isinstance(extensions, str):
            extensions = [extensions]
        cfg.extensions = [ext if ext.startswith(".") else f".{ext}" for ext in extensions]

        # Formatter
        formatter = raw.get("formatter") or {}
        command = formatter.get("command") or cfg.formatter_command
        if isinstance(command, str):
            command = command.split()
        cfg.formatter_command = [str(part) for part in command]

        # Exclusions
        exclusions = raw.get("exclusions") or {}
        cfg.excluded_paths = exclusions.get("paths") or []

        cfg.restage = _as_bool(raw.get("restage"), cfg.restage)

        # Reporting
        reporting = raw.get("reporting") or {}
        cfg.report_formats = reporting.get("format", cfg.report_formats)
        cfg.output_dir = reporting.get("output_dir", cfg.output_dir)

        return cfg

    def is_source_file(self, file_path: str) -> bool:
        """Check if a path ends with one of the recognized source extensions."""
        return any(file_path.endswith(ext) for ext in self.extensions)

    def is_path_excluded(self, file_path: str) -> bool:
        """Check if a file path is excluded by glob patterns."""
        return any(fnmatch(file_path, pattern) for pattern in self.excluded_paths)


def _as_bool(value: Any, default: bool) -> bool:
    """Read a YAML boolean, accepting quoted spellings such as ``"false"``."""
    if isinstance(value, str):
        value = yaml.safe_load(value)
    if isinstance(value, bool):
        return value
    return default


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep-merge override dict into base dict."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result
