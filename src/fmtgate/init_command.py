"""fmtgate init command: bootstrap project configuration files."""

from __future__ import annotations

import stat
from pathlib import Path

from fmtgate.config import CONFIG_FILENAME, DEFAULT_FORMATTER_COMMAND

# ---------------------------------------------------------------------------
# Template builders
# ---------------------------------------------------------------------------


def _build_fmtgate_yml() -> str:
    command = ", ".join(DEFAULT_FORMATTER_COMMAND)
    return f"""\
# .fmtgate.yml: fmtgate configuration

# Staged files ending with one of these suffixes are checked
extensions: [.rs]

# Formatter invoked once per file, with the path appended.
# Any output (stdout or stderr) marks the file as needing reformatting.
formatter:
  command: [{command}]

# Glob patterns for staged paths that are never checked
exclusions:
  paths: []

# Re-stage every originally staged file when the check passes
restage: true

reporting:
  format: [text]       # text | json | sarif
  # output_dir: .fmtgate/reports
"""


def _build_precommit_config() -> str:
    return """\
# .pre-commit-config.yaml: fmtgate pre-commit hook
repos:
  - repo: local
    hooks:
      - id: fmtgate
        name: fmtgate format check
        entry: python -m fmtgate check
        language: python
        pass_filenames: false
        always_run: true
"""


def _build_git_hook() -> str:
    return """\
#!/bin/sh
# Installed by `fmtgate init --install-hook`
exec python -m fmtgate check
"""


# ---------------------------------------------------------------------------
# Interactive helpers
# ---------------------------------------------------------------------------


def _prompt_yn(question: str, default: bool = False) -> bool:
    """Yes/no prompt."""
    default_str = "Y/n" if default else "y/N"
    answer = input(f"  {question} [{default_str}]: ").strip().lower()
    if not answer:
        return default
    return answer.startswith("y")


def _write_file(path: Path, content: str, executable: bool = False) -> bool:
    """Write file, prompting if it already exists. Returns True if written."""
    if path.exists() and not _prompt_yn(f"{path} already exists. Overwrite?", default=False):
        print(f"  Skipped: {path}")
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    if executable:
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    print(f"  Creating {path} ... done")
    return True


# ---------------------------------------------------------------------------
# Main command
# ---------------------------------------------------------------------------


def init_command(args: object) -> int:
    """Execute the init command.

    Args:
        args: Parsed CLI arguments with optional ``path`` and
              ``install_hook`` attributes.

    Returns:
        0 on success, 1 if a git hook was requested outside a git checkout.
    """
    root = Path(getattr(args, "path", None) or ".").resolve()
    install_hook = getattr(args, "install_hook", False)

    if install_hook and not (root / ".git").is_dir():
        print(f"Error: {root} is not a git repository (no .git directory)")
        return 1

    print()
    print("fmtgate init")
    print("-" * 50)

    _write_file(root / CONFIG_FILENAME, _build_fmtgate_yml())
    _write_file(root / ".pre-commit-config.yaml", _build_precommit_config())

    if install_hook:
        _write_file(root / ".git" / "hooks" / "pre-commit", _build_git_hook(), executable=True)

    print("-" * 50)
    print("Done! fmtgate is configured for this project.")
    print()
    print("  Next steps:")
    print("    1. Review .fmtgate.yml and adjust the formatter command")
    if not install_hook:
        print("    2. pip install pre-commit && pre-commit install")
    print()
    return 0
