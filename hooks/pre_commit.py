#!/usr/bin/env python3
"""Git pre-commit hook for fmtgate.

Install by copying or symlinking this file to `.git/hooks/pre-commit`,
or use with the pre-commit framework:

    # .pre-commit-config.yaml
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

from __future__ import annotations

import subprocess
import sys


def build_command(argv: list[str]) -> list[str]:
    """Build the fmtgate invocation, forwarding any extra hook arguments."""
    return [sys.executable, "-m", "fmtgate", "check", *argv]


def main(argv: list[str] | None = None) -> int:
    """Run fmtgate on staged changes."""
    cmd = build_command(sys.argv[1:] if argv is None else argv)

    try:
        result = subprocess.run(cmd)
    except OSError as e:
        print(f"fmtgate: ERROR: could not run {cmd[0]}: {e}", flush=True)
        return 1
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
