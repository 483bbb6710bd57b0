"""fmtgate CLI entry point.

Usage:
    fmtgate check [--config PATH] [--format text|json|sarif] [--no-stage] [FILES ...]
    fmtgate init [--path DIR] [--install-hook]
    python -m fmtgate check [options]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from fmtgate.checker import CommandFormatChecker
from fmtgate.config import FmtGateConfig
from fmtgate.engine import FormatGate
from fmtgate.git import GitError, GitStagingArea
from fmtgate.init_command import init_command
from fmtgate.models import Action
from fmtgate.reporters import REPORT_FILENAMES, REPORTERS


def check_command(args: argparse.Namespace) -> int:
    """Execute the check command.

    Staged paths from git are relative to the working tree root, so the
    formatter and ``git add`` run from there and ``.fmtgate.yml`` is read
    from there. Explicit FILES are taken relative to the current directory.
    """
    try:
        if args.files:
            root = None
        else:
            root = GitStagingArea().toplevel()

        config = FmtGateConfig.load(args.config, root=root)
        if args.no_stage:
            config.restage = False

        staging = GitStagingArea(cwd=root)
        checker = CommandFormatChecker(config.formatter_command, cwd=root)

        staged_files = list(args.files) if args.files else staging.list_staged_files()
        if not staged_files:
            print("ℹ️  No staged files to check.", file=sys.stderr)
        else:
            print(f"📄 Checking {len(staged_files)} staged file(s)...", file=sys.stderr)

        verdict = FormatGate(config, checker, staging).run(staged_files)
    except GitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    formats = []
    for fmt in args.format or config.report_formats:
        if fmt in REPORTERS:
            formats.append(fmt)
        else:
            print(f"⚠️  Unknown report format '{fmt}', skipping", file=sys.stderr)

    for fmt in formats:
        reporter = REPORTERS[fmt]()
        rendered = reporter.render(verdict)
        if rendered:
            print(rendered)

    # The committer always sees which files failed
    if not verdict.passed and "text" not in formats:
        print(verdict.message, file=sys.stderr)

    # Write to output dir if configured
    output_dir = args.output_dir or config.output_dir
    if output_dir:
        for fmt in formats:
            REPORTERS[fmt]().write(verdict, str(Path(output_dir) / REPORT_FILENAMES[fmt]))
        print(f"📁 Reports written to {output_dir}/", file=sys.stderr)

    emoji = {"FAIL": "🚫", "PASS": "✅"}.get(verdict.verdict, "❓")
    print(f"\n{emoji} Verdict: {verdict.verdict} ({verdict.summary})", file=sys.stderr)

    if verdict.verdict == Action.FAIL.value:
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fmtgate",
        description="fmtgate: block commits whose staged source files are not formatted",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check", help="Check staged files with the formatter and gate the commit"
    )
    check_parser.add_argument(
        "files",
        nargs="*",
        help="Paths to check instead of the git staged set",
    )
    check_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to .fmtgate.yml config file",
    )
    check_parser.add_argument(
        "--format",
        type=str,
        nargs="+",
        choices=sorted(REPORTERS),
        default=None,
        help="Output format(s)",
    )
    check_parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory to write report files to",
    )
    check_parser.add_argument(
        "--no-stage",
        action="store_true",
        help="Do not re-stage files when the check passes",
    )

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Bootstrap fmtgate config files for this project",
    )
    init_parser.add_argument(
        "--path",
        type=str,
        default=None,
        help="Target directory to initialize (default: current directory)",
    )
    init_parser.add_argument(
        "--install-hook",
        action="store_true",
        default=False,
        help="Also install .git/hooks/pre-commit",
    )

    return parser


def main() -> None:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args()

    if args.command == "check":
        sys.exit(check_command(args))
    elif args.command == "init":
        sys.exit(init_command(args))
    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":  # pragma: no cover
    main()
