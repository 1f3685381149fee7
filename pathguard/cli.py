"""Command line interface for inspecting untrusted paths.

Examples:
  pathguard check "lib/../../etc/passwd" "src/main.py"
  pathguard --drive-letters always sanitize /args.js "C:\\Windows\\win.ini"
  pathguard join /tmp/repo testing/framework /args.js
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ConfigurationError, get_settings
from .errors import PathViolation
from .ui.console import ConsoleManager, PathReport
from .utils.logging_factory import LoggingFactory
from .utils.paths import safe_repository_join
from .utils.sanitization import DRIVE_LETTER_POLICIES, PathSanitizer, drive_letters_enabled
from .utils.validation import find_violation

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="pathguard",
        description="Validate, sanitize and safely join untrusted paths",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  # Report which rule each path breaks
  pathguard check "lib/../../etc/passwd" "src/main.py" CON.txt

  # Turn absolute-looking archive paths into relative ones
  pathguard sanitize /args.js lib//generator.js

  # Resolve where an untrusted path would be written inside a repository
  pathguard join /tmp/repo testing/framework /args.js

Exit status is 1 when any path is rejected.
        """,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument(
        "--json-output",
        action="store_true",
        help="Emit one JSON object per path instead of a table",
    )
    parser.add_argument(
        "--drive-letters",
        choices=DRIVE_LETTER_POLICIES,
        default=None,
        help="Drive letter policy for sanitize/join (default: configured policy)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    check_parser = subparsers.add_parser(
        "check",
        help="Check paths against the safety rules",
        description="Check raw paths without modifying them",
    )
    check_parser.add_argument("paths", nargs="+", help="Paths to check")

    sanitize_parser = subparsers.add_parser(
        "sanitize",
        help="Sanitize paths into safe relative paths",
        description="Normalize, strip leading separators and validate each path",
    )
    sanitize_parser.add_argument("paths", nargs="+", help="Untrusted paths")

    join_parser = subparsers.add_parser(
        "join",
        help="Join an untrusted path onto a trusted root",
        description="Compute root/target/path, guaranteeing the result stays inside root",
    )
    join_parser.add_argument("root", help="Existing trusted root directory")
    join_parser.add_argument("target", help="Target directory inside the root")
    join_parser.add_argument("path", help="Untrusted path")

    return parser


def check_command(args: argparse.Namespace) -> List[PathReport]:
    """Run the validator over each path."""
    return [PathReport(path=p, violation=find_violation(p)) for p in args.paths]


def sanitize_command(args: argparse.Namespace) -> List[PathReport]:
    """Run the sanitizer over each path."""
    drive_letters = drive_letters_enabled(args.drive_letters)
    reports = []
    for raw in args.paths:
        try:
            sanitized = PathSanitizer.sanitize_directory_file_path(
                raw, check_drive_letters=drive_letters
            )
            reports.append(PathReport(path=raw, result=sanitized))
        except PathViolation as e:
            reports.append(PathReport(path=raw, violation=e))
    return reports


def join_command(args: argparse.Namespace) -> List[PathReport]:
    """Join one untrusted path onto the trusted root."""
    drive_letters = drive_letters_enabled(args.drive_letters)
    try:
        joined = safe_repository_join(
            args.root, args.target, args.path, check_drive_letters=drive_letters
        )
        return [PathReport(path=args.path, result=str(joined))]
    except PathViolation as e:
        return [PathReport(path=args.path, violation=e)]


COMMANDS = {
    "check": ("Path check", check_command),
    "sanitize": ("Sanitized paths", sanitize_command),
    "join": ("Joined path", join_command),
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 if any path was rejected, 2 on configuration errors)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    console = ConsoleManager(verbose=args.verbose, json_output=args.json_output)

    try:
        settings = get_settings()
    except ConfigurationError as e:
        console.print_error(str(e))
        return 2

    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level)
    LoggingFactory.initialize(
        log_dir=settings.log_dir, level=level, handler=console.logging_handler()
    )

    if args.drive_letters is None:
        args.drive_letters = settings.drive_letter_policy

    title, command = COMMANDS[args.command]
    reports = command(args)
    console.print_reports(title, reports)

    rejected = sum(1 for report in reports if not report.ok)
    if rejected:
        logger.debug(f"{rejected} of {len(reports)} path(s) rejected")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
