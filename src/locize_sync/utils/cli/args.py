"""
Command-line argument parsing for locize-sync.

This module parses the source root, configuration path, logging options and
run mode flags into a typed container.
"""

import argparse
import logging
from pathlib import Path
from typing import NamedTuple

from ..core.version import get_version


class PathValidationError(Exception):
    """Raised when a path validation fails."""

    pass


class ParsedArgs(NamedTuple):
    """Container for parsed command-line arguments."""

    root: Path
    config_file: Path
    debug_level: int
    log_file: Path | None
    answers: Path | None
    dry_run: bool
    init: bool


class DefaultPaths:
    """Default paths for locize-sync."""

    CONFIG_FILE: Path = Path("locize-sync.yml")
    ROOT: Path = Path(".")


LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def validate_config_file_path(config_file_str: str) -> Path:
    """
    Validate configuration file path.

    Args:
        config_file_str: String path to configuration file

    Returns:
        Resolved Path object for the configuration file

    Raises:
        PathValidationError: If the configuration file path is invalid
    """
    try:
        config_file = Path(config_file_str).expanduser().resolve()
    except (OSError, ValueError) as e:
        raise PathValidationError(f"Invalid config file path: {e}") from e

    if config_file.exists() and config_file.is_dir():
        raise PathValidationError(
            f"Config file path exists but is not a file: {config_file}"
        )

    if not config_file.parent.exists():
        raise PathValidationError(
            f"Parent directory for config file does not exist: {config_file.parent}"
        )

    return config_file


def validate_root_path(root_str: str) -> Path:
    """
    Validate and resolve the source root.

    Raises:
        PathValidationError: If the path is not an existing directory
    """
    try:
        root = Path(root_str).expanduser().resolve()
    except (OSError, ValueError) as e:
        raise PathValidationError(f"Invalid source root: {e}") from e

    if not root.is_dir():
        raise PathValidationError(f"Source root is not a directory: {root}")

    return root


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for locize-sync.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="locize-sync",
        description="Find translation keys used in a codebase and add the missing ones to locize",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  locize-sync
    Scan the current directory and ask for every missing translation

  locize-sync src --answers answers.yml
    Fill missing translations from a prepared file

  locize-sync --dry-run
    Only report missing translations (exit code 1 if any)

  locize-sync --init
    Write a starter locize-sync.yml
""",
    )

    defaults = DefaultPaths()

    _ = parser.add_argument(
        "root",
        nargs="?",
        default=str(defaults.ROOT),
        help="Source directory to scan for translation keys (default: current directory)",
        metavar="ROOT",
    )

    _ = parser.add_argument(
        "--config-file",
        type=str,
        default=str(defaults.CONFIG_FILE),
        help="Path to the configuration file (default: %(default)s)",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--debug-level",
        choices=sorted(LOG_LEVELS),
        default="info",
        help="Console log level (default: %(default)s)",
    )

    _ = parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write a detailed, rotating log to this file",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--answers",
        type=str,
        default=None,
        help="YAML/JSON file of {language: {key: value}} answers instead of prompting",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report missing translations without asking or writing anything",
    )

    _ = parser.add_argument(
        "--init",
        action="store_true",
        help="Write a starter configuration file and exit",
    )

    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    return parser


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """
    Parse command-line arguments.

    Args:
        args: List of arguments to parse (defaults to sys.argv[1:])

    Returns:
        ParsedArgs containing validated and resolved paths

    Raises:
        SystemExit: If argument parsing fails or --help is requested
        PathValidationError: If path validation fails
    """
    parser = create_argument_parser()
    parsed = parser.parse_args(args)

    root: str = parsed.root  # pyright: ignore[reportAny]
    config_file: str = parsed.config_file  # pyright: ignore[reportAny]
    log_file: str | None = parsed.log_file  # pyright: ignore[reportAny]
    answers: str | None = parsed.answers  # pyright: ignore[reportAny]
    debug_level: str = parsed.debug_level  # pyright: ignore[reportAny]

    return ParsedArgs(
        root=validate_root_path(root),
        config_file=validate_config_file_path(config_file),
        debug_level=LOG_LEVELS[debug_level],
        log_file=Path(log_file).expanduser().resolve() if log_file else None,
        answers=Path(answers).expanduser().resolve() if answers else None,
        dry_run=bool(parsed.dry_run),  # pyright: ignore[reportAny]
        init=bool(parsed.init),  # pyright: ignore[reportAny]
    )
