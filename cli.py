"""Command-line parsing helpers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from config.loader import LEVEL_NAMES


DEFAULT_CONFIG_NAME = "yash-log.json"


@dataclass
class LogOptions:
    """Parsed CLI options for writing one log line."""

    config_path: Path | None
    log_file: Path | None
    level: str | None
    message: str
    args: list[str]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Args:
        argv: Optional argument list.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(description="Append a tagged line to the yash log file.")
    parser.add_argument("--config", help="Path to a config JSON file")
    parser.add_argument("--log-file", help="Log file to append to (overrides config and environment)")
    parser.add_argument("--level", choices=list(LEVEL_NAMES), help="Line severity (default from config)")
    parser.add_argument("message", help="Message, optionally with printf-style placeholders")
    parser.add_argument("args", nargs="*", help="Values interpolated into the message")
    return parser.parse_args(argv)


def resolve_config_path(args: argparse.Namespace) -> Path | None:
    """Resolve the config path from CLI arguments.

    Falls back to ``yash-log.json`` in the working directory when present.
    """
    if args.config:
        return Path(args.config).expanduser().resolve()
    default_file = Path.cwd() / DEFAULT_CONFIG_NAME
    if default_file.exists():
        return default_file.resolve()
    return None


def parse_cli(argv: list[str] | None = None) -> LogOptions:
    """Build a LogOptions instance from CLI arguments."""
    args = _parse_args(argv)
    log_file = Path(args.log_file).expanduser() if args.log_file else None
    return LogOptions(
        config_path=resolve_config_path(args),
        log_file=log_file,
        level=args.level,
        message=args.message,
        args=list(args.args),
    )
