#!/usr/bin/env python3
"""CLI entrypoint for the yash logger."""

from __future__ import annotations

import logger
from cli import parse_cli
from config import load_config, resolve_log_path


EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2
EXIT_TODO = 3


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Returns:
        Process exit code.
    """
    options = parse_cli(argv)

    if options.config_path:
        if not options.config_path.exists():
            print(f"Config path not found: {options.config_path}")
            return EXIT_USAGE
        if options.config_path.is_dir():
            print(f"Config path must be a file: {options.config_path}")
            return EXIT_USAGE

    try:
        cfg = load_config(options.config_path)
    except ValueError as exc:
        print(f"Invalid config: {exc}")
        return EXIT_USAGE

    log_path = options.log_file or resolve_log_path(cfg)
    level = logger.LogLevel[(options.level or cfg.cli.default_level).upper()]

    try:
        message = options.message % tuple(options.args) if options.args else options.message
    except (TypeError, ValueError) as exc:
        print(f"Message does not match arguments: {exc}")
        return EXIT_USAGE

    try:
        logger.init_logger(log_path)
        if level is logger.LogLevel.TODO:
            logger.todo(message)
        logger.log(level, message)
    except NotImplementedError as exc:
        print(str(exc))
        return EXIT_TODO
    except (OSError, ValueError, logger.LoggerError) as exc:
        print(f"Cannot write log file {log_path}: {exc}")
        return EXIT_IO_ERROR
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
