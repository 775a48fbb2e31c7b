"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field

from logger import DEFAULT_FILENAME


@dataclass
class LogConfig:
    """Log file target settings."""

    path: str = DEFAULT_FILENAME
    path_env: str = "YASH_LOG_PATH"


@dataclass
class CliConfig:
    """Command-line defaults."""

    default_level: str = "info"


@dataclass
class Config:
    """Top-level configuration container."""

    log: LogConfig = field(default_factory=LogConfig)
    cli: CliConfig = field(default_factory=CliConfig)
