"""Configuration loading and normalization."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping

from config.models import CliConfig, Config, LogConfig
from logger import DEFAULT_FILENAME, LogLevel


LEVEL_NAMES = tuple(level.name.lower() for level in LogLevel)


def _as_str(value: Any, default: str) -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def _as_level(value: Any, default: str) -> str:
    text = _as_str(value, default).lower()
    if text in LEVEL_NAMES:
        return text
    return default


def _merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a JSON object: {path}")
    return data


def config_from_dict(raw: Dict[str, Any]) -> Config:
    """Build a Config instance from a raw dictionary."""
    log_raw = raw.get("log", {}) or {}
    cli_raw = raw.get("cli", {}) or {}

    log_cfg = LogConfig(
        path=_as_str(log_raw.get("path"), DEFAULT_FILENAME),
        path_env=_as_str(log_raw.get("path_env"), "YASH_LOG_PATH"),
    )
    cli_cfg = CliConfig(
        default_level=_as_level(cli_raw.get("default_level"), "info"),
    )
    return Config(log=log_cfg, cli=cli_cfg)


def apply_env_overrides(cfg: Config, environ: Mapping[str, str] | None = None) -> Config:
    """Replace the log path with the environment variable named by ``log.path_env``."""
    env = os.environ if environ is None else environ
    override = env.get(cfg.log.path_env, "").strip()
    if override:
        cfg.log.path = override
    return cfg


def load_config(path: Path | None, environ: Mapping[str, str] | None = None) -> Config:
    """Load config data into a Config instance.

    Args:
        path: Optional path to a JSON config file containing overrides.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        Parsed Config instance.
    """
    raw: Dict[str, Any] = {"log": {}, "cli": {}}
    if path is not None:
        raw = _merge(raw, _load_json(path))
    return apply_env_overrides(config_from_dict(raw), environ)


def resolve_log_path(cfg: Config) -> Path:
    """Return the configured log file path with ``~`` expanded."""
    return Path(cfg.log.path).expanduser()
