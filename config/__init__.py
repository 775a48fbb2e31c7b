"""Config package facade."""

from config.loader import apply_env_overrides, config_from_dict, load_config, resolve_log_path
from config.models import CliConfig, Config, LogConfig

__all__ = [
    "CliConfig",
    "Config",
    "LogConfig",
    "apply_env_overrides",
    "config_from_dict",
    "load_config",
    "resolve_log_path",
]
