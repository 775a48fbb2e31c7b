import json
from pathlib import Path

import pytest

from config import config_from_dict, load_config, resolve_log_path


def test_defaults_without_file() -> None:
    cfg = load_config(None, environ={})

    assert cfg.log.path == "./.yash.log"
    assert cfg.log.path_env == "YASH_LOG_PATH"
    assert cfg.cli.default_level == "info"


def test_file_overrides_defaults(tmp_path: Path) -> None:
    cfg_path = tmp_path / "yash-log.json"
    cfg_path.write_text(
        json.dumps({"log": {"path": "logs/app.log"}, "cli": {"default_level": "WARN"}}),
        encoding="utf-8",
    )

    cfg = load_config(cfg_path, environ={})

    assert cfg.log.path == "logs/app.log"
    assert cfg.log.path_env == "YASH_LOG_PATH"
    assert cfg.cli.default_level == "warn"


def test_environment_overrides_file(tmp_path: Path) -> None:
    cfg_path = tmp_path / "yash-log.json"
    cfg_path.write_text(json.dumps({"log": {"path": "from-file.log", "path_env": "MY_LOG"}}), encoding="utf-8")

    cfg = load_config(cfg_path, environ={"MY_LOG": "/var/tmp/from-env.log", "YASH_LOG_PATH": "ignored"})

    assert cfg.log.path == "/var/tmp/from-env.log"


def test_blank_environment_value_is_ignored() -> None:
    cfg = load_config(None, environ={"YASH_LOG_PATH": "   "})

    assert cfg.log.path == "./.yash.log"


def test_unknown_level_falls_back_to_info() -> None:
    cfg = config_from_dict({"cli": {"default_level": "verbose"}})

    assert cfg.cli.default_level == "info"


def test_non_object_config_rejected(tmp_path: Path) -> None:
    cfg_path = tmp_path / "yash-log.json"
    cfg_path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(cfg_path, environ={})


def test_resolve_log_path_expands_user(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    cfg = config_from_dict({"log": {"path": "~/app.log"}})

    assert resolve_log_path(cfg) == tmp_path / "app.log"
