from pathlib import Path

import pytest

import logger


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path: Path, monkeypatch):
    """Give each test a fresh shared logger and a private working directory."""
    work_dir = tmp_path / "cwd"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    monkeypatch.delenv("YASH_LOG_PATH", raising=False)
    monkeypatch.setattr(logger, "_LOGGER", None)
    yield work_dir
    if logger._LOGGER is not None:
        logger._LOGGER.close()
