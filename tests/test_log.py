"""日志配置测试：文件 sink 来自参数或 BASSERT_LOG_FILE。"""
# @file purpose: Check setup_logging sinks.

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from browser_assert.core.log import setup_logging
from browser_assert.core.settings import settings


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    yield
    setup_logging("INFO", None)


def test_log_file_argument_adds_file_sink(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    setup_logging("DEBUG", log_file)
    logger.info("scenario started")
    logger.remove()
    text = log_file.read_text(encoding="utf-8")
    assert "Logger initialized with level: DEBUG" in text
    assert "scenario started" in text


def test_log_file_setting_is_used_by_default(tmp_path: Path, monkeypatch) -> None:
    log_file = tmp_path / "from-settings.log"
    monkeypatch.setattr(settings, "log_file", log_file)
    setup_logging("INFO")
    logger.warning("from settings")
    logger.remove()
    assert "from settings" in log_file.read_text(encoding="utf-8")
