# tests/test_logging.py
# -*- coding: utf-8 -*-

import logging

from co2calc.infra.logging import (
      LOG_LEVEL_ENV
    , get_current_log_path
    , get_logger
    , get_logs_dir
    , init_logging
    , log_banner
)


def test_init_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    init_logging(level="INFO", log_file=log_file)

    get_logger("co2calc.test").info("hello from the test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert get_current_log_path() == log_file.resolve()
    assert get_logs_dir() == log_file.parent
    content = log_file.read_text(encoding="utf-8")
    assert "[INFO][co2calc.test] hello from the test" in content


def test_init_logging_per_run_file(tmp_path):
    init_logging(level="INFO", write_output=True, logs_dir=tmp_path)
    path = get_current_log_path()
    assert path is not None
    assert path.parent == tmp_path.resolve()
    assert path.suffix == ".log"


def test_env_overrides_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    init_logging(level="ERROR")
    assert logging.getLogger().level == logging.DEBUG


def test_invalid_level_falls_back_to_info():
    init_logging(level="chatty")
    assert logging.getLogger().level == logging.INFO
    assert get_current_log_path() is None


def test_log_banner(caplog):
    log = get_logger("co2calc.banner")
    with caplog.at_level(logging.INFO, logger="co2calc.banner"):
        log_banner(log, "bulk run", width=20)
        log_banner(log, "bulk run", width=20, box=True)

    messages = [r.getMessage() for r in caplog.records]
    assert messages[:3] == ["=" * 20, "bulk run", "=" * 20]
    assert messages[3] == "╔" + "═" * 20 + "╗"
    assert messages[4] == "║" + " " * 5 + " bulk run " + " " * 5 + "║"
    assert len(messages) == 6
