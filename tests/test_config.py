from __future__ import annotations

import logging
from pathlib import Path

from app import config


def test_storage_path_defaults_and_override():
    assert config.get_storage_path({}) == Path("data_pipeline/watchlist.json")
    assert config.get_storage_path({"WATCHLIST_STORAGE_PATH": "/tmp/w.json"}) == Path("/tmp/w.json")


def test_log_level_parsing():
    assert config.get_log_level({}) == logging.INFO
    assert config.get_log_level({"LOG_LEVEL": "debug"}) == logging.DEBUG
    assert config.get_log_level({"LOG_LEVEL": "nope"}) == logging.INFO


def test_storage_silent_flag():
    assert config.is_storage_logging_silent({}) is False
    assert config.is_storage_logging_silent({"WATCHLIST_STORAGE_SILENT": "yes"}) is True
    assert config.is_storage_logging_silent({"WATCHLIST_STORAGE_SILENT": "maybe"}) is False


def test_configure_logging_applies_level(monkeypatch):
    captured = {}
    monkeypatch.setattr(config.logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    config.configure_logging({"LOG_LEVEL": "warning"})
    assert captured["level"] == logging.WARNING
    assert "%(name)s" in captured["format"]
