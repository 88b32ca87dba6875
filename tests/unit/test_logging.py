"""Tests for logging bootstrap."""

import logging
import os

from release_signing.build.config.logging import bootstrap_logging


def test_log_level_override(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    bootstrap_logging()

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("release_signing").level == logging.DEBUG


def test_invalid_log_level_falls_back_to_info(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    bootstrap_logging()

    assert os.environ["LOG_LEVEL"] == "INFO"
    assert logging.getLogger("release_signing").level == logging.INFO
    assert "Invalid LOG_LEVEL" in capsys.readouterr().err


def test_project_logging_ini_wins(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    (tmp_path / "logging.ini").write_text(
        "[loggers]\nkeys=root\n\n"
        "[handlers]\nkeys=console\n\n"
        "[formatters]\nkeys=plain\n\n"
        "[logger_root]\nlevel=%(log_level)s\nhandlers=console\n\n"
        "[handler_console]\nclass=StreamHandler\nlevel=%(log_level)s\nformatter=plain\nargs=(sys.stderr,)\n\n"
        "[formatter_plain]\nformat=%(message)s\n",
        encoding="utf-8",
    )

    bootstrap_logging()

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert root.handlers[0].formatter._fmt == "%(message)s"


def test_broken_logging_ini_falls_back(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    (tmp_path / "logging.ini").write_text("[loggers]\nkeys=missing\n", encoding="utf-8")

    bootstrap_logging()

    assert "Failed to load logging config" in capsys.readouterr().err
