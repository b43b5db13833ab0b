"""Tests for application bootstrap helpers."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from simplechess.ui import bootstrap


def _capture_basic_config(monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    captured: dict[str, Any] = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    return captured


def test_configure_logging_accepts_level_names(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture_basic_config(monkeypatch)
    bootstrap.configure_logging("debug")
    assert captured["level"] == logging.DEBUG
    assert "%(levelname)s" in captured["format"]


def test_configure_logging_accepts_ints(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture_basic_config(monkeypatch)
    bootstrap.configure_logging(logging.INFO)
    assert captured["level"] == logging.INFO


def test_configure_logging_unknown_level_falls_back(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    captured = _capture_basic_config(monkeypatch)
    with caplog.at_level(logging.WARNING, logger="simplechess.ui.bootstrap"):
        bootstrap.configure_logging("chatty")
    assert captured["level"] == logging.WARNING
    assert "Unknown log level" in caplog.text
