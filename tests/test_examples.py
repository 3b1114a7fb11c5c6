"""Smoke tests for the scripts under ``examples/``."""

from __future__ import annotations

import runpy
import socket
from pathlib import Path

import pytest

import maildraft.environment as env_mod

EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples"


def test_console_preview_renders_and_logs(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """The console preview prints the draft and reports through LogManager."""
    monkeypatch.setattr(socket, "getfqdn", lambda: "preview.example.test")
    env_mod._detect_environment.cache_clear()  # pylint: disable=protected-access

    namespace = runpy.run_path(str(EXAMPLES_DIR / "mail" / "console_preview.py"))
    namespace["preview_newsletter"]()
    env_mod._detect_environment.cache_clear()  # pylint: disable=protected-access

    captured = capsys.readouterr()
    assert "Spring edition" in captured.out
    assert "preview.example.test" in captured.out
    assert "spring-edition.pdf" in captured.out
    assert "Preview rendered" in captured.err
