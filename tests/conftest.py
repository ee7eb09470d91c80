# tests/conftest.py
"""Shared fixtures: isolated settings and a recording sink."""

from __future__ import annotations

import os

import pytest

from adapters.console_output import RecordingOutput
from core.config import AppSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep real env vars and .env files out of every test."""

    for key in list(os.environ):
        if key.upper().startswith("SOLID_DEMOS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def recorder() -> RecordingOutput:
    return RecordingOutput()
