"""Shared pytest fixtures for authfields tests."""

from __future__ import annotations

import pytest

from authfields.config.emulator import AUTH_EMULATOR_HOST_VAR


@pytest.fixture(autouse=True)
def _clear_emulator_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every test starts with no emulator configured."""
    monkeypatch.delenv(AUTH_EMULATOR_HOST_VAR, raising=False)
    monkeypatch.delenv("AUTHFIELDS_VERBOSE", raising=False)
    monkeypatch.delenv("AUTHFIELDS_LOG_JSON", raising=False)


@pytest.fixture
def emulator_env(monkeypatch: pytest.MonkeyPatch) -> str:
    """Point the process environment at a local emulator."""
    host = "localhost:9099"
    monkeypatch.setenv(AUTH_EMULATOR_HOST_VAR, host)
    return host
