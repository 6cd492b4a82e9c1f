"""Tests for Auth emulator host resolution."""

from __future__ import annotations

import pytest

from authfields.config.emulator import (
    AUTH_EMULATOR_HOST_VAR,
    ID_TOOLKIT_V1_URL,
    get_emulator_host,
    get_emulator_v1_url,
    get_v1_base_url,
    is_emulated,
)
from authfields.domain.errors import InvalidArgumentError


class TestGetEmulatorHost:
    def test_unset(self) -> None:
        assert get_emulator_host() is None

    def test_from_process_env(self, emulator_env: str) -> None:
        assert get_emulator_host() == emulator_env

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_blank_is_unset(self, value: str) -> None:
        assert get_emulator_host({AUTH_EMULATOR_HOST_VAR: value}) is None

    def test_strips_whitespace(self) -> None:
        env = {AUTH_EMULATOR_HOST_VAR: "  localhost:9099 \n"}
        assert get_emulator_host(env) == "localhost:9099"

    @pytest.mark.parametrize("value", ["http://localhost:9099", "//localhost:9099", "a//b"])
    def test_rejects_url(self, value: str) -> None:
        with pytest.raises(InvalidArgumentError, match='must follow the format "host:port"'):
            get_emulator_host({AUTH_EMULATOR_HOST_VAR: value})

    def test_error_names_variable(self) -> None:
        with pytest.raises(InvalidArgumentError, match=AUTH_EMULATOR_HOST_VAR):
            get_emulator_host({AUTH_EMULATOR_HOST_VAR: "https://127.0.0.1:9099"})

    def test_injected_mapping_ignores_process_env(self, emulator_env: str) -> None:
        assert get_emulator_host({}) is None


class TestEmulatorUrls:
    def test_v1_url(self) -> None:
        env = {AUTH_EMULATOR_HOST_VAR: "localhost:9099"}
        assert get_emulator_v1_url(env) == "http://localhost:9099/identitytoolkit.googleapis.com/v1"

    def test_v1_url_unset(self) -> None:
        assert get_emulator_v1_url() is None

    def test_v1_url_propagates_error(self) -> None:
        with pytest.raises(InvalidArgumentError):
            get_emulator_v1_url({AUTH_EMULATOR_HOST_VAR: "http://localhost:9099"})

    def test_base_url_production(self) -> None:
        assert get_v1_base_url() == ID_TOOLKIT_V1_URL

    def test_base_url_emulated(self, emulator_env: str) -> None:
        assert get_v1_base_url() == f"http://{emulator_env}/identitytoolkit.googleapis.com/v1"


class TestIsEmulated:
    def test_false_when_unset(self) -> None:
        assert is_emulated() is False

    def test_true_when_set(self, emulator_env: str) -> None:
        assert is_emulated() is True

    def test_raises_on_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(AUTH_EMULATOR_HOST_VAR, "http://localhost:9099")
        with pytest.raises(InvalidArgumentError):
            is_emulated()

    def test_idempotent(self, emulator_env: str) -> None:
        assert is_emulated() == is_emulated()
        assert get_emulator_host() == get_emulator_host()
