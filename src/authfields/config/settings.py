"""Unified settings — init kwargs and environment in one frozen object.

Priority chain (highest to lowest):
  1. Init kwargs  — explicit overrides from the caller
  2. Environment  — ``FIREBASE_AUTH_EMULATOR_HOST`` and ``AUTHFIELDS_*``
  3. Code defaults

Uses Pydantic Settings v2 with a custom :class:`EnvironMappingSource`
that reads exactly the variables in ``_ENV_NAMES``, nothing else.
:meth:`AuthSettings.from_env` swaps the process environment for an
explicit mapping, so the environment can be read once and injected
instead of consulted ad hoc.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Mapping
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from authfields.config.emulator import (
    AUTH_EMULATOR_HOST_VAR,
    EMULATOR_V1_PATH,
    ID_TOOLKIT_V1_URL,
    get_emulator_host,
)

ENV_PREFIX = "AUTHFIELDS_"

# Field name -> environment variable read by EnvironMappingSource.
_ENV_NAMES: dict[str, str] = {
    "emulator_host": AUTH_EMULATOR_HOST_VAR,
    "verbose": f"{ENV_PREFIX}VERBOSE",
    "log_json": f"{ENV_PREFIX}LOG_JSON",
}


class EnvironMappingSource(PydanticBaseSettingsSource):
    """Read settings from an explicit environment mapping."""

    def __init__(self, settings_cls: type[BaseSettings], environ: Mapping[str, str]) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {
            field_name: environ[env_name]
            for field_name, env_name in _ENV_NAMES.items()
            if env_name in environ
        }

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``.

        Unused by the merge: :meth:`__call__` supplies the data directly.
        Values are raw environment strings, never complex.
        """
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for the injected environment during construction.
_tls = threading.local()


class AuthSettings(BaseSettings):
    """Settings consumed by request-building code.

    Attributes:
        emulator_host: Bare ``host:port`` of the Auth emulator, or None to
            target production.
        verbose: Enable DEBUG logging for ``authfields``.
        log_json: Emit logs as JSON lines.
    """

    model_config = {"frozen": True}

    emulator_host: str | None = None
    verbose: bool = False
    log_json: bool = False

    @field_validator("emulator_host", mode="before")
    @classmethod
    def check_emulator_host(cls, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, str):
            return value
        # Same rules as the environment resolver.
        return get_emulator_host({AUTH_EMULATOR_HOST_VAR: value})

    @property
    def is_emulated(self) -> bool:
        return self.emulator_host is not None

    @property
    def v1_base_url(self) -> str:
        """Emulator v1 URL when an emulator is configured, else production."""
        if self.emulator_host is None:
            return ID_TOOLKIT_V1_URL
        return f"http://{self.emulator_host}/{EMULATOR_V1_PATH}"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read only the named variables, from the injected mapping when present."""
        environ = getattr(_tls, "environ", None)
        if environ is None:
            environ = os.environ
        return (init_settings, EnvironMappingSource(settings_cls, environ))

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> AuthSettings:
        """Construct settings from *environ* (default: ``os.environ``).

        Raises:
            InvalidArgumentError: If the emulator host variable holds a URL
                rather than ``host:port``.
        """
        env = os.environ if environ is None else environ
        if "emulator_host" not in overrides:
            get_emulator_host(env)

        _tls.environ = env
        try:
            return cls(**overrides)
        finally:
            _tls.environ = None
