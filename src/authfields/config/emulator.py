"""Auth emulator resolution from the process environment.

``FIREBASE_AUTH_EMULATOR_HOST`` holds a bare ``host:port``. When it is set,
requests go to the local emulator instead of the production Identity
Toolkit endpoint. Each function accepts an explicit *environ* mapping and
falls back to ``os.environ``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from authfields.domain.errors import InvalidArgumentError

AUTH_EMULATOR_HOST_VAR = "FIREBASE_AUTH_EMULATOR_HOST"
ID_TOOLKIT_V1_URL = "https://identitytoolkit.googleapis.com/v1"
EMULATOR_V1_PATH = "identitytoolkit.googleapis.com/v1"


def get_emulator_host(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the configured emulator ``host:port``, or None if unset or blank.

    Raises:
        InvalidArgumentError: If the value looks like a URL (contains ``//``).
    """
    env = os.environ if environ is None else environ
    emulator_host = (env.get(AUTH_EMULATOR_HOST_VAR) or "").strip()
    if not emulator_host:
        return None
    if "//" in emulator_host:
        msg = (
            f'Invalid {AUTH_EMULATOR_HOST_VAR}: "{emulator_host}". '
            'It must follow the format "host:port"'
        )
        raise InvalidArgumentError(msg)
    return emulator_host


def get_emulator_v1_url(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the emulator's v1 base URL, or None when no emulator is configured."""
    emulator_host = get_emulator_host(environ)
    if emulator_host is None:
        return None
    return f"http://{emulator_host}/{EMULATOR_V1_PATH}"


def is_emulated(environ: Mapping[str, str] | None = None) -> bool:
    return get_emulator_host(environ) is not None


def get_v1_base_url(environ: Mapping[str, str] | None = None) -> str:
    """Base URL for v1 requests: the emulator when configured, else production."""
    return get_emulator_v1_url(environ) or ID_TOOLKIT_V1_URL
