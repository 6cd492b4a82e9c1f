"""Field validators for user records.

Every validator shares one contract::

    validate_x(value, *, required=False) -> value | None

A missing value (``None``) is returned as ``None`` unless *required* is
set. A missing required value, or a present value that breaks a rule,
raises :class:`InvalidArgumentError`. Valid values come back unchanged.

INVARIANT: validators never mutate or normalize their argument.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from authfields.domain.errors import InvalidArgumentError
from authfields.domain.urls import validate_url

MAX_UID_LENGTH = 128
MIN_PASSWORD_LENGTH = 6

# E.164: a leading "+" then 1 to 14 digits, nothing else.
PHONE_NUMBER_PATTERN = re.compile(r"\+\d{1,14}", re.ASCII)


def _invalid(field: str, message: str) -> InvalidArgumentError:
    return InvalidArgumentError(message, field=field)


def validate_uid(uid: Any, *, required: bool = False) -> str | None:
    """Check a user identifier: a string of 1 to 128 characters."""
    if uid is None and not required:
        return None
    if not isinstance(uid, str):
        raise _invalid("uid", "uid must be a string")
    if not 1 <= len(uid) <= MAX_UID_LENGTH:
        raise _invalid("uid", f"uid must be non-empty with no more than {MAX_UID_LENGTH} chars")
    return uid


def validate_email(email: Any, *, required: bool = False) -> str | None:
    """Check an email address syntactically.

    Only the ``local@domain`` shape is enforced: exactly one ``@`` with
    text on both sides. ``"a@b"`` is accepted.
    """
    if email is None and not required:
        return None
    if not isinstance(email, str) or not email:
        raise _invalid("email", "email must be a non-empty string")
    parts = email.split("@")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise _invalid("email", f"email is malformed: {email!r}")
    return email


def validate_phone_number(phone_number: Any, *, required: bool = False) -> str | None:
    """Check an E.164 phone number such as ``+15551234567``."""
    if phone_number is None and not required:
        return None
    if not isinstance(phone_number, str):
        raise _invalid("phone_number", "phone_number must be a non-empty string")
    if PHONE_NUMBER_PATTERN.fullmatch(phone_number) is None:
        raise _invalid("phone_number", "phone_number must be an E.164 identifier")
    return phone_number


def validate_password(password: Any, *, required: bool = False) -> str | None:
    if password is None and not required:
        return None
    if not isinstance(password, str):
        raise _invalid("password", "password must be a string")
    if len(password) < MIN_PASSWORD_LENGTH:
        msg = f"password must be at least {MIN_PASSWORD_LENGTH} characters long"
        raise _invalid("password", msg)
    return password


def validate_photo_url(url: Any, *, required: bool = False) -> str | None:
    """Check a photo URL with :func:`validate_url`."""
    if url is None and not required:
        return None
    if not isinstance(url, str) or not url or not validate_url(url):
        raise _invalid("photo_url", "photo_url must be a valid url")
    return url


def validate_display_name(name: Any, *, required: bool = False) -> str | None:
    if name is None and not required:
        return None
    if not isinstance(name, str) or not name:
        raise _invalid("display_name", "display_name must be a non-empty string")
    return name


def validate_custom_claims(
    custom_claims: Any, *, required: bool = False
) -> Mapping[str, Any] | None:
    """Check that custom claims form a mapping.

    Reserved claim names and payload size are enforced by the remote API.
    """
    if custom_claims is None and not required:
        return None
    if not isinstance(custom_claims, Mapping):
        raise _invalid("custom_claims", "custom_claims must be a mapping")
    return custom_claims


def to_boolean(value: Any) -> bool | None:
    """Coerce a flag to a strict bool by truthiness, keeping ``None`` as ``None``.

    Examples:
        >>> to_boolean(None) is None
        True
        >>> to_boolean(0)
        False
        >>> to_boolean("yes")
        True
    """
    if value is None:
        return None
    return bool(value)
