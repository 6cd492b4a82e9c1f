"""Request payload builders for the Identity Toolkit user endpoints.

Pipeline: VALIDATE → COERCE → COMPACT → RESPOND

Each builder runs the field validators, coerces flag fields with
``to_boolean``, drops absent fields, and keys the result by the REST
wire names. The first invalid field aborts the build; no partial
payload is returned.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from authfields.domain.errors import InvalidArgumentError
from authfields.domain.types import UserField
from authfields.domain.validators import (
    to_boolean,
    validate_custom_claims,
    validate_display_name,
    validate_email,
    validate_password,
    validate_phone_number,
    validate_photo_url,
    validate_uid,
)
from authfields.services.result import ValidationResult, capture

logger = logging.getLogger(__name__)


def _compact(fields: dict[UserField, Any]) -> dict[str, Any]:
    return {field.wire_key: value for field, value in fields.items() if value is not None}


def _dump_claims(claims: Mapping[str, Any]) -> str:
    try:
        return json.dumps(dict(claims), separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        msg = "custom_claims must be JSON-serializable"
        raise InvalidArgumentError(msg, field=UserField.CUSTOM_CLAIMS.value) from exc


def build_create_user_payload(
    *,
    uid: Any = None,
    display_name: Any = None,
    email: Any = None,
    email_verified: Any = None,
    phone_number: Any = None,
    photo_url: Any = None,
    password: Any = None,
    disabled: Any = None,
) -> dict[str, Any]:
    """Build the body of an ``accounts`` (sign-up) request.

    Every field is optional; the service assigns a uid when none is given.

    Raises:
        InvalidArgumentError: On the first field that fails validation.
    """
    return _compact(
        {
            UserField.UID: validate_uid(uid),
            UserField.DISPLAY_NAME: validate_display_name(display_name),
            UserField.EMAIL: validate_email(email),
            UserField.PHONE_NUMBER: validate_phone_number(phone_number),
            UserField.PHOTO_URL: validate_photo_url(photo_url),
            UserField.PASSWORD: validate_password(password),
            UserField.EMAIL_VERIFIED: to_boolean(email_verified),
            UserField.DISABLED: to_boolean(disabled),
        }
    )


def build_update_user_payload(
    uid: Any,
    *,
    display_name: Any = None,
    email: Any = None,
    email_verified: Any = None,
    phone_number: Any = None,
    photo_url: Any = None,
    password: Any = None,
    disabled: Any = None,
    custom_claims: Any = None,
) -> dict[str, Any]:
    """Build the body of an ``accounts:update`` request.

    *uid* is required. Custom claims travel as a compact JSON string.

    Raises:
        InvalidArgumentError: On the first field that fails validation.
    """
    fields: dict[UserField, Any] = {
        UserField.UID: validate_uid(uid, required=True),
        UserField.DISPLAY_NAME: validate_display_name(display_name),
        UserField.EMAIL: validate_email(email),
        UserField.PHONE_NUMBER: validate_phone_number(phone_number),
        UserField.PHOTO_URL: validate_photo_url(photo_url),
        UserField.PASSWORD: validate_password(password),
        UserField.EMAIL_VERIFIED: to_boolean(email_verified),
        UserField.DISABLED: to_boolean(disabled),
    }
    claims = validate_custom_claims(custom_claims)
    if claims is not None:
        fields[UserField.CUSTOM_CLAIMS] = _dump_claims(claims)
    return _compact(fields)


def build_set_custom_claims_payload(uid: Any, custom_claims: Any) -> dict[str, Any]:
    """Build an ``accounts:update`` body that replaces a user's custom claims.

    ``None`` clears the claims (serialized as ``{}``).
    """
    claims = validate_custom_claims(custom_claims) or {}
    return {
        UserField.UID.wire_key: validate_uid(uid, required=True),
        UserField.CUSTOM_CLAIMS.wire_key: _dump_claims(claims),
    }


def create_user_request(**fields: Any) -> ValidationResult:
    """:func:`build_create_user_payload` reported as a :class:`ValidationResult`."""
    return capture("create_user", build_create_user_payload, **fields)


def update_user_request(uid: Any, **fields: Any) -> ValidationResult:
    """:func:`build_update_user_payload` reported as a :class:`ValidationResult`.

    A payload carrying only the uid succeeds with a warning.
    """
    result = capture("update_user", build_update_user_payload, uid, **fields)
    if result.ok and set(result.data) == {UserField.UID.wire_key}:
        logger.debug("update_user for %s carries no changes", uid)
        return result.model_copy(update={"warnings": ["No fields to update"]})
    return result
