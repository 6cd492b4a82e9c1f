"""User-record field names and their Identity Toolkit wire keys."""

from __future__ import annotations

from enum import StrEnum


class UserField(StrEnum):
    """Fields accepted when creating or updating a user."""

    UID = "uid"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    PASSWORD = "password"
    PHOTO_URL = "photo_url"
    DISPLAY_NAME = "display_name"
    EMAIL_VERIFIED = "email_verified"
    DISABLED = "disabled"
    CUSTOM_CLAIMS = "custom_claims"

    @property
    def wire_key(self) -> str:
        """camelCase key used in the REST request body."""
        return WIRE_KEYS[self]


WIRE_KEYS: dict[UserField, str] = {
    UserField.UID: "localId",
    UserField.EMAIL: "email",
    UserField.PHONE_NUMBER: "phoneNumber",
    UserField.PASSWORD: "password",
    UserField.PHOTO_URL: "photoUrl",
    UserField.DISPLAY_NAME: "displayName",
    UserField.EMAIL_VERIFIED: "emailVerified",
    UserField.DISABLED: "disabled",
    UserField.CUSTOM_CLAIMS: "customAttributes",
}
