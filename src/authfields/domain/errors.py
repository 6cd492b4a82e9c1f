"""Error raised when a caller supplies an invalid field value."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A field value violated one of its validation rules.

    Attributes:
        field: Name of the offending field, or None when the error is not
            tied to a single user-record field (e.g. environment config).
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
