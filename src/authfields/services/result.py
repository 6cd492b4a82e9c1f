"""ValidationResult and ValidationError — the value-based failure contract.

Validators raise :class:`InvalidArgumentError`. Callers that would rather
branch on a value than catch an exception wrap the call with
:func:`capture`, which turns that one error kind into a failed result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field

from authfields.domain.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

INVALID_ARGUMENT = "INVALID_ARGUMENT"


class ValidationError(BaseModel):
    """Structured error payload within a ValidationResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    field: str | None = None


class ValidationResult(BaseModel):
    """Return type for request-building operations.

    Attributes:
        ok: Whether every field passed validation.
        op: Name of the operation (e.g. ``"update_user"``).
        data: The request payload on success.
        warnings: Non-fatal issues encountered while building.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ValidationError | None = None


def capture(
    op: str,
    fn: Callable[..., dict[str, Any]],
    *args: Any,
    **kwargs: Any,
) -> ValidationResult:
    """Run *fn* and report its outcome as a :class:`ValidationResult`.

    Only :class:`InvalidArgumentError` is converted; anything else
    propagates to the caller.
    """
    try:
        data = fn(*args, **kwargs)
    except InvalidArgumentError as exc:
        logger.debug("%s rejected: %s", op, exc)
        return ValidationResult(
            ok=False,
            op=op,
            error=ValidationError(code=INVALID_ARGUMENT, message=str(exc), field=exc.field),
        )
    return ValidationResult(ok=True, op=op, data=data)
