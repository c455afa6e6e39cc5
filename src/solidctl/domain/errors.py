"""Error taxonomy shared by every guarded operation.

Two failure kinds cover all guarded mutators:

- ``InvalidArgument``: a supplied parameter violates a precondition.
- ``InvalidState``: the operation would push an entity out of its invariant.

Both are raised synchronously at the point of violation and are never
retried internally. ``PaymentDeclined`` is raised by payment providers and
travels through orchestrators unchanged.
"""

from __future__ import annotations

from typing import Any


class SolidError(Exception):
    """Base class for all domain failures.

    ``code`` is the stable identifier used at the CLI boundary; ``detail``
    carries structured context (field names, offending values).
    """

    code = "SOLID_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail


class InvalidArgument(SolidError, ValueError):
    """A supplied parameter violates a precondition."""

    code = "INVALID_ARGUMENT"


class InvalidState(SolidError, RuntimeError):
    """An operation would violate an entity invariant."""

    code = "INVALID_STATE"


class PaymentDeclined(SolidError):
    """A payment provider refused the charge."""

    code = "PAYMENT_DECLINED"
