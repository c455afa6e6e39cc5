"""Precondition helpers used by guarded constructors and mutators.

Every helper either returns the normalized value or raises
:class:`InvalidArgument` naming the offending field.
"""

from __future__ import annotations

import math
from decimal import Context, Decimal, Inexact, InvalidOperation, Overflow
from numbers import Real

from solidctl.domain.errors import InvalidArgument


def to_decimal(value: object, field: str) -> Decimal:
    """Convert *value* to a finite ``Decimal``.

    Floats go through ``str`` so ``0.1`` stays ``Decimal("0.1")``.
    Booleans and ``None`` are rejected even though ``bool`` is an ``int``.
    """
    if value is None or isinstance(value, bool):
        raise InvalidArgument(f"{field} must be a number", field=field, value=value)
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise InvalidArgument(
                f"{field} must be a number", field=field, value=value
            ) from exc
    else:
        raise InvalidArgument(f"{field} must be a number", field=field, value=value)
    if not amount.is_finite():
        raise InvalidArgument(f"{field} must be finite", field=field, value=value)
    return amount


def require_positive_amount(value: object, field: str = "amount") -> Decimal:
    """Return *value* as a ``Decimal`` strictly greater than zero."""
    amount = to_decimal(value, field)
    if amount <= 0:
        raise InvalidArgument(f"{field} must be positive", field=field, value=value)
    return amount


def require_non_negative_amount(value: object, field: str = "amount") -> Decimal:
    """Return *value* as a ``Decimal`` greater than or equal to zero."""
    amount = to_decimal(value, field)
    if amount < 0:
        raise InvalidArgument(f"{field} must not be negative", field=field, value=value)
    return amount


# Balance arithmetic never rounds: a result needing more than 28 digits,
# or past the exponent range, raises instead.
_EXACT = Context(prec=28, traps=[Inexact, Overflow])


def exact_sum(total: Decimal, delta: Decimal, field: str = "amount") -> Decimal:
    """Return ``total + delta`` computed exactly.

    Raises:
        InvalidArgument: If the sum cannot be represented without rounding.
    """
    try:
        return _EXACT.add(total, delta)
    except Inexact as exc:
        raise InvalidArgument(
            f"{field} {abs(delta)} cannot be applied to {total} without rounding",
            field=field,
            value=str(abs(delta)),
        ) from exc


def require_dimension(value: object, field: str) -> float:
    """Return *value* as a finite float strictly greater than zero."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(f"{field} must be a number", field=field, value=value)
    number = float(value)
    if not math.isfinite(number) or number <= 0:
        raise InvalidArgument(f"{field} must be positive", field=field, value=value)
    return number


def require_text(value: object, field: str) -> str:
    """Return *value* stripped; ``None``, non-strings and blanks are rejected."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{field} must not be blank", field=field, value=value)
    return value.strip()
