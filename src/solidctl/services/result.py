"""The result envelope commands print.

Orchestrators raise; the command layer turns domain failures into a
frozen ``ServiceResult`` with ``ok=False`` via :func:`failure`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from solidctl.domain.errors import SolidError


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code`` plus the domain message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """What every command prints, as JSON or rendered text.

    ``op`` names the operation (``"place_order"``). On success ``data``
    holds its payload; on failure ``error`` is set and ``data`` may keep
    state worth showing, such as the balance an account was left with.
    ``meta`` is only rendered with ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None


def success(op: str, data: dict[str, Any], **kwargs: Any) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=data, **kwargs)


def failure(op: str, exc: SolidError, *, data: dict[str, Any] | None = None) -> ServiceResult:
    """Wrap a domain failure, keeping its code, message, and detail verbatim."""
    detail = {key: _plain(value) for key, value in exc.detail.items()}
    return ServiceResult(
        ok=False,
        op=op,
        data=data or {},
        error=ServiceError(code=exc.code, message=exc.message, detail=detail),
    )


def _plain(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)
